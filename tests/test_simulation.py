import io

import pytest

from dining.config import USAGE, Config
from dining.simulation import Simulation, main

DIED = "\x1b[0;31mdied\x1b[0m"
EATING = "is \x1b[0;32meating\x1b[0m"
FORK_LINE = "has taken a fork"


def lines_of(stream):
    return stream.getvalue().splitlines()


@pytest.mark.parametrize("argv", [[], ["5", "800", "200"], ["1", "2", "3", "4", "5", "6"]])
def test_main_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == f"philo: {USAGE}\n"


@pytest.mark.parametrize(
    "argv",
    [["0", "800", "200", "200"], ["5", "800", "abc", "200"], ["5", "800", "200", "200", "0"]],
)
def test_main_invalid_arguments(argv, capsys):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.err == "philo: Invalid arguments\n"
    assert captured.out == ""


def test_main_lone_philosopher_dies(capsys):
    assert main(["1", "60", "20", "20"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].endswith(f"1 {FORK_LINE}")
    assert out[-1].endswith(f"1 {DIED}")


def test_lone_philosopher_simulation():
    stream = io.StringIO()
    simulation = Simulation(Config(1, 100, 50, 50), stream)
    casualty = simulation.run()
    assert casualty is simulation.philosophers[0]
    lines = lines_of(stream)
    assert len(lines) == 2
    timestamp, philo_id, text = lines[1].split(" ", 2)
    assert philo_id == "1"
    assert text == DIED
    assert int(timestamp) >= 100
    assert all(not thread.is_alive() for thread in simulation.threads)


def test_meal_limit_ends_without_death():
    stream = io.StringIO()
    config = Config(5, 1000, 100, 100, 2)
    simulation = Simulation(config, stream)
    assert simulation.run() is None
    lines = lines_of(stream)
    assert not any(DIED in line for line in lines)
    assert [p.meals_eaten for p in simulation.philosophers] == [2] * 5
    eat_lines = [line for line in lines if line.endswith(EATING)]
    assert len(eat_lines) == 5 * 2
    assert all(p.left_fork.is_available for p in simulation.philosophers)


def test_timestamps_never_go_backwards():
    stream = io.StringIO()
    Simulation(Config(4, 1000, 60, 60, 2), stream).run()
    stamps = [int(line.split(" ", 1)[0]) for line in lines_of(stream)]
    assert stamps == sorted(stamps)


def test_starving_table_reports_one_death():
    stream = io.StringIO()
    simulation = Simulation(Config(4, 310, 200, 100), stream)
    casualty = simulation.run()
    assert casualty is not None and casualty.dead
    died = [line for line in lines_of(stream) if line.endswith(DIED)]
    assert len(died) == 1
    timestamp, philo_id, _ = died[0].split(" ", 2)
    assert int(philo_id) == casualty.id
    assert int(timestamp) >= 310
    assert simulation.reporter.stopped()


def test_live_returns_once_table_has_stopped():
    stream = io.StringIO()
    simulation = Simulation(Config(2, 800, 50, 50), stream)
    simulation.reporter.stop()
    simulation.live(simulation.philosophers[1])
    assert stream.getvalue() == ""
    assert simulation.philosophers[1].meals_eaten == 0