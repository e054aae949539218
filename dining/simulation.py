"""Running the philosophers' threads and watching for deaths."""

import sys
import threading
import time

from .clock import now_ms
from .config import USAGE, Config, ConfigError
from .report import Event, Reporter, write_error
from .table import PhilosopherDied, State, seat_philosophers

_POLL_SECONDS = 0.0001


class Simulation:
    """A table of philosophers, each on its own thread, and a monitor."""

    def __init__(self, config, stream=None):
        self.config = config
        self.reporter = Reporter(now_ms(), stream)
        self.philosophers = seat_philosophers(config, self.reporter)
        self.threads = []

    def _half_meal(self):
        return self.config.time_to_eat // 2

    def live(self, philosopher):
        """Take forks, eat, sleep and think until a death or the meal limit."""
        config = self.config
        reporter = self.reporter
        try:
            if config.num_philos != 1 and philosopher.id % 2 == 1:
                philosopher.wait(self._half_meal(), State.WAITING)
            while not reporter.stopped():
                philosopher.take_forks()
                reporter.announce(Event.EAT, philosopher.id)
                philosopher.last_meal_ms = now_ms()
                philosopher.wait(config.time_to_eat, State.EATING)
                philosopher.release_forks()
                if config.max_meals is not None:
                    philosopher.meals_eaten += 1
                    if philosopher.meals_eaten == config.max_meals:
                        break
                reporter.announce(Event.SLEEP, philosopher.id)
                philosopher.wait(config.time_to_sleep, State.SLEEPING)
                reporter.announce(Event.THINK, philosopher.id)
                if config.num_philos % 2 == 1 and philosopher.id % 2 == 1:
                    philosopher.wait(self._half_meal(), State.WAITING)
        except PhilosopherDied:
            pass

    def start_threads(self):
        """Start one thread per philosopher; stop the table if one cannot start."""
        for philosopher in self.philosophers:
            thread = threading.Thread(
                target=self.live, args=(philosopher,), name=f"philo-{philosopher.id}"
            )
            try:
                thread.start()
            except RuntimeError as exc:
                self.reporter.stop()
                raise RuntimeError(
                    "start_threads: Failed to create philo threads"
                ) from exc
            self.threads.append(thread)

    def monitor(self):
        """Poll until a philosopher dies or enough meals are counted.

        Returns the philosopher who died, or None when the meals ran out.
        """
        limit = self.config.max_meals
        finished = 0
        while True:
            for philosopher in self.philosophers:
                if philosopher.dead:
                    self.reporter.stop()
                    self.reporter.announce(Event.DEAD, philosopher.id)
                    return philosopher
                if limit is not None and philosopher.meals_eaten == limit:
                    finished += 1
                    if finished == self.config.num_philos:
                        return None
            time.sleep(_POLL_SECONDS)

    def join_threads(self):
        """Wait for every started philosopher thread to finish."""
        for thread in self.threads:
            thread.join()

    def run(self):
        """Run the whole simulation; return the philosopher who died, if any."""
        casualty = None
        try:
            self.start_threads()
        except RuntimeError as exc:
            write_error(str(exc))
        else:
            casualty = self.monitor()
        self.join_threads()
        return casualty


def main(argv=None):
    """Command-line entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = Config.from_args(args)
    except ConfigError as exc:
        write_error(str(exc))
        return 1 if str(exc) == USAGE else 0
    Simulation(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())