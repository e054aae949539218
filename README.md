# dining

A console simulation of the dining philosophers problem. Each philosopher
runs in its own thread. A fork lies between each pair of neighbours, and a
philosopher must hold both of them to eat. A separate monitor watches the
table. The simulation stops when a philosopher starves, or when every
philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
dining NUM_PHILOS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MAX_MEALS]
```

You can also start it with `python -m dining.simulation` and the same
arguments.

All times are in milliseconds. Each argument must be a positive integer that
fits in a signed 32-bit int. Leading whitespace and a single `+` or `-` sign
are accepted. Any other character makes the argument invalid.

- `NUM_PHILOS`: the number of philosophers, which is also the number of forks
- `TIME_TO_DIE`: how long a philosopher can go without starting a meal
- `TIME_TO_EAT`: how long a meal takes
- `TIME_TO_SLEEP`: how long a philosopher sleeps after eating
- `MAX_MEALS` (optional): the simulation ends once every philosopher has
  eaten this many meals

Example:

```
dining 5 800 200 200 7
```

Each event is printed on its own line. A line shows the milliseconds since
the start, the philosopher's number (counted from 1), and the action:

```
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
200 2 is sleeping
...
```

The words `eating`, `sleeping`, `thinking` and `died` are coloured with ANSI
escape codes. Once the monitor sees a death, it prints the `died` line. After
that, no other events are printed.

### Errors and exit status

Errors are written to standard error with the prefix `philo: `.

- If the number of arguments is wrong, the command prints the usage line and
  exits with status 1.
- If an argument is not a valid positive integer, the command prints
  `Invalid arguments` and exits with status 0.
- A simulation that runs exits with status 0, whether or not a philosopher
  died.

## Use from Python

```python
import sys

from dining.config import Config
from dining.simulation import Simulation

config = Config.from_args(["4", "410", "200", "200", "3"])
casualty = Simulation(config, sys.stdout).run()
if casualty is not None:
    print("philosopher", casualty.id, "starved")
```

`Config.from_args` takes the four or five arguments that follow the program
name. It raises `dining.config.ConfigError` (a `ValueError`) when their number
is wrong or one of them is invalid. `Config` can also be built directly. In
that case, `max_meals=None` means there is no meal limit.

`Simulation.run()` does three things:

1. It starts one thread per philosopher.
2. It monitors them until the simulation stops.
3. It joins the threads.

It returns the philosopher who died, or `None` if the meal limit was reached.

`dining.main(argv)` is the command itself. It is found in
`dining.simulation.main` and returns the exit status.

## Running the tests

```
pip install .[test]
pytest
```