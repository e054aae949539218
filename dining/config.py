"""Simulation parameters read from the command line."""

from dataclasses import dataclass
from typing import Optional

from .parsing import parse_int

USAGE = (
    "Usage: ./philosophers num_philos time_to_die time_to_eat "
    "time_to_sleep [max_meals]"
)


class ConfigError(ValueError):
    """Raised when the command-line arguments cannot start a simulation."""


def _positive(text):
    try:
        value = parse_int(text)
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass(frozen=True)
class Config:
    """Table size and timings in milliseconds; ``max_meals`` None means no limit."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: Optional[int] = None

    @classmethod
    def from_args(cls, args):
        """Build a Config from the four or five arguments after the program name."""
        args = list(args)
        if not 4 <= len(args) <= 5:
            raise ConfigError(USAGE)
        values = [_positive(text) for text in args]
        if any(value is None for value in values):
            raise ConfigError("Invalid arguments")
        return cls(*values)