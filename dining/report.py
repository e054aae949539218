"""Serialized, timestamped status lines for the philosophers."""

import sys
import threading
from enum import Enum

from .clock import elapsed_ms

END_COLOR = "\x1b[0m"
GREEN = "\x1b[0;32m"
VIOLET = "\x1b[0;35m"
ORANGE = "\x1b[0;33m"
RED = "\x1b[0;31m"


class Event(Enum):
    """What a philosopher did; the value is the text printed for it."""

    EAT = f"is {GREEN}eating{END_COLOR}"
    DEAD = f"{RED}died{END_COLOR}"
    SLEEP = f"is {VIOLET}sleeping{END_COLOR}"
    THINK = f"is {ORANGE}thinking{END_COLOR}"
    HAS_TAKEN_FORK = "has taken a fork"


class Reporter:
    """Prints one line per event, never interleaved, until a death stops it."""

    def __init__(self, start_ms, stream=None):
        self.start_ms = start_ms
        self._stream = stream
        self._lock = threading.Lock()
        self._stopped = False

    def stop(self):
        """Mark that somebody died; only death lines are printed afterwards."""
        self._stopped = True

    def stopped(self):
        """Return whether somebody has died."""
        return self._stopped

    def announce(self, event, philo_id):
        """Print the line for ``event``; return it, or None when suppressed."""
        if self._stopped and event is not Event.DEAD:
            return None
        stream = self._stream if self._stream is not None else sys.stdout
        with self._lock:
            line = f"{elapsed_ms(self.start_ms)} {philo_id} {event.value}\n"
            stream.write(line)
            stream.flush()
        return line


def write_error(message, stream=None):
    """Write ``message`` prefixed with the program name; return exit status 1."""
    stream = stream if stream is not None else sys.stderr
    stream.write(f"philo: {message}\n")
    stream.flush()
    return 1