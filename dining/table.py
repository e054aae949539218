"""Forks, philosophers and the seating around the table."""

import threading
import time
from dataclasses import dataclass, field
from enum import Enum

from .clock import elapsed_ms, now_ms
from .report import Event

_POLL_SECONDS = 0.0001


class PhilosopherDied(Exception):
    """Raised inside a philosopher's routine once it has starved."""


class State(Enum):
    """What a philosopher is doing while it waits."""

    EATING = "eating"
    SLEEPING = "sleeping"
    WAITING = "waiting"


class Fork:
    """A fork shared by two neighbours; only one can hold it at a time."""

    def __init__(self):
        self._lock = threading.Lock()

    @property
    def is_available(self):
        return not self._lock.locked()

    def take(self, philosopher):
        """Wait for the fork, giving up with PhilosopherDied if starving."""
        while not self._lock.acquire(blocking=False):
            if philosopher.check_dead():
                raise PhilosopherDied(philosopher.id)
            time.sleep(_POLL_SECONDS)
        philosopher.reporter.announce(Event.HAS_TAKEN_FORK, philosopher.id)

    def release(self):
        """Put the fork back on the table."""
        if self._lock.locked():
            self._lock.release()


@dataclass(eq=False)
class Philosopher:
    """One diner, with its forks and its meal record."""

    id: int
    config: object
    reporter: object
    left_fork: Fork
    right_fork: Fork
    last_meal_ms: int
    meals_eaten: int = 0
    dead: bool = field(default=False)

    def check_dead(self):
        """Return whether too long has passed since the last meal, marking death."""
        if elapsed_ms(self.last_meal_ms) >= self.config.time_to_die:
            self.dead = True
            return True
        return False

    def wait(self, ms, state):
        """Pass ``ms`` milliseconds; outside of eating, starving raises PhilosopherDied."""
        start = now_ms()
        while elapsed_ms(start) < ms:
            if state is not State.EATING and self.check_dead():
                raise PhilosopherDied(self.id)
            time.sleep(_POLL_SECONDS)

    def take_forks(self):
        """Pick up both forks, even ids left first, odd ids right first."""
        if self.id % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork
        first.take(self)
        if self.config.num_philos == 1:
            time.sleep(self.config.time_to_die / 1000)
            self.dead = True
            first.release()
            raise PhilosopherDied(self.id)
        try:
            second.take(self)
        except PhilosopherDied:
            first.release()
            raise

    def release_forks(self):
        """Put both forks back."""
        self.left_fork.release()
        self.right_fork.release()


def seat_philosophers(config, reporter):
    """Lay out one fork per seat and seat the philosophers, numbered from 1."""
    forks = [Fork() for _ in range(config.num_philos)]
    return [
        Philosopher(
            id=seat + 1,
            config=config,
            reporter=reporter,
            left_fork=fork,
            right_fork=forks[(seat + 1) % config.num_philos],
            last_meal_ms=reporter.start_ms,
        )
        for seat, fork in enumerate(forks)
    ]