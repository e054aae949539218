"""Millisecond wall-clock helpers."""

import time


def now_ms():
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def elapsed_ms(start_ms):
    """Return the milliseconds that have passed since ``start_ms``."""
    return now_ms() - start_ms