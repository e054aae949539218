"""A threaded simulation of the dining philosophers problem."""

__version__ = "0.1.0"