"""Worked exercises in numbers, data structures and design patterns."""

__version__ = "0.1.0"