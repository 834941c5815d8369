"""Bees In The Trap: a turn-based terminal game against a hive of bees."""

__version__ = "0.1.0"