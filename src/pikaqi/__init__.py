"""Pikaqi — a desktop xiangqi board driven by an external UCI engine."""

__version__ = "0.1.0"
