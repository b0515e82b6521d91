"""Bounded clipboard history with restore and JSON persistence."""

__version__ = "0.1.0"
