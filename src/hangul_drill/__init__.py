"""Hangul spelling drill: decomposition and keystroke matching for typed answers."""

__version__ = "0.1.0"
