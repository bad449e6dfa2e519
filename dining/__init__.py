"""Dining philosophers simulation, with ASCII, string and printf-style helpers."""

__version__ = "0.1.0"