"""Exact arithmetic on nested square-root numbers, with triangle and pentagon geometry."""

__version__ = "0.1.0"