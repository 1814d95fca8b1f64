"""Aerostop hotel reservation command-line utility."""

__version__ = "0.1.0"
