"""Compress a working directory into a short, unambiguous prompt string."""

__version__ = "0.1.0"
