"""Customizable Olympic medal standings."""

__version__ = "0.1.0"
