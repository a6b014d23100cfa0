"""Watchy 200x200 monochrome bitmap converter."""

__version__ = "0.1.0"
