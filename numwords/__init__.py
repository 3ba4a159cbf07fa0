"""Spell out non-negative integers in words using a plain-text number dictionary."""

__version__ = "0.1.0"