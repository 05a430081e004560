"""Cheer API: resilient content gateway for quotes, verses, songs and jokes."""

__version__ = "1.0.0"
