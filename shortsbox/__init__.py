"""Shortsbox: API backing a short-video browsing page."""

__version__ = "1.0.0"
