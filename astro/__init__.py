"""Astro readings API: accounts, astrology and numerology readings."""

__version__ = "1.0.0"
