"""Bounded, single-host crawler that searches pages for a phrase."""

__version__ = "0.1.0"
