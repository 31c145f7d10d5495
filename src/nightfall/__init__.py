"""Nightfall: a small state-driven text adventure."""

__version__ = "0.1.0"
