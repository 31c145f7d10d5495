"""Runtime entity exports."""

from .stats import DEFAULT_ATTACK, DEFAULT_MAX_HEALTH, Stats

__all__ = [
    "DEFAULT_ATTACK",
    "DEFAULT_MAX_HEALTH",
    "Stats",
]
