"""Stat models for the player."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_HEALTH = 10
DEFAULT_ATTACK = 3


@dataclass(slots=True)
class Stats:
    """Stores the player's health and attack.

    ``health`` may drop to zero or below; the controller reads that as defeat.
    """

    max_health: int
    health: int
    attack: int

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0
