"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field

from nightfall.domain.entities import Stats
from nightfall.domain.inventory import Inventory


@dataclass
class GameState:
    """Everything that changes during a single playthrough."""

    current_scene_id: str
    stats: Stats
    inventory: Inventory = field(default_factory=Inventory)
    is_over: bool = False
