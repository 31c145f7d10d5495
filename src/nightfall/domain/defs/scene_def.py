"""Scene definition structures used by the runtime."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from nightfall.core.types import TERMINAL_SCENE_IDS, SceneKind

DEFAULT_COMBAT_REWARD = "Relic"


@dataclass(frozen=True, slots=True)
class ChoiceRequirementDef:
    """Item the player must hold to take a choice, and where to go otherwise."""

    item_id: str
    fallback_scene_id: str
    blocked_text: str = ""


@dataclass(frozen=True, slots=True)
class ChoiceDef:
    """Represents a selectable choice on a scene."""

    key: str
    label: str
    next_scene_id: str
    health_delta: int = 0
    gain_item: str | None = None
    lose_item: str | None = None
    requirement: ChoiceRequirementDef | None = None


@dataclass(frozen=True, slots=True)
class SceneHintDef:
    """Extra line shown on a scene while the player holds ``item_id``."""

    item_id: str
    text: str


@dataclass(frozen=True, slots=True)
class CombatDef:
    """Enemy configuration for a combat scene."""

    enemy_health: int
    enemy_attack: int
    percent_based: bool = False
    reward_item: str = DEFAULT_COMBAT_REWARD


@dataclass(frozen=True, slots=True)
class SceneDef:
    """Fully parsed scene.

    ``kind`` selects the apply behaviour; only ``"combat"`` scenes carry
    ``combat``.
    """

    id: str
    text: str
    choices: Tuple[ChoiceDef, ...] = field(default_factory=tuple)
    kind: SceneKind = "dialogue"
    combat: CombatDef | None = None
    hint: SceneHintDef | None = None

    @property
    def is_terminal(self) -> bool:
        return self.id in TERMINAL_SCENE_IDS

    def find_choice(self, key: str) -> ChoiceDef | None:
        """Return the choice bound to ``key``, ignoring case."""
        wanted = key.strip().upper()
        for choice in self.choices:
            if choice.key.upper() == wanted:
                return choice
        return None

    def choice_keys(self) -> list[str]:
        return [choice.key.upper() for choice in self.choices]
