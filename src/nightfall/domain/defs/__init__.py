"""Domain definition exports."""

from .scene_def import (
    DEFAULT_COMBAT_REWARD,
    ChoiceDef,
    ChoiceRequirementDef,
    CombatDef,
    SceneDef,
    SceneHintDef,
)

__all__ = [
    "DEFAULT_COMBAT_REWARD",
    "ChoiceDef",
    "ChoiceRequirementDef",
    "CombatDef",
    "SceneDef",
    "SceneHintDef",
]
