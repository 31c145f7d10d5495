"""Repository for scene definitions."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from nightfall.core.types import SceneKind
from nightfall.data.errors import DataValidationError
from nightfall.data.repositories.base import RepositoryBase
from nightfall.domain.defs import (
    DEFAULT_COMBAT_REWARD,
    ChoiceDef,
    ChoiceRequirementDef,
    CombatDef,
    SceneDef,
    SceneHintDef,
)

_SCENE_KINDS: tuple[SceneKind, ...] = ("dialogue", "combat")


class SceneRepository(RepositoryBase[SceneDef]):
    """Loads scenes from ``scenes.json`` and validates their structure.

    Cross-scene references are not checked here; the registry does that once
    every scene is known.
    """

    def __init__(self, base_path: Path | str | None = None) -> None:
        super().__init__("scenes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, SceneDef]:
        scenes: Dict[str, SceneDef] = {}
        for scene_id, scene_payload in raw.items():
            context = f"scene '{scene_id}'"
            scene_data = self._require_mapping(scene_payload, context)
            text = self._require_str(scene_data.get("text"), f"{context} text")
            kind = self._parse_kind(scene_data.get("type", "dialogue"), context)
            combat = None
            if "combat" in scene_data:
                combat = self._parse_combat(scene_data["combat"], f"{context} combat")
            if kind == "combat" and combat is None:
                raise DataValidationError(f"{context} is a combat scene but has no combat block.")
            if kind == "dialogue" and combat is not None:
                raise DataValidationError(f"{context} has a combat block but is not a combat scene.")
            hint = None
            if "hint" in scene_data:
                hint = self._parse_hint(scene_data["hint"], f"{context} hint")
            scenes[scene_id] = SceneDef(
                id=scene_id,
                text=text,
                choices=tuple(self._parse_choices(scene_data.get("choices"), context)),
                kind=kind,
                combat=combat,
                hint=hint,
            )
        return scenes

    def _parse_kind(self, value: object, context: str) -> SceneKind:
        kind = self._require_str(value, f"{context} type")
        if kind not in _SCENE_KINDS:
            raise DataValidationError(
                f"{context} type must be one of {', '.join(_SCENE_KINDS)} (got '{kind}')."
            )
        return kind  # type: ignore[return-value]

    def _parse_combat(self, raw_combat: object, context: str) -> CombatDef:
        data = self._require_mapping(raw_combat, context)
        enemy_health = self._require_int(data.get("enemy_health"), f"{context} enemy_health")
        enemy_attack = self._require_int(data.get("enemy_attack", 0), f"{context} enemy_attack")
        if enemy_attack < 0:
            raise DataValidationError(f"{context} enemy_attack must not be negative.")
        percent_based = self._require_bool(data.get("percent_based", False), f"{context} percent_based")
        reward_item = self._require_str(data.get("reward_item", DEFAULT_COMBAT_REWARD), f"{context} reward_item")
        return CombatDef(
            enemy_health=enemy_health,
            enemy_attack=enemy_attack,
            percent_based=percent_based,
            reward_item=reward_item,
        )

    def _parse_hint(self, raw_hint: object, context: str) -> SceneHintDef:
        data = self._require_mapping(raw_hint, context)
        return SceneHintDef(
            item_id=self._require_str(data.get("requires_item"), f"{context} requires_item"),
            text=self._require_str(data.get("text"), f"{context} text"),
        )

    def _parse_choices(self, raw_choices: object, context: str) -> List[ChoiceDef]:
        if raw_choices is None:
            return []
        if not isinstance(raw_choices, list):
            raise DataValidationError(f"{context} choices must be a list if provided.")
        choices: List[ChoiceDef] = []
        for index, entry in enumerate(raw_choices):
            choice_ctx = f"{context} choices[{index}]"
            data = self._require_mapping(entry, choice_ctx)
            requirement = None
            if "requires_item" in data:
                requirement = ChoiceRequirementDef(
                    item_id=self._require_str(data["requires_item"], f"{choice_ctx} requires_item"),
                    fallback_scene_id=self._require_str(data.get("fallback"), f"{choice_ctx} fallback"),
                    blocked_text=self._optional_str(data.get("blocked_text"), f"{choice_ctx} blocked_text") or "",
                )
            elif "fallback" in data:
                raise DataValidationError(f"{choice_ctx} fallback requires requires_item.")
            choices.append(
                ChoiceDef(
                    key=self._require_str(data.get("key"), f"{choice_ctx} key"),
                    label=self._require_str(data.get("label"), f"{choice_ctx} label"),
                    next_scene_id=self._require_str(data.get("next"), f"{choice_ctx} next"),
                    health_delta=self._require_int(data.get("health_delta", 0), f"{choice_ctx} health_delta"),
                    gain_item=self._optional_str(data.get("gain_item"), f"{choice_ctx} gain_item"),
                    lose_item=self._optional_str(data.get("lose_item"), f"{choice_ctx} lose_item"),
                    requirement=requirement,
                )
            )
        return choices
