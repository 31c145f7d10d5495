"""Choice application for dialogue and combat scenes."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from nightfall.core.types import LOSE_SCENE_ID
from nightfall.domain.combat import resolve_combat_round
from nightfall.domain.defs import ChoiceDef, SceneDef
from nightfall.domain.state import GameState

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameEvent:
    """Base class for events the presentation layer renders."""


@dataclass(slots=True)
class CombatRoundEvent(GameEvent):
    player_damage: int
    enemy_damage: int
    player_health: int


@dataclass(slots=True)
class EnemyDefeatedEvent(GameEvent):
    player_damage: int
    reward_item: str
    reward_is_new: bool


@dataclass(slots=True)
class HealthChangedEvent(GameEvent):
    delta: int
    health: int
    max_health: int


@dataclass(slots=True)
class ItemGainedEvent(GameEvent):
    item_id: str


@dataclass(slots=True)
class ItemLostEvent(GameEvent):
    item_id: str


def apply_choice(
    scene: SceneDef,
    state: GameState,
    choice: ChoiceDef,
    events: List[GameEvent] | None = None,
) -> str:
    """Apply ``choice`` on ``scene`` to ``state`` and return the next scene id.

    ``choice`` must belong to ``scene``; callers are expected to resolve it
    through :meth:`SceneDef.find_choice`. Narrative events are appended to
    ``events`` when a list is supplied.
    """
    sink: List[GameEvent] = events if events is not None else []
    if scene.kind == "combat":
        return _apply_combat(scene, state, choice, sink)
    return _apply_dialogue(state, choice, sink)


def _apply_dialogue(state: GameState, choice: ChoiceDef, events: List[GameEvent]) -> str:
    stats = state.stats
    if choice.health_delta:
        stats.health += choice.health_delta
        events.append(
            HealthChangedEvent(delta=choice.health_delta, health=stats.health, max_health=stats.max_health)
        )
    if choice.gain_item is not None and state.inventory.add(choice.gain_item):
        events.append(ItemGainedEvent(item_id=choice.gain_item))
    if choice.lose_item is not None and state.inventory.remove(choice.lose_item):
        events.append(ItemLostEvent(item_id=choice.lose_item))
    if stats.is_defeated:
        return LOSE_SCENE_ID
    return choice.next_scene_id


def _apply_combat(
    scene: SceneDef, state: GameState, choice: ChoiceDef, events: List[GameEvent]
) -> str:
    combat = scene.combat
    if combat is None:
        raise ValueError(f"Combat scene '{scene.id}' has no combat configuration.")
    result = resolve_combat_round(combat, state.stats)
    if result.enemy_defeated:
        is_new = state.inventory.add(combat.reward_item)
        events.append(
            EnemyDefeatedEvent(
                player_damage=result.player_damage,
                reward_item=combat.reward_item,
                reward_is_new=is_new,
            )
        )
    state.stats.health -= result.enemy_damage
    logger.debug(
        "Combat at '%s': player hits %d, enemy hits %d, enemy left %d, player health %d",
        scene.id,
        result.player_damage,
        result.enemy_damage,
        result.enemy_remaining,
        state.stats.health,
    )
    if not result.enemy_defeated:
        events.append(
            CombatRoundEvent(
                player_damage=result.player_damage,
                enemy_damage=result.enemy_damage,
                player_health=state.stats.health,
            )
        )
    if state.stats.is_defeated:
        return LOSE_SCENE_ID
    return _apply_dialogue(state, choice, events)
