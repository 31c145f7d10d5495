"""Deterministic single-round combat resolution."""
from __future__ import annotations

import math
from dataclasses import dataclass

from nightfall.domain.defs import CombatDef
from nightfall.domain.entities import Stats

PERCENT_DAMAGE_RATE = 0.25


@dataclass(frozen=True, slots=True)
class CombatRoundResult:
    """Outcome of one exchange of blows."""

    player_damage: int
    enemy_remaining: int
    enemy_damage: int

    @property
    def enemy_defeated(self) -> bool:
        return self.enemy_remaining <= 0


def player_damage_for(stats: Stats) -> int:
    """The player always lands at least one point."""
    return max(1, stats.attack)


def enemy_damage_for(combat: CombatDef, current_health: int) -> int:
    """Return the retaliation damage for a surviving enemy.

    Percent-based enemies take a fixed share of the player's current health
    (never less than one point); the rest hit for their flat attack value.
    """
    if combat.percent_based:
        return max(1, math.floor(current_health * PERCENT_DAMAGE_RATE))
    return combat.enemy_attack


def resolve_combat_round(combat: CombatDef, stats: Stats) -> CombatRoundResult:
    """Compute one round without touching ``stats``.

    A lethal opening strike means the enemy never retaliates.
    """
    player_damage = player_damage_for(stats)
    enemy_remaining = combat.enemy_health - player_damage
    if enemy_remaining <= 0:
        enemy_damage = 0
    else:
        enemy_damage = enemy_damage_for(combat, stats.health)
    return CombatRoundResult(
        player_damage=player_damage,
        enemy_remaining=enemy_remaining,
        enemy_damage=enemy_damage,
    )
