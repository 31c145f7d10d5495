"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from nightfall.domain.scene_effects import (
    CombatRoundEvent,
    EnemyDefeatedEvent,
    GameEvent,
    HealthChangedEvent,
    ItemGainedEvent,
    ItemLostEvent,
)
from nightfall.domain.state import GameState
from nightfall.presentation.cli.console import Console
from nightfall.services.game_controller import (
    ChoiceBlockedEvent,
    GameLoadedEvent,
    GameSavedEvent,
    GameSummary,
    LoadFailedEvent,
    SaveFailedEvent,
    SceneView,
)

TITLE = "=== Nightfall: Text Adventure ==="
DIVIDER_WIDTH = 60
COMMANDS_LINE = "Commands: S) Save   L) Load   Q) Quit"


def format_inventory(items: Sequence[str]) -> str:
    return ", ".join(items) if items else "-"


def render_hud(console: Console, state: GameState) -> None:
    """HP, attack and inventory, followed by a divider."""
    stats = state.stats
    inventory = format_inventory(state.inventory.sorted_items())
    console.write_line(f"HP: {stats.health}/{stats.max_health}   ATK: {stats.attack}   Inventory: [{inventory}]")
    console.write_line("-" * DIVIDER_WIDTH)


def render_scene(console: Console, view: SceneView, *, debug: bool = False) -> None:
    if debug:
        console.write_line(f"[{view.scene_id}]")
    console.write_line(view.text)
    for hint in view.hints:
        console.write_line(hint)


def render_choices(console: Console, choices: Sequence[Tuple[str, str]]) -> None:
    for key, label in choices:
        console.write_line(f"{key}) {label}")
    console.write_line()
    console.write_line(COMMANDS_LINE)


def format_prompt(allowed: Sequence[str]) -> str:
    return f"Choose [{'/'.join(allowed)}]: "


def format_event(event: GameEvent) -> List[str]:
    """Turn an event into the lines shown to the player."""
    if isinstance(event, CombatRoundEvent):
        return [
            "",
            "— Combat Round —",
            f"You strike for {event.player_damage}.",
            f"Enemy strikes for {event.enemy_damage}.",
        ]
    if isinstance(event, EnemyDefeatedEvent):
        reward = (
            f"You claim the {event.reward_item}."
            if event.reward_is_new
            else f"You already carry the {event.reward_item}."
        )
        return [
            "",
            "— Combat Round —",
            f"You strike for {event.player_damage}. The enemy falls before it can answer.",
            reward,
        ]
    if isinstance(event, HealthChangedEvent):
        verb = "recover" if event.delta > 0 else "lose"
        return [f"You {verb} {abs(event.delta)} HP ({event.health}/{event.max_health})."]
    if isinstance(event, ItemGainedEvent):
        return [f"Found: {event.item_id}."]
    if isinstance(event, ItemLostEvent):
        return [f"Lost: {event.item_id}."]
    if isinstance(event, ChoiceBlockedEvent):
        message = event.message or f"You need the {event.item_id} for that."
        return ["", message]
    if isinstance(event, GameSavedEvent):
        return ["Saved."]
    if isinstance(event, SaveFailedEvent):
        return [f"Save failed: {event.reason}"]
    if isinstance(event, GameLoadedEvent):
        return ["Loaded."]
    if isinstance(event, LoadFailedEvent):
        return ["No save found."]
    return [str(event)]


def render_events(console: Console, events: Iterable[GameEvent]) -> None:
    for event in events:
        for line in format_event(event):
            console.write_line(line)


def render_summary(console: Console, summary: GameSummary) -> None:
    console.write_line()
    console.write_line(f"Final HP: {summary.health}/{summary.max_health}")
    console.write_line(f"Inventory: {format_inventory(summary.inventory)}")
    console.write_line("Thanks for playing!")
