"""UI-agnostic game loop controller.

The controller owns turn progression over the scene graph: it validates
player input, runs the global commands, enforces choice requirements, applies
choices and detects terminal scenes. Rendering and prompting stay in the
presentation layer, which consumes the returned views and events.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from nightfall.core.types import (
    GLOBAL_COMMANDS,
    LOAD_COMMAND,
    LOSE_SCENE_ID,
    QUIT_COMMAND,
    SAVE_COMMAND,
)
from nightfall.domain.defs import ChoiceDef, SceneDef
from nightfall.domain.entities import DEFAULT_ATTACK, DEFAULT_MAX_HEALTH, Stats
from nightfall.domain.inventory import Inventory
from nightfall.domain.scene_effects import GameEvent, apply_choice
from nightfall.domain.state import GameState
from nightfall.services.save_service import SaveService
from nightfall.services.scene_registry import SceneRegistry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SceneView:
    """Data returned to the presentation layer for rendering."""

    scene_id: str
    text: str
    choices: List[Tuple[str, str]]
    hints: List[str]
    is_terminal: bool


@dataclass(slots=True)
class GameSavedEvent(GameEvent):
    scene_id: str


@dataclass(slots=True)
class SaveFailedEvent(GameEvent):
    reason: str


@dataclass(slots=True)
class GameLoadedEvent(GameEvent):
    scene_id: str


@dataclass(slots=True)
class LoadFailedEvent(GameEvent):
    pass


@dataclass(slots=True)
class ChoiceBlockedEvent(GameEvent):
    message: str
    item_id: str
    fallback_scene_id: str


@dataclass(slots=True)
class TurnResult:
    """Result of handling one validated input."""

    state: GameState
    events: List[GameEvent] = field(default_factory=list)
    quit: bool = False


@dataclass(frozen=True, slots=True)
class GameSummary:
    health: int
    max_health: int
    inventory: List[str]


class GameController:
    """Drives a single-player session over a validated scene registry."""

    def __init__(
        self,
        registry: SceneRegistry,
        save_service: SaveService,
        *,
        max_health: int = DEFAULT_MAX_HEALTH,
        attack: int = DEFAULT_ATTACK,
    ) -> None:
        self._registry = registry
        self._save_service = save_service
        self._max_health = max_health
        self._attack = attack

    def new_game(self) -> GameState:
        """Create a fresh game state positioned at the start scene."""
        stats = Stats(max_health=self._max_health, health=self._max_health, attack=self._attack)
        return GameState(current_scene_id=self._registry.start_scene_id, stats=stats, inventory=Inventory())

    def current_scene(self, state: GameState) -> SceneDef:
        return self._registry[state.current_scene_id]

    def get_scene_view(self, state: GameState) -> SceneView:
        """Return the view model for the current scene."""
        scene = self.current_scene(state)
        if scene.is_terminal:
            return SceneView(scene_id=scene.id, text=scene.text, choices=[], hints=[], is_terminal=True)
        hints: List[str] = []
        if scene.hint is not None and scene.hint.item_id in state.inventory:
            hints.append(scene.hint.text)
        return SceneView(
            scene_id=scene.id,
            text=scene.text,
            choices=[(choice.key.upper(), choice.label) for choice in scene.choices],
            hints=hints,
            is_terminal=False,
        )

    def allowed_inputs(self, state: GameState) -> List[str]:
        """Choice keys in display order followed by the global commands."""
        keys = self.current_scene(state).choice_keys()
        return keys + [command for command in GLOBAL_COMMANDS if command not in keys]

    def normalize_input(self, state: GameState, raw: str) -> str | None:
        """Return the upper-cased input if it is a valid key or command, else None."""
        value = raw.strip().upper()
        if value in self.allowed_inputs(state):
            return value
        return None

    def handle_input(self, state: GameState, key: str) -> TurnResult:
        """Apply one normalized input and return the (possibly replaced) state."""
        if state.is_over:
            raise ValueError("The game is already over.")
        if key == SAVE_COMMAND:
            return self._save(state)
        if key == LOAD_COMMAND:
            return self._load(state)
        if key == QUIT_COMMAND:
            logger.debug("Player quit at scene '%s'", state.current_scene_id)
            return TurnResult(state=state, quit=True)

        scene = self.current_scene(state)
        choice = scene.find_choice(key)
        if choice is None:
            raise ValueError(f"Input '{key}' is not a choice on scene '{scene.id}'.")
        return self._choose(scene, choice, state)

    def enter_terminal_if_needed(self, state: GameState) -> bool:
        """Mark the game over when the current scene is terminal."""
        if self.current_scene(state).is_terminal:
            state.is_over = True
        return state.is_over

    def summarize(self, state: GameState) -> GameSummary:
        return GameSummary(
            health=state.stats.health,
            max_health=state.stats.max_health,
            inventory=state.inventory.sorted_items(),
        )

    def _choose(self, scene: SceneDef, choice: ChoiceDef, state: GameState) -> TurnResult:
        events: List[GameEvent] = []
        requirement = choice.requirement
        if requirement is not None and requirement.item_id not in state.inventory:
            logger.debug(
                "Choice %s on '%s' blocked (missing %s), redirecting to '%s'",
                choice.key,
                scene.id,
                requirement.item_id,
                requirement.fallback_scene_id,
            )
            events.append(
                ChoiceBlockedEvent(
                    message=requirement.blocked_text,
                    item_id=requirement.item_id,
                    fallback_scene_id=requirement.fallback_scene_id,
                )
            )
            next_scene_id = requirement.fallback_scene_id
        else:
            next_scene_id = apply_choice(scene, state, choice, events)
            if state.stats.is_defeated:
                next_scene_id = LOSE_SCENE_ID
        logger.debug("Transition '%s' -[%s]-> '%s'", scene.id, choice.key, next_scene_id)
        state.current_scene_id = next_scene_id
        self.enter_terminal_if_needed(state)
        return TurnResult(state=state, events=events)

    def _save(self, state: GameState) -> TurnResult:
        try:
            self._save_service.save(state)
        except OSError as exc:
            logger.warning("Save failed: %s", exc)
            return TurnResult(state=state, events=[SaveFailedEvent(reason=str(exc))])
        return TurnResult(state=state, events=[GameSavedEvent(scene_id=state.current_scene_id)])

    def _load(self, state: GameState) -> TurnResult:
        loaded = self._save_service.load()
        if loaded is None:
            return TurnResult(state=state, events=[LoadFailedEvent()])
        return TurnResult(state=loaded, events=[GameLoadedEvent(scene_id=loaded.current_scene_id)])
