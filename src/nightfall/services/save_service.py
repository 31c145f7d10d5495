"""Serialization helpers for manual save/load."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Protocol

from nightfall.domain.entities import Stats
from nightfall.domain.inventory import Inventory
from nightfall.domain.state import GameState
from nightfall.services.errors import SaveLoadError

logger = logging.getLogger(__name__)

SavePayload = Dict[str, Any]


class SaveStore(Protocol):
    """Where a single save payload lives."""

    def exists(self) -> bool: ...

    def read(self) -> SavePayload: ...

    def write(self, payload: SavePayload) -> None: ...


class SaveService:
    """Converts runtime state to and from the on-disk save payload.

    Loading fails soft: a missing, unreadable, or invalid save is reported as
    ``None`` rather than raised.
    """

    def __init__(self, store: SaveStore, scene_ids: Mapping[str, object], *, start_scene_id: str) -> None:
        self._store = store
        self._scene_ids = scene_ids
        self._start_scene_id = start_scene_id

    def serialize(self, state: GameState) -> SavePayload:
        stats = state.stats
        return {
            "CurrentScene": state.current_scene_id,
            "Stats": {
                "MaxHealth": stats.max_health,
                "Health": stats.health,
                "Attack": stats.attack,
            },
            "Inventory": state.inventory.sorted_items(),
        }

    def deserialize(self, payload: Mapping[str, Any]) -> GameState:
        """Rebuild a GameState from a payload, raising SaveLoadError if it is unusable."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")

        raw_scene = payload.get("CurrentScene")
        if raw_scene is None:
            current_scene_id = self._start_scene_id
        else:
            current_scene_id = self._require_str(raw_scene, "CurrentScene")
        if current_scene_id not in self._scene_ids:
            raise SaveLoadError(f"Save references unknown scene '{current_scene_id}'.")

        stats_payload = payload.get("Stats")
        if not isinstance(stats_payload, Mapping):
            raise SaveLoadError("Stats must be an object.")
        max_health = self._require_int(stats_payload.get("MaxHealth"), "Stats.MaxHealth")
        if max_health <= 0:
            raise SaveLoadError("Stats.MaxHealth must be positive.")
        attack = self._require_int(stats_payload.get("Attack"), "Stats.Attack")
        if attack < 0:
            raise SaveLoadError("Stats.Attack must not be negative.")
        stats = Stats(
            max_health=max_health,
            health=self._require_int(stats_payload.get("Health"), "Stats.Health"),
            attack=attack,
        )

        return GameState(
            current_scene_id=current_scene_id,
            stats=stats,
            inventory=self._coerce_inventory(payload.get("Inventory")),
        )

    def save(self, state: GameState) -> None:
        """Overwrite the stored save with ``state``. OS errors propagate."""
        self._store.write(self.serialize(state))
        logger.debug("Saved game at scene '%s'", state.current_scene_id)

    def load(self) -> GameState | None:
        """Return the stored state, or None when there is no usable save."""
        if not self._store.exists():
            logger.debug("No save present")
            return None
        try:
            payload = self._store.read()
        except (OSError, ValueError) as exc:
            logger.warning("Save could not be read: %s", exc)
            return None
        try:
            state = self.deserialize(payload)
        except SaveLoadError as exc:
            logger.warning("Save rejected: %s", exc)
            return None
        logger.debug("Loaded game at scene '%s'", state.current_scene_id)
        return state

    @staticmethod
    def _coerce_inventory(value: Any) -> Inventory:
        if value is None:
            return Inventory()
        if not isinstance(value, list):
            raise SaveLoadError("Inventory must be a list.")
        for entry in value:
            if not isinstance(entry, str):
                raise SaveLoadError("Inventory entries must be strings.")
        return Inventory.of(value)

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: Any, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"{context} must be an integer.")
        return value
