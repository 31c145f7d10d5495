"""Service layer exports."""

from .errors import SaveLoadError
from .game_controller import (
    ChoiceBlockedEvent,
    GameController,
    GameLoadedEvent,
    GameSavedEvent,
    GameSummary,
    LoadFailedEvent,
    SaveFailedEvent,
    SceneView,
    TurnResult,
)
from .save_service import SaveService
from .scene_registry import SceneRegistry, load_default_registry

__all__ = [
    "ChoiceBlockedEvent",
    "GameController",
    "GameLoadedEvent",
    "GameSavedEvent",
    "GameSummary",
    "LoadFailedEvent",
    "SaveFailedEvent",
    "SaveLoadError",
    "SaveService",
    "SceneRegistry",
    "SceneView",
    "TurnResult",
    "load_default_registry",
]
