"""Shared type aliases and reserved ids for the core and domain layers."""
from typing import Literal

SceneKind = Literal["dialogue", "combat"]

WIN_SCENE_ID = "win"
LOSE_SCENE_ID = "lose"
TERMINAL_SCENE_IDS: frozenset[str] = frozenset({WIN_SCENE_ID, LOSE_SCENE_ID})

SAVE_COMMAND = "S"
LOAD_COMMAND = "L"
QUIT_COMMAND = "Q"
GLOBAL_COMMANDS: tuple[str, ...] = (SAVE_COMMAND, LOAD_COMMAND, QUIT_COMMAND)

__all__ = [
    "GLOBAL_COMMANDS",
    "LOAD_COMMAND",
    "LOSE_SCENE_ID",
    "QUIT_COMMAND",
    "SAVE_COMMAND",
    "SceneKind",
    "TERMINAL_SCENE_IDS",
    "WIN_SCENE_ID",
]
