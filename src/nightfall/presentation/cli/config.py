"""CLI configuration helpers."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

SAVE_PATH_ENV = "NIGHTFALL_SAVE_PATH"
DEBUG_ENV = "NIGHTFALL_DEBUG"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Nightfall"
        return Path.home() / "Nightfall"
    return Path.home() / ".config" / "nightfall"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_default_save_path() -> Path:
    """Return the save file path, honouring NIGHTFALL_SAVE_PATH."""
    override = os.environ.get(SAVE_PATH_ENV)
    if override:
        return Path(override)
    return get_user_data_dir() / "save.json"


def debug_enabled() -> bool:
    """Return True only when NIGHTFALL_DEBUG is explicitly set to '1'."""
    return os.getenv(DEBUG_ENV) == "1"


def _defaults() -> Dict[str, Any]:
    return {"save_path": get_default_save_path(), "clear_screen": True}


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk, falling back to defaults for anything unusable."""
    config = _defaults()
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return config
    if not isinstance(raw, dict):
        return config
    save_path = raw.get("save_path")
    if isinstance(save_path, str) and save_path and not os.environ.get(SAVE_PATH_ENV):
        config["save_path"] = Path(save_path).expanduser()
    clear_screen = raw.get("clear_screen")
    if isinstance(clear_screen, bool):
        config["clear_screen"] = clear_screen
    return config
