"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when a save payload cannot be turned back into game state."""
