"""Repository exports."""

from .scenes_repo import SceneRepository

__all__ = [
    "SceneRepository",
]
