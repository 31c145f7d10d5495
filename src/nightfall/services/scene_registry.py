"""Validated, read-only lookup of scenes by id."""
from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from nightfall.data.errors import DataReferenceError
from nightfall.data.repositories import SceneRepository
from nightfall.domain.defs import SceneDef
from nightfall.services.scene_graph_validator import errors_only, format_issue, validate_scene_graph

logger = logging.getLogger(__name__)

DEFAULT_START_SCENE_ID = "start"


class SceneRegistry(Mapping[str, SceneDef]):
    """Immutable mapping from scene id to scene.

    Build it through :meth:`build` so the graph is validated once, up front.
    """

    def __init__(self, scenes: Mapping[str, SceneDef], start_scene_id: str) -> None:
        self._scenes: Mapping[str, SceneDef] = MappingProxyType(dict(scenes))
        self._start_scene_id = start_scene_id

    @classmethod
    def build(
        cls, scenes: Mapping[str, SceneDef], start_scene_id: str = DEFAULT_START_SCENE_ID
    ) -> "SceneRegistry":
        """Validate ``scenes`` and wrap them, raising DataReferenceError on broken content."""
        issues = validate_scene_graph(scenes, start_scene_id)
        for issue in issues:
            if issue.severity != "ERROR":
                logger.warning("Scene graph: %s", format_issue(issue))
        errors = errors_only(issues)
        if errors:
            details = "\n".join(format_issue(issue) for issue in errors)
            raise DataReferenceError(f"Scene graph failed validation:\n{details}")
        logger.debug("Scene registry built with %d scenes (start=%s)", len(scenes), start_scene_id)
        return cls(scenes, start_scene_id)

    @property
    def start_scene_id(self) -> str:
        return self._start_scene_id

    def __getitem__(self, scene_id: str) -> SceneDef:
        return self._scenes[scene_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._scenes)

    def __len__(self) -> int:
        return len(self._scenes)


def load_default_registry(
    base_path: Path | str | None = None, start_scene_id: str = DEFAULT_START_SCENE_ID
) -> SceneRegistry:
    """Load ``scenes.json`` (shipped content unless ``base_path`` is given) into a registry."""
    repo = SceneRepository(base_path=base_path)
    return SceneRegistry.build(repo.as_mapping(), start_scene_id)
