"""Static scene graph validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from nightfall.core.types import GLOBAL_COMMANDS, LOSE_SCENE_ID, TERMINAL_SCENE_IDS
from nightfall.domain.defs import SceneDef


Severity = str


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def errors_only(issues: list[Issue]) -> list[Issue]:
    return [issue for issue in issues if issue.severity == "ERROR"]


def validate_scene_graph(scenes: Mapping[str, SceneDef], start_scene_id: str) -> list[Issue]:
    """Check a scene graph for broken references and unplayable scenes.

    Returns every problem found; ERROR issues make the graph unusable, WARN
    issues are advisory.
    """
    issues: list[Issue] = []
    scene_ids = set(scenes)

    if start_scene_id not in scene_ids:
        issues.append(
            Issue(
                severity="ERROR",
                code="MISSING_ENTRY_ROOT",
                message="Start scene is not defined.",
                context={"scene_id": start_scene_id},
            )
        )
    for terminal_id in sorted(TERMINAL_SCENE_IDS - scene_ids):
        issues.append(
            Issue(
                severity="ERROR",
                code="MISSING_TERMINAL_SCENE",
                message="Reserved terminal scene is not defined.",
                context={"scene_id": terminal_id},
            )
        )

    for scene_id, scene in scenes.items():
        if scene.id != scene_id:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="SCENE_ID_MISMATCH",
                    message="Scene is registered under a different id.",
                    context={"scene_id": scene_id, "declared_id": scene.id},
                )
            )
        if scene.kind == "combat" and scene.combat is None:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_COMBAT_CONFIG",
                    message="Combat scene has no enemy configuration.",
                    context={"scene_id": scene_id},
                )
            )
        if not scene.is_terminal and not scene.choices:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="DEAD_END_SCENE",
                    message="Non-terminal scene offers no choices.",
                    context={"scene_id": scene_id},
                )
            )
        _validate_choice_keys(scene, issues)
        _validate_references(scene, scene_ids, issues)

    _validate_reachability(scenes, start_scene_id, issues)
    return issues


def _validate_choice_keys(scene: SceneDef, issues: list[Issue]) -> None:
    seen: set[str] = set()
    for index, choice in enumerate(scene.choices):
        field_path = f"choices[{index}].key"
        key = choice.key.upper()
        if len(key) != 1 or not key.isalpha():
            issues.append(
                Issue(
                    severity="ERROR",
                    code="INVALID_CHOICE_KEY",
                    message="Choice key must be a single letter.",
                    context={"scene_id": scene.id, "field_path": field_path, "key": choice.key},
                )
            )
            continue
        if key in GLOBAL_COMMANDS:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="RESERVED_CHOICE_KEY",
                    message="Choice key collides with a global command.",
                    context={"scene_id": scene.id, "field_path": field_path, "key": choice.key},
                )
            )
        if key in seen:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="DUPLICATE_CHOICE_KEY",
                    message="Choice key is used more than once in the scene.",
                    context={"scene_id": scene.id, "field_path": field_path, "key": choice.key},
                )
            )
        seen.add(key)


def _validate_references(scene: SceneDef, scene_ids: set[str], issues: list[Issue]) -> None:
    for index, choice in enumerate(scene.choices):
        if choice.next_scene_id not in scene_ids:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_SCENE_REF",
                    message="Choice references missing scene.",
                    context={
                        "scene_id": scene.id,
                        "field_path": f"choices[{index}].next",
                        "referenced_id": choice.next_scene_id,
                    },
                )
            )
        requirement = choice.requirement
        if requirement is not None and requirement.fallback_scene_id not in scene_ids:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_SCENE_REF",
                    message="Choice fallback references missing scene.",
                    context={
                        "scene_id": scene.id,
                        "field_path": f"choices[{index}].fallback",
                        "referenced_id": requirement.fallback_scene_id,
                    },
                )
            )


def _validate_reachability(
    scenes: Mapping[str, SceneDef], start_scene_id: str, issues: list[Issue]
) -> None:
    reachable: set[str] = set()
    # "lose" is always reachable through health loss.
    stack: list[str] = [scene_id for scene_id in (start_scene_id, LOSE_SCENE_ID) if scene_id in scenes]
    while stack:
        scene_id = stack.pop()
        if scene_id in reachable:
            continue
        reachable.add(scene_id)
        for choice in scenes[scene_id].choices:
            if choice.next_scene_id in scenes:
                stack.append(choice.next_scene_id)
            if choice.requirement is not None and choice.requirement.fallback_scene_id in scenes:
                stack.append(choice.requirement.fallback_scene_id)
    for scene_id in sorted(set(scenes) - reachable):
        issues.append(
            Issue(
                severity="WARN",
                code="UNREACHABLE_SCENE",
                message="Scene is unreachable from the start scene.",
                context={"scene_id": scene_id},
            )
        )
