from nightfall.core.types import TERMINAL_SCENE_IDS
from nightfall.data.repositories import SceneRepository
from nightfall.services.scene_graph_validator import format_issue, validate_scene_graph
from nightfall.services.scene_registry import DEFAULT_START_SCENE_ID, load_default_registry


def test_shipped_scene_graph_is_clean() -> None:
    scenes = SceneRepository().as_mapping()

    issues = validate_scene_graph(scenes, DEFAULT_START_SCENE_ID)

    assert issues == [], "\n".join(format_issue(issue) for issue in issues)


def test_shipped_content_shape() -> None:
    registry = load_default_registry()

    assert set(registry) == {"start", "cabin", "river", "cave", "gate", "maybe_lose", "win", "lose"}
    assert TERMINAL_SCENE_IDS <= set(registry)
    gate = registry["gate"]
    assert gate.kind == "combat"
    assert gate.combat is not None and gate.combat.percent_based
    assert gate.hint is not None and gate.hint.item_id == "Key"
    use_key = gate.find_choice("A")
    assert use_key is not None and use_key.requirement is not None
    assert use_key.requirement.fallback_scene_id == "maybe_lose"
    assert [scene_id for scene_id, scene in registry.items() if scene.kind == "combat"] == ["gate"]
