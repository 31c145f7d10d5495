import json
from pathlib import Path

import pytest

from nightfall.data.errors import DataLoadError, DataValidationError
from nightfall.data.repositories import SceneRepository
from nightfall.domain.defs import ChoiceRequirementDef, CombatDef, SceneHintDef


def _write_scenes(tmp_path: Path, payload: object) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    (definitions_dir / "scenes.json").write_text(json.dumps(payload), encoding="utf-8")
    return definitions_dir


def test_parses_dialogue_and_combat_scenes(tmp_path: Path) -> None:
    definitions_dir = _write_scenes(
        tmp_path,
        {
            "start": {
                "text": "Hello.",
                "choices": [{"key": "a", "label": "Onward", "next": "pit", "health_delta": -1, "gain_item": "Key"}],
            },
            "pit": {
                "type": "combat",
                "text": "A beast.",
                "combat": {"enemy_health": 5, "enemy_attack": 1, "percent_based": True},
                "hint": {"requires_item": "Key", "text": "The key hums."},
                "choices": [
                    {
                        "key": "A",
                        "label": "Unlock",
                        "next": "win",
                        "requires_item": "Key",
                        "fallback": "lose",
                        "blocked_text": "No key.",
                    }
                ],
            },
            "win": {"text": "Yay."},
        },
    )
    repo = SceneRepository(base_path=definitions_dir)

    scenes = repo.as_mapping()
    start = scenes["start"]
    pit = scenes["pit"]

    assert start.kind == "dialogue"
    assert start.choices[0].health_delta == -1
    assert start.choices[0].gain_item == "Key"
    assert start.find_choice("A") is start.choices[0]
    assert pit.kind == "combat"
    assert pit.combat == CombatDef(enemy_health=5, enemy_attack=1, percent_based=True, reward_item="Relic")
    assert pit.hint == SceneHintDef(item_id="Key", text="The key hums.")
    assert pit.choices[0].requirement == ChoiceRequirementDef(
        item_id="Key", fallback_scene_id="lose", blocked_text="No key."
    )
    assert scenes["win"].choices == ()
    assert list(scenes) == ["start", "pit", "win"]
    assert [scene.id for scene in scenes.values()] == ["start", "pit", "win"]


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    repo = SceneRepository(base_path=tmp_path)

    with pytest.raises(DataLoadError):
        repo.as_mapping()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "scenes.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(DataLoadError):
        SceneRepository(base_path=tmp_path).as_mapping()


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ([], "top-level object"),
        ({"start": {"choices": []}}, "text"),
        ({"start": {"text": "x", "type": "puzzle"}}, "type must be one of"),
        ({"start": {"text": "x", "type": "combat"}}, "no combat block"),
        ({"start": {"text": "x", "combat": {"enemy_health": 1}}}, "not a combat scene"),
        ({"start": {"text": "x", "type": "combat", "combat": {"enemy_health": "6"}}}, "enemy_health"),
        ({"start": {"text": "x", "choices": {}}}, "choices must be a list"),
        ({"start": {"text": "x", "choices": [{"key": "A", "label": "y"}]}}, "next"),
        ({"start": {"text": "x", "choices": [{"key": "A", "label": "y", "next": "z", "health_delta": True}]}}, "health_delta"),
        ({"start": {"text": "x", "choices": [{"key": "A", "label": "y", "next": "z", "fallback": "w"}]}}, "requires requires_item"),
        ({"start": {"text": "x", "choices": [{"key": "A", "label": "y", "next": "z", "requires_item": "Key"}]}}, "fallback"),
    ],
)
def test_structural_problems_raise_validation_error(tmp_path: Path, payload: object, message: str) -> None:
    definitions_dir = _write_scenes(tmp_path, payload)

    with pytest.raises(DataValidationError, match=message):
        SceneRepository(base_path=definitions_dir).as_mapping()
