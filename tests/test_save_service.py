import json
from pathlib import Path

import pytest

from nightfall.presentation.cli.save_file import SaveFileStore
from nightfall.services.errors import SaveLoadError
from nightfall.services.save_service import SaveService
from tests.helpers.game_builders import make_state

_SCENE_IDS = {"start": None, "cabin": None, "win": None, "lose": None}


def _service(tmp_path: Path) -> tuple[SaveService, SaveFileStore]:
    store = SaveFileStore(tmp_path / "saves" / "save.json")
    return SaveService(store, _SCENE_IDS, start_scene_id="start"), store


def test_save_then_load_round_trips(tmp_path: Path) -> None:
    service, _ = _service(tmp_path)
    state = make_state(scene_id="cabin", health=7, max_health=12, attack=4, items=["Torch", "Key"])

    service.save(state)
    restored = service.load()

    assert restored is not None
    assert restored.current_scene_id == "cabin"
    assert restored.stats == state.stats
    assert set(restored.inventory) == {"Key", "Torch"}
    assert restored.is_over is False


def test_serialized_payload_uses_save_file_field_names(tmp_path: Path) -> None:
    service, store = _service(tmp_path)

    service.save(make_state(scene_id="cabin", health=9, items=["Torch", "Key"]))

    assert json.loads(store.path.read_text(encoding="utf-8")) == {
        "CurrentScene": "cabin",
        "Stats": {"MaxHealth": 10, "Health": 9, "Attack": 3},
        "Inventory": ["Key", "Torch"],
    }


def test_save_overwrites_previous_file(tmp_path: Path) -> None:
    service, _ = _service(tmp_path)
    service.save(make_state(scene_id="cabin"))
    service.save(make_state(scene_id="start", health=4))

    restored = service.load()

    assert restored is not None
    assert restored.current_scene_id == "start"
    assert restored.stats.health == 4


def test_load_without_file_returns_none(tmp_path: Path) -> None:
    service, _ = _service(tmp_path)

    assert service.load() is None


def test_load_corrupt_file_returns_none(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    service, store = _service(tmp_path)
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{ definitely not json", encoding="utf-8")

    with caplog.at_level("WARNING"):
        assert service.load() is None
    assert "could not be read" in caplog.text


def test_load_rejects_unknown_scene(tmp_path: Path) -> None:
    service, store = _service(tmp_path)
    store.write({"CurrentScene": "atlantis", "Stats": {"MaxHealth": 10, "Health": 10, "Attack": 3}})

    assert service.load() is None


def test_missing_optional_fields_use_defaults() -> None:
    service = SaveService(SaveFileStore("unused.json"), _SCENE_IDS, start_scene_id="start")

    state = service.deserialize({"Stats": {"MaxHealth": 10, "Health": 6, "Attack": 3}})

    assert state.current_scene_id == "start"
    assert len(state.inventory) == 0
    assert state.stats.health == 6


def test_duplicate_inventory_entries_collapse() -> None:
    service = SaveService(SaveFileStore("unused.json"), _SCENE_IDS, start_scene_id="start")

    state = service.deserialize(
        {
            "CurrentScene": "cabin",
            "Stats": {"MaxHealth": 10, "Health": 6, "Attack": 3},
            "Inventory": ["Key", "Key", "Torch"],
        }
    )

    assert state.inventory.sorted_items() == ["Key", "Torch"]


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"CurrentScene": "start"},
        {"CurrentScene": 3, "Stats": {"MaxHealth": 10, "Health": 10, "Attack": 3}},
        {"CurrentScene": "start", "Stats": {"MaxHealth": 0, "Health": 10, "Attack": 3}},
        {"CurrentScene": "start", "Stats": {"MaxHealth": 10, "Health": "10", "Attack": 3}},
        {"CurrentScene": "start", "Stats": {"MaxHealth": 10, "Health": 10, "Attack": -1}},
        {"CurrentScene": "start", "Stats": {"MaxHealth": 10, "Health": 10, "Attack": True}},
        {"CurrentScene": "start", "Stats": {"MaxHealth": 10, "Health": 10, "Attack": 3}, "Inventory": "Key"},
        {"CurrentScene": "start", "Stats": {"MaxHealth": 10, "Health": 10, "Attack": 3}, "Inventory": [1]},
    ],
)
def test_deserialize_rejects_bad_payloads(payload: object) -> None:
    service = SaveService(SaveFileStore("unused.json"), _SCENE_IDS, start_scene_id="start")

    with pytest.raises(SaveLoadError):
        service.deserialize(payload)  # type: ignore[arg-type]


def test_store_delete_is_idempotent(tmp_path: Path) -> None:
    _, store = _service(tmp_path)
    store.write({"CurrentScene": "start"})
    assert store.exists()

    store.delete()
    store.delete()

    assert not store.exists()


def test_load_deeply_nested_file_returns_none(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    service, store = _service(tmp_path)
    store.path.parent.mkdir(parents=True)
    store.path.write_text("[" * 200000 + "]" * 200000, encoding="utf-8")

    with caplog.at_level("WARNING"):
        assert service.load() is None
    assert "nested too deeply" in caplog.text


def test_store_read_reports_deep_nesting_as_value_error(tmp_path: Path) -> None:
    _, store = _service(tmp_path)
    store.path.parent.mkdir(parents=True)
    store.path.write_text("[" * 200000 + "]" * 200000, encoding="utf-8")

    with pytest.raises(ValueError, match="nested too deeply"):
        store.read()
