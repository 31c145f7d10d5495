def test_import_nightfall_package() -> None:
    import importlib

    module = importlib.import_module("nightfall")
    assert module.__version__
    assert module.__file__.replace("\\", "/").endswith("src/nightfall/__init__.py")


def test_import_domain_has_no_side_effects() -> None:
    from nightfall.domain.combat import resolve_combat_round
    from nightfall.domain.defs import CombatDef
    from nightfall.domain.entities import Stats

    result = resolve_combat_round(CombatDef(enemy_health=1, enemy_attack=1), Stats(10, 10, 3))
    assert result.enemy_defeated
