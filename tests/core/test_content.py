"""
Tests for the content repository.
"""

import json

import pytest

from battlecore.actions.spell import Ability, Spell
from battlecore.character.combatant import Monster
from battlecore.core.constants import ActionKind, ItemType, StatKey
from battlecore.core.content import ContentRepository, get_repository


def _write_catalog(root, **overrides):
    """Writes a minimal valid catalog, with optional per-file overrides."""
    files = {
        "spells": [{"id": "spark", "name": "Spark", "dice": "1d4"}],
        "abilities": [{"id": "jab", "name": "Jab", "dice": "1d4"}],
        "items": [{"id": "stick", "name": "Stick", "item_type": "weapon"}],
        "talents": [{"id": "grit", "name": "Grit", "hp_bonus": 2}],
        "monsters": [
            {"id": "rat", "name": "Rat", "max_hp": 3, "ac": 8, "damage": "1d2"}
        ],
    }
    files.update(overrides)
    for name, data in files.items():
        (root / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")
    return root


def test_default_catalog_loads_every_collection(repository):
    assert len(repository.spells) == 49
    assert len(repository.abilities) == 22
    assert len(repository.items) == 22
    assert len(repository.talents) == 6
    assert len(repository.monsters) == 38


def test_repository_is_shared(repository):
    assert ContentRepository() is repository
    assert get_repository() is repository
    assert get_repository(repository) is repository


def test_get_spell(repository):
    spell = repository.get_spell("magicMissile")
    assert isinstance(spell, Spell)
    assert spell.auto_hit
    assert spell.mp_cost == 3
    assert str(spell.dice) == "3d4"


def test_get_ability(repository):
    ability = repository.get_ability("flurryOfBlows")
    assert isinstance(ability, Ability)
    assert ability.stat == StatKey.WISDOM


def test_utility_entries_have_no_dice(repository):
    assert repository.get_spell("teleport").kind == ActionKind.UTILITY
    assert repository.get_spell("teleport").dice is None
    assert repository.get_ability("fastTravel").dice is None


def test_get_item_and_talent(repository):
    dagger = repository.get_item("startDagger")
    assert dagger.item_type == ItemType.WEAPON
    assert dagger.light
    assert dagger.attack_stat == StatKey.DEXTERITY
    assert repository.get_item("greatSword").two_handed
    assert repository.get_talent("legendary").ac_bonus == 1


def test_unknown_id_returns_none_and_warns(repository, mocker):
    mock_warning = mocker.patch("battlecore.core.content.log_warning")
    assert repository.get_spell("wish") is None
    assert repository.get_item("excalibur") is None
    assert mock_warning.call_count == 2


def test_monsters_start_at_full_hp(repository):
    for monster in repository.monsters.values():
        assert monster.hp == monster.max_hp


def test_monster_status_abilities_reference_known_effects(repository):
    from battlecore.effects.status_effect import STATUS_EFFECT_DEFINITIONS

    for monster in repository.monsters.values():
        for ability in monster.abilities:
            if ability.status_effect:
                assert ability.status_effect in STATUS_EFFECT_DEFINITIONS


def test_cure_items_exist_in_catalog(repository):
    from battlecore.effects.status_effect import STATUS_EFFECT_DEFINITIONS

    for definition in STATUS_EFFECT_DEFINITIONS.values():
        if definition.cure_item_id:
            item = repository.get_item(definition.cure_item_id)
            assert item is not None
            assert item.item_type == ItemType.CONSUMABLE


def test_spawn_monster_returns_independent_copy(repository):
    first = repository.spawn_monster("goblin")
    second = repository.spawn_monster("goblin")
    assert isinstance(first, Monster)
    assert first is not second
    first.take_damage(5)
    first.effects.apply("poison", "test")
    assert second.hp == second.max_hp
    assert len(second.effects) == 0
    assert repository.get_monster("goblin").hp == 15


def test_spawn_unknown_monster(repository):
    assert repository.spawn_monster("kraken") is None


def test_available_spells_by_level(repository):
    ids = {spell.id for spell in repository.available_spells(1)}
    assert "fireBolt" in ids
    assert "cureWounds" in ids
    assert "fireball" not in ids
    assert all(spell.level_required <= 1 for spell in repository.available_spells(1))


def test_available_talents_by_level_and_class(repository):
    knight = {t.id for t in repository.available_talents(3, "knight")}
    mage = {t.id for t in repository.available_talents(3, "mage")}
    assert knight == {"toughness", "twoWeaponFighting"}
    assert mage == {"toughness"}


def test_custom_data_dir(isolated_repository, tmp_path):
    repo = ContentRepository(data_dir=_write_catalog(tmp_path))
    assert repo.data_dir == tmp_path
    assert set(repo.spells) == {"spark"}
    assert repo.get_monster("rat").hp == 3


def test_duplicate_ids_are_rejected(isolated_repository, tmp_path):
    spells = [
        {"id": "spark", "name": "Spark", "dice": "1d4"},
        {"id": "spark", "name": "Spark Again", "dice": "1d6"},
    ]
    with pytest.raises(ValueError, match="Duplicate spell id: spark"):
        ContentRepository(data_dir=_write_catalog(tmp_path, spells=spells))


def test_missing_file_is_reported(isolated_repository, tmp_path):
    _write_catalog(tmp_path)
    (tmp_path / "talents.json").unlink()
    with pytest.raises(ValueError, match="talents.json raised an error"):
        ContentRepository(data_dir=tmp_path)


def test_empty_file_is_reported(isolated_repository, tmp_path):
    with pytest.raises(ValueError, match="Empty data list"):
        ContentRepository(data_dir=_write_catalog(tmp_path, items=[]))


def test_invalid_entry_is_reported(isolated_repository, tmp_path):
    monsters = [{"id": "rat", "name": "Rat", "max_hp": 3, "ac": 8, "damage": "lots"}]
    with pytest.raises(ValueError, match="monsters.json raised an error"):
        ContentRepository(data_dir=_write_catalog(tmp_path, monsters=monsters))
