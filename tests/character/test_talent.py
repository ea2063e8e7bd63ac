"""
Tests for talent lookups and bonus sums.
"""

from battlecore.character.talent import (
    Talent,
    talent_ac_bonus,
    talent_attack_bonus,
    talent_damage_bonus,
)


def test_talent_class_restriction():
    open_talent = Talent(id="grit", name="Grit")
    knight_only = Talent(id="guard", name="Guard", classes=["knight"])
    assert open_talent.is_available_to("mage")
    assert knight_only.is_available_to("knight")
    assert not knight_only.is_available_to("mage")


def test_talent_bonus_sums(repository):
    known = {"combatTraining", "legendary", "deadlyPrecision", "unknownTalent"}
    assert talent_attack_bonus(known, repository) == 3
    assert talent_damage_bonus(known, repository) == 2
    assert talent_ac_bonus(known, repository) == 1


def test_no_talents_no_bonus(repository):
    assert talent_attack_bonus([], repository) == 0
    assert talent_damage_bonus(set(), repository) == 0
