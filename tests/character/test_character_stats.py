"""
Tests for armor class and attack modifier derivation.
"""

from battlecore.core.constants import StatKey
from battlecore.character.character_stats import (
    get_ability_modifier,
    get_armor_class,
    get_attack_modifier,
    get_spell_modifier,
)


def test_unarmored_player_ac(player, repository):
    # 10 + dex 12 (+1)
    assert get_armor_class(player, 0, repository) == 11


def test_player_ac_adds_every_term(player, repository):
    player.armor = repository.get_item("chainMail")
    player.shield = repository.get_item("woodenShield")
    player.talents.add("legendary")
    player.effects.apply("haste", "Potion")
    # 10 + 3 armor + 1 shield + 1 dex + 2 defend + 1 talent + 2 haste
    assert get_armor_class(player, 2, repository) == 20


def test_player_ac_is_not_clamped(player, repository):
    player.stats.dexterity = 1
    player.effects.apply("paralysis", "Ghoul")
    player.effects.apply("freeze", "Ice")
    # 10 - 5 dex - 4 - 2
    assert get_armor_class(player, 0, repository) == -1


def test_monster_ac(goblin, repository):
    assert get_armor_class(goblin, 0, repository) == 12
    assert get_armor_class(goblin, 2, repository) == 14
    goblin.effects.apply("freeze", "Hero")
    assert get_armor_class(goblin, 0, repository) == 10


def test_unarmed_attack_uses_strength(player, repository):
    # str 14 (+2) + proficiency 2
    assert get_attack_modifier(player, None, repository) == 4


def test_weapon_attack_uses_weapon_stat(player, repository):
    player.weapon = repository.get_item("startDagger")
    # dex 12 (+1) + proficiency 2
    assert get_attack_modifier(player, None, repository) == 3
    assert get_attack_modifier(player, repository.get_item("startSword"), repository) == 4


def test_talents_add_to_attack(player, repository):
    player.talents.update({"combatTraining", "legendary"})
    assert get_attack_modifier(player, None, repository) == 4 + 1 + 2


def test_unknown_talents_are_ignored(player, repository):
    player.talents.add("dragonBlood")
    assert get_attack_modifier(player, None, repository) == 4


def test_proficiency_scales_with_level(player, repository):
    player.level = 9
    assert get_ability_modifier(player, StatKey.STRENGTH, repository) == 2 + 4


def test_spell_modifier_uses_casting_stat(player, repository):
    # int 16 (+3) + proficiency 2
    assert get_spell_modifier(player, repository) == 5
    player.casting_stat = StatKey.WISDOM
    # wis 8 (-1) + proficiency 2
    assert get_spell_modifier(player, repository) == 1
