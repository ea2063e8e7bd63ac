"""
Tests for player and monster ability resolvers.
"""

import pytest

from battlecore.actions.ability_action import monster_use_ability, player_use_ability
from battlecore.core.error_handling import EngineContractError


@pytest.fixture
def wraith(repository):
    return repository.spawn_monster("wraith")


# ---- Player abilities ----


def test_ability_hit(player, goblin, repository, scripted):
    # d20 10 + str 2 + proficiency 2 = 14 vs 12, 1d8 rolls 5
    result = player_use_ability(player, "shieldBash", goblin, rng=scripted(10, 5), repository=repository)
    assert result.kind == "ability"
    assert result.hit
    assert result.damage == 5
    assert result.attack_modifier == 4
    assert result.message == "Hero uses Shield Bash! 5 damage!"
    assert player.mp == 8
    assert goblin.hp == 10


def test_ability_uses_its_own_stat(player, goblin, repository, scripted):
    # wis 8 (-1) + proficiency 2
    result = player_use_ability(
        player, "flurryOfBlows", goblin, rng=scripted(10), repository=repository
    )
    assert result.attack_modifier == 1
    assert not result.hit
    assert result.message == "Hero uses Flurry of Blows but misses!"
    assert player.mp == 8


def test_ability_fumble(player, goblin, repository, scripted):
    result = player_use_ability(player, "shieldBash", goblin, rng=scripted(1), repository=repository)
    assert result.fumble
    assert result.message == "Hero uses Shield Bash but fumbles!"
    assert player.mp == 8


def test_ability_critical(player, goblin, repository, scripted):
    result = player_use_ability(
        player, "shieldBash", goblin, rng=scripted(20, 2, 2), repository=repository
    )
    assert result.critical
    assert result.message == "CRITICAL! Hero uses Shield Bash! 4 damage!"


def test_ability_heal(player, goblin, repository, scripted):
    player.take_damage(20)
    result = player_use_ability(
        player, "secondWind", goblin, rng=scripted(2, 3, 4), repository=repository
    )
    assert result.kind == "heal"
    assert result.healing == 9
    assert result.message == "Hero uses Second Wind! Healed 9 HP!"
    assert player.mp == 4


def test_ability_rejections(player, goblin, repository, scripted):
    assert player_use_ability(player, "nope", goblin, repository=repository).message == "Unknown ability!"
    refused = player_use_ability(player, "fastTravel", goblin, repository=repository)
    assert refused.message == "Fast Travel cannot be used in battle!"
    player.mp = 1
    broke = player_use_ability(player, "shieldBash", goblin, rng=scripted(), repository=repository)
    assert broke.message == "Not enough MP!"
    assert player.mp == 1


def test_ability_requires_player(goblin, repository):
    with pytest.raises(EngineContractError):
        player_use_ability(None, "shieldBash", goblin, repository=repository)


# ---- Monster abilities ----


def test_monster_damage_ability_always_lands(player, repository, scripted):
    skeleton = repository.spawn_monster("skeleton")
    result = monster_use_ability(skeleton.abilities[0], skeleton, player, scripted(3, 4))
    assert result.kind == "monster_ability"
    assert result.hit
    assert result.damage == 7
    assert result.message == "Skeleton uses Bone Throw! 7 damage!"
    assert player.hp == 23


def test_life_drain_heals_monster(player, wraith, scripted):
    wraith.take_damage(20)
    drain = wraith.abilities[0]
    result = monster_use_ability(drain, wraith, player, scripted(3, 4))
    assert result.damage == 7
    assert result.healing == 7
    assert result.message == "Wraith uses Life Drain! 7 damage! Wraith absorbs the life force!"
    assert player.hp == 23
    assert wraith.hp == 42


def test_healing_ability_reports_roll_but_caps_hp(player, repository, scripted):
    troll = repository.spawn_monster("troll")
    troll.take_damage(10)
    result = monster_use_ability(troll.abilities[0], troll, player, scripted(8, 8, 8))
    assert result.healing == 24
    assert result.damage == 0
    assert result.message == "Cave Troll uses Regenerate! Recovers 24 HP!"
    assert troll.hp == troll.max_hp
    assert player.hp == 30


def test_status_ability_applies_effect(player, repository, scripted):
    rat = repository.spawn_monster("giantRat")
    bite = rat.abilities[0]
    result = monster_use_ability(bite, rat, player, scripted(2, 2))
    assert result.status_applied == "poison"
    assert result.message == "Giant Rat uses Frenzy Bite! 4 damage! Poisoned! (3 turns)"
    assert player.effects.get("poison").source == "Giant Rat"

    again = monster_use_ability(bite, rat, player, scripted(1, 1))
    assert again.status_applied is None
    assert again.message.endswith("Already Poisoned!")


def test_status_duration_override(player, repository, scripted):
    elemental = repository.spawn_monster("iceElemental")
    nova = next(a for a in elemental.abilities if a.status_effect == "freeze")
    monster_use_ability(nova, elemental, player, scripted(1, 1, 1))
    assert player.effects.get("freeze").remaining_turns == 1


def test_life_drain_at_full_health_caps_monster_hp(player, wraith, scripted):
    result = monster_use_ability(wraith.abilities[0], wraith, player, scripted(6, 6))
    assert result.healing == 12
    assert wraith.hp == wraith.max_hp
    assert player.hp == 18
