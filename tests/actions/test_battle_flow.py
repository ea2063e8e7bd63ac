"""
Seeded end-to-end exchanges checking the invariants every resolver keeps.
"""

import pytest

from battlecore.actions.attack_action import monster_attack, player_attack
from battlecore.actions.ability_action import monster_use_ability
from battlecore.actions.spell_action import player_cast_spell
from battlecore.core.dice import seeded_random


def _check_bounds(player, monster):
    assert 0 <= player.hp <= player.max_hp
    assert 0 <= player.mp <= player.max_mp
    assert 0 <= monster.hp <= monster.max_hp


@pytest.mark.parametrize("seed", [1, 7, 42, 1234])
def test_battle_keeps_hp_in_bounds(player, repository, seed):
    rng = seeded_random(seed)
    player.max_hp = player.hp = 500
    monster = repository.spawn_monster("orc")
    for turn in range(200):
        if not monster.is_alive():
            break
        if turn % 3 == 0:
            result = player_cast_spell(player, "fireBolt", monster, rng=rng, repository=repository)
        else:
            result = player_attack(player, monster, rng=rng, repository=repository)
        assert result.damage >= 0
        _check_bounds(player, monster)

        if not monster.is_alive():
            break
        if turn % 4 == 0:
            enemy = monster_use_ability(monster.abilities[0], monster, player, rng)
        else:
            enemy = monster_attack(monster, player, rng=rng, repository=repository)
        assert enemy.damage >= 0
        _check_bounds(player, monster)

        report = player.effects.process_start_of_turn(player.stats, rng)
        player.take_damage(report.total_tick_damage)
        _check_bounds(player, monster)
    assert not monster.is_alive()


def test_same_seed_same_battle(player, repository):
    def fight(seed):
        rng = seeded_random(seed)
        hero = player.battle_copy()
        monster = repository.spawn_monster("orc")
        log = []
        for _ in range(10):
            log.append(player_attack(hero, monster, rng=rng, repository=repository).message)
            log.append(monster_attack(monster, hero, rng=rng, repository=repository).message)
        return log

    assert fight(99) == fight(99)
