"""
Tests for the attack resolution kernel.
"""

import pytest

from battlecore.combat.resolution import resolve_attack_roll, roll_attack_damage
from battlecore.core.dice import D20Roll


def _roll(natural: int, modifier: int = 0) -> D20Roll:
    return D20Roll(natural_roll=natural, modifier=modifier, total=natural + modifier)


def test_total_meeting_target_hits():
    outcome = resolve_attack_roll(_roll(10, 2), 12)
    assert outcome.hit
    assert not outcome.critical
    assert not outcome.fumble
    assert outcome.total == 12


def test_total_below_target_misses():
    outcome = resolve_attack_roll(_roll(10, 1), 12)
    assert not outcome.hit
    assert not outcome.fumble


def test_natural_twenty_always_hits():
    outcome = resolve_attack_roll(_roll(20, -10), 40)
    assert outcome.hit
    assert outcome.critical
    assert outcome.natural_roll == 20


def test_natural_one_always_misses():
    outcome = resolve_attack_roll(_roll(1, 30), 5)
    assert not outcome.hit
    assert outcome.fumble
    assert not outcome.critical


def test_auto_hit_skips_comparison():
    outcome = resolve_attack_roll(_roll(2), 30, auto_hit=True)
    assert outcome.hit
    assert not outcome.critical


def test_auto_hit_still_fumbles():
    outcome = resolve_attack_roll(_roll(1, 10), 5, auto_hit=True)
    assert not outcome.hit
    assert outcome.fumble


@pytest.mark.parametrize("natural", range(2, 20))
def test_middle_rolls_are_never_special(natural):
    outcome = resolve_attack_roll(_roll(natural), 11)
    assert not outcome.critical
    assert not outcome.fumble
    assert outcome.hit == (natural >= 11)


def test_damage_rolls_dice_plus_bonus(scripted):
    rng = scripted(3, 5)
    assert roll_attack_damage(2, 6, False, bonus=2, rng=rng) == 10
    assert len(rng.calls) == 2


def test_critical_doubles_dice_not_bonus(scripted):
    rng = scripted(1, 2, 3, 4)
    assert roll_attack_damage(2, 6, True, bonus=3, rng=rng) == 13
    assert len(rng.calls) == 4


def test_damage_respects_minimum(scripted):
    assert roll_attack_damage(1, 4, False, bonus=-10, rng=scripted(2)) == 0
    assert roll_attack_damage(1, 4, False, bonus=-10, minimum=1, rng=scripted(2)) == 1


def test_damage_is_never_negative():
    for _ in range(100):
        assert roll_attack_damage(1, 4, False, bonus=-3) >= 0
