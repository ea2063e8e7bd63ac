"""
Attack resolution module for the combat engine.

Holds the two rules every attacking action shares: deciding whether a d20
roll hits its target value, and rolling the damage of a hit. Natural 20 and
natural 1 are rule branches checked before anything else.
"""

from catchery import log_debug
from pydantic import BaseModel, Field

from ..core.dice import D20Roll, RandomSource, roll_dice


class AttackOutcome(BaseModel):
    """The verdict of an attack roll against a target value."""

    hit: bool = Field(
        description="Whether the attack connects.",
    )
    critical: bool = Field(
        default=False,
        description="Natural 20: always a hit, damage dice are doubled.",
    )
    fumble: bool = Field(
        default=False,
        description="Natural 1: always a miss.",
    )
    natural_roll: int = Field(
        description="The face shown by the d20.",
    )
    total: int = Field(
        description="The d20 plus every modifier.",
    )


def resolve_attack_roll(
    d20_roll: D20Roll,
    target_value: int,
    auto_hit: bool = False,
) -> AttackOutcome:
    """
    Resolves an attack roll against the target's defense.

    A natural 20 is a critical hit and a natural 1 a fumble whatever the
    total, the target or the auto_hit flag. Otherwise the attack hits when
    the total reaches the target value, or unconditionally with auto_hit.

    Args:
        d20_roll (D20Roll): The attack roll, modifiers included.
        target_value (int): Usually armor class plus situational bonuses.
        auto_hit (bool): Skips the comparison, a fumble still misses.

    Returns:
        AttackOutcome: Hit, critical and fumble flags with the roll.

    """
    if d20_roll.is_critical():
        outcome = AttackOutcome(
            hit=True,
            critical=True,
            natural_roll=d20_roll.natural_roll,
            total=d20_roll.total,
        )
    elif d20_roll.is_fumble():
        outcome = AttackOutcome(
            hit=False,
            fumble=True,
            natural_roll=d20_roll.natural_roll,
            total=d20_roll.total,
        )
    else:
        outcome = AttackOutcome(
            hit=d20_roll.total >= target_value or auto_hit,
            natural_roll=d20_roll.natural_roll,
            total=d20_roll.total,
        )
    log_debug(
        "Attack roll resolved",
        {
            "roll": d20_roll.natural_roll,
            "modifier": d20_roll.modifier,
            "total": d20_roll.total,
            "target": target_value,
            "auto_hit": auto_hit,
            "hit": outcome.hit,
        },
    )
    return outcome


def roll_attack_damage(
    dice_count: int,
    die_size: int,
    is_critical: bool,
    bonus: int = 0,
    minimum: int = 0,
    rng: RandomSource | None = None,
) -> int:
    """
    Rolls the damage of a successful attack.

    Args:
        dice_count (int): Number of damage dice.
        die_size (int): Faces of each damage die.
        is_critical (bool): Doubles the number of dice rolled.
        bonus (int): Flat bonus added after the roll, never doubled.
        minimum (int): Floor applied to the final damage.
        rng (RandomSource | None): Random source, system random if None.

    Returns:
        int: The damage dealt.

    """
    count = dice_count * 2 if is_critical else dice_count
    return max(minimum, roll_dice(count, die_size, rng) + bonus)
