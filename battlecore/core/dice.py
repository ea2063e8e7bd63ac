"""
Dice module for the combat engine.

Provides the dice primitives every resolver builds on: single and multiple
die rolls, d20 rolls with a modifier, dice formulas parsed from content
files, and the ability score and proficiency formulas.

All rolls draw from a random source that can be injected. When none is
given, a module-level system random source is used.
"""

import random
import re
from typing import Any, ClassVar, Protocol

from pydantic import BaseModel, Field, model_validator

from .constants import MAX_DIE_FACE, FUMBLE_FACE


class RandomSource(Protocol):
    """Anything that can produce a uniform integer in a closed range."""

    def randint(self, a: int, b: int) -> int: ...


_SYSTEM_RANDOM: RandomSource = random.SystemRandom()


def seeded_random(seed: int) -> random.Random:
    """
    Creates a deterministic random source.

    Args:
        seed (int): The seed for the generator.

    Returns:
        random.Random: A random source that repeats for the same seed.

    """
    return random.Random(seed)


def _source(rng: RandomSource | None) -> RandomSource:
    return rng if rng is not None else _SYSTEM_RANDOM


class D20Roll(BaseModel):
    """The result of a single d20 roll plus a flat modifier."""

    natural_roll: int = Field(
        description="The face shown by the die",
    )
    modifier: int = Field(
        default=0,
        description="The flat modifier added to the roll",
    )
    total: int = Field(
        description="natural_roll + modifier",
    )

    def is_critical(self) -> bool:
        """
        Determines if the roll is a critical hit (natural 20).
        """
        return self.natural_roll == MAX_DIE_FACE

    def is_fumble(self) -> bool:
        """
        Determines if the roll is a fumble (natural 1).
        """
        return self.natural_roll == FUMBLE_FACE


class DiceRollDetail(BaseModel):
    """Individual dice of a multi-die roll and their sum."""

    rolls: list[int] = Field(
        default_factory=list,
        description="List of individual dice rolls",
    )
    total: int = Field(
        description="Sum of the individual rolls",
    )


def roll_die(sides: int, rng: RandomSource | None = None) -> int:
    """
    Rolls a single die.

    Args:
        sides (int): Number of faces of the die.
        rng (RandomSource | None): Random source, system random if None.

    Returns:
        int: A uniform integer in [1, sides].

    """
    return _source(rng).randint(1, sides)


def roll_dice(count: int, sides: int, rng: RandomSource | None = None) -> int:
    """
    Rolls several dice of the same size and sums them (e.g. 2d6).

    Args:
        count (int): Number of dice.
        sides (int): Number of faces of each die.
        rng (RandomSource | None): Random source, system random if None.

    Returns:
        int: The total of the dice.

    """
    return roll_dice_detailed(count, sides, rng).total


def roll_dice_detailed(
    count: int, sides: int, rng: RandomSource | None = None
) -> DiceRollDetail:
    """
    Rolls several dice and keeps the individual results.

    Args:
        count (int): Number of dice.
        sides (int): Number of faces of each die.
        rng (RandomSource | None): Random source, system random if None.

    Returns:
        DiceRollDetail: The individual rolls and their total.

    """
    source = _source(rng)
    rolls = [roll_die(sides, source) for _ in range(count)]
    return DiceRollDetail(rolls=rolls, total=sum(rolls))


def roll_d20(modifier: int = 0, rng: RandomSource | None = None) -> D20Roll:
    """
    Rolls a d20 and adds a modifier.

    Args:
        modifier (int): Flat modifier added to the natural roll.
        rng (RandomSource | None): Random source, system random if None.

    Returns:
        D20Roll: The natural roll, the modifier and their total.

    """
    natural = roll_die(MAX_DIE_FACE, rng)
    return D20Roll(natural_roll=natural, modifier=modifier, total=natural + modifier)


def ability_modifier(score: int) -> int:
    """
    Calculates the D&D ability score modifier.

    Args:
        score (int): The ability score.

    Returns:
        int: floor((score - 10) / 2), negative for scores below 10.

    """
    return (score - 10) // 2


def proficiency_bonus(level: int) -> int:
    """
    Calculates the level-scaled proficiency bonus.

    Args:
        level (int): The character level.

    Returns:
        int: floor((level - 1) / 4) + 2.

    """
    return (level - 1) // 4 + 2


class DiceFormula(BaseModel):
    """A fixed-size dice expression such as 2d6+1."""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^\s*(\d*)\s*[dD]\s*(\d+)\s*(?:([+-])\s*(\d+))?\s*$"
    )

    count: int = Field(
        ge=1,
        description="Number of dice to roll",
    )
    sides: int = Field(
        ge=1,
        description="Number of faces of each die",
    )
    bonus: int = Field(
        default=0,
        description="Flat value added to the dice total",
    )

    @model_validator(mode="before")
    @classmethod
    def _from_notation(cls, data: Any) -> Any:
        """Allows content files to write formulas as plain strings."""
        if isinstance(data, str):
            return cls._split(data)
        return data

    @classmethod
    def _split(cls, expression: str) -> dict[str, int]:
        match = cls.PATTERN.match(expression)
        if not match:
            raise ValueError(f"Invalid dice expression: {expression!r}")
        count_str, sides_str, sign, bonus_str = match.groups()
        bonus = int(bonus_str) if bonus_str else 0
        if sign == "-":
            bonus = -bonus
        return {
            "count": int(count_str) if count_str else 1,
            "sides": int(sides_str),
            "bonus": bonus,
        }

    @classmethod
    def parse(cls, expression: str) -> "DiceFormula":
        """
        Parses a dice expression.

        Args:
            expression (str): Notation like "1d20+5", "2d6" or "d8".

        Returns:
            DiceFormula: The parsed formula.

        Raises:
            ValueError: If the expression is not valid dice notation.

        """
        return cls(**cls._split(expression))

    @property
    def minimum(self) -> int:
        return self.count + self.bonus

    @property
    def maximum(self) -> int:
        return self.count * self.sides + self.bonus

    def roll(self, rng: RandomSource | None = None) -> int:
        """Rolls the formula and returns the total."""
        return roll_dice(self.count, self.sides, rng) + self.bonus

    def __str__(self) -> str:
        if self.bonus > 0:
            return f"{self.count}d{self.sides}+{self.bonus}"
        if self.bonus < 0:
            return f"{self.count}d{self.sides}-{-self.bonus}"
        return f"{self.count}d{self.sides}"
