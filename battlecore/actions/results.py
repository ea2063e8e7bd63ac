"""
Result types returned by the combat resolvers.

Every resolver returns one of these models. They share the ActionResult
fields and carry a literal `kind` tag, so a caller can dispatch on the tag or
on the class.
"""

from typing import Literal, Union

from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """Fields common to every resolver outcome."""

    kind: str = Field(
        description="Tag identifying the concrete result type.",
    )
    message: str = Field(
        description="Human readable description of what happened.",
    )
    damage: int = Field(
        default=0,
        ge=0,
        description="Damage dealt to the target.",
    )
    hit: bool = Field(
        default=False,
        description="Whether the action landed.",
    )


class AttackResult(ActionResult):
    """A weapon attack by the player, or a plain attack by a monster."""

    kind: Literal["attack"] = "attack"
    critical: bool = False
    fumble: bool = False
    natural_roll: int = 0
    total: int = 0
    target_value: int = 0
    off_hand: bool = False


class SpellResult(ActionResult):
    """A damage spell that went through the attack roll."""

    kind: Literal["spell"] = "spell"
    spell_id: str
    mp_used: int = 0
    critical: bool = False
    fumble: bool = False
    natural_roll: int = 0
    total: int = 0


class AbilityResult(ActionResult):
    """A damage ability that went through the attack roll."""

    kind: Literal["ability"] = "ability"
    ability_id: str
    mp_used: int = 0
    critical: bool = False
    fumble: bool = False
    natural_roll: int = 0
    total: int = 0
    attack_modifier: int = 0


class HealResult(ActionResult):
    """A healing spell or ability; healing is the HP actually restored."""

    kind: Literal["heal"] = "heal"
    source_id: str
    healing: int = 0
    mp_used: int = 0
    hit: bool = True


class RejectedResult(ActionResult):
    """An action refused by the rules; nothing was spent or changed."""

    kind: Literal["rejected"] = "rejected"
    mp_used: Literal[0] = 0


class MonsterAbilityResult(ActionResult):
    """A monster special move. Damage abilities always land."""

    kind: Literal["monster_ability"] = "monster_ability"
    ability_name: str
    healing: int = 0
    status_applied: str | None = None
    hit: bool = True


class InitiativeResult(ActionResult):
    """Who acts first; ties favor the player."""

    kind: Literal["initiative"] = "initiative"
    player_first: bool
    player_roll: int
    monster_roll: int


class FleeResult(ActionResult):
    """An attempt to run from the battle."""

    kind: Literal["flee"] = "flee"
    success: bool
    total: int


CombatResult = Union[
    AttackResult,
    SpellResult,
    AbilityResult,
    HealResult,
    RejectedResult,
    MonsterAbilityResult,
    InitiativeResult,
    FleeResult,
]
