"""
Spell and ability catalog records.

Spells attack with the caster's casting stat, abilities with the stat they
name. Both either deal damage, restore HP or are utilities that cannot be
used during a battle.
"""

from typing import Any

from pydantic import BaseModel, Field

from ..core.constants import ActionKind, StatKey
from ..core.dice import DiceFormula


class Castable(BaseModel):
    """Fields shared by spells and abilities."""

    id: str = Field(
        description="The unique catalog id.",
    )
    name: str = Field(
        description="The display name.",
    )
    description: str = Field(
        default="",
        description="A brief description.",
    )
    mp_cost: int = Field(
        default=0,
        ge=0,
        description="Mana spent on use.",
    )
    level_required: int = Field(
        default=1,
        ge=1,
        description="The character level at which it can be learned.",
    )
    kind: ActionKind = Field(
        default=ActionKind.DAMAGE,
        description="Whether it deals damage, heals, or is a utility.",
    )
    dice: DiceFormula | None = Field(
        default=None,
        description="Dice rolled for damage or healing, None for utilities.",
    )

    @property
    def colored_name(self) -> str:
        return self.kind.colorize(self.name)

    def model_post_init(self, _: Any) -> None:
        if self.kind != ActionKind.UTILITY and self.dice is None:
            raise ValueError(f"{self.id} needs dice to deal damage or heal.")


class Spell(Castable):
    """A spell from the content catalog."""

    auto_hit: bool = Field(
        default=False,
        description="Whether the spell skips the comparison against AC.",
    )
    element: str | None = Field(
        default=None,
        description="Elemental damage type, informational only.",
    )


class Ability(Castable):
    """A martial ability from the content catalog."""

    stat: StatKey = Field(
        default=StatKey.STRENGTH,
        description="The ability score driving the attack roll.",
    )
