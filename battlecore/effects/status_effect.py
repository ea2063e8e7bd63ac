"""
Status effect catalog.

Defines the static definition of every status effect a combatant can carry,
and the per-combatant record of an effect that is currently active. The
table is fixed: effects are referenced by id from spells, monster abilities
and cure items.
"""

from typing import Any

from pydantic import BaseModel, Field

from ..core.constants import EffectCategory, RemovalMethod, StatKey
from ..core.dice import RandomSource, roll_die


class StatusEffectDefinition(BaseModel):
    """
    The static rules of a status effect.

    An effect ticks only when `tick_damage` is positive. The tick is then
    either that flat amount or, when `tick_die` is set, a roll of that die
    floored at 1. A `save_dc` of 0 means the effect cannot be shaken
    off with a saving throw.
    """

    id: str = Field(
        description="The catalog id of the effect.",
    )
    name: str = Field(
        description="The display name of the effect.",
    )
    description: str = Field(
        default="",
        description="A brief description of the effect.",
    )
    category: EffectCategory = Field(
        description="Whether the effect hinders or helps its bearer.",
    )
    default_duration: int = Field(
        ge=1,
        description="Number of turns the effect lasts when applied.",
    )
    tick_damage: int = Field(
        default=0,
        ge=0,
        description="Flat damage dealt at the start of each turn.",
    )
    tick_die: int = Field(
        default=0,
        ge=0,
        description="Die rolled for damage at the start of each turn, 0 if none.",
    )
    accuracy_modifier: int = Field(
        default=0,
        description="Added to the bearer's attack rolls.",
    )
    ac_modifier: int = Field(
        default=0,
        description="Added to the bearer's armor class.",
    )
    damage_modifier: int = Field(
        default=0,
        description="Added to the bearer's damage rolls.",
    )
    skips_turn: bool = Field(
        default=False,
        description="Whether the bearer loses its turn.",
    )
    save_stat: StatKey = Field(
        default=StatKey.CONSTITUTION,
        description="The ability used for the saving throw.",
    )
    save_dc: int = Field(
        default=0,
        ge=0,
        description="Difficulty of the saving throw, 0 for none.",
    )
    removal_methods: list[RemovalMethod] = Field(
        default_factory=lambda: [RemovalMethod.DURATION],
        description="The ways the effect can end.",
    )
    cure_item_id: str | None = Field(
        default=None,
        description="The consumable that removes the effect, if any.",
    )

    @property
    def is_debuff(self) -> bool:
        return self.category == EffectCategory.DEBUFF

    @property
    def colored_name(self) -> str:
        return self.category.colorize(self.name)

    def can_be_saved(self) -> bool:
        """Returns True if a saving throw can end the effect early."""
        return (
            self.is_debuff
            and self.save_dc > 0
            and RemovalMethod.SAVE in self.removal_methods
        )

    def can_be_cured_by(self, item_id: str) -> bool:
        """Returns True if the given item removes this effect."""
        return (
            self.cure_item_id is not None
            and self.cure_item_id == item_id
            and RemovalMethod.CURE in self.removal_methods
        )

    def roll_tick_damage(self, rng: RandomSource | None = None) -> int:
        """
        Computes the damage this effect deals at the start of a turn.

        Args:
            rng (RandomSource | None): Random source for the tick die.

        Returns:
            int: The tick damage, 0 for effects that do not tick.

        """
        if self.tick_damage <= 0:
            return 0
        if self.tick_die > 0:
            return max(1, roll_die(self.tick_die, rng))
        return self.tick_damage

    def model_post_init(self, _: Any) -> None:
        if self.cure_item_id and RemovalMethod.CURE not in self.removal_methods:
            raise ValueError(f"Effect {self.id} has a cure item but cannot be cured.")


class ActiveStatusEffect(BaseModel):
    """An effect currently affecting a combatant."""

    effect_id: str = Field(
        description="The id of the effect definition.",
    )
    remaining_turns: int = Field(
        description="Turns left before the effect wears off.",
    )
    source: str = Field(
        default="",
        description="Who or what applied the effect.",
    )

    @property
    def definition(self) -> "StatusEffectDefinition":
        definition = get_status_effect_definition(self.effect_id)
        assert definition is not None, f"Unknown effect id: {self.effect_id}"
        return definition


_D = RemovalMethod.DURATION
_S = RemovalMethod.SAVE
_C = RemovalMethod.CURE
_M = RemovalMethod.MANUAL


STATUS_EFFECT_DEFINITIONS: dict[str, StatusEffectDefinition] = {
    definition.id: definition
    for definition in [
        StatusEffectDefinition(
            id="poison",
            name="Poisoned",
            description="Taking damage each turn, disadvantage on attacks",
            category=EffectCategory.DEBUFF,
            default_duration=3,
            tick_damage=2,
            tick_die=4,
            accuracy_modifier=-2,
            save_stat=StatKey.CONSTITUTION,
            save_dc=12,
            removal_methods=[_D, _S, _C],
            cure_item_id="antidote",
        ),
        StatusEffectDefinition(
            id="burn",
            name="Burning",
            description="Taking fire damage each turn",
            category=EffectCategory.DEBUFF,
            default_duration=3,
            tick_damage=3,
            tick_die=4,
            save_stat=StatKey.DEXTERITY,
            save_dc=11,
            removal_methods=[_D, _S, _C],
            cure_item_id="burnSalve",
        ),
        StatusEffectDefinition(
            id="freeze",
            name="Frozen",
            description="Slowed and vulnerable, may skip turn",
            category=EffectCategory.DEBUFF,
            default_duration=2,
            accuracy_modifier=-3,
            ac_modifier=-2,
            save_stat=StatKey.CONSTITUTION,
            save_dc=12,
            removal_methods=[_D, _S, _C],
            cure_item_id="thawingTonic",
        ),
        StatusEffectDefinition(
            id="paralysis",
            name="Paralyzed",
            description="Cannot move or act",
            category=EffectCategory.DEBUFF,
            default_duration=2,
            ac_modifier=-4,
            skips_turn=True,
            save_stat=StatKey.CONSTITUTION,
            save_dc=13,
            removal_methods=[_D, _S, _C],
            cure_item_id="paralysisRemedy",
        ),
        StatusEffectDefinition(
            id="stunned",
            name="Stunned",
            description="Cannot act for one turn",
            category=EffectCategory.DEBUFF,
            default_duration=1,
            ac_modifier=-2,
            skips_turn=True,
            save_stat=StatKey.CONSTITUTION,
            save_dc=12,
            removal_methods=[_D, _S],
        ),
        StatusEffectDefinition(
            id="frightened",
            name="Frightened",
            description="Disadvantage on attacks and ability checks",
            category=EffectCategory.DEBUFF,
            default_duration=2,
            accuracy_modifier=-3,
            damage_modifier=-2,
            save_stat=StatKey.WISDOM,
            save_dc=12,
            removal_methods=[_D, _S, _C],
            cure_item_id="smellingSalts",
        ),
        StatusEffectDefinition(
            id="slow",
            name="Slowed",
            description="Reduced accuracy and damage",
            category=EffectCategory.DEBUFF,
            default_duration=3,
            accuracy_modifier=-2,
            damage_modifier=-2,
            save_stat=StatKey.WISDOM,
            save_dc=11,
            removal_methods=[_D, _S],
        ),
        StatusEffectDefinition(
            id="prone",
            name="Prone",
            description="Knocked down, disadvantage on attacks",
            category=EffectCategory.DEBUFF,
            default_duration=1,
            accuracy_modifier=-4,
            ac_modifier=-2,
            save_stat=StatKey.STRENGTH,
            save_dc=10,
            removal_methods=[_D],
        ),
        StatusEffectDefinition(
            id="asleep",
            name="Asleep",
            description="Unconscious until damaged or saved",
            category=EffectCategory.DEBUFF,
            default_duration=3,
            ac_modifier=-4,
            skips_turn=True,
            save_stat=StatKey.WISDOM,
            save_dc=13,
            removal_methods=[_D, _S, _C],
            cure_item_id="smellingSalts",
        ),
        StatusEffectDefinition(
            id="confused",
            name="Confused",
            description="May attack self or skip turn",
            category=EffectCategory.DEBUFF,
            default_duration=2,
            accuracy_modifier=-3,
            save_stat=StatKey.WISDOM,
            save_dc=12,
            removal_methods=[_D, _S],
        ),
        StatusEffectDefinition(
            id="enraged",
            name="Enraged",
            description="Increased damage but reduced AC",
            category=EffectCategory.BUFF,
            default_duration=3,
            ac_modifier=-2,
            damage_modifier=3,
            save_stat=StatKey.CONSTITUTION,
            removal_methods=[_D],
        ),
        StatusEffectDefinition(
            id="haste",
            name="Haste",
            description="Increased accuracy and AC",
            category=EffectCategory.BUFF,
            default_duration=3,
            accuracy_modifier=2,
            ac_modifier=2,
            save_stat=StatKey.DEXTERITY,
            removal_methods=[_D],
        ),
        StatusEffectDefinition(
            id="rage",
            name="Raging",
            description="Berserker fury: +3 damage, resistance to pain",
            category=EffectCategory.BUFF,
            default_duration=5,
            damage_modifier=3,
            save_stat=StatKey.STRENGTH,
            removal_methods=[_D, _M],
        ),
        StatusEffectDefinition(
            id="sneakStance",
            name="Sneak Stance",
            description="+2 AC, next attack deals bonus damage",
            category=EffectCategory.BUFF,
            default_duration=2,
            ac_modifier=2,
            save_stat=StatKey.DEXTERITY,
            removal_methods=[_D, _M],
        ),
    ]
}


def get_status_effect_definition(effect_id: str) -> StatusEffectDefinition | None:
    """
    Looks up the definition of a status effect.

    Args:
        effect_id (str): The id of the effect.

    Returns:
        StatusEffectDefinition | None: The definition, None for unknown ids.

    """
    return STATUS_EFFECT_DEFINITIONS.get(effect_id)
