"""
Combatant module for the combat engine.

Defines the battle-time records of the player and of monsters. Both carry
hit points clamped to [0, max_hp], ability scores and their own container of
active status effects. The resolvers mutate these records in place.
"""

from typing import Any

from catchery import log_debug
from pydantic import BaseModel, Field, model_validator

from ..core.constants import ActionKind, StatKey
from ..core.dice import DiceFormula, ability_modifier
from ..effects.effect_manager import ActiveEffects
from ..items.item import Item


class AbilityScores(BaseModel):
    """The six ability scores of a combatant."""

    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10

    def get(self, stat: StatKey | str) -> int:
        """
        Returns the score for a stat.

        Args:
            stat (StatKey | str): The stat key, or its lowercase name.

        Returns:
            int: The ability score.

        """
        key = StatKey(stat) if isinstance(stat, str) else stat
        return getattr(self, key.value)

    def modifier(self, stat: StatKey | str) -> int:
        """Returns the ability modifier for a stat."""
        return ability_modifier(self.get(stat))


class Combatant(BaseModel):
    """
    Shared state of everything that can fight.
    """

    name: str = Field(
        description="The display name of the combatant.",
    )
    hp: int = Field(
        ge=0,
        description="Current hit points.",
    )
    max_hp: int = Field(
        ge=1,
        description="Maximum hit points.",
    )
    stats: AbilityScores = Field(
        default_factory=AbilityScores,
        description="The combatant's ability scores.",
    )
    effects: ActiveEffects = Field(
        default_factory=ActiveEffects,
        description="The status effects currently affecting the combatant.",
    )

    @model_validator(mode="before")
    @classmethod
    def _default_to_full_hp(cls, data: Any) -> Any:
        if isinstance(data, dict) and "hp" not in data and "max_hp" in data:
            data = {**data, "hp": data["max_hp"]}
        return data

    def model_post_init(self, _: Any) -> None:
        self.hp = min(self.hp, self.max_hp)

    def is_alive(self) -> bool:
        return self.hp > 0

    def take_damage(self, amount: int) -> int:
        """
        Reduces HP by the given amount, never below 0.

        Args:
            amount (int): The damage dealt.

        Returns:
            int: The HP actually lost.

        """
        before = self.hp
        self.hp = max(0, min(self.max_hp, self.hp - max(0, amount)))
        actual = before - self.hp
        log_debug(
            f"{self.name} takes {actual} damage",
            {"amount": amount, "remaining_hp": self.hp},
        )
        return actual

    def heal(self, amount: int) -> int:
        """
        Increases HP by the given amount, up to max_hp.

        Args:
            amount (int): The amount to restore.

        Returns:
            int: The HP actually restored.

        """
        before = self.hp
        self.hp = max(0, min(self.max_hp, self.hp + max(0, amount)))
        return self.hp - before


class Player(Combatant):
    """The player character as seen by the combat engine."""

    level: int = Field(
        default=1,
        ge=1,
        description="The character level, drives the proficiency bonus.",
    )
    character_class: str = Field(
        default="",
        description="The id of the character class.",
    )
    mp: int = Field(
        default=0,
        ge=0,
        description="Current mana points.",
    )
    max_mp: int = Field(
        default=0,
        ge=0,
        description="Maximum mana points.",
    )
    casting_stat: StatKey = Field(
        default=StatKey.INTELLIGENCE,
        description="The ability used for spell attacks.",
    )
    talents: set[str] = Field(
        default_factory=set,
        description="Ids of the talents the player knows.",
    )
    spells: list[str] = Field(
        default_factory=list,
        description="Ids of the spells the player knows.",
    )
    abilities: list[str] = Field(
        default_factory=list,
        description="Ids of the abilities the player knows.",
    )
    weapon: Item | None = None
    off_hand: Item | None = None
    armor: Item | None = None
    shield: Item | None = None

    def model_post_init(self, _: Any) -> None:
        super().model_post_init(_)
        self.mp = min(self.mp, self.max_mp)

    def spend_mp(self, amount: int) -> bool:
        """
        Consumes mana if enough is available.

        Returns:
            bool: False, with MP untouched, when the player cannot afford it.

        """
        if amount > self.mp:
            return False
        self.mp -= amount
        return True

    def restore_mp(self, amount: int) -> int:
        before = self.mp
        self.mp = min(self.max_mp, self.mp + max(0, amount))
        return self.mp - before

    def knows_talent(self, talent_id: str) -> bool:
        return talent_id in self.talents

    def battle_copy(self) -> "Player":
        """Returns an independent copy for the engine to mutate."""
        return self.model_copy(deep=True)


class MonsterAbility(BaseModel):
    """A special move a monster may use instead of a plain attack."""

    name: str = Field(
        description="The display name of the ability.",
    )
    chance: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Probability that the monster picks this ability on its turn.",
    )
    damage: DiceFormula = Field(
        description="Dice rolled for the damage dealt or HP recovered.",
    )
    kind: ActionKind = Field(
        default=ActionKind.DAMAGE,
        description="Whether the ability hurts the player or heals the monster.",
    )
    self_heal: bool = Field(
        default=False,
        description="Whether the monster also recovers the damage it deals.",
    )
    status_effect: str | None = Field(
        default=None,
        description="Id of a status effect applied to the player on use.",
    )
    status_duration: int | None = Field(
        default=None,
        description="Duration replacing the effect's default.",
    )


class Monster(Combatant):
    """A monster, either a catalog template or a spawned battle copy."""

    id: str = Field(
        description="The catalog id of the monster.",
    )
    ac: int = Field(
        description="The monster's armor class before modifiers.",
    )
    attack_bonus: int = Field(
        default=0,
        description="Added to the monster's attack rolls.",
    )
    damage: DiceFormula = Field(
        description="Dice rolled by the monster's plain attack.",
    )
    abilities: list[MonsterAbility] = Field(
        default_factory=list,
        description="Special moves the monster can use.",
    )
    xp: int = Field(default=0, ge=0)
    gold: int = Field(default=0, ge=0)

    def spawn(self) -> "Monster":
        """Returns a fresh battle copy at full HP with no active effects."""
        monster = self.model_copy(deep=True)
        monster.hp = monster.max_hp
        monster.effects.clear_all()
        return monster
