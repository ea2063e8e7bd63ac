"""
Constants and enumerations for the combat engine.

Defines the rule constants used by the resolvers together with the
enumerations for ability scores, status effect categories and removal
methods, action kinds and item types.
"""

from enum import Enum

# Natural roll faces that override the numeric comparison of an attack roll.
MAX_DIE_FACE = 20
FUMBLE_FACE = 1

# Difficulty class of a flee attempt.
FLEE_DC = 10

# Situational AC bonus granted while defending.
DEFEND_BONUS = 2

# Armor class of an unarmored combatant before modifiers.
BASE_ARMOR_CLASS = 10

# Die rolled by a melee attack (weapons add their flat bonus on top).
UNARMED_DIE = 6

# Talent that lets the off-hand attack add its ability modifier to damage.
TWO_WEAPON_FIGHTING = "twoWeaponFighting"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class StatKey(NiceEnum):
    """The six ability scores."""

    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    CONSTITUTION = "constitution"
    INTELLIGENCE = "intelligence"
    WISDOM = "wisdom"
    CHARISMA = "charisma"

    @property
    def short_name(self) -> str:
        """Returns the three letter abbreviation (e.g., STR)."""
        return self.name[:3]


class EffectCategory(NiceEnum):
    """Classification of a status effect."""

    DEBUFF = "debuff"
    BUFF = "buff"

    @property
    def color(self) -> str:
        """Returns the color string associated with this category."""
        return {
            EffectCategory.DEBUFF: "bold red",
            EffectCategory.BUFF: "bold green",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies category color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class RemovalMethod(NiceEnum):
    """The ways a status effect can end."""

    DURATION = "duration"
    SAVE = "save"
    CURE = "cure"
    MANUAL = "manual"


class ActionKind(NiceEnum):
    """What a spell, ability or monster ability does when used."""

    DAMAGE = "damage"
    HEAL = "heal"
    UTILITY = "utility"

    @property
    def color(self) -> str:
        """Returns the color string associated with this kind."""
        return {
            ActionKind.DAMAGE: "bold red",
            ActionKind.HEAL: "bold green",
            ActionKind.UTILITY: "bold cyan",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies kind color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ItemType(NiceEnum):
    """Defines the slot family of an item."""

    WEAPON = "weapon"
    ARMOR = "armor"
    SHIELD = "shield"
    CONSUMABLE = "consumable"
