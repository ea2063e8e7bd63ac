"""
Character stats module for the combat engine.

Derives the numbers the resolvers compare against: armor class, and the
attack modifiers for weapons, spells and abilities. All terms are additive
and nothing is clamped, so stacked penalties may push a value very low.
"""

from ..core.constants import BASE_ARMOR_CLASS, StatKey
from ..core.content import ContentRepository
from ..core.dice import ability_modifier, proficiency_bonus
from ..items.item import Item
from .combatant import Combatant, Monster, Player
from .talent import talent_ac_bonus, talent_attack_bonus

# ============================================================================
# ARMOR CLASS
# ============================================================================


def get_armor_class(
    combatant: Combatant,
    situational_bonus: int = 0,
    repository: ContentRepository | None = None,
) -> int:
    """
    Computes the armor class of a player or a monster.

    A player's AC is the unarmored base plus equipped armor and shield,
    the dexterity modifier, talent bonuses and active effect modifiers. A
    monster's AC is its own AC plus active effect modifiers.

    Args:
        combatant (Combatant): The player or monster being targeted.
        situational_bonus (int): Bonus such as defending.
        repository (ContentRepository | None): Catalog for talent lookups.

    Returns:
        int: The armor class.

    """
    if isinstance(combatant, Monster):
        return combatant.ac + situational_bonus + combatant.effects.ac_modifier()
    assert isinstance(combatant, Player), "Armor class needs a player or a monster."
    armor_bonus = combatant.armor.effect if combatant.armor else 0
    shield_bonus = combatant.shield.effect if combatant.shield else 0
    return (
        BASE_ARMOR_CLASS
        + armor_bonus
        + shield_bonus
        + ability_modifier(combatant.stats.dexterity)
        + situational_bonus
        + talent_ac_bonus(combatant.talents, repository)
        + combatant.effects.ac_modifier()
    )


# ============================================================================
# ATTACK MODIFIERS
# ============================================================================


def get_ability_modifier(
    player: Player,
    stat: StatKey,
    repository: ContentRepository | None = None,
) -> int:
    """
    Computes an attack modifier driven by the given ability score.

    Args:
        player (Player): The attacker.
        stat (StatKey): The ability score driving the roll.
        repository (ContentRepository | None): Catalog for talent lookups.

    Returns:
        int: ability modifier + proficiency bonus + talent attack bonuses.

    """
    return (
        ability_modifier(player.stats.get(stat))
        + proficiency_bonus(player.level)
        + talent_attack_bonus(player.talents, repository)
    )


def get_attack_modifier(
    player: Player,
    weapon: Item | None = None,
    repository: ContentRepository | None = None,
) -> int:
    """
    Computes the weapon attack modifier.

    Args:
        player (Player): The attacker.
        weapon (Item | None): The weapon used, the main hand when None.
        repository (ContentRepository | None): Catalog for talent lookups.

    Returns:
        int: The modifier, using strength when fighting unarmed.

    """
    weapon = weapon if weapon is not None else player.weapon
    stat = weapon.attack_stat if weapon is not None else StatKey.STRENGTH
    return get_ability_modifier(player, stat, repository)


def get_spell_modifier(
    player: Player, repository: ContentRepository | None = None
) -> int:
    """Computes the spell attack modifier from the player's casting stat."""
    return get_ability_modifier(player, player.casting_stat, repository)
