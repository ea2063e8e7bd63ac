"""
Character inventory module for the combat engine.

Handles the equipment slots of the player: which weapons may be dual
wielded, equipping items into their slots, and using consumables. Rule
failures are reported through the returned result, never raised.
"""

from pydantic import BaseModel

from ..core.constants import TWO_WEAPON_FIGHTING, ItemType
from ..items.item import Item
from .combatant import Player


class EquipResult(BaseModel):
    """Outcome of an equip attempt."""

    success: bool
    message: str


class UseItemResult(BaseModel):
    """Outcome of using a consumable."""

    used: bool
    message: str


def is_light_weapon(item: Item | None) -> bool:
    """Returns True if the item is a weapon flagged light."""
    return item is not None and item.is_weapon and item.light


def can_dual_wield(player: Player) -> bool:
    """
    Checks whether the main hand allows a second weapon.

    Returns:
        bool: True if the main-hand weapon is light, one-handed, and no
        shield is equipped.

    """
    weapon = player.weapon
    return (
        is_light_weapon(weapon)
        and weapon is not None
        and not weapon.two_handed
        and player.shield is None
    )


def has_two_weapon_fighting(player: Player) -> bool:
    return player.knows_talent(TWO_WEAPON_FIGHTING)


def equip_off_hand(player: Player, item: Item) -> EquipResult:
    """
    Equips a weapon in the off hand.

    The off-hand weapon must be a light, one-handed weapon different from
    the main-hand one, and the main hand must itself hold a light weapon.
    On success any shield is unequipped.

    Args:
        player (Player): The player equipping the weapon.
        item (Item): The weapon to hold in the off hand.

    Returns:
        EquipResult: Whether the weapon was equipped, and a message.

    """
    if not item.is_weapon:
        return EquipResult(success=False, message=f"{item.name} is not a weapon.")
    if item.two_handed:
        return EquipResult(
            success=False,
            message=f"{item.name} is two-handed and cannot be held in the off-hand.",
        )
    if not item.light:
        return EquipResult(
            success=False,
            message=f"{item.name} is too heavy for the off-hand. Only light weapons can be dual wielded.",
        )
    if player.weapon is not None and player.weapon.id == item.id:
        return EquipResult(
            success=False,
            message=f"{item.name} is already in your main hand. You cannot wield the same weapon twice.",
        )
    if not is_light_weapon(player.weapon):
        return EquipResult(
            success=False,
            message="Main hand must hold a light weapon to dual wield.",
        )

    messages = []
    if player.shield is not None:
        messages.append(f"Unequipped {player.shield.name}.")
        player.shield = None
    player.off_hand = item
    messages.append(f"Equipped {item.name} in the off-hand!")
    return EquipResult(success=True, message=" ".join(messages))


def equip_item(player: Player, item: Item) -> EquipResult:
    """
    Equips an item into the slot matching its type.

    A weapon goes to the main hand: a two-handed or non-light weapon drops
    the off-hand weapon, and a two-handed one also drops the shield. A
    shield drops the off-hand weapon and is refused while a two-handed
    weapon is held.

    Args:
        player (Player): The player equipping the item.
        item (Item): The item to equip.

    Returns:
        EquipResult: Whether the item was equipped, and a message.

    """
    if item.item_type == ItemType.WEAPON:
        if (item.two_handed or not item.light) and player.off_hand is not None:
            player.off_hand = None
        if item.two_handed and player.shield is not None:
            player.shield = None
        player.weapon = item
        return EquipResult(success=True, message=f"Equipped {item.name}!")

    if item.item_type == ItemType.ARMOR:
        player.armor = item
        return EquipResult(success=True, message=f"Equipped {item.name}!")

    if item.item_type == ItemType.SHIELD:
        if player.weapon is not None and player.weapon.two_handed:
            return EquipResult(
                success=False,
                message=f"Cannot use a shield with {player.weapon.name} (two-handed).",
            )
        player.off_hand = None
        player.shield = item
        return EquipResult(success=True, message=f"Equipped {item.name}!")

    return EquipResult(success=False, message=f"{item.name} cannot be equipped.")


def use_consumable(player: Player, item: Item) -> UseItemResult:
    """
    Uses a consumable: restores HP or MP, or cures status effects.

    Args:
        player (Player): The player using the item.
        item (Item): The consumable.

    Returns:
        UseItemResult: Whether the item was consumed, and a message.

    """
    if item.item_type != ItemType.CONSUMABLE:
        return UseItemResult(used=False, message="Cannot use this item.")
    if item.restores == "hp":
        healed = player.heal(item.effect)
        return UseItemResult(used=True, message=f"Healed {healed} HP!")
    if item.restores == "mp":
        restored = player.restore_mp(item.effect)
        return UseItemResult(used=True, message=f"Restored {restored} MP!")
    cured = player.effects.cure_with_item(item.id)
    if not cured:
        return UseItemResult(used=False, message=f"{item.name} has no effect.")
    return UseItemResult(used=True, message=f"Cured {', '.join(cured)}!")
