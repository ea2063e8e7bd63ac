"""
Character system module for the battlecore combat engine.

This module handles the battle-time records of the player and monsters,
talents, derived stats such as armor class and attack modifiers, and the
equipment rules.
"""

from .character_inventory import (
    EquipResult,
    UseItemResult,
    can_dual_wield,
    equip_item,
    equip_off_hand,
    has_two_weapon_fighting,
    is_light_weapon,
    use_consumable,
)
from .character_stats import (
    get_ability_modifier,
    get_armor_class,
    get_attack_modifier,
    get_spell_modifier,
)
from .combatant import AbilityScores, Combatant, Monster, MonsterAbility, Player
from .talent import Talent, talent_ac_bonus, talent_attack_bonus, talent_damage_bonus

__all__ = [
    # Import from combatant.py
    "AbilityScores",
    "Combatant",
    "Monster",
    "MonsterAbility",
    "Player",
    # Import from talent.py
    "Talent",
    "talent_ac_bonus",
    "talent_attack_bonus",
    "talent_damage_bonus",
    # Import from character_stats.py
    "get_ability_modifier",
    "get_armor_class",
    "get_attack_modifier",
    "get_spell_modifier",
    # Import from character_inventory.py
    "EquipResult",
    "UseItemResult",
    "can_dual_wield",
    "equip_item",
    "equip_off_hand",
    "has_two_weapon_fighting",
    "is_light_weapon",
    "use_consumable",
]
