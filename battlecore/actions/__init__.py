"""
Actions system module for the battlecore combat engine.

This module contains the spell and ability catalog records and one resolver
per combat action: weapon attacks, spells, abilities, monster attacks and
moves, initiative and fleeing.
"""

from .ability_action import monster_use_ability, player_use_ability
from .attack_action import (
    attempt_flee,
    monster_attack,
    player_attack,
    player_off_hand_attack,
    roll_initiative,
)
from .results import (
    AbilityResult,
    ActionResult,
    AttackResult,
    CombatResult,
    FleeResult,
    HealResult,
    InitiativeResult,
    MonsterAbilityResult,
    RejectedResult,
    SpellResult,
)
from .spell import Ability, Castable, Spell
from .spell_action import player_cast_spell

__all__ = [
    # Catalog records
    "Ability",
    "Castable",
    "Spell",
    # Resolvers
    "attempt_flee",
    "monster_attack",
    "monster_use_ability",
    "player_attack",
    "player_cast_spell",
    "player_off_hand_attack",
    "player_use_ability",
    "roll_initiative",
    # Results
    "AbilityResult",
    "ActionResult",
    "AttackResult",
    "CombatResult",
    "FleeResult",
    "HealResult",
    "InitiativeResult",
    "MonsterAbilityResult",
    "RejectedResult",
    "SpellResult",
]
