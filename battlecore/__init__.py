"""
battlecore: the combat rules engine of a turn-based dungeon RPG.

This package resolves one discrete battle action at a time: weapon attacks,
spells, abilities, monster moves, initiative and fleeing. It also carries the
status effect system, the equipment rules and the content catalog the
resolvers read from.
"""

from .core import ContentRepository, get_repository, seeded_random, setup_logging
from .effects import ActiveEffects, StatusEffectDefinition
from .items import Item
from .character import AbilityScores, Monster, MonsterAbility, Player
from .combat import resolve_attack_roll, roll_attack_damage
from .actions import (
    attempt_flee,
    monster_attack,
    monster_use_ability,
    player_attack,
    player_cast_spell,
    player_off_hand_attack,
    player_use_ability,
    roll_initiative,
)

__all__ = [
    "AbilityScores",
    "ActiveEffects",
    "ContentRepository",
    "Item",
    "Monster",
    "MonsterAbility",
    "Player",
    "StatusEffectDefinition",
    "attempt_flee",
    "get_repository",
    "monster_attack",
    "monster_use_ability",
    "player_attack",
    "player_cast_spell",
    "player_off_hand_attack",
    "player_use_ability",
    "resolve_attack_roll",
    "roll_attack_damage",
    "roll_initiative",
    "seeded_random",
    "setup_logging",
]
