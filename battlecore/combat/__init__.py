"""
Combat system module for the battlecore combat engine.

This module holds the attack resolution kernel: hit, critical and fumble
rules for a d20 attack roll, and the shared damage roll.
"""

from .resolution import AttackOutcome, resolve_attack_roll, roll_attack_damage

__all__ = ["AttackOutcome", "resolve_attack_roll", "roll_attack_damage"]
