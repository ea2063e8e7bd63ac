"""
Status effect system for the battlecore combat engine.

This module contains the fixed catalog of status effect definitions and the
per-combatant container that applies, refreshes, cures and ticks them.
"""

from .effect_manager import ActiveEffects, EffectApplication, TurnStartReport
from .status_effect import (
    STATUS_EFFECT_DEFINITIONS,
    ActiveStatusEffect,
    StatusEffectDefinition,
    get_status_effect_definition,
)

__all__ = [
    # Catalog
    "STATUS_EFFECT_DEFINITIONS",
    "ActiveStatusEffect",
    "StatusEffectDefinition",
    "get_status_effect_definition",
    # Container
    "ActiveEffects",
    "EffectApplication",
    "TurnStartReport",
]
