"""
Core system module for the battlecore combat engine.

This module contains the fundamental components the rest of the engine
builds on: rule constants, dice primitives, content loading, error handling,
logging setup and console utilities.
"""

from .constants import (
    BASE_ARMOR_CLASS,
    DEFEND_BONUS,
    FLEE_DC,
    FUMBLE_FACE,
    MAX_DIE_FACE,
    UNARMED_DIE,
    ActionKind,
    EffectCategory,
    ItemType,
    RemovalMethod,
    StatKey,
)
from .content import (
    DEFAULT_DATA_DIR,
    ContentRepository,
    get_repository,
)
from .dice import (
    D20Roll,
    DiceFormula,
    DiceRollDetail,
    RandomSource,
    ability_modifier,
    proficiency_bonus,
    roll_d20,
    roll_dice,
    roll_dice_detailed,
    roll_die,
    seeded_random,
)
from .error_handling import (
    EngineContractError,
    require_int,
    require_non_empty_string,
    validate_required_object,
)
from .logging import get_logger, setup_logging
from .utils import Singleton, ccapture, cprint, crule, make_bar

__all__ = [
    # Constants
    "BASE_ARMOR_CLASS",
    "DEFEND_BONUS",
    "FLEE_DC",
    "FUMBLE_FACE",
    "MAX_DIE_FACE",
    "UNARMED_DIE",
    "ActionKind",
    "EffectCategory",
    "ItemType",
    "RemovalMethod",
    "StatKey",
    # Content
    "DEFAULT_DATA_DIR",
    "ContentRepository",
    "get_repository",
    # Dice
    "D20Roll",
    "DiceFormula",
    "DiceRollDetail",
    "RandomSource",
    "ability_modifier",
    "proficiency_bonus",
    "roll_d20",
    "roll_dice",
    "roll_dice_detailed",
    "roll_die",
    "seeded_random",
    # Error handling
    "EngineContractError",
    "require_int",
    "require_non_empty_string",
    "validate_required_object",
    # Logging
    "get_logger",
    "setup_logging",
    # Utilities
    "Singleton",
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
