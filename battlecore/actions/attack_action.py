"""
Attack resolvers: initiative, weapon attacks, monster attacks and fleeing.

Each function resolves one discrete action, performs its own rolls, applies
the damage to the defender and returns a typed result. Turn order is left to
the caller.
"""

from catchery import log_debug

from ..character.character_inventory import has_two_weapon_fighting
from ..character.character_stats import get_armor_class, get_attack_modifier
from ..character.combatant import Monster, Player
from ..character.talent import talent_damage_bonus
from ..combat.resolution import resolve_attack_roll, roll_attack_damage
from ..core.constants import FLEE_DC, UNARMED_DIE
from ..core.content import ContentRepository
from ..core.dice import RandomSource, ability_modifier, roll_d20
from ..core.error_handling import (
    contract_violation,
    require_int,
    validate_required_object,
)
from ..items.item import Item
from .results import AttackResult, FleeResult, InitiativeResult


def roll_initiative(
    player_dex_mod: int,
    monster_attack_bonus: int,
    rng: RandomSource | None = None,
) -> InitiativeResult:
    """
    Rolls initiative for both sides.

    Args:
        player_dex_mod (int): Added to the player's d20.
        monster_attack_bonus (int): Added to the monster's d20.
        rng (RandomSource | None): Random source, system random if None.

    Returns:
        InitiativeResult: Both totals; the player goes first on a tie.

    Raises:
        EngineContractError: If a modifier is not an integer.

    """
    require_int(player_dex_mod, "player_dex_mod", {"action": "roll_initiative"})
    require_int(monster_attack_bonus, "monster_attack_bonus", {"action": "roll_initiative"})
    player_roll = roll_d20(player_dex_mod, rng)
    monster_roll = roll_d20(monster_attack_bonus, rng)
    player_first = player_roll.total >= monster_roll.total
    return InitiativeResult(
        message=(
            f"Initiative: you rolled {player_roll.total}, "
            f"the enemy rolled {monster_roll.total}. "
            + ("You act first!" if player_first else "The enemy acts first!")
        ),
        player_first=player_first,
        player_roll=player_roll.total,
        monster_roll=monster_roll.total,
    )


def _weapon_attack(
    player: Player,
    monster: Monster,
    weapon: Item | None,
    off_hand: bool,
    monster_defend_bonus: int,
    weather_penalty: int,
    rng: RandomSource | None,
    repository: ContentRepository | None,
) -> AttackResult:
    """Shared body of the main-hand and off-hand attacks."""
    target = get_armor_class(monster, monster_defend_bonus, repository) + weather_penalty
    modifier = (
        get_attack_modifier(player, weapon, repository)
        + player.effects.accuracy_modifier()
    )
    roll = roll_d20(modifier, rng)
    outcome = resolve_attack_roll(roll, target)
    hand = "off-hand " if off_hand else ""
    meta = {
        "natural_roll": outcome.natural_roll,
        "total": outcome.total,
        "target_value": target,
        "off_hand": off_hand,
    }

    if outcome.fumble:
        return AttackResult(
            message=f"Critical miss! {player.name}'s {hand}attack goes wild!",
            fumble=True,
            **meta,
        )

    if not outcome.hit:
        if off_hand:
            return AttackResult(message=f"{player.name}'s off-hand attack misses!", **meta)
        return AttackResult(message=f"{player.name} misses!", **meta)

    bonus = (
        (weapon.effect if weapon else 0)
        + talent_damage_bonus(player.talents, repository)
        + player.effects.damage_modifier()
    )
    if off_hand and has_two_weapon_fighting(player) and weapon is not None:
        bonus += ability_modifier(player.stats.get(weapon.attack_stat))
    damage = roll_attack_damage(
        1,
        UNARMED_DIE,
        outcome.critical,
        bonus,
        minimum=0 if outcome.critical else 1,
        rng=rng,
    )
    monster.take_damage(damage)
    prefix = "CRITICAL HIT! " if outcome.critical else ""
    verb = "strikes" if outcome.critical else "hits"
    if off_hand and weapon is not None:
        message = f"{prefix}{player.name}'s off-hand {weapon.name} {verb} for {damage} damage!"
    else:
        message = f"{prefix}{player.name} {verb} for {damage} damage!"
    return AttackResult(
        message=message,
        damage=damage,
        hit=True,
        critical=outcome.critical,
        **meta,
    )


def player_attack(
    player: Player,
    monster: Monster,
    monster_defend_bonus: int = 0,
    weather_penalty: int = 0,
    rng: RandomSource | None = None,
    repository: ContentRepository | None = None,
) -> AttackResult:
    """
    The player attacks the monster with the main-hand weapon (or bare hands).

    Damage is 1d6 plus the weapon bonus, talent and effect damage bonuses,
    with the dice doubled on a critical hit. A non-critical hit deals at
    least 1 damage.

    Args:
        player (Player): The attacker.
        monster (Monster): The defender, its HP is reduced on a hit.
        monster_defend_bonus (int): AC bonus when the monster defends.
        weather_penalty (int): Added to the target value.
        rng (RandomSource | None): Random source, system random if None.
        repository (ContentRepository | None): Catalog, shared one if None.

    Returns:
        AttackResult: The outcome of the attack.

    """
    validate_required_object(player, "player", context={"action": "player_attack"})
    validate_required_object(monster, "monster", context={"action": "player_attack"})
    require_int(monster_defend_bonus, "monster_defend_bonus")
    require_int(weather_penalty, "weather_penalty")
    return _weapon_attack(
        player,
        monster,
        player.weapon,
        False,
        monster_defend_bonus,
        weather_penalty,
        rng,
        repository,
    )


def player_off_hand_attack(
    player: Player,
    monster: Monster,
    monster_defend_bonus: int = 0,
    weather_penalty: int = 0,
    rng: RandomSource | None = None,
    repository: ContentRepository | None = None,
) -> AttackResult:
    """
    The player attacks with the off-hand weapon.

    Same rules as the main-hand attack, using the off-hand weapon's stat and
    bonus. With Two-Weapon Fighting the weapon's ability modifier is also
    added to the damage.

    Raises:
        EngineContractError: If no off-hand weapon is equipped.

    """
    validate_required_object(player, "player", context={"action": "player_off_hand_attack"})
    validate_required_object(monster, "monster", context={"action": "player_off_hand_attack"})
    require_int(monster_defend_bonus, "monster_defend_bonus")
    require_int(weather_penalty, "weather_penalty")
    if player.off_hand is None:
        raise contract_violation(
            f"{player.name} has no off-hand weapon equipped",
            {"action": "player_off_hand_attack", "player": player.name},
        )
    return _weapon_attack(
        player,
        monster,
        player.off_hand,
        True,
        monster_defend_bonus,
        weather_penalty,
        rng,
        repository,
    )


def monster_attack(
    monster: Monster,
    player: Player,
    player_defend_bonus: int = 0,
    weather_penalty: int = 0,
    monster_attack_boost: int = 0,
    rng: RandomSource | None = None,
    repository: ContentRepository | None = None,
) -> AttackResult:
    """
    The monster attacks the player with its plain attack.

    Args:
        monster (Monster): The attacker.
        player (Player): The defender, its HP is reduced on a hit.
        player_defend_bonus (int): AC bonus when the player defends.
        weather_penalty (int): Added to the target value.
        monster_attack_boost (int): Added to the monster's attack bonus.
        rng (RandomSource | None): Random source, system random if None.
        repository (ContentRepository | None): Catalog, shared one if None.

    Returns:
        AttackResult: The outcome of the attack.

    """
    validate_required_object(monster, "monster", context={"action": "monster_attack"})
    validate_required_object(player, "player", context={"action": "monster_attack"})
    require_int(player_defend_bonus, "player_defend_bonus")
    require_int(weather_penalty, "weather_penalty")
    require_int(monster_attack_boost, "monster_attack_boost")

    target = get_armor_class(player, player_defend_bonus, repository) + weather_penalty
    attack_bonus = (
        monster.attack_bonus + monster_attack_boost + monster.effects.accuracy_modifier()
    )
    roll = roll_d20(attack_bonus, rng)
    outcome = resolve_attack_roll(roll, target)
    meta = {
        "natural_roll": outcome.natural_roll,
        "total": outcome.total,
        "target_value": target,
    }

    if outcome.fumble:
        return AttackResult(
            message=f"{monster.name} stumbles and misses!", fumble=True, **meta
        )
    if not outcome.hit:
        return AttackResult(message=f"{monster.name} misses!", **meta)

    damage = roll_attack_damage(
        monster.damage.count,
        monster.damage.sides,
        outcome.critical,
        monster.damage.bonus + monster.effects.damage_modifier(),
        rng=rng,
    )
    player.take_damage(damage)
    prefix = "CRITICAL! " if outcome.critical else ""
    verb = "savages you" if outcome.critical else "hits you"
    return AttackResult(
        message=f"{prefix}{monster.name} {verb} for {damage} damage!",
        damage=damage,
        hit=True,
        critical=outcome.critical,
        **meta,
    )


def attempt_flee(dex_modifier: int, rng: RandomSource | None = None) -> FleeResult:
    """
    Tries to run from the battle: d20 + dexterity modifier against DC 10.

    Raises:
        EngineContractError: If the modifier is not an integer.

    """
    require_int(dex_modifier, "dex_modifier", {"action": "attempt_flee"})
    roll = roll_d20(dex_modifier, rng)
    success = roll.total >= FLEE_DC
    log_debug("Flee attempt", {"roll": roll.natural_roll, "total": roll.total})
    if success:
        return FleeResult(
            message=f"Escaped! (rolled {roll.total})",
            success=True,
            total=roll.total,
        )
    return FleeResult(
        message=f"Failed to escape! (rolled {roll.total}, needed {FLEE_DC})",
        success=False,
        total=roll.total,
    )
