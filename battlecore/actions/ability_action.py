"""
Ability resolvers for the player and for monsters.

Player abilities follow the spell rules but attack with the ability's own
stat. Monster abilities never roll to hit: damage always lands, and healing
goes to the monster itself.
"""

from ..character.character_stats import get_ability_modifier, get_armor_class
from ..character.combatant import Monster, MonsterAbility, Player
from ..character.talent import talent_damage_bonus
from ..combat.resolution import resolve_attack_roll, roll_attack_damage
from ..core.constants import ActionKind
from ..core.content import ContentRepository, get_repository
from ..core.dice import RandomSource, roll_d20
from ..core.error_handling import (
    require_int,
    require_non_empty_string,
    validate_required_object,
)
from .results import AbilityResult, HealResult, MonsterAbilityResult, RejectedResult


def player_use_ability(
    player: Player,
    ability_id: str,
    monster: Monster,
    weather_penalty: int = 0,
    rng: RandomSource | None = None,
    repository: ContentRepository | None = None,
) -> AbilityResult | HealResult | RejectedResult:
    """
    The player uses a martial ability during a battle.

    Args:
        player (Player): The user of the ability.
        ability_id (str): Catalog id of the ability.
        monster (Monster): The target of damage abilities.
        weather_penalty (int): Added to the target value.
        rng (RandomSource | None): Random source, system random if None.
        repository (ContentRepository | None): Catalog, shared one if None.

    Returns:
        AbilityResult | HealResult | RejectedResult: The outcome.

    Raises:
        EngineContractError: On a missing combatant or ability id.

    """
    context = {"action": "player_use_ability", "ability_id": ability_id}
    validate_required_object(player, "player", context=context)
    validate_required_object(monster, "monster", context=context)
    require_non_empty_string(ability_id, "ability_id", context)
    require_int(weather_penalty, "weather_penalty", context)
    repo = get_repository(repository)

    ability = repo.get_ability(ability_id)
    if ability is None:
        return RejectedResult(message="Unknown ability!")
    if player.mp < ability.mp_cost:
        return RejectedResult(message="Not enough MP!")
    if ability.kind == ActionKind.UTILITY or ability.dice is None:
        return RejectedResult(message=f"{ability.name} cannot be used in battle!")

    if ability.kind == ActionKind.HEAL:
        player.spend_mp(ability.mp_cost)
        healed = player.heal(ability.dice.roll(rng))
        return HealResult(
            message=f"{player.name} uses {ability.name}! Healed {healed} HP!",
            source_id=ability.id,
            healing=healed,
            mp_used=ability.mp_cost,
        )

    target = get_armor_class(monster, 0, repo) + weather_penalty
    modifier = (
        get_ability_modifier(player, ability.stat, repo)
        + player.effects.accuracy_modifier()
    )
    roll = roll_d20(modifier, rng)
    outcome = resolve_attack_roll(roll, target)
    player.spend_mp(ability.mp_cost)
    meta = {
        "ability_id": ability.id,
        "mp_used": ability.mp_cost,
        "natural_roll": outcome.natural_roll,
        "total": outcome.total,
        "attack_modifier": modifier,
    }

    if outcome.fumble:
        return AbilityResult(
            message=f"{player.name} uses {ability.name} but fumbles!",
            fumble=True,
            **meta,
        )
    if not outcome.hit:
        return AbilityResult(
            message=f"{player.name} uses {ability.name} but misses!", **meta
        )

    damage = roll_attack_damage(
        ability.dice.count,
        ability.dice.sides,
        outcome.critical,
        ability.dice.bonus
        + talent_damage_bonus(player.talents, repo)
        + player.effects.damage_modifier(),
        rng=rng,
    )
    monster.take_damage(damage)
    prefix = "CRITICAL! " if outcome.critical else ""
    return AbilityResult(
        message=f"{prefix}{player.name} uses {ability.name}! {damage} damage!",
        damage=damage,
        hit=True,
        critical=outcome.critical,
        **meta,
    )


def monster_use_ability(
    ability: MonsterAbility,
    monster: Monster,
    player: Player,
    rng: RandomSource | None = None,
) -> MonsterAbilityResult:
    """
    A monster uses one of its special moves instead of a plain attack.

    Healing moves restore the monster's HP. Damage moves bypass AC and
    always land; a self-healing move also restores the monster by the rolled
    damage, and a move with a status effect applies it to the player.

    Args:
        ability (MonsterAbility): The move being used.
        monster (Monster): The user of the move.
        player (Player): The target of damage moves.
        rng (RandomSource | None): Random source, system random if None.

    Returns:
        MonsterAbilityResult: Damage dealt, HP recovered and effect applied.

    """
    context = {"action": "monster_use_ability"}
    validate_required_object(ability, "ability", context=context)
    validate_required_object(monster, "monster", context=context)
    validate_required_object(player, "player", context=context)

    rolled = ability.damage.roll(rng)
    if ability.kind == ActionKind.HEAL:
        monster.heal(rolled)
        return MonsterAbilityResult(
            message=f"{monster.name} uses {ability.name}! Recovers {rolled} HP!",
            healing=rolled,
            ability_name=ability.name,
        )

    player.take_damage(rolled)
    message = f"{monster.name} uses {ability.name}! {rolled} damage!"
    healing = 0
    if ability.self_heal:
        monster.heal(rolled)
        healing = rolled
        message += f" {monster.name} absorbs the life force!"

    status_applied = None
    if ability.status_effect:
        application = player.effects.apply(
            ability.status_effect, monster.name, ability.status_duration
        )
        if application.applied:
            status_applied = ability.status_effect
        message += f" {application.message}"

    return MonsterAbilityResult(
        message=message,
        damage=rolled,
        healing=healing,
        ability_name=ability.name,
        status_applied=status_applied,
    )
