"""
Spell resolver.

Casting looks the spell up in the content catalog, checks the mana cost and
then either heals the caster or rolls a spell attack against the monster.
Rule refusals come back as RejectedResult with no mana spent.
"""

from catchery import log_debug

from ..character.character_stats import get_armor_class, get_spell_modifier
from ..character.combatant import Monster, Player
from ..character.talent import talent_damage_bonus
from ..combat.resolution import resolve_attack_roll
from ..core.constants import ActionKind
from ..core.content import ContentRepository, get_repository
from ..core.dice import RandomSource, roll_d20, roll_dice
from ..core.error_handling import (
    require_int,
    require_non_empty_string,
    validate_required_object,
)
from .results import HealResult, RejectedResult, SpellResult


def player_cast_spell(
    player: Player,
    spell_id: str,
    monster: Monster,
    weather_penalty: int = 0,
    rng: RandomSource | None = None,
    repository: ContentRepository | None = None,
) -> SpellResult | HealResult | RejectedResult:
    """
    The player casts a spell during a battle.

    Unknown spells, spells the player cannot afford and utility spells are
    refused without spending mana. Healing spells restore up to the missing
    HP. Damage spells roll d20 plus the spell modifier against the monster's
    AC; spells flagged auto_hit skip the comparison but still miss on a
    natural 1. Mana is spent whether a damage spell hits or not.

    Args:
        player (Player): The caster.
        spell_id (str): Catalog id of the spell.
        monster (Monster): The target of damage spells.
        weather_penalty (int): Added to the target value.
        rng (RandomSource | None): Random source, system random if None.
        repository (ContentRepository | None): Catalog, shared one if None.

    Returns:
        SpellResult | HealResult | RejectedResult: The outcome of the cast.

    Raises:
        EngineContractError: On a missing combatant or spell id.

    """
    context = {"action": "player_cast_spell", "spell_id": spell_id}
    validate_required_object(player, "player", context=context)
    validate_required_object(monster, "monster", context=context)
    require_non_empty_string(spell_id, "spell_id", context)
    require_int(weather_penalty, "weather_penalty", context)
    repo = get_repository(repository)

    spell = repo.get_spell(spell_id)
    if spell is None:
        return RejectedResult(message="Unknown spell!")
    if player.mp < spell.mp_cost:
        return RejectedResult(message="Not enough MP!")
    if spell.kind == ActionKind.UTILITY or spell.dice is None:
        return RejectedResult(message=f"{spell.name} cannot be used in battle!")

    if spell.kind == ActionKind.HEAL:
        player.spend_mp(spell.mp_cost)
        healed = player.heal(spell.dice.roll(rng))
        return HealResult(
            message=f"{player.name} casts {spell.name}! Healed {healed} HP!",
            source_id=spell.id,
            healing=healed,
            mp_used=spell.mp_cost,
        )

    target = get_armor_class(monster, 0, repo) + weather_penalty
    modifier = get_spell_modifier(player, repo) + player.effects.accuracy_modifier()
    roll = roll_d20(modifier, rng)
    outcome = resolve_attack_roll(roll, target, auto_hit=spell.auto_hit)
    player.spend_mp(spell.mp_cost)
    log_debug(
        f"{player.name} casts {spell.name}",
        {"mp_cost": spell.mp_cost, "mp_left": player.mp, "hit": outcome.hit},
    )
    meta = {
        "spell_id": spell.id,
        "mp_used": spell.mp_cost,
        "natural_roll": outcome.natural_roll,
        "total": outcome.total,
    }

    if not outcome.hit:
        return SpellResult(
            message=f"{player.name} casts {spell.name} but it misses!",
            fumble=outcome.fumble,
            **meta,
        )

    # Spell dice are not doubled on a natural 20.
    damage = max(
        0,
        roll_dice(spell.dice.count, spell.dice.sides, rng)
        + spell.dice.bonus
        + talent_damage_bonus(player.talents, repo)
        + player.effects.damage_modifier(),
    )
    monster.take_damage(damage)
    return SpellResult(
        message=f"{player.name} casts {spell.name}! {damage} damage!",
        damage=damage,
        hit=True,
        critical=outcome.critical,
        **meta,
    )
