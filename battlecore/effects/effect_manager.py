"""
Active status effects of a single combatant.

The container holds at most one instance per effect id, in the order the
effects were first applied. It applies, refreshes, cures and expires effects
and sums their modifiers for the stat derivation and the resolvers.
"""

from typing import Iterator, Protocol

from catchery import log_debug
from pydantic import BaseModel, Field

from ..core.constants import EffectCategory, StatKey
from ..core.dice import RandomSource, ability_modifier, roll_d20
from .status_effect import ActiveStatusEffect, get_status_effect_definition


class AbilityScoreSource(Protocol):
    """Anything that exposes ability scores by stat key."""

    def get(self, stat: StatKey) -> int: ...


class EffectApplication(BaseModel):
    """Outcome of an attempt to apply an effect."""

    applied: bool
    message: str


class TurnStartReport(BaseModel):
    """What the start-of-turn processing did to the bearer."""

    messages: list[str] = Field(default_factory=list)
    total_tick_damage: int = 0


class ActiveEffects(BaseModel):
    """
    Container of the status effects currently affecting a combatant.

    Effects are keyed by id, so applying an effect that is already active
    refreshes it instead of stacking a second copy.
    """

    effects: dict[str, ActiveStatusEffect] = Field(
        default_factory=dict,
        description="Active effects keyed by effect id, in application order.",
    )

    # === Effect Management ===

    def apply(
        self,
        effect_id: str,
        source: str,
        duration_override: int | None = None,
    ) -> EffectApplication:
        """
        Applies an effect, or refreshes it when it is already active.

        An active effect is refreshed only when the new duration is strictly
        longer than the remaining one; the source is updated with it.

        Args:
            effect_id (str): The id of the effect to apply.
            source (str): Who or what applies the effect.
            duration_override (int | None): Duration replacing the default.

        Returns:
            EffectApplication: Whether anything changed, and a message.

        """
        definition = get_status_effect_definition(effect_id)
        if definition is None:
            return EffectApplication(applied=False, message=f"Unknown effect: {effect_id}")

        duration = (
            definition.default_duration if duration_override is None else duration_override
        )
        existing = self.effects.get(effect_id)
        if existing is not None:
            if duration > existing.remaining_turns:
                existing.remaining_turns = duration
                existing.source = source
                return EffectApplication(
                    applied=True,
                    message=f"{definition.name} refreshed! ({duration} turns)",
                )
            return EffectApplication(applied=False, message=f"Already {definition.name}!")

        self.effects[effect_id] = ActiveStatusEffect(
            effect_id=effect_id,
            remaining_turns=duration,
            source=source,
        )
        log_debug(
            f"Applied {definition.name}",
            {"effect": effect_id, "source": source, "duration": duration},
        )
        return EffectApplication(
            applied=True, message=f"{definition.name}! ({duration} turns)"
        )

    def remove(self, effect_id: str) -> bool:
        """Removes an effect, returns False if it was not active."""
        return self.effects.pop(effect_id, None) is not None

    def cure_with_item(self, item_id: str) -> list[str]:
        """
        Removes every active effect that the given item cures.

        Args:
            item_id (str): The id of the consumable being used.

        Returns:
            list[str]: Display names of the removed effects, empty if none.

        """
        cured: list[str] = []
        for effect_id in list(self.effects):
            definition = get_status_effect_definition(effect_id)
            if definition is not None and definition.can_be_cured_by(item_id):
                del self.effects[effect_id]
                cured.append(definition.name)
        return cured

    def clear_all(self) -> None:
        self.effects.clear()

    def clear_debuffs(self) -> None:
        """Removes every debuff, buffs are kept."""
        for effect_id in list(self.effects):
            definition = get_status_effect_definition(effect_id)
            if definition is None or definition.category == EffectCategory.DEBUFF:
                del self.effects[effect_id]

    # === Turn Processing ===

    def process_start_of_turn(
        self,
        stats: AbilityScoreSource,
        rng: RandomSource | None = None,
    ) -> TurnStartReport:
        """
        Ticks every active effect at the start of the bearer's turn.

        For each effect, in application order: tick damage is accumulated
        (the bearer's HP is left to the caller), a saveable debuff gets a
        saving throw that ends it on success, and otherwise the remaining
        duration goes down by one, removing the effect when it runs out.

        Args:
            stats (AbilityScoreSource): The bearer's ability scores.
            rng (RandomSource | None): Random source for ticks and saves.

        Returns:
            TurnStartReport: The messages produced and the total tick damage.

        """
        report = TurnStartReport()
        for effect_id in list(self.effects):
            active = self.effects[effect_id]
            definition = get_status_effect_definition(effect_id)
            if definition is None:
                del self.effects[effect_id]
                continue

            tick = definition.roll_tick_damage(rng)
            if tick > 0:
                report.total_tick_damage += tick
                report.messages.append(f"{definition.name} deals {tick} damage!")

            if definition.can_be_saved():
                save = roll_d20(ability_modifier(stats.get(definition.save_stat)), rng)
                log_debug(
                    f"Saving throw vs {definition.name}",
                    {
                        "roll": save.natural_roll,
                        "total": save.total,
                        "dc": definition.save_dc,
                    },
                )
                if save.total >= definition.save_dc:
                    del self.effects[effect_id]
                    report.messages.append(
                        f"Saved vs {definition.name}! "
                        f"(rolled {save.total} vs DC {definition.save_dc})"
                    )
                    continue

            active.remaining_turns -= 1
            if active.remaining_turns <= 0:
                del self.effects[effect_id]
                report.messages.append(f"{definition.name} wore off.")
        return report

    # === Queries ===

    def _sum(self, attribute: str) -> int:
        total = 0
        for effect_id in self.effects:
            definition = get_status_effect_definition(effect_id)
            if definition is not None:
                total += getattr(definition, attribute)
        return total

    def accuracy_modifier(self) -> int:
        return self._sum("accuracy_modifier")

    def ac_modifier(self) -> int:
        return self._sum("ac_modifier")

    def damage_modifier(self) -> int:
        return self._sum("damage_modifier")

    def must_skip_turn(self) -> bool:
        """Returns True if any active effect makes the bearer lose its turn."""
        for effect_id in self.effects:
            definition = get_status_effect_definition(effect_id)
            if definition is not None and definition.skips_turn:
                return True
        return False

    def has(self, effect_id: str) -> bool:
        return effect_id in self.effects

    def get(self, effect_id: str) -> ActiveStatusEffect | None:
        return self.effects.get(effect_id)

    def names(self) -> list[str]:
        """Returns display strings such as "Poisoned (3t)"."""
        result = []
        for effect_id, active in self.effects.items():
            definition = get_status_effect_definition(effect_id)
            name = definition.name if definition else effect_id
            result.append(f"{name} ({active.remaining_turns}t)")
        return result

    def __iter__(self) -> Iterator[ActiveStatusEffect]:  # type: ignore[override]
        return iter(list(self.effects.values()))

    def __len__(self) -> int:
        return len(self.effects)

    def __contains__(self, effect_id: object) -> bool:
        return effect_id in self.effects
