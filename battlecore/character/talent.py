"""
Talent module for the combat engine.

Talents are passive perks unlocked at a given level. Their flat bonuses are
summed by the stat derivation for every talent id a character knows.
"""

from typing import Iterable

from pydantic import BaseModel, Field

from ..core.content import ContentRepository, get_repository


class Talent(BaseModel):
    """A passive perk from the content catalog."""

    id: str = Field(
        description="The unique catalog id of the talent.",
    )
    name: str = Field(
        description="The display name of the talent.",
    )
    description: str = Field(
        default="",
        description="A brief description of the talent.",
    )
    level: int = Field(
        default=1,
        ge=1,
        description="The character level at which the talent unlocks.",
    )
    classes: list[str] = Field(
        default_factory=list,
        description="Classes allowed to learn the talent, empty for all.",
    )
    hp_bonus: int = Field(default=0, description="Added to maximum HP.")
    mp_bonus: int = Field(default=0, description="Added to maximum MP.")
    attack_bonus: int = Field(default=0, description="Added to attack rolls.")
    damage_bonus: int = Field(default=0, description="Added to damage rolls.")
    ac_bonus: int = Field(default=0, description="Added to armor class.")

    def is_available_to(self, character_class: str) -> bool:
        """Returns True if a character of the given class may learn it."""
        return not self.classes or character_class in self.classes


def _sum_talents(
    known: Iterable[str],
    field: str,
    repository: ContentRepository | None = None,
) -> int:
    repo = get_repository(repository)
    total = 0
    for talent_id in known:
        talent = repo.talents.get(talent_id)
        if talent is not None:
            total += getattr(talent, field)
    return total


def talent_attack_bonus(
    known: Iterable[str], repository: ContentRepository | None = None
) -> int:
    """Sum of the attack bonuses of the known talents, unknown ids count 0."""
    return _sum_talents(known, "attack_bonus", repository)


def talent_damage_bonus(
    known: Iterable[str], repository: ContentRepository | None = None
) -> int:
    """Sum of the damage bonuses of the known talents, unknown ids count 0."""
    return _sum_talents(known, "damage_bonus", repository)


def talent_ac_bonus(
    known: Iterable[str], repository: ContentRepository | None = None
) -> int:
    """Sum of the AC bonuses of the known talents, unknown ids count 0."""
    return _sum_talents(known, "ac_bonus", repository)
