"""
Shared fixtures for the battlecore test suite.
"""

import pytest

from battlecore.character.combatant import AbilityScores, Monster, Player
from battlecore.core.content import ContentRepository
from battlecore.core.utils import Singleton


class ScriptedRandom:
    """
    Random source that replays a fixed list of values.

    Each call to randint returns the next value, clamped to the requested
    range. Running out of values fails the test unless a fallback is given.
    """

    def __init__(self, *values: int, fallback: int | None = None) -> None:
        self.values = list(values)
        self.fallback = fallback
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if self.values:
            value = self.values.pop(0)
        elif self.fallback is not None:
            value = self.fallback
        else:
            raise AssertionError(f"No scripted roll left for randint({a}, {b})")
        return max(a, min(b, value))

    @property
    def exhausted(self) -> bool:
        return not self.values


@pytest.fixture
def scripted():
    """Factory building a ScriptedRandom from the given rolls."""
    return ScriptedRandom


@pytest.fixture
def repository():
    return ContentRepository()


@pytest.fixture
def isolated_repository():
    """Drops the shared repository before and after the test."""
    Singleton.reset(ContentRepository)
    yield
    Singleton.reset(ContentRepository)


@pytest.fixture
def player():
    return Player(
        name="Hero",
        max_hp=30,
        mp=10,
        max_mp=10,
        level=1,
        character_class="knight",
        stats=AbilityScores(
            strength=14,
            dexterity=12,
            constitution=10,
            intelligence=16,
            wisdom=8,
            charisma=10,
        ),
    )


@pytest.fixture
def goblin(repository) -> Monster:
    return repository.spawn_monster("goblin")
