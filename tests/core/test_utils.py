"""
Tests for the console helpers and the singleton metaclass.
"""

from battlecore.core.utils import Singleton, ccapture, make_bar


class _Registry(metaclass=Singleton):
    def __init__(self, value: int = 0) -> None:
        self.value = value


def test_singleton_returns_same_instance():
    Singleton.reset(_Registry)
    assert _Registry() is _Registry()


def test_singleton_reinitializes_on_explicit_arguments():
    Singleton.reset(_Registry)
    first = _Registry(1)
    second = _Registry(2)
    assert first is second
    assert second.value == 2
    assert _Registry().value == 2


def test_singleton_reset_builds_new_instance():
    first = _Registry()
    Singleton.reset(_Registry)
    assert _Registry() is not first


def test_make_bar_fills_proportionally():
    bar = make_bar(5, 10, length=10)
    assert bar.count("▮") == 5
    assert bar.count("▯") == 5


def test_make_bar_clamps_and_handles_zero_maximum():
    assert make_bar(15, 10).count("▮") == 10
    assert make_bar(-3, 10).count("▮") == 0
    assert make_bar(0, 0).count("▯") == 10


def test_ccapture_renders_markup():
    assert "hello" in ccapture("[bold]hello[/]")
