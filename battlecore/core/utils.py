"""
Utilities module for the combat engine.

Provides the shared rich console used by the display helpers, the singleton
metaclass used by the content repository, and a small bar renderer.
"""

from __future__ import annotations

from typing import Any, Generic

from rich.console import Console
from rich.rule import Rule
from typing_extensions import TypeVar

# Shared console, markup always on.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """Prints renderables or markup strings on the shared console."""
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Prints a horizontal separator on the shared console.

    Args:
        *args: Forwarded to rich's Rule, usually the title.
        **kwargs: Forwarded to rich's Rule, e.g. style.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Renders content through the shared console and returns the text.

    Args:
        content (Any): A markup string or a rich renderable.

    Returns:
        str: The rendered output, markup resolved to terminal codes.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


# ---- Singleton Metaclass ----


_T = TypeVar("_T")


class Singleton(type, Generic[_T]):
    """
    Metaclass that hands out one shared instance per class.

    Calling the class again with arguments re-runs __init__ on the shared
    instance, so a repository can be pointed at another data directory.
    """

    _instances: dict[Singleton[_T], _T] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> _T:
        instance = cls._instances.get(cls)
        if instance is None:
            instance = super().__call__(*args, **kwargs)
            cls._instances[cls] = instance
        elif args or kwargs:
            instance.__init__(*args, **kwargs)  # type: ignore[misc]
        return instance

    @classmethod
    def reset(mcs, cls: type) -> None:
        """Forgets the instance of cls, the next call builds a new one."""
        mcs._instances.pop(cls, None)  # type: ignore[call-overload]


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Draws a pool such as HP or MP as a row of filled and empty cells.

    Args:
        current (int): Points left, clamped to [0, maximum].
        maximum (int): Size of the pool, an empty bar when not positive.
        length (int): Number of cells.
        color (str): Rich style of the filled cells.

    Returns:
        str: Rich markup for the bar.

    """
    filled = 0
    if maximum > 0:
        filled = int(max(0, min(current, maximum)) * length / maximum)
    bar = f"[{color}]" + "▮" * filled
    if filled < length:
        bar += "[dim white]" + "▯" * (length - filled) + "[/]"
    return bar + "[/]"
