"""CLI console helpers with optional Rich support.

Rich is imported lazily so that the parser and its help output keep
working in environments where Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from cmdopts.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(
        self,
        *objects: object,
        style: str | None = None,
        markup: bool = True,
        preformatted: bool = False,
    ) -> None:
        """Render with Rich when available, else plain ``print``.

        Pass ``markup=False`` for text that may contain user input, and
        ``preformatted=True`` for text that must come out byte for byte:
        no markup, emoji codes, highlighting or re-wrapping.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        if preformatted:
            rich_console.print(
                *objects,
                style=style,
                markup=False,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )
            return
        rich_console.print(*objects, style=style, markup=markup)


console = _ConsoleProxy(stderr=True)
"""Diagnostics and errors."""

stdout_console = _ConsoleProxy(stderr=False)
"""Program output: help text and parse results."""
