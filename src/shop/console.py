# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import cache
from typing import Literal, TextIO

from rich.console import Console


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is a terminal."""

    try:
        return (stream or sys.stdout).isatty()
    except (AttributeError, ValueError):
        return False


class ConsoleManager:
    """Provision Rich :class:`Console` instances keyed by presentation flags."""

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return a console configured for the requested output preferences.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when Rich should render emoji glyphs.
            stderr: ``True`` to write to the standard error stream.

        Returns:
            Console: Cached or newly constructed console.
        """

        tty = detect_tty(sys.stderr if stderr else sys.stdout)
        key = (color, emoji, stderr, tty)
        if key not in self._cache:
            color_system: Literal["auto"] | None = "auto" if color and tty else None
            self._cache[key] = Console(
                color_system=color_system,
                force_terminal=tty,
                no_color=not (color and tty),
                emoji=emoji,
                stderr=stderr,
                soft_wrap=True,
                highlight=False,
            )
        return self._cache[key]


@cache
def get_console_manager() -> ConsoleManager:
    """Return the process-wide :class:`ConsoleManager`."""

    return ConsoleManager()


__all__ = ["ConsoleManager", "detect_tty", "get_console_manager"]
