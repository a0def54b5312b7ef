# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing diagnostics with optional colour and emoji support."""

from __future__ import annotations

from rich.text import Text

from .console import get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool, use_color: bool, stderr: bool) -> None:
    """Render ``msg`` through the shared console for the requested stream.

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Flag indicating whether colour output is desired.
        stderr: ``True`` to print on the standard error stream.
    """

    console = get_console_manager().get(color=use_color, emoji=use_emoji, stderr=stderr)
    text = Text(msg)
    if use_color:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool = False, use_color: bool = True) -> None:
    """Emit an informational message on stdout."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color, stderr=False)


def warn(msg: str, *, use_emoji: bool = False, use_color: bool = True) -> None:
    """Emit a ``WARNING:`` message on stderr."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(
        f"{prefix}WARNING: {msg}",
        style="yellow",
        use_emoji=use_emoji,
        use_color=use_color,
        stderr=True,
    )


def fail(msg: str, *, use_emoji: bool = False, use_color: bool = True) -> None:
    """Emit an ``ERROR:`` diagnostic on stderr.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Flag indicating whether colour output is desired.
    """

    prefix = emoji("❌ ", use_emoji)
    _print_line(
        f"{prefix}ERROR: {msg}",
        style="bold red",
        use_emoji=use_emoji,
        use_color=use_color,
        stderr=True,
    )


__all__ = ["emoji", "fail", "info", "warn"]
