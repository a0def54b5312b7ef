# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Help and verbose listings for a registry."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import ShopConfig
from .models import OptionDescriptor

ELLIPSIS = "..."


def truncate(text: str, width: int) -> str:
    """Shorten ``text`` to ``width`` characters, ending in an ellipsis when cut."""

    if len(text) <= width:
        return text
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def help_line(descriptor: OptionDescriptor, *, marker: str = "-") -> str:
    """Return the help line for one option; ``*`` flags argument-taking options."""

    indicator = "*" if descriptor.takes_argument else " "
    return f"{indicator} {marker}{descriptor.name}    {descriptor.description or ''}".rstrip()


def help_lines(options: Iterable[OptionDescriptor], *, marker: str = "-") -> list[str]:
    """Return one help line per option, in registration order."""

    return [help_line(descriptor, marker=marker) for descriptor in options]


@dataclass(slots=True, frozen=True)
class VerboseRow:
    """Pre-formatted cells of one verbose table row."""

    option: str
    description: str
    used: str
    kind: str
    argument: str


def verbose_rows(options: Iterable[OptionDescriptor], *, config: ShopConfig) -> list[VerboseRow]:
    """Return the verbose table rows with descriptions and values truncated."""

    rows: list[VerboseRow] = []
    for descriptor in options:
        rows.append(
            VerboseRow(
                option=f"{config.marker}{descriptor.name}",
                description=truncate(descriptor.description or "", config.description_width),
                used="yes" if descriptor.used else "no",
                kind="with-arg" if descriptor.takes_argument else "flag",
                argument=",".join(truncate(value, config.value_width) for value in descriptor.values),
            )
        )
    return rows


def build_verbose_table(options: Iterable[OptionDescriptor], *, config: ShopConfig) -> Table:
    """Return a Rich table listing every option's state and collected values."""

    table = Table(box=box.SIMPLE, show_edge=False)
    table.add_column("Option", style="bold", no_wrap=True)
    table.add_column("Description", no_wrap=True)
    table.add_column("Used", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Argument", overflow="fold")
    for row in verbose_rows(options, config=config):
        used_style = "green" if row.used == "yes" else "dim"
        table.add_row(
            Text(row.option),
            Text(row.description),
            Text(row.used, style=used_style),
            Text(row.kind),
            Text(row.argument),
        )
    return table


def print_help(options: Iterable[OptionDescriptor], *, console: Console, marker: str = "-") -> None:
    """Print the help listing for ``options``.

    Args:
        options: Descriptors in registration order.
        console: Console receiving the output.
        marker: Option marker character shown before each name.
    """

    for line in help_lines(options, marker=marker):
        console.print(line, markup=False, highlight=False)


def print_verbose(options: Iterable[OptionDescriptor], *, console: Console, config: ShopConfig) -> None:
    """Print the verbose state table for ``options``.

    Args:
        options: Descriptors in registration order.
        console: Console receiving the output.
        config: Settings providing the marker and column widths.
    """

    console.print()
    console.print(build_verbose_table(options, config=config))


__all__ = [
    "ELLIPSIS",
    "VerboseRow",
    "build_verbose_table",
    "help_line",
    "help_lines",
    "print_help",
    "print_verbose",
    "truncate",
    "verbose_rows",
]
