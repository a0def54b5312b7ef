# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``shop`` command for inspecting how a spec tracks an argument vector."""

from __future__ import annotations

from pathlib import Path
from typing import Final

import typer
from rich.console import Console

from .config import ShopConfig, load_config
from .console import get_console_manager
from .errors import ConfigError, ProgrammerError, UsageError
from .logging import fail, info, warn
from .parser import OptionParser

PROGRAM_NAME: Final[str] = "shop"
EXIT_PROGRAMMER_ERROR: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2

app = typer.Typer(
    name=PROGRAM_NAME,
    help="Inspect short-option specs and the values they collect.",
    no_args_is_help=True,
    add_completion=False,
)

_DESCRIBE_HELP = "Describe an option as NAME=FORMAT[:TEXT], e.g. 'n=%d:Number'. Repeatable."


def parse_description(item: str) -> tuple[str, str | None, str | None]:
    """Split a ``NAME=FORMAT[:TEXT]`` description into its parts."""

    name, sep, rest = item.partition("=")
    if not sep or len(name) != 1:
        raise typer.BadParameter(f"expected NAME=FORMAT[:TEXT], got {item!r}")
    value_format, _, text = rest.partition(":")
    return name, value_format or None, text or None


def _load(config_path: Path | None, no_color: bool) -> ShopConfig:
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        fail(str(exc), use_color=not no_color)
        raise typer.Exit(code=EXIT_PROGRAMMER_ERROR) from exc
    if no_color:
        config.use_color = False
    return config


def _build(spec: str, descriptions: list[str], config: ShopConfig) -> OptionParser:
    parsed = [parse_description(item) for item in descriptions]
    try:
        parser = OptionParser.from_spec(spec, config=config)
        for name, value_format, text in parsed:
            descriptor = parser.describe(name, value_format, text)
            if value_format and not descriptor.takes_argument:
                warn(
                    f"option '{config.marker}{name}' takes no argument; format {value_format!r} is ignored",
                    use_color=config.use_color,
                )
    except ProgrammerError as exc:
        fail(str(exc), use_color=config.use_color)
        raise typer.Exit(code=EXIT_PROGRAMMER_ERROR) from exc
    return parser


def _console(config: ShopConfig) -> Console:
    return get_console_manager().get(color=config.use_color, emoji=config.use_emoji)


@app.command("check")
def check(
    spec: str = typer.Argument(..., help="Compact option spec, e.g. 'vn:f:h'."),
    args: list[str] | None = typer.Argument(None, help="Arguments to track; place them after '--'."),
    describe: list[str] | None = typer.Option(None, "--describe", "-d", help=_DESCRIBE_HELP),
    config_path: Path | None = typer.Option(None, "--config", help="pyproject.toml holding [tool.shop]."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output."),
) -> None:
    """Track ARGS against SPEC and print every option's state."""

    config = _load(config_path, no_color)
    parser = _build(spec, describe or [], config)
    try:
        parser.track([PROGRAM_NAME, *(args or [])])
    except UsageError as exc:
        fail(str(exc), use_color=config.use_color)
        raise typer.Exit(code=EXIT_USAGE_ERROR) from exc

    console = _console(config)
    parser.print_verbose(console=console)
    if not any(descriptor.used for descriptor in parser.registry):
        info("no options were used", use_color=config.use_color)
    for descriptor in parser.registry:
        if not descriptor.value_format:
            continue
        for index, value in enumerate(parser.iter_values(descriptor.name)):
            console.print(f"{config.marker}{descriptor.name}[{index}] = {value!r}", markup=False)


@app.command("help")
def show_help(
    spec: str = typer.Argument(..., help="Compact option spec, e.g. 'vn:f:h'."),
    describe: list[str] | None = typer.Option(None, "--describe", "-d", help=_DESCRIBE_HELP),
    config_path: Path | None = typer.Option(None, "--config", help="pyproject.toml holding [tool.shop]."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output."),
) -> None:
    """Print the help listing SPEC would produce."""

    config = _load(config_path, no_color)
    parser = _build(spec, describe or [], config)
    parser.print_help(console=_console(config))


def main() -> None:
    app()


__all__ = ["app", "main", "parse_description"]
