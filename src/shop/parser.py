# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""High-level parsing context combining registry, tracker and accessors.

Typical use::

    parser = OptionParser.from_spec("vn:f:h")
    parser.describe("n", "%d", "Number (int)")
    parser.describe("f", "%s", "Filename")
    parser.track(sys.argv)
    if parser.used("h"):
        parser.print_help()
    for number in parser.iter_values("n"):
        ...

Each parser owns its registry, so several may coexist. ``reset`` clears
the session before a parser is reused with a fresh spec.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from rich.console import Console

from . import accessors, rendering
from .config import ShopConfig
from .console import get_console_manager
from .conversion import ConvertedValue
from .models import OptionDescriptor, OptionTemplate, ValueKind
from .registry import OptionRegistry
from .tracker import track


class OptionParser:
    """Own one option registry for the lifetime of a parsing session."""

    def __init__(self, *, config: ShopConfig | None = None) -> None:
        self.registry = OptionRegistry(config=config)

    @classmethod
    def from_spec(cls, spec: str, *, config: ShopConfig | None = None) -> OptionParser:
        """Return a parser whose options come from a compact spec string.

        Args:
            spec: Compact specification such as ``"vn:f:h"``.
            config: Optional settings; defaults are used when omitted.

        Returns:
            OptionParser: Parser holding the compiled registry.

        Raises:
            SpecError: If ``spec`` is malformed.
            DuplicateOptionError: If ``spec`` names an option twice.
        """

        parser = cls(config=config)
        parser.registry.load_spec(spec)
        return parser

    @classmethod
    def from_templates(
        cls,
        templates: Iterable[OptionTemplate | None],
        *,
        config: ShopConfig | None = None,
    ) -> OptionParser:
        """Return a parser registering ``templates`` verbatim.

        Args:
            templates: Option templates; a ``None`` entry ends the list.
            config: Optional settings; defaults are used when omitted.

        Returns:
            OptionParser: Parser holding the registered options.
        """

        parser = cls(config=config)
        parser.registry.load_templates(templates)
        return parser

    @property
    def config(self) -> ShopConfig:
        return self.registry.config

    def describe(
        self,
        name: str,
        value_format: str | ValueKind | None = None,
        description: str | None = None,
    ) -> OptionDescriptor:
        """Attach a value format and help text to option ``name``."""

        return self.registry.describe(name, value_format, description)

    def track(self, argv: Sequence[str]) -> None:
        """Record options and values from a full argument vector."""

        track(argv, self.registry)

    def used(self, name: str) -> OptionDescriptor | None:
        """Return the descriptor of ``name`` when it appeared on the command line.

        Args:
            name: Option character.

        Returns:
            OptionDescriptor | None: Descriptor of a used option, otherwise ``None``.
        """

        return accessors.used(self.registry, name)

    def length(self, name: str) -> int:
        """Return how many values ``name`` collected, ``0`` for unknown names."""

        return accessors.length(self.registry, name)

    def get(
        self,
        name: str,
        index: int = 0,
        *,
        value_format: str | ValueKind | None = None,
    ) -> ConvertedValue | None:
        """Return the converted ``index``-th value of ``name`` or ``None``."""

        return accessors.get(self.registry, name, index, value_format=value_format)

    def iter_values(
        self,
        name: str,
        *,
        value_format: str | ValueKind | None = None,
    ) -> Iterator[ConvertedValue]:
        """Yield the converted values of ``name`` in order until the first miss.

        Args:
            name: Option character.
            value_format: Format overriding the one registered via ``describe``.

        Returns:
            Iterator[ConvertedValue]: Converted values in command-line order.
        """

        return accessors.iter_values(self.registry, name, value_format=value_format)

    def help_lines(self) -> list[str]:
        """Return the help listing as plain text lines, one per option."""

        return rendering.help_lines(self.registry, marker=self.config.marker)

    def print_help(self, *, console: Console | None = None) -> None:
        """Print one line per option, marking argument-taking options with ``*``."""

        rendering.print_help(self.registry, console=console or self._console(), marker=self.config.marker)

    def print_verbose(self, *, console: Console | None = None) -> None:
        """Print the state and collected values of every option as a table."""

        rendering.print_verbose(self.registry, console=console or self._console(), config=self.config)

    def reset(self) -> None:
        """Tear down the registry so a new spec can be loaded."""

        self.registry.clear()

    def _console(self) -> Console:
        return get_console_manager().get(color=self.config.use_color, emoji=self.config.use_emoji)


__all__ = ["OptionParser"]
