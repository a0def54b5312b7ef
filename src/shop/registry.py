# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option registry compiled from compact specs or explicit templates."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .config import ShopConfig
from .conversion import format_token, resolve_conversion
from .errors import DuplicateOptionError, SpecError, UndefinedOptionError
from .models import OptionDescriptor, OptionTemplate, ValueKind

LOGGER = logging.getLogger(__name__)


def compile_spec(spec: str, *, delimiter: str = ":", separator: str = " ") -> list[tuple[str, bool]]:
    """Return ``(name, takes_argument)`` pairs described by a compact spec.

    Every character other than ``separator`` and ``delimiter`` names an
    option, and the option takes an argument exactly when the delimiter
    follows it directly. ``"vn:f: h"`` therefore yields ``v`` and ``h`` as
    flags and ``n`` and ``f`` as argument-taking options.

    Args:
        spec: Compact specification string.
        delimiter: Character marking the preceding option as argument-taking.
        separator: Grouping character ignored between options.

    Returns:
        list[tuple[str, bool]]: Option names in spec order with their flags.

    Raises:
        SpecError: If the spec is empty or a delimiter does not follow an option.
    """

    entries: list[tuple[str, bool]] = []
    previous: str | None = None
    for char in spec:
        if char == delimiter:
            if previous is None or previous in (delimiter, separator):
                raise SpecError(spec, f"'{delimiter}' must directly follow an option name")
            name, _ = entries[-1]
            entries[-1] = (name, True)
        elif char == separator:
            pass
        elif char.isspace():
            raise SpecError(spec, "whitespace cannot name an option")
        else:
            entries.append((char, False))
        previous = char
    if not entries:
        raise SpecError(spec, "no options defined")
    return entries


class OptionRegistry:
    """Own the descriptors of one parsing session and index them by name."""

    def __init__(self, *, config: ShopConfig | None = None) -> None:
        self._config = config if config is not None else ShopConfig()
        self._options: list[OptionDescriptor] = []
        self._lookup: dict[str, OptionDescriptor] = {}

    @classmethod
    def from_spec(cls, spec: str, *, config: ShopConfig | None = None) -> OptionRegistry:
        """Return a registry compiled from the compact ``spec`` string."""

        registry = cls(config=config)
        registry.load_spec(spec)
        return registry

    @classmethod
    def from_templates(
        cls,
        templates: Iterable[OptionTemplate | None],
        *,
        config: ShopConfig | None = None,
    ) -> OptionRegistry:
        """Return a registry holding ``templates`` verbatim."""

        registry = cls(config=config)
        registry.load_templates(templates)
        return registry

    @property
    def config(self) -> ShopConfig:
        return self._config

    @property
    def options(self) -> tuple[OptionDescriptor, ...]:
        """Return descriptors in registration order."""

        return tuple(self._options)

    def load_spec(self, spec: str) -> None:
        """Register every option named by the compact ``spec`` string."""

        for name, takes_argument in compile_spec(
            spec,
            delimiter=self._config.delimiter,
            separator=self._config.separator,
        ):
            self.register(name, takes_argument=takes_argument)

    def load_templates(self, templates: Iterable[OptionTemplate | None]) -> None:
        """Register ``templates`` in order, stopping at a ``None`` terminator."""

        for template in templates:
            if template is None:
                break
            self.register(
                template.name,
                takes_argument=template.takes_argument,
                description=template.description,
                value_format=template.value_format,
            )

    def register(
        self,
        name: str,
        *,
        takes_argument: bool = False,
        description: str | None = None,
        value_format: str | ValueKind | None = None,
    ) -> OptionDescriptor:
        """Create and index a descriptor for ``name``.

        Args:
            name: Single, non-whitespace character naming the option.
            takes_argument: ``True`` when each occurrence consumes a value.
            description: Optional help text.
            value_format: Optional format token used for typed retrieval.

        Returns:
            OptionDescriptor: Newly registered descriptor.

        Raises:
            SpecError: If ``name`` is not a single non-whitespace character.
            DuplicateOptionError: If ``name`` is registered already and
                duplicates are not allowed by the configuration.
        """

        if len(name) != 1 or name.isspace():
            raise SpecError(name, "option names must be one non-whitespace character")
        if name in self._lookup and not self._config.allow_duplicates:
            raise DuplicateOptionError(name)
        descriptor = OptionDescriptor(name=name, takes_argument=takes_argument)
        self._apply_description(descriptor, value_format, description)
        self._options.append(descriptor)
        self._lookup[name] = descriptor
        LOGGER.debug("registered option -%s (takes_argument=%s)", name, takes_argument)
        return descriptor

    def describe(
        self,
        name: str,
        value_format: str | ValueKind | None = None,
        description: str | None = None,
    ) -> OptionDescriptor:
        """Attach a value format and help text to a registered option.

        Raises:
            UndefinedOptionError: If ``name`` is not registered.
            FormatError: If ``value_format`` is not a supported token.
        """

        descriptor = self[name]
        self._apply_description(descriptor, value_format, description)
        return descriptor

    def find(self, name: str) -> OptionDescriptor | None:
        """Return the descriptor registered under ``name``.

        Args:
            name: Option character to look up.

        Returns:
            OptionDescriptor | None: Matching descriptor, or ``None`` when the
            name is not registered.
        """

        return self._lookup.get(name)

    def clear(self) -> None:
        """Drop every descriptor and its collected values."""

        for descriptor in self._options:
            descriptor.values.clear()
        self._options.clear()
        self._lookup.clear()

    def __getitem__(self, name: str) -> OptionDescriptor:
        descriptor = self._lookup.get(name)
        if descriptor is None:
            raise UndefinedOptionError(name)
        return descriptor

    def __contains__(self, name: object) -> bool:
        return name in self._lookup

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    @staticmethod
    def _apply_description(
        descriptor: OptionDescriptor,
        value_format: str | ValueKind | None,
        description: str | None,
    ) -> None:
        if value_format:
            conversion = resolve_conversion(value_format)
            descriptor.kind = conversion.kind
            descriptor.value_format = format_token(value_format)
        else:
            descriptor.kind = None
            descriptor.value_format = None
        descriptor.description = description


__all__ = ["OptionRegistry", "compile_spec"]
