# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data model for registered options and their collected values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ValueKind(str, Enum):
    """Closed set of conversions available to the typed accessors."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"


@dataclass(slots=True, frozen=True)
class OptionTemplate:
    """Describe one option for the explicit-list registration form."""

    name: str
    takes_argument: bool = False
    description: str | None = None
    value_format: str | ValueKind | None = None


@dataclass(slots=True)
class OptionDescriptor:
    """Registry record for a single option character.

    Attributes:
        name: Single character naming the option.
        takes_argument: ``True`` when every occurrence consumes one value.
        description: Help text shown by the help and verbose listings.
        value_format: Format token registered for typed retrieval.
        kind: Conversion resolved from ``value_format``.
        used: ``True`` once the option appeared on the command line.
        values: Raw values in order of appearance.
    """

    name: str
    takes_argument: bool = False
    description: str | None = None
    value_format: str | None = None
    kind: ValueKind | None = None
    used: bool = False
    values: list[str] = field(default_factory=list)

    @property
    def length(self) -> int:
        """Return the number of values collected for the option."""

        return len(self.values)

    def push(self, value: str) -> None:
        """Append ``value`` when the option accepts arguments."""

        if self.takes_argument:
            self.values.append(value)


__all__ = ["OptionDescriptor", "OptionTemplate", "ValueKind"]
