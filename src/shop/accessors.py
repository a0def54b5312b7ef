# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read-only queries over a tracked registry."""

from __future__ import annotations

from collections.abc import Iterator

from .conversion import ConvertedValue, resolve_conversion
from .models import OptionDescriptor, ValueKind
from .registry import OptionRegistry


def used(registry: OptionRegistry, name: str) -> OptionDescriptor | None:
    """Return the descriptor for ``name`` when it appeared on the command line."""

    descriptor = registry.find(name)
    if descriptor is not None and descriptor.used:
        return descriptor
    return None


def length(registry: OptionRegistry, name: str) -> int:
    """Return how many values ``name`` collected, ``0`` for unknown names."""

    descriptor = registry.find(name)
    return descriptor.length if descriptor is not None else 0


def get(
    registry: OptionRegistry,
    name: str,
    index: int = 0,
    *,
    value_format: str | ValueKind | None = None,
) -> ConvertedValue | None:
    """Return the ``index``-th value of ``name`` converted to its registered type.

    ``None`` signals that no value is available: the option is unknown,
    unused or flag-only, has no format, ``index`` is out of range, or the
    raw value does not convert. A boolean option always converts, yielding
    ``False`` for anything outside the truthy literals.

    Args:
        registry: Registry populated by :func:`shop.tracker.track`.
        name: Option character.
        index: Position of the value among the option's occurrences.
        value_format: Format overriding the one registered via ``describe``.

    Returns:
        ConvertedValue | None: Converted value or ``None`` on a miss.

    Raises:
        FormatError: If ``value_format`` is not a supported token.
    """

    descriptor = used(registry, name)
    if descriptor is None or not descriptor.takes_argument:
        return None
    token = value_format or descriptor.value_format
    if not token or not 0 <= index < descriptor.length:
        return None
    return resolve_conversion(token).parse(descriptor.values[index])


def iter_values(
    registry: OptionRegistry,
    name: str,
    *,
    value_format: str | ValueKind | None = None,
) -> Iterator[ConvertedValue]:
    """Yield converted values of ``name`` in order until the first miss."""

    index = 0
    while (value := get(registry, name, index, value_format=value_format)) is not None:
        yield value
        index += 1


__all__ = ["get", "iter_values", "length", "used"]
