# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Single-pass tracking of a process argument vector against a registry."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import MissingArgumentError, UnknownOptionError
from .models import OptionDescriptor
from .registry import OptionRegistry

LOGGER = logging.getLogger(__name__)


def _scan_token(argument: str, registry: OptionRegistry) -> OptionDescriptor | None:
    """Mark the combined options in ``argument`` as used.

    Returns the argument-taking option still waiting for its value in the
    next argument, or ``None`` when the token is complete. Only the last
    option of a combined run may take an argument: scanning stops at the
    first one, and the rest of the token becomes its value when non-empty.
    """

    for position in range(1, len(argument)):
        name = argument[position]
        descriptor = registry.find(name)
        if descriptor is None:
            raise UnknownOptionError(name, argument)
        descriptor.used = True
        if not descriptor.takes_argument:
            continue
        attached = argument[position + 1 :]
        if attached:
            descriptor.push(attached)
            LOGGER.debug("-%s <- %r (attached)", name, attached)
            return None
        return descriptor
    return None


def track(argv: Sequence[str], registry: OptionRegistry, *, marker: str | None = None) -> None:
    """Record option usage and values from ``argv`` into ``registry``.

    ``argv[0]`` is the program name and is skipped. Arguments that do not
    start with the option marker are positional and ignored. ``-f value``,
    ``-fvalue`` and ``-vf value`` all assign ``value`` to ``f``; collecting
    several values for one option requires repeating it (``-t 1 -t 2``).

    Args:
        argv: Full argument vector including the program name.
        registry: Registry whose descriptors are updated in place.
        marker: Option marker character; defaults to the registry's config.

    Raises:
        UnknownOptionError: If an option character is not registered. Options
            earlier in the same token have already been marked as used.
        MissingArgumentError: If an argument-taking option ends ``argv``.
    """

    option_marker = marker or registry.config.marker
    index = 1
    while index < len(argv):
        argument = argv[index]
        index += 1
        if not argument.startswith(option_marker):
            LOGGER.debug("skipping positional argument %r", argument)
            continue
        pending = _scan_token(argument, registry)
        if pending is None:
            continue
        if index >= len(argv):
            raise MissingArgumentError(pending.name, argument)
        value = argv[index]
        index += 1
        pending.push(value)
        LOGGER.debug("-%s <- %r", pending.name, value)


__all__ = ["track"]
