# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed conversions selected by value format tokens.

Format tokens keep the familiar ``scanf`` spelling (``%d``, ``%lf``, ``%s``
plus ``%b`` for booleans) but each one resolves to a fixed parser rather than
being interpreted as a free-form format string. Numeric parsers read the
longest valid prefix after leading whitespace, so ``"42abc"`` converts to
``42`` while ``"abc"`` does not convert at all. Unsigned tokens (``%u``,
``%lu``, ``%zu``) treat a leading minus sign as a failed conversion.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from .errors import FormatError
from .models import ValueKind

ConvertedValue = int | float | str | bool
Parser = Callable[[str], ConvertedValue | None]

TRUTHY_LITERALS: Final[frozenset[str]] = frozenset({"true", "yes", "1", "on"})

_DECIMAL_RE: Final = re.compile(r"\s*([+-]?[0-9]+)")
_UNSIGNED_RE: Final = re.compile(r"\s*\+?([0-9]+)")
_HEX_RE: Final = re.compile(r"\s*([+-]?(?:0[xX](?=[0-9a-fA-F]))?[0-9a-fA-F]+)")
_AUTO_INT_RE: Final = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_FLOAT_RE: Final = re.compile(
    r"\s*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_decimal(raw: str) -> int | None:
    """Return the leading base-10 integer of ``raw`` or ``None``."""

    match = _DECIMAL_RE.match(raw)
    return int(match.group(1)) if match else None


def parse_unsigned(raw: str) -> int | None:
    """Return the leading non-negative integer of ``raw`` or ``None``.

    A leading ``-`` is a miss rather than a wrapped value.
    """

    match = _UNSIGNED_RE.match(raw)
    return int(match.group(1)) if match else None


def parse_hex(raw: str) -> int | None:
    """Return the leading hexadecimal integer of ``raw`` or ``None``."""

    match = _HEX_RE.match(raw)
    return int(match.group(1), 16) if match else None


def parse_auto_int(raw: str) -> int | None:
    """Return the leading integer of ``raw`` honouring ``0x`` and ``0`` prefixes."""

    match = _AUTO_INT_RE.match(raw)
    if not match:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits, 16)
    elif len(digits) > 1 and digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def parse_float(raw: str) -> float | None:
    """Return the leading floating point number of ``raw`` or ``None``."""

    match = _FLOAT_RE.match(raw)
    return float(match.group(1)) if match else None


def parse_bool(raw: str) -> bool:
    """Return ``True`` when ``raw`` is exactly one of :data:`TRUTHY_LITERALS`."""

    return raw in TRUTHY_LITERALS


def parse_string(raw: str) -> str:
    return raw


@dataclass(slots=True, frozen=True)
class Conversion:
    """Pair a value kind with the parser used to produce it."""

    kind: ValueKind
    parse: Parser


_STRING: Final = Conversion(ValueKind.STRING, parse_string)
_BOOL: Final = Conversion(ValueKind.BOOL, parse_bool)
_DECIMAL: Final = Conversion(ValueKind.INT, parse_decimal)
_UNSIGNED: Final = Conversion(ValueKind.INT, parse_unsigned)
_FLOAT: Final = Conversion(ValueKind.FLOAT, parse_float)

FORMAT_CONVERSIONS: Final[dict[str, Conversion]] = {
    "%s": _STRING,
    "%b": _BOOL,
    "%d": _DECIMAL,
    "%u": _UNSIGNED,
    "%ld": _DECIMAL,
    "%lld": _DECIMAL,
    "%lu": _UNSIGNED,
    "%zu": _UNSIGNED,
    "%i": Conversion(ValueKind.INT, parse_auto_int),
    "%x": Conversion(ValueKind.INT, parse_hex),
    "%f": _FLOAT,
    "%lf": _FLOAT,
    "%g": _FLOAT,
    "%e": _FLOAT,
}

KIND_TOKENS: Final[dict[ValueKind, str]] = {
    ValueKind.STRING: "%s",
    ValueKind.BOOL: "%b",
    ValueKind.INT: "%d",
    ValueKind.FLOAT: "%f",
}

KIND_CONVERSIONS: Final[dict[ValueKind, Conversion]] = {
    kind: FORMAT_CONVERSIONS[token] for kind, token in KIND_TOKENS.items()
}


def format_token(value_format: str | ValueKind) -> str:
    """Return the format token spelling of ``value_format``."""

    if isinstance(value_format, ValueKind):
        return KIND_TOKENS[value_format]
    return value_format


def resolve_conversion(value_format: str | ValueKind) -> Conversion:
    """Return the :class:`Conversion` registered for ``value_format``.

    Args:
        value_format: Format token such as ``"%d"`` or a :class:`ValueKind`.

    Returns:
        Conversion: Kind and parser associated with the token.

    Raises:
        FormatError: If the token is not a supported format.
    """

    if isinstance(value_format, ValueKind):
        return KIND_CONVERSIONS[value_format]
    try:
        return FORMAT_CONVERSIONS[value_format]
    except KeyError:
        raise FormatError(value_format) from None


def convert(raw: str, value_format: str | ValueKind) -> ConvertedValue | None:
    """Convert ``raw`` using ``value_format`` and return ``None`` on failure."""

    return resolve_conversion(value_format).parse(raw)


__all__ = [
    "FORMAT_CONVERSIONS",
    "KIND_CONVERSIONS",
    "KIND_TOKENS",
    "TRUTHY_LITERALS",
    "Conversion",
    "ConvertedValue",
    "convert",
    "format_token",
    "parse_auto_int",
    "parse_bool",
    "parse_decimal",
    "parse_float",
    "parse_hex",
    "parse_string",
    "parse_unsigned",
    "resolve_conversion",
]
