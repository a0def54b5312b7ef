# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the option registry, tracker and CLI."""

from __future__ import annotations


class ShopError(Exception):
    """Base class for every error raised by the ``shop`` package."""


class ProgrammerError(ShopError):
    """Raised when the registration code and the option table disagree."""


class UsageError(ShopError):
    """Raised when the command line itself is malformed."""


class ConfigError(ShopError):
    """Raised when configuration input is invalid."""


class SpecError(ProgrammerError):
    """Raised when a compact option specification cannot be compiled."""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(f"invalid option spec {spec!r}: {reason}")


class DuplicateOptionError(ProgrammerError):
    """Raised when an option name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"option '-{name}' is already registered")


class FormatError(ProgrammerError):
    """Raised when a value format token is not one of the supported kinds."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unsupported value format: {token!r}")


class UndefinedOptionError(ProgrammerError):
    """Raised when code refers to an option name that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown option: '-{name}'")


class UnknownOptionError(UsageError):
    """Raised when the command line holds an unregistered option character."""

    def __init__(self, name: str, argument: str) -> None:
        self.name = name
        self.argument = argument
        super().__init__(f"unknown option: '-{name}'")


class MissingArgumentError(UsageError):
    """Raised when an argument-taking option ends the command line."""

    def __init__(self, name: str, argument: str) -> None:
        self.name = name
        self.argument = argument
        super().__init__(f"option '{argument}' requires an argument but none was supplied")


__all__ = (
    "ConfigError",
    "DuplicateOptionError",
    "FormatError",
    "MissingArgumentError",
    "ProgrammerError",
    "ShopError",
    "SpecError",
    "UndefinedOptionError",
    "UnknownOptionError",
    "UsageError",
)
