# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Short-option command-line parsing with typed value retrieval."""

from __future__ import annotations

from importlib import metadata

from .config import ShopConfig, load_config
from .errors import (
    ConfigError,
    DuplicateOptionError,
    FormatError,
    MissingArgumentError,
    ProgrammerError,
    ShopError,
    SpecError,
    UndefinedOptionError,
    UnknownOptionError,
    UsageError,
)
from .models import OptionDescriptor, OptionTemplate, ValueKind
from .parser import OptionParser
from .registry import OptionRegistry
from .tracker import track

__all__ = [
    "ConfigError",
    "DuplicateOptionError",
    "FormatError",
    "MissingArgumentError",
    "OptionDescriptor",
    "OptionParser",
    "OptionRegistry",
    "OptionTemplate",
    "ProgrammerError",
    "ShopConfig",
    "ShopError",
    "SpecError",
    "UndefinedOptionError",
    "UnknownOptionError",
    "UsageError",
    "ValueKind",
    "__version__",
    "load_config",
    "track",
]

try:
    __version__ = metadata.version("shop-opts")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
