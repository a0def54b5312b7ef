# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loader for parser and rendering settings."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ConfigError

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "shop"
MIN_COLUMN_WIDTH: Final[int] = 4


class ShopConfig(BaseModel):
    """Settings shared by the registry, the tracker and the renderers."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    marker: str = "-"
    delimiter: str = ":"
    separator: str = " "
    allow_duplicates: bool = False
    description_width: int = Field(default=20, ge=MIN_COLUMN_WIDTH)
    value_width: int = Field(default=10, ge=MIN_COLUMN_WIDTH)
    use_color: bool = True
    use_emoji: bool = False

    @field_validator("marker", "delimiter", "separator")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("must be exactly one character")
        return value

    @field_validator("marker", "delimiter", "separator")
    @classmethod
    def _not_alphanumeric(cls, value: str) -> str:
        if value.isalnum():
            raise ValueError("must not be a letter or digit")
        return value

    @field_validator("marker", "delimiter")
    @classmethod
    def _not_whitespace(cls, value: str) -> str:
        if value.isspace():
            raise ValueError("must be a punctuation character")
        return value

    @model_validator(mode="after")
    def _distinct_symbols(self) -> ShopConfig:
        if len({self.marker, self.delimiter, self.separator}) != 3:
            raise ValueError("marker, delimiter and separator must differ")
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ShopConfig:
        """Build a configuration from ``data`` and wrap validation failures.

        Args:
            data: Raw mapping, typically the ``[tool.shop]`` table.

        Returns:
            ShopConfig: Validated configuration.

        Raises:
            ConfigError: If ``data`` does not describe a valid configuration.
        """

        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigError(f"invalid [tool.shop] configuration: {exc}") from exc


def load_config(path: Path | None = None) -> ShopConfig:
    """Load ``[tool.shop]`` from the pyproject file at ``path``.

    Missing files and missing sections yield the defaults.

    Args:
        path: Path to a ``pyproject.toml`` document, or ``None`` for defaults.

    Returns:
        ShopConfig: Configuration read from the document.

    Raises:
        ConfigError: If the document cannot be parsed or holds invalid values.
    """

    if path is None or not path.is_file():
        return ShopConfig()
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"failed to parse {path}: {exc}") from exc
    section = document.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY)
    if section is None:
        return ShopConfig()
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.shop] in {path} must be a table")
    return ShopConfig.from_mapping(section)


__all__ = ["ShopConfig", "load_config"]
