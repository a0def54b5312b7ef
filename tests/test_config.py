# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from shop import ConfigError, OptionRegistry, ShopConfig, load_config


def test_defaults() -> None:
    config = ShopConfig()
    assert (config.marker, config.delimiter, config.separator) == ("-", ":", " ")
    assert config.description_width == 20
    assert config.value_width == 10
    assert config.allow_duplicates is False


def test_missing_file_and_section_yield_defaults(tmp_path: Path) -> None:
    assert load_config(None) == ShopConfig()
    assert load_config(tmp_path / "pyproject.toml") == ShopConfig()
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_config(pyproject) == ShopConfig()


def test_tool_section_is_loaded(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        "[tool.shop]\nmarker = \"+\"\nvalue_width = 6\nallow_duplicates = true\n",
        encoding="utf-8",
    )
    config = load_config(pyproject)
    assert config.marker == "+"
    assert config.value_width == 6
    assert config.allow_duplicates is True


@pytest.mark.parametrize(
    "body",
    [
        'marker = "--"',
        'marker = "a"',
        'delimiter = "-"',
        "value_width = 2",
        'unknown = "key"',
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, body: str) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(f"[tool.shop]\n{body}\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(pyproject)


def test_unparseable_toml_raises_config_error(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("[tool.shop\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(pyproject)


@pytest.mark.parametrize("separator", ["a", "7"])
def test_alphanumeric_separator_is_rejected(separator: str) -> None:
    with pytest.raises(ValidationError):
        ShopConfig(separator=separator)


def test_punctuation_separator_is_accepted() -> None:
    assert ShopConfig(separator=",").separator == ","


def test_registries_do_not_share_a_default_config() -> None:
    first = OptionRegistry()
    second = OptionRegistry()
    first.config.value_width = 6

    assert first.config is not second.config
    assert second.config.value_width == 10
