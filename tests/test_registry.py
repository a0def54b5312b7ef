# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for compiling option specs into a registry."""

from __future__ import annotations

import pytest

from shop import (
    DuplicateOptionError,
    FormatError,
    OptionRegistry,
    OptionTemplate,
    ProgrammerError,
    ShopConfig,
    SpecError,
    UndefinedOptionError,
    UsageError,
    ValueKind,
)
from shop.registry import compile_spec


def _flags(registry: OptionRegistry) -> dict[str, bool]:
    return {descriptor.name: descriptor.takes_argument for descriptor in registry}


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("vn:f:b:p:h", {"v": False, "n": True, "f": True, "b": True, "p": True, "h": False}),
        ("hvn:f:", {"h": False, "v": False, "n": True, "f": True}),
        ("hv", {"h": False, "v": False}),
        ("ab c:", {"a": False, "b": False, "c": True}),
        ("a: b: c", {"a": True, "b": True, "c": False}),
        ("x:", {"x": True}),
    ],
)
def test_delimiter_marks_preceding_option(spec: str, expected: dict[str, bool]) -> None:
    assert _flags(OptionRegistry.from_spec(spec)) == expected


def test_last_option_is_flag_when_spec_does_not_end_with_delimiter() -> None:
    registry = OptionRegistry.from_spec("n:f:h")
    assert registry.options[-1].name == "h"
    assert registry.options[-1].takes_argument is False


def test_registration_order_is_preserved() -> None:
    registry = OptionRegistry.from_spec("zy:x")
    assert [descriptor.name for descriptor in registry] == ["z", "y", "x"]
    assert len(registry) == 3


@pytest.mark.parametrize("spec", ["", "   ", ":a", "a::", "a :", "a\tb"])
def test_malformed_specs_are_rejected(spec: str) -> None:
    with pytest.raises(SpecError):
        compile_spec(spec)


def test_custom_delimiter_from_config() -> None:
    config = ShopConfig(delimiter="=")
    registry = OptionRegistry.from_spec("n=v", config=config)
    assert _flags(registry) == {"n": True, "v": False}


def test_duplicate_names_raise_by_default() -> None:
    with pytest.raises(DuplicateOptionError) as excinfo:
        OptionRegistry.from_spec("ab:a")
    assert excinfo.value.name == "a"


def test_duplicate_names_overwrite_lookup_when_allowed() -> None:
    registry = OptionRegistry.from_spec("a:ba", config=ShopConfig(allow_duplicates=True))
    assert len(registry) == 3
    found = registry.find("a")
    assert found is registry.options[-1]
    assert found.takes_argument is False


def test_templates_are_registered_verbatim() -> None:
    registry = OptionRegistry.from_templates(
        [
            OptionTemplate("h", description="Show help"),
            OptionTemplate("n", takes_argument=True, description="Number", value_format="%d"),
            OptionTemplate("d", takes_argument=True, value_format=ValueKind.FLOAT),
        ]
    )
    assert _flags(registry) == {"h": False, "n": True, "d": True}
    assert registry["h"].description == "Show help"
    assert registry["n"].kind is ValueKind.INT
    assert registry["d"].value_format == "%f"


def test_templates_stop_at_none_terminator() -> None:
    registry = OptionRegistry.from_templates([OptionTemplate("a"), None, OptionTemplate("b")])
    assert [descriptor.name for descriptor in registry] == ["a"]


def test_template_names_must_be_single_characters() -> None:
    with pytest.raises(SpecError):
        OptionRegistry.from_templates([OptionTemplate("ab")])


def test_describe_sets_metadata() -> None:
    registry = OptionRegistry.from_spec("n:")
    descriptor = registry.describe("n", "%d", "Number (int)")
    assert descriptor.value_format == "%d"
    assert descriptor.kind is ValueKind.INT
    assert descriptor.description == "Number (int)"


def test_describe_unknown_option_is_a_programmer_error() -> None:
    registry = OptionRegistry.from_spec("n:")
    with pytest.raises(UndefinedOptionError) as excinfo:
        registry.describe("x", "%d", "missing")
    assert isinstance(excinfo.value, ProgrammerError)
    assert not isinstance(excinfo.value, UsageError)
    assert excinfo.value.name == "x"


def test_indexing_unknown_option_is_a_programmer_error() -> None:
    registry = OptionRegistry.from_spec("n:")
    with pytest.raises(UndefinedOptionError):
        registry["x"]


def test_describe_rejects_unsupported_format() -> None:
    registry = OptionRegistry.from_spec("n:")
    with pytest.raises(FormatError):
        registry.describe("n", "%q")


def test_lookup_and_membership() -> None:
    registry = OptionRegistry.from_spec("vn:")
    assert registry.find("v") is registry["v"]
    assert registry.find("x") is None
    assert "n" in registry
    assert "x" not in registry


def test_clear_then_reload_leaves_no_residue() -> None:
    registry = OptionRegistry.from_spec("ab:c")
    registry["b"].used = True
    registry["b"].values.append("stale")
    registry.clear()
    registry.clear()
    assert len(registry) == 0
    assert registry.find("a") is None

    registry.load_spec("x:")
    assert [descriptor.name for descriptor in registry] == ["x"]
    assert registry.find("b") is None
    assert registry["x"].values == []
