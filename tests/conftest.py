# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from shop import OptionParser

DEMO_SPEC = "vn:f:b:p:h"


@pytest.fixture
def demo_parser() -> OptionParser:
    """Return a parser for the demo spec with formats attached to every valued option."""

    parser = OptionParser.from_spec(DEMO_SPEC)
    parser.describe("h", None, "Show help")
    parser.describe("v", None, "Verbose mode")
    parser.describe("n", "%d", "Number (int)")
    parser.describe("f", "%s", "Filename (string)")
    parser.describe("b", "%b", "Boolean flag")
    parser.describe("p", "%lf", "Double value")
    return parser
