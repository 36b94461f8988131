"""
Shared fixtures for the hexlog test suite.
"""

import os
import re
import sys
from typing import Callable, List

import pytest

_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from hexlog.core.styling import AnsiStyler  # noqa: E402

FIXED_TIMESTAMP = "19 Oct 2026 14:03:22"

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI.sub("", text)


@pytest.fixture
def lines() -> List[str]:
    """Collects every line a logger emits."""
    return []


@pytest.fixture
def sink(lines: List[str]) -> Callable[[str], None]:
    return lines.append


@pytest.fixture
def clock() -> Callable[[str], str]:
    """Clock that ignores the pattern and returns a fixed timestamp."""
    return lambda pattern: FIXED_TIMESTAMP


@pytest.fixture
def truecolor() -> AnsiStyler:
    return AnsiStyler("truecolor")


@pytest.fixture
def plain() -> AnsiStyler:
    return AnsiStyler(None)
