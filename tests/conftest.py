"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.2.0 - 2026-10-14 - Provide a fresh Registry per test.
  v0.1.0 - 2026-10-05 - Strip colour and EOE_* variables so output is deterministic.
"""

from __future__ import annotations

import os

import pytest

from eoe.registry import Registry

_COLOR_VARIABLES = ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "COLUMNS")


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _COLOR_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.upper().startswith("EOE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def force_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make rich treat every stream as a colour terminal."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("TERM", "xterm-256color")
