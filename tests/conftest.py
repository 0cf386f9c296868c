"""Shared pytest fixtures and configuration for the rotkit test suite.

Guidelines
----------
* No internet access in any test.
* Core tests must be pure: no side effects, no mocking.
* Optional UI packages (rich, questionary) are hidden through
  ``sys.modules`` rather than uninstalled.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import sys

import pytest


@pytest.fixture
def hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail for the duration of a test."""
    for name in ("rich", "rich.console", "rich.markup", "rich.table"):
        monkeypatch.setitem(sys.modules, name, None)


@pytest.fixture
def hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make ``import questionary`` fail for the duration of a test."""
    monkeypatch.setitem(sys.modules, "questionary", None)
