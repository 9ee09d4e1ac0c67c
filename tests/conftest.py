"""Pytest configuration shared across the plottrace test suite."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

import pytest

SPEED_MARKERS = ("unit", "integration")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every PLOTTRACE_* variable so settings fall back to defaults."""

    for name in list(os.environ):
        if name.startswith("PLOTTRACE_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


def speed_marker_problems(items: Iterable[pytest.Item]) -> list[str]:
    """Describe every item that does not carry exactly one speed marker.

    `unit` tests are pure and touch no IO; `integration` tests touch the
    filesystem or the process environment.
    """

    problems: list[str] = []
    for item in items:
        found = [marker for marker in SPEED_MARKERS if item.get_closest_marker(marker) is not None]
        if len(found) != 1:
            problems.append(f"{item.nodeid}: {', '.join(found) or 'no speed marker'}")
    return problems


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    problems = speed_marker_problems(items)
    if problems:
        listing = "\n".join(f"  {problem}" for problem in problems)
        raise pytest.UsageError(f"Mark each test with exactly one of {list(SPEED_MARKERS)}:\n{listing}")
