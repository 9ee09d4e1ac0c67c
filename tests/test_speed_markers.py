"""Tests for the speed-marker collection check."""

from __future__ import annotations

import pytest

from conftest import speed_marker_problems

pytestmark = pytest.mark.unit


class FakeItem:
    def __init__(self, nodeid: str, *markers: str) -> None:
        self.nodeid = nodeid
        self._markers = set(markers)

    def get_closest_marker(self, name: str):
        return getattr(pytest.mark, name).mark if name in self._markers else None


def test_items_with_one_speed_marker_pass() -> None:
    items = [FakeItem("a::unit", "unit"), FakeItem("b::integration", "integration", "parametrize")]
    assert speed_marker_problems(items) == []


def test_missing_and_duplicate_speed_markers_are_reported() -> None:
    items = [FakeItem("a::bare"), FakeItem("b::both", "unit", "integration")]
    assert speed_marker_problems(items) == [
        "a::bare: no speed marker",
        "b::both: unit, integration",
    ]
