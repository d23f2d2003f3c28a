"""
Position indicator: five-dot window selection.
"""
from __future__ import annotations

import pytest

from backend.display.indicator import select_indicator


def _indices(total: int, current: int) -> list[int]:
    return [d.index for d in select_indicator(total, current)]


@pytest.mark.parametrize("total", [0, 1])
def test_no_dots_for_zero_or_one_entry(total):
    assert select_indicator(total, 0) == []


def test_small_feed_shows_every_dot():
    dots = select_indicator(5, 3)
    assert [d.index for d in dots] == [0, 1, 2, 3, 4]
    assert [d.active for d in dots] == [False, False, False, True, False]
    assert not any(d.gap_before for d in dots)


@pytest.mark.parametrize("current", [0, 1])
def test_window_at_start(current):
    assert _indices(10, current) == [0, 1, 2, 3, 9]


@pytest.mark.parametrize("current", [8, 9])
def test_window_at_end(current):
    assert _indices(10, current) == [0, 6, 7, 8, 9]


def test_window_in_middle():
    dots = select_indicator(10, 5)
    assert [d.index for d in dots] == [0, 4, 5, 6, 9]
    assert [d.index for d in dots if d.active] == [5]
    assert [d.index for d in dots if d.gap_before] == [4, 9]


def test_window_near_start_is_deduplicated():
    # current=2: [0, max(1,1), 2, 3, 9]
    assert _indices(10, 2) == [0, 1, 2, 3, 9]


def test_six_entries_middle_position():
    # last=5, current=3 is >= last-1? no (3 < 4): [0, 2, 3, 4, 5]
    assert _indices(6, 3) == [0, 2, 3, 4, 5]


def test_gap_marker_at_start_window():
    dots = select_indicator(10, 0)
    assert [d.index for d in dots if d.gap_before] == [9]
