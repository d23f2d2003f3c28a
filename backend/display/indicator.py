"""
Position indicator for the rotating display.

With more than five entries only five dots are shown: the first, the last and
a window around the current entry. A gap marker is rendered wherever the
shown indices are not contiguous.
"""
from __future__ import annotations

from dataclasses import dataclass

MAX_DOTS = 5


@dataclass(frozen=True)
class IndicatorDot:
    index: int
    active: bool
    gap_before: bool = False


def _visible_indices(total: int, current: int) -> list[int]:
    if total <= MAX_DOTS:
        return list(range(total))
    last = total - 1
    if current <= 1:
        picked = [0, 1, 2, 3, last]
    elif current >= last - 1:
        picked = [0, last - 3, last - 2, last - 1, last]
    else:
        picked = [0, max(current - 1, 1), current, min(current + 1, last - 1), last]
    return sorted(set(picked))


def select_indicator(total: int, current: int) -> list[IndicatorDot]:
    """Return the dots to render for ``current`` within ``total`` entries.

    Returns an empty list when there is at most one entry.
    """
    if total <= 1:
        return []
    dots: list[IndicatorDot] = []
    previous: int | None = None
    for index in _visible_indices(total, current):
        dots.append(
            IndicatorDot(
                index=index,
                active=index == current,
                gap_before=previous is not None and index - previous > 1,
            )
        )
        previous = index
    return dots


__all__ = ["IndicatorDot", "MAX_DOTS", "select_indicator"]
