from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from backend.wall.records import SubmissionRecord

from .indicator import IndicatorDot, select_indicator


@dataclass(frozen=True)
class DisplayFrame:
    """What the kiosk shows right now."""

    record: Optional[SubmissionRecord]
    index: int
    total: int
    indicator: list[IndicatorDot] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def key(self) -> str:
        """Stable identity used by the kiosk page to skip unchanged polls."""
        record_id = self.record.id if self.record is not None else "-"
        return f"{record_id}:{self.index}:{self.total}:{1 if self.error else 0}"


class DisplayState:
    """Working feed plus rotation position for one display.

    The raw position is never clamped on write; the visible index is derived
    as ``position % len(feed)`` on every read, so a shrinking feed can never
    produce an out-of-range index.
    """

    def __init__(self) -> None:
        self._feed: list[SubmissionRecord] = []
        self._position = 0
        self.last_error: Optional[str] = None

    @property
    def feed(self) -> list[SubmissionRecord]:
        return list(self._feed)

    @property
    def current_index(self) -> int:
        if not self._feed:
            return 0
        return self._position % len(self._feed)

    def replace_feed(self, records: Sequence[SubmissionRecord]) -> None:
        self._feed = list(records)
        self.last_error = None

    def record_error(self, message: str) -> None:
        self.last_error = message

    def advance(self) -> None:
        if not self._feed:
            return
        self._position = (self.current_index + 1) % len(self._feed)

    def frame(self) -> DisplayFrame:
        total = len(self._feed)
        if total == 0:
            return DisplayFrame(record=None, index=0, total=0, indicator=[], error=self.last_error)
        index = self.current_index
        return DisplayFrame(
            record=self._feed[index],
            index=index,
            total=total,
            indicator=select_indicator(total, index),
            error=self.last_error,
        )


__all__ = ["DisplayFrame", "DisplayState"]
