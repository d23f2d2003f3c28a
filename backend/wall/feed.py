from __future__ import annotations

import structlog

from .errors import StoreUnavailable
from .records import SubmissionRecord
from .store import MessageStore

logger = structlog.get_logger(__name__)


class ReadFeedUseCase:
    """Return every wall entry, oldest first.

    The store is the only source of truth; no caching happens here.
    """

    def __init__(self, store: MessageStore) -> None:
        self._store = store

    async def execute(self) -> list[SubmissionRecord]:
        try:
            records = await self._store.read_all()
        except StoreUnavailable as exc:
            # Fail soft: the display keeps rendering an empty wall.
            logger.error("feed_read_failed", error=str(exc))
            return []
        # sorted() is stable, so equal timestamps keep store order.
        return sorted(records, key=lambda r: r.timestamp)


__all__ = ["ReadFeedUseCase"]
