"""
Redis-backed message store.

All submissions live in one Redis list. New records are pushed onto the head
(LPUSH); the feed reads the whole list (LRANGE 0 -1). Both commands are
atomic on the server, so concurrent submissions need no extra locking, but
two racing submissions have no defined relative order.

Lifecycle:
    One store (one connection pool) per process. It is created when the app
    is built, reused across requests and closed on shutdown.
"""
from __future__ import annotations

from typing import Any

import redis.asyncio as redis
import structlog
from pydantic import ValidationError as _RecordFormatError
from redis.exceptions import RedisError

from .errors import StoreUnavailable
from .records import SubmissionRecord

logger = structlog.get_logger(__name__)

DEFAULT_MESSAGES_KEY = "messages"

# Connection failures can surface as redis errors or plain socket errors.
_STORE_ERRORS = (RedisError, ConnectionError, OSError)


class MessageStore:
    """Append-only list of submission records.

    The client is duck-typed: anything exposing ``lpush``, ``lrange``,
    ``ping`` and ``aclose`` with redis.asyncio semantics works, which keeps
    tests free of a running Redis.
    """

    def __init__(self, client: Any, *, key: str = DEFAULT_MESSAGES_KEY) -> None:
        self._client = client
        self.key = key

    @classmethod
    def from_url(cls, url: str, *, key: str = DEFAULT_MESSAGES_KEY, max_connections: int = 20) -> "MessageStore":
        """Create a store for ``url``. No connection is opened until first use."""
        client = redis.from_url(url, decode_responses=True, max_connections=max_connections)
        return cls(client, key=key)

    async def append(self, record: SubmissionRecord) -> None:
        """Push ``record`` onto the head of the list."""
        try:
            await self._client.lpush(self.key, record.to_json())
        except _STORE_ERRORS as exc:
            logger.error("message_store_append_failed", key=self.key, error=str(exc))
            raise StoreUnavailable(str(exc) or exc.__class__.__name__) from exc

    async def read_all(self) -> list[SubmissionRecord]:
        """Return every record in store order (newest first for LPUSH writes)."""
        try:
            raw_entries = await self._client.lrange(self.key, 0, -1)
        except _STORE_ERRORS as exc:
            logger.error("message_store_read_failed", key=self.key, error=str(exc))
            raise StoreUnavailable(str(exc) or exc.__class__.__name__) from exc

        records: list[SubmissionRecord] = []
        for position, raw in enumerate(raw_entries or []):
            try:
                records.append(SubmissionRecord.from_json(raw))
            except _RecordFormatError:
                logger.warning("message_store_entry_skipped", key=self.key, position=position)
        return records

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except _STORE_ERRORS as exc:
            logger.warning("message_store_ping_failed", error=str(exc))
            return False

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("message_store_closed")


__all__ = ["DEFAULT_MESSAGES_KEY", "MessageStore"]
