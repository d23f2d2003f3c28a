"""
Feed sources for the display client.

`StoreFeedSource` reads in-process through the feed use case.
`HttpFeedSource` polls a remote `GET /messages` endpoint, e.g. when the kiosk
runs on a different host than the submission server.
"""
from __future__ import annotations

import time
from typing import Protocol

import httpx
import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as _PayloadError

from backend.wall.feed import ReadFeedUseCase
from backend.wall.records import SubmissionRecord

logger = structlog.get_logger(__name__)

_FEED_ADAPTER = TypeAdapter(list[SubmissionRecord])


class FeedUnavailable(Exception):
    """The feed could not be fetched; the display keeps its last good feed."""


class FeedSource(Protocol):
    async def fetch(self) -> list[SubmissionRecord]: ...


class StoreFeedSource:
    def __init__(self, usecase: ReadFeedUseCase) -> None:
        self._usecase = usecase

    async def fetch(self) -> list[SubmissionRecord]:
        return await self._usecase.execute()


class HttpFeedSource:
    """Fetch the feed over HTTP with a cache-busting query parameter."""

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = url

    async def fetch(self) -> list[SubmissionRecord]:
        params = {"timestamp": str(int(time.time() * 1000))}
        try:
            resp = await self._client.get(
                self.url,
                params=params,
                headers={"Cache-Control": "no-cache", "Pragma": "no-cache"},
            )
        except httpx.HTTPError as exc:
            logger.warning("display_feed_request_failed", url=self.url, error=str(exc))
            raise FeedUnavailable(f"request failed: {exc.__class__.__name__}") from exc

        if not resp.is_success:
            raise FeedUnavailable(f"HTTP error! status: {resp.status_code}")
        content_type = resp.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise FeedUnavailable("Response is not JSON")
        try:
            return _FEED_ADAPTER.validate_json(resp.content)
        except _PayloadError as exc:
            raise FeedUnavailable("Response is not a message list") from exc


__all__ = ["FeedSource", "FeedUnavailable", "HttpFeedSource", "StoreFeedSource"]
