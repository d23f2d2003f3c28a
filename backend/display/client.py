"""
Display client: periodic feed refresh plus independent rotation.

Two asyncio tasks share one `DisplayState` without a lock. Both only run on
the event loop, and the state derives its visible index on every read, so a
refresh that shrinks the feed between two rotations stays in range.
"""
from __future__ import annotations

import asyncio
from typing import Optional

import structlog

from .sources import FeedSource, FeedUnavailable
from .state import DisplayFrame, DisplayState

logger = structlog.get_logger(__name__)


class DisplayClient:
    def __init__(
        self,
        source: FeedSource,
        *,
        refresh_interval: float = 30.0,
        rotation_interval: float = 6.0,
        state: Optional[DisplayState] = None,
    ) -> None:
        self._source = source
        self.refresh_interval = refresh_interval
        self.rotation_interval = rotation_interval
        self.state = state or DisplayState()
        self._tasks: list[asyncio.Task] = []

    def frame(self) -> DisplayFrame:
        return self.state.frame()

    async def refresh_once(self) -> None:
        try:
            records = await self._source.fetch()
        except FeedUnavailable as exc:
            logger.warning("display_refresh_failed", error=str(exc))
            self.state.record_error(str(exc))
            return
        self.state.replace_feed(records)
        logger.debug("display_feed_refreshed", total=len(records))

    def rotate_once(self) -> None:
        self.state.advance()

    async def _refresh_loop(self) -> None:
        while True:
            try:
                await self.refresh_once()
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.error("display_refresh_error", error=str(exc), exc_type=type(exc).__name__)
                self.state.record_error(str(exc))
            await asyncio.sleep(self.refresh_interval)

    async def _rotation_loop(self) -> None:
        while True:
            await asyncio.sleep(self.rotation_interval)
            self.rotate_once()

    @property
    def running(self) -> bool:
        return any(not t.done() for t in self._tasks)

    def start(self) -> None:
        """Spawn the refresh and rotation tasks. Calling twice is a no-op."""
        if self.running:
            return
        self._tasks = [
            asyncio.create_task(self._refresh_loop(), name="display-refresh"),
            asyncio.create_task(self._rotation_loop(), name="display-rotation"),
        ]
        logger.info(
            "display_client_started",
            refresh_interval=self.refresh_interval,
            rotation_interval=self.rotation_interval,
        )

    async def stop(self) -> None:
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        if tasks:
            logger.info("display_client_stopped")


__all__ = ["DisplayClient"]
