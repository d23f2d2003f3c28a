"""
ReadFeedUseCase: ordering and fail-soft reads.
"""
from __future__ import annotations

import pytest

from backend.wall.feed import ReadFeedUseCase
from backend.wall.records import SubmissionRecord
from backend.wall.store import MessageStore

from fakes import DownRedis

pytestmark = pytest.mark.anyio


def _rec(rid: str, ts: int) -> SubmissionRecord:
    return SubmissionRecord(id=rid, kind="text", content=rid, name="n", timestamp=ts)


async def test_feed_is_sorted_oldest_first(store: MessageStore):
    for rid, ts in (("b", 20), ("a", 10), ("c", 30)):
        await store.append(_rec(rid, ts))
    records = await ReadFeedUseCase(store).execute()
    assert [r.id for r in records] == ["a", "b", "c"]


async def test_equal_timestamps_keep_store_order(store: MessageStore):
    await store.append(_rec("first", 5))
    await store.append(_rec("second", 5))
    # Store order is newest-first (LPUSH), and a stable sort preserves it.
    records = await ReadFeedUseCase(store).execute()
    assert [r.id for r in records] == ["second", "first"]


async def test_empty_store_gives_empty_feed(store: MessageStore):
    assert await ReadFeedUseCase(store).execute() == []


async def test_store_outage_gives_empty_feed():
    assert await ReadFeedUseCase(MessageStore(DownRedis())).execute() == []


async def test_sorting_is_idempotent(store: MessageStore):
    for rid, ts in (("c", 30), ("a", 10), ("tie-1", 20), ("b", 20), ("tie-2", 20)):
        await store.append(_rec(rid, ts))
    use_case = ReadFeedUseCase(store)

    first = await use_case.execute()
    second = await use_case.execute()

    assert second == first
    assert sorted(first, key=lambda r: r.timestamp) == first
