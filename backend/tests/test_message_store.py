"""
Message store: Redis list semantics and failure mapping.
"""
from __future__ import annotations

import pytest

from backend.wall.errors import StoreUnavailable
from backend.wall.records import SubmissionRecord
from backend.wall.store import MessageStore

from fakes import DownRedis, FakeRedis

pytestmark = pytest.mark.anyio


def _record(i: int) -> SubmissionRecord:
    return SubmissionRecord(id=f"id-{i}", kind="text", content=f"msg {i}", name="n", timestamp=i)


async def test_append_pushes_onto_head(store: MessageStore, fake_redis: FakeRedis):
    await store.append(_record(1))
    await store.append(_record(2))
    records = await store.read_all()
    assert [r.id for r in records] == ["id-2", "id-1"]
    assert len(fake_redis.lists["messages"]) == 2


async def test_read_all_on_empty_list_returns_empty(store: MessageStore):
    assert await store.read_all() == []


async def test_read_all_skips_malformed_entries(store: MessageStore, fake_redis: FakeRedis):
    await store.append(_record(1))
    fake_redis.lists["messages"].insert(0, "not json at all")
    fake_redis.lists["messages"].insert(0, '{"id":"x"}')
    records = await store.read_all()
    assert [r.id for r in records] == ["id-1"]


async def test_custom_key_is_used():
    client = FakeRedis()
    s = MessageStore(client, key="wall:event-42")
    await s.append(_record(7))
    assert list(client.lists) == ["wall:event-42"]


async def test_append_maps_connection_errors():
    s = MessageStore(DownRedis())
    with pytest.raises(StoreUnavailable):
        await s.append(_record(1))


async def test_read_all_maps_connection_errors():
    s = MessageStore(DownRedis())
    with pytest.raises(StoreUnavailable):
        await s.read_all()


async def test_ping_reports_health_without_raising():
    assert await MessageStore(FakeRedis()).ping() is True
    assert await MessageStore(DownRedis()).ping() is False


async def test_close_closes_client(store: MessageStore, fake_redis: FakeRedis):
    await store.close()
    assert fake_redis.closed is True


def test_from_url_does_not_connect():
    s = MessageStore.from_url("redis://redis.invalid:6379/0", key="k", max_connections=3)
    assert s.key == "k"


@pytest.mark.parametrize("count", [0, 1, 7, 50])
async def test_read_all_returns_every_appended_record(store: MessageStore, count: int):
    for i in range(count):
        await store.append(_record(i))
    records = await store.read_all()
    assert len(records) == count
    assert [r.id for r in records] == [f"id-{i}" for i in reversed(range(count))]
