from __future__ import annotations
from types import SimpleNamespace
import fakeredis
import pytest
import batting_board.store as store_module
from batting_board.config import settings
from batting_board.errors import StoreError
from batting_board.store import KeyValueStore, open_store


def _patch_client(monkeypatch, client):
    monkeypatch.setattr(store_module, "Redis", SimpleNamespace(from_url=lambda *a, **kw: client))
    monkeypatch.setattr(settings, "redis_reconnect_backoff_ms", 0)


@pytest.mark.asyncio
async def test_open_store_returns_working_handle(monkeypatch):
    server = fakeredis.FakeServer()
    _patch_client(monkeypatch, fakeredis.FakeAsyncRedis(server=server, decode_responses=True))
    s = await open_store()
    try:
        await s.set("k", "v")
        assert await s.get("k") == "v"
        await s.delete("k")
        assert await s.get("k") is None
    finally:
        await s.close()


@pytest.mark.asyncio
async def test_open_store_gives_up_after_one_retry(monkeypatch):
    server = fakeredis.FakeServer()
    server.connected = False
    _patch_client(monkeypatch, fakeredis.FakeAsyncRedis(server=server, decode_responses=True))
    with pytest.raises(StoreError):
        await open_store()


@pytest.mark.asyncio
async def test_operations_wrap_redis_errors():
    server = fakeredis.FakeServer()
    s = KeyValueStore(fakeredis.FakeAsyncRedis(server=server, decode_responses=True))
    server.connected = False
    with pytest.raises(StoreError):
        await s.get("battingOrders")
    with pytest.raises(StoreError):
        await s.set("battingOrders", "[]")
    with pytest.raises(StoreError):
        await s.delete("battingOrders")


@pytest.mark.asyncio
async def test_open_store_recovers_on_the_retry(monkeypatch):
    server = fakeredis.FakeServer()
    server.connected = False
    _patch_client(monkeypatch, fakeredis.FakeAsyncRedis(server=server, decode_responses=True))
    waits = []

    async def _sleep(seconds):
        waits.append(seconds)
        server.connected = True

    monkeypatch.setattr(store_module, "asyncio", SimpleNamespace(sleep=_sleep))
    s = await open_store()
    try:
        assert waits == [0.0]
        assert await s.ping() is True
    finally:
        await s.close()


def test_reconnect_backoff_is_capped(monkeypatch):
    monkeypatch.setattr(settings, "redis_reconnect_backoff_ms", 60_000)
    assert store_module._backoff_seconds() == 3.0


@pytest.mark.asyncio
async def test_client_gets_operation_timeout(monkeypatch):
    seen = {}
    client = fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)

    def _from_url(url, **kwargs):
        seen.update(kwargs)
        return client

    monkeypatch.setattr(store_module, "Redis", SimpleNamespace(from_url=_from_url))
    monkeypatch.setattr(settings, "redis_socket_timeout_s", 2.5)
    s = await open_store()
    await s.close()
    assert seen["socket_timeout"] == 2.5
    assert seen["socket_connect_timeout"] == settings.redis_connect_timeout_s


class _TrackedStore(KeyValueStore):
    closed = False

    async def close(self) -> None:
        self.closed = True
        await super().close()


@pytest.mark.asyncio
async def test_get_store_releases_connection_when_handler_raises(monkeypatch):
    tracked = _TrackedStore(fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True))

    async def _open():
        return tracked

    monkeypatch.setattr(store_module, "open_store", _open)
    gen = store_module.get_store()
    assert await gen.__anext__() is tracked
    with pytest.raises(RuntimeError):
        await gen.athrow(RuntimeError("handler blew up"))
    assert tracked.closed is True


@pytest.mark.asyncio
async def test_get_store_releases_connection_on_success(monkeypatch):
    tracked = _TrackedStore(fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True))

    async def _open():
        return tracked

    monkeypatch.setattr(store_module, "open_store", _open)
    gen = store_module.get_store()
    await gen.__anext__()
    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()
    assert tracked.closed is True
