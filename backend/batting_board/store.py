from __future__ import annotations
import asyncio
from typing import AsyncGenerator
import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError
from batting_board.config import settings
from batting_board.errors import StoreError

log = structlog.get_logger()

MAX_RECONNECT_BACKOFF_MS = 3000


class KeyValueStore:
    """Thin string get/set/delete facade over a Redis connection.

    No transactions and no optimistic locking: callers read a whole key,
    mutate it in memory and overwrite it. Concurrent writers to the same
    key race and the last write wins.
    """

    def __init__(self, client: Redis):
        self._client = client

    async def get(self, key: str) -> str | None:
        try:
            return await self._client.get(key)
        except RedisError as e:
            raise StoreError(f"Failed to read {key}") from e

    async def set(self, key: str, value: str) -> None:
        try:
            await self._client.set(key, value)
        except RedisError as e:
            raise StoreError(f"Failed to write {key}") from e

    async def delete(self, key: str) -> None:
        try:
            await self._client.delete(key)
        except RedisError as e:
            raise StoreError(f"Failed to delete {key}") from e

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            raise StoreError("Store did not answer ping") from e

    async def close(self) -> None:
        await self._client.aclose()


def _backoff_seconds() -> float:
    return min(max(settings.redis_reconnect_backoff_ms, 0), MAX_RECONNECT_BACKOFF_MS) / 1000.0


async def open_store() -> KeyValueStore:
    """Connect to Redis, retrying once after a bounded backoff."""
    client = Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_connect_timeout=settings.redis_connect_timeout_s,
        socket_timeout=settings.redis_socket_timeout_s,
    )
    try:
        await client.ping()
    except RedisError as first:
        log.warning("store_connect_retry", error=str(first), backoff_s=_backoff_seconds())
        await asyncio.sleep(_backoff_seconds())
        try:
            await client.ping()
        except RedisError as e:
            await client.aclose()
            log.error("store_connect_failed", error=str(e))
            raise StoreError("Could not connect to store") from e
    return KeyValueStore(client)


async def get_store() -> AsyncGenerator[KeyValueStore, None]:
    store = await open_store()
    try:
        yield store
    finally:
        await store.close()
