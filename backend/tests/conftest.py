import fakeredis
import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient
from batting_board.main import app
from batting_board.models.batting_order import BattingOrder
from batting_board.models.player import PlayerSlot
from batting_board.store import KeyValueStore, get_store


@pytest.fixture
def redis_server():
    return fakeredis.FakeServer()


@pytest.fixture
def store(redis_server):
    return KeyValueStore(fakeredis.FakeAsyncRedis(server=redis_server, decode_responses=True))


@pytest_asyncio.fixture
async def client(redis_server):
    async def _store():
        s = KeyValueStore(fakeredis.FakeAsyncRedis(server=redis_server, decode_responses=True))
        try:
            yield s
        finally:
            await s.close()

    app.dependency_overrides[get_store] = _store
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def make_order(order_id: str, owner: str, up=(), down=(), created_at: int = 0) -> BattingOrder:
    return BattingOrder(
        id=order_id,
        user_id=owner,
        players=[PlayerSlot(id=1, name="Rahul", position=1), PlayerSlot(id=2, name="Varun", position=2)],
        upvotes=list(up),
        downvotes=list(down),
        created_at=created_at,
    )
