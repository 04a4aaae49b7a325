from __future__ import annotations
import json
from typing import Any, Iterable, Sequence
import structlog
from pydantic import TypeAdapter, ValidationError as SchemaError
from batting_board.config import settings
from batting_board.errors import StoreError, ValidationError
from batting_board.models.batting_order import IDENTITY_FIELDS, BattingOrder
from batting_board.models.player import PlayerSlot
from batting_board.services.ids import new_id, now_ms
from batting_board.store import KeyValueStore

log = structlog.get_logger()

_orders_adapter = TypeAdapter(list[BattingOrder])


def coerce_slots(players: Iterable[PlayerSlot | dict[str, Any]]) -> list[PlayerSlot]:
    """Validate a submitted batting order.

    Every slot needs id, name and position; positions must be exactly 1..n
    and each player appears once.
    """
    try:
        slots = [p if isinstance(p, PlayerSlot) else PlayerSlot.model_validate(p) for p in players]
    except SchemaError as e:
        raise ValidationError("Malformed player entry") from e
    if not slots:
        raise ValidationError("Batting order must contain at least one player")
    positions = sorted(s.position for s in slots)
    if positions != list(range(1, len(slots) + 1)):
        raise ValidationError("Player positions must be unique and run from 1 to the number of players")
    if len({s.id for s in slots}) != len(slots):
        raise ValidationError("A player can only bat once")
    return slots


def find_order(orders: Sequence[BattingOrder], order_id: str) -> BattingOrder | None:
    return next((o for o in orders if o.id == order_id), None)


def rank_by_score(orders: Iterable[BattingOrder]) -> list[BattingOrder]:
    # sorted() is stable, so ties keep insertion order
    return sorted(orders, key=lambda o: o.score, reverse=True)


def public_view(order: BattingOrder, *, with_identity: bool) -> dict[str, Any]:
    if with_identity:
        # an owner who never sent a name or photo gets no such keys
        exclude = {f for f in IDENTITY_FIELDS if getattr(order, f) is None}
    else:
        exclude = set(IDENTITY_FIELDS)
    return order.model_dump(by_alias=True, exclude=exclude or None)


def sanitize_for_viewer(orders: Iterable[BattingOrder], viewer_id: str | None) -> list[dict[str, Any]]:
    """Only the owner gets to see their own name/photo on the list view."""
    return [public_view(o, with_identity=viewer_id is not None and o.user_id == viewer_id) for o in orders]


class BattingOrderRepository:
    """The whole collection lives under a single key as one JSON array."""

    def __init__(self, store: KeyValueStore, key: str | None = None):
        self.store = store
        self.key = key or settings.batting_orders_key

    async def list(self) -> list[BattingOrder]:
        raw = await self.store.get(self.key)
        if not raw:
            return []
        try:
            return _orders_adapter.validate_json(raw)
        except SchemaError as e:
            log.error("batting_orders_corrupt", key=self.key, error=str(e))
            raise StoreError("Stored batting orders could not be decoded") from e

    async def save(self, orders: Sequence[BattingOrder]) -> None:
        payload = json.dumps([o.model_dump(by_alias=True) for o in orders])
        await self.store.set(self.key, payload)

    async def ranked(self) -> list[BattingOrder]:
        return rank_by_score(await self.list())

    async def upsert(
        self,
        user_id: str,
        players: Iterable[PlayerSlot | dict[str, Any]],
        *,
        user_name: str | None = None,
        user_photo_url: str | None = None,
    ) -> BattingOrder:
        if not user_id:
            raise ValidationError("userId is required")
        slots = coerce_slots(players)
        orders = await self.list()
        existing = next((o for o in orders if o.user_id == user_id), None)
        if existing:
            # id, votes, comments and createdAt survive an edit
            existing.players = slots
            existing.user_name = user_name
            existing.user_photo_url = user_photo_url
            order = existing
        else:
            order = BattingOrder(
                id=new_id(),
                user_id=user_id,
                user_name=user_name,
                user_photo_url=user_photo_url,
                players=slots,
                created_at=now_ms(),
            )
            orders.append(order)
        await self.save(orders)
        log.info("batting_order_saved", order_id=order.id, user_id=user_id, created=existing is None)
        return order

    async def reset(self) -> None:
        await self.store.delete(settings.legacy_votes_key)
        await self.store.set(self.key, json.dumps([]))
        log.info("store_reset", key=self.key)
