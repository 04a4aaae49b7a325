from __future__ import annotations
import json
from typing import Any, Iterable, Sequence
import structlog
from pydantic import TypeAdapter, ValidationError as SchemaError
from batting_board.config import settings
from batting_board.errors import StoreError, ValidationError
from batting_board.models.batting_order import BattingOrder
from batting_board.models.player import Player, PlayerSlot
from batting_board.store import KeyValueStore

log = structlog.get_logger()

DEFAULT_ROSTER: tuple[tuple[int, str], ...] = (
    (1, "Rahul"),
    (2, "Varun"),
    (3, "Avinash"),
    (4, "Vaibhav"),
    (5, "Rohit"),
    (6, "Purvesh"),
    (7, "Prashant"),
    (8, "Pragatheesh"),
    (9, "Shubham"),
    (10, "Akshay"),
    (11, "Henil"),
)

_players_adapter = TypeAdapter(list[Player])


def default_roster() -> list[Player]:
    return [Player(id=pid, name=name) for pid, name in DEFAULT_ROSTER]


def coerce_roster(players: Iterable[Player | dict[str, Any]]) -> list[Player]:
    try:
        return [p if isinstance(p, Player) else Player.model_validate(p) for p in players]
    except SchemaError as e:
        raise ValidationError("Every player needs an id and a name") from e


class RosterRepository:
    def __init__(self, store: KeyValueStore, key: str | None = None):
        self.store = store
        self.key = key or settings.players_key

    async def list(self) -> list[Player]:
        raw = await self.store.get(self.key)
        if not raw:
            roster = default_roster()
            await self._write(roster)
            log.info("roster_seeded", key=self.key, players=len(roster))
            return roster
        try:
            return _players_adapter.validate_json(raw)
        except SchemaError as e:
            log.error("roster_corrupt", key=self.key, error=str(e))
            raise StoreError("Stored roster could not be decoded") from e

    async def replace(self, players: Iterable[Player | dict[str, Any]]) -> list[Player]:
        roster = coerce_roster(players)
        await self._write(roster)
        log.info("roster_replaced", key=self.key, players=len(roster))
        return roster

    async def _write(self, roster: Sequence[Player]) -> None:
        await self.store.set(self.key, json.dumps([p.model_dump() for p in roster]))


def _numbered(players: Iterable[Player]) -> list[PlayerSlot]:
    return [PlayerSlot(id=p.id, name=p.name, position=i) for i, p in enumerate(players, start=1)]


def build_draft(roster: Sequence[Player], existing: BattingOrder | None = None) -> list[PlayerSlot]:
    """
    Starting point for the order builder.

    With an existing order the viewer's own ranking is kept and names are
    refreshed from the current roster; a player no longer on the roster keeps
    the name captured when the order was submitted. Without one, the roster
    order is used as-is. The stored order itself is left untouched.
    """
    if existing is None:
        return _numbered(roster)
    names = {p.id: p.name for p in roster}
    ranked = sorted(existing.players, key=lambda s: s.position)
    return _numbered(Player(id=s.id, name=names.get(s.id, s.name)) for s in ranked)


def move_player(slots: Sequence[PlayerSlot], from_index: int, to_index: int) -> list[PlayerSlot]:
    """Drag-and-drop reorder: move one slot and renumber positions."""
    size = len(slots)
    if not (0 <= from_index < size and 0 <= to_index < size):
        raise ValidationError("Move indices out of range")
    items = list(slots)
    items.insert(to_index, items.pop(from_index))
    return _numbered(items)
