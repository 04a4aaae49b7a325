from __future__ import annotations
import json
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError as SchemaError
from batting_board.config import settings
from batting_board.errors import StoreError, ValidationError
from batting_board.store import KeyValueStore

log = structlog.get_logger()


class PlayerTally(BaseModel):
    upvotes: int = 0
    downvotes: int = 0


_tally_adapter = TypeAdapter(dict[str, PlayerTally])


class PlayerVoteRepository:
    """Per-player thumbs up/down counters, independent of batting orders."""

    def __init__(self, store: KeyValueStore, key: str | None = None):
        self.store = store
        self.key = key or settings.player_votes_key

    async def tally(self) -> dict[str, PlayerTally]:
        raw = await self.store.get(self.key)
        if not raw:
            return {}
        try:
            return _tally_adapter.validate_json(raw)
        except SchemaError as e:
            raise StoreError("Stored player votes could not be decoded") from e

    async def record(self, player_id: int | str, vote_type: str) -> dict[str, PlayerTally]:
        if vote_type not in ("up", "down"):
            raise ValidationError("voteType must be 'up' or 'down'")
        votes = await self.tally()
        entry = votes.setdefault(str(player_id), PlayerTally())
        if vote_type == "up":
            entry.upvotes += 1
        else:
            entry.downvotes += 1
        await self.store.set(self.key, json.dumps({k: v.model_dump() for k, v in votes.items()}))
        log.info("player_vote_recorded", player_id=str(player_id), vote_type=vote_type)
        return votes
