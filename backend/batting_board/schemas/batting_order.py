from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from batting_board.models.batting_order import CommentAuthor
from batting_board.models.player import PlayerSlot
from batting_board.services.votes import VoteType


class _Camel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BattingOrderCreate(_Camel):
    user_id: str = Field(min_length=1)
    players: list[PlayerSlot] = Field(min_length=1)
    user_name: str | None = None
    user_photo_url: str | None = Field(default=None, alias="userPhotoURL")


class VoteCreate(_Camel):
    user_id: str = Field(min_length=1)
    batting_order_id: str = Field(min_length=1)
    vote_type: VoteType


class CommentCreate(_Camel):
    batting_order_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    # blank-after-trim is rejected by the comment log itself
    text: str
    user: CommentAuthor | None = None


class DraftMove(_Camel):
    players: list[PlayerSlot] = Field(min_length=1)
    from_index: int
    to_index: int
