from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from batting_board.models.player import PlayerSlot


class _Stored(BaseModel):
    # Stored JSON uses camelCase keys; Python code uses snake_case.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CommentAuthor(_Stored):
    display_name: str | None = None
    photo_url: str | None = Field(default=None, alias="photoURL")


class Comment(_Stored):
    id: str
    user_id: str
    text: str
    created_at: int  # epoch ms
    user: CommentAuthor | None = None


class BattingOrder(_Stored):
    id: str
    user_id: str
    user_name: str | None = None
    user_photo_url: str | None = Field(default=None, alias="userPhotoURL")
    players: list[PlayerSlot]
    upvotes: list[str] = Field(default_factory=list)
    downvotes: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: int  # epoch ms, preserved across edits

    @property
    def score(self) -> int:
        return len(self.upvotes) - len(self.downvotes)

    def votes_for(self, vote_type: str) -> list[str]:
        return self.upvotes if vote_type == "up" else self.downvotes


IDENTITY_FIELDS = {"user_name", "user_photo_url"}
