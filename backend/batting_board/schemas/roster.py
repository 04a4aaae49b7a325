from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field
from batting_board.models.player import Player


class RosterUpdate(BaseModel):
    players: list[Player]


class PlayerVoteCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_id: int = Field(alias="playerId")
    vote_type: Literal["up", "down"] = Field(alias="voteType")
