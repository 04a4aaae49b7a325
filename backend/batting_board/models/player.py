from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class Player(BaseModel):
    """Roster entry. Shared by everyone, owned by no submission."""
    model_config = ConfigDict(extra="ignore")

    id: int = Field(gt=0)
    name: str = Field(min_length=1)


class PlayerSlot(Player):
    """A roster player placed at a 1-based batting position."""
    position: int = Field(ge=1)
