from __future__ import annotations
from fastapi import APIRouter, Depends
from batting_board.schemas.roster import PlayerVoteCreate, RosterUpdate
from batting_board.services.player_votes import PlayerVoteRepository
from batting_board.services.roster import RosterRepository
from batting_board.store import KeyValueStore, get_store

router = APIRouter(tags=["roster"])

@router.get("/roster")
async def list_players(store: KeyValueStore = Depends(get_store)):
    players = await RosterRepository(store).list()
    return {"players": [p.model_dump() for p in players]}

@router.put("/roster")
async def replace_players(payload: RosterUpdate, store: KeyValueStore = Depends(get_store)):
    players = await RosterRepository(store).replace(payload.players)
    return {"success": True, "players": [p.model_dump() for p in players]}

@router.get("/player-votes")
async def player_votes(store: KeyValueStore = Depends(get_store)):
    votes = await PlayerVoteRepository(store).tally()
    return {"votes": {k: v.model_dump() for k, v in votes.items()}}

@router.post("/player-votes")
async def vote_player(payload: PlayerVoteCreate, store: KeyValueStore = Depends(get_store)):
    votes = await PlayerVoteRepository(store).record(payload.player_id, payload.vote_type)
    return {"votes": {k: v.model_dump() for k, v in votes.items()}}
