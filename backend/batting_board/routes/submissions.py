from __future__ import annotations
from fastapi import APIRouter, Depends
from batting_board.auth_deps import get_viewer_id
from batting_board.schemas.batting_order import BattingOrderCreate, CommentCreate, DraftMove, VoteCreate
from batting_board.services.batting_orders import BattingOrderRepository, public_view, sanitize_for_viewer
from batting_board.services.comments import add_comment
from batting_board.services.roster import RosterRepository, build_draft, move_player
from batting_board.services.votes import cast_vote
from batting_board.store import KeyValueStore, get_store

router = APIRouter(prefix="/submissions", tags=["submissions"])

@router.get("")
async def list_batting_orders(store: KeyValueStore = Depends(get_store), viewer_id: str | None = Depends(get_viewer_id)):
    orders = await BattingOrderRepository(store).ranked()
    return {"battingOrders": sanitize_for_viewer(orders, viewer_id)}

@router.post("", status_code=201)
async def submit_batting_order(payload: BattingOrderCreate, store: KeyValueStore = Depends(get_store)):
    order = await BattingOrderRepository(store).upsert(
        payload.user_id,
        payload.players,
        user_name=payload.user_name,
        user_photo_url=payload.user_photo_url,
    )
    return {"success": True, "battingOrder": public_view(order, with_identity=False)}

@router.post("/vote")
async def vote(payload: VoteCreate, store: KeyValueStore = Depends(get_store)):
    repo = BattingOrderRepository(store)
    orders = await repo.list()
    target = cast_vote(orders, payload.user_id, payload.batting_order_id, payload.vote_type)
    await repo.save(orders)
    # Full object, owner identity included
    return {"success": True, "battingOrder": public_view(target, with_identity=True)}

@router.post("/comment", status_code=201)
async def comment(payload: CommentCreate, store: KeyValueStore = Depends(get_store)):
    repo = BattingOrderRepository(store)
    orders = await repo.list()
    created = add_comment(orders, payload.batting_order_id, payload.user_id, payload.text, payload.user)
    await repo.save(orders)
    return {"success": True, "comment": created.model_dump(by_alias=True)}

@router.get("/draft")
async def draft(store: KeyValueStore = Depends(get_store), viewer_id: str | None = Depends(get_viewer_id)):
    roster = await RosterRepository(store).list()
    mine = None
    if viewer_id:
        orders = await BattingOrderRepository(store).list()
        mine = next((o for o in orders if o.user_id == viewer_id), None)
    return {"players": [s.model_dump() for s in build_draft(roster, mine)]}

@router.post("/draft/move")
async def draft_move(payload: DraftMove):
    moved = move_player(payload.players, payload.from_index, payload.to_index)
    return {"players": [s.model_dump() for s in moved]}
