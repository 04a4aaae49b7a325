from __future__ import annotations
from fastapi import APIRouter, Depends
from batting_board.services.batting_orders import BattingOrderRepository
from batting_board.store import KeyValueStore, get_store

router = APIRouter(prefix="/admin", tags=["admin"])

@router.post("/reset")
async def reset(store: KeyValueStore = Depends(get_store)):
    """Wipe every batting order, with its votes and comments. The roster is kept."""
    await BattingOrderRepository(store).reset()
    return {"success": True, "message": "Database reset successfully"}
