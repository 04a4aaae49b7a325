from __future__ import annotations
from fastapi import APIRouter, Depends, Request
from datetime import datetime, timezone
from batting_board.config import settings
from batting_board.store import KeyValueStore, get_store

router = APIRouter(tags=["system"])

@router.get("/health")
async def health(request: Request):
    return {
        "status": "ok",
        "service": settings.app_name,
        "env": settings.environment,
        "time": datetime.now(timezone.utc).isoformat(),
        "request_id": request.headers.get("x-request-id") or request.state.request_id,
    }

@router.get("/health/store")
async def store_health(store: KeyValueStore = Depends(get_store)):
    # get_store already pinged on connect; ping again so a dropped link shows up here
    return {"status": "ok", "store": "up" if await store.ping() else "down"}

@router.get("/version")
async def version():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "git_sha": settings.git_sha,
    }
