from __future__ import annotations
import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4())


def now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)
