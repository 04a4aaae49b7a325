from __future__ import annotations
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

# Sign-in happens at the identity provider; the client forwards the
# provider's user id as a bearer credential and we take it at face value.
security = HTTPBearer(auto_error=False)

async def get_viewer_id(credentials: HTTPAuthorizationCredentials | None = Depends(security)) -> str | None:
    if credentials is None or not credentials.credentials:
        return None
    return credentials.credentials
