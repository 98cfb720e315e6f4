from __future__ import annotations

from fastapi import Cookie, Depends, HTTPException

from prodash import identity


async def require_user(
    session_cookie: str | None = Cookie(default=None, alias=identity.SESSION_COOKIE),
) -> dict:
    session_id = identity.decode_session_cookie(session_cookie or "")
    if not session_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    user = await identity.resolve_session(session_id)
    if not user:
        raise HTTPException(status_code=401, detail="Session expired")
    return user


async def require_admin(user: dict = Depends(require_user)) -> dict:
    if not identity.is_admin(user):
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
