from __future__ import annotations

import logging

from fastapi import APIRouter, Cookie, HTTPException
from fastapi.responses import JSONResponse

from prodash import identity
from prodash.schemas import LoginPayload, RegisterPayload
from prodash.settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _with_session_cookie(payload: dict, session_id: str) -> JSONResponse:
    settings = get_settings()
    response = JSONResponse(payload)
    response.set_cookie(
        identity.SESSION_COOKIE,
        identity.encode_session_cookie(session_id),
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
    )
    return response


@router.post("/v1/auth/register")
async def register(payload: RegisterPayload):
    try:
        user, session_id = await identity.register(payload.name, payload.email, payload.password)
    except identity.IdentityError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
    except Exception as exc:
        logger.exception("Register failed: %s", exc)
        raise HTTPException(status_code=500, detail="Registration failed")
    return _with_session_cookie({"ok": True, "user": identity.public_user(user)}, session_id)


@router.post("/v1/auth/login")
async def login(payload: LoginPayload):
    try:
        user, session_id = await identity.login(payload.email, payload.password)
    except identity.IdentityError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
    except Exception as exc:
        logger.exception("Login failed: %s", exc)
        raise HTTPException(status_code=500, detail="Login failed")
    return _with_session_cookie({"ok": True, "user": identity.public_user(user)}, session_id)


@router.post("/v1/auth/logout")
async def logout(session_cookie: str | None = Cookie(default=None, alias=identity.SESSION_COOKIE)):
    session_id = identity.decode_session_cookie(session_cookie or "")
    try:
        await identity.logout(session_id)
    except Exception as exc:
        # the cookie is cleared regardless
        logger.warning("Failed to delete session: %s", exc)
    response = JSONResponse({"ok": True})
    response.delete_cookie(identity.SESSION_COOKIE, path="/")
    return response


@router.get("/v1/auth/me")
async def me(session_cookie: str | None = Cookie(default=None, alias=identity.SESSION_COOKIE)):
    session_id = identity.decode_session_cookie(session_cookie or "")
    user = await identity.resolve_session(session_id)
    if not user:
        return JSONResponse({"user": None}, status_code=401)
    return {"user": identity.public_user(user)}
