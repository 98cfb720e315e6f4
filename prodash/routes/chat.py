from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder

from prodash import repositories
from prodash.auth import require_user
from prodash.schemas import ChatMessageCreate, ChatRequest
from prodash.services import assistant

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/chat/messages")
async def chat_history(user: dict = Depends(require_user)):
    items = await repositories.chat_messages.list_by_owner(user["id"], newest_first=False)
    return {"items": jsonable_encoder(items), "total": len(items)}


@router.post("/v1/chat/messages")
async def save_message(payload: ChatMessageCreate, user: dict = Depends(require_user)):
    try:
        record = await repositories.chat_messages.create(user["id"], payload.model_dump())
    except Exception as exc:
        logger.exception("Failed to save chat message: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to save message")
    return jsonable_encoder(record)


@router.delete("/v1/chat/messages")
async def clear_history(user: dict = Depends(require_user)):
    removed = await repositories.chat_messages.delete_by_owner(user["id"])
    return {"ok": True, "removed": removed}


@router.post("/v1/chat")
async def chat(payload: ChatRequest, user: dict = Depends(require_user)):
    content = await assistant.reply([turn.model_dump() for turn in payload.messages])
    return {"message": {"role": "assistant", "content": content}}
