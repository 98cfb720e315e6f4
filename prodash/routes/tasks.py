from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder

from prodash.auth import require_user
from prodash.schemas import TaskCreate, TaskPatch
from prodash import repositories

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/tasks")
async def list_tasks(user: dict = Depends(require_user)):
    items = await repositories.tasks.list_by_owner(user["id"])
    return {"items": jsonable_encoder(items), "total": len(items)}


@router.post("/v1/tasks")
async def create_task(payload: TaskCreate, user: dict = Depends(require_user)):
    try:
        record = await repositories.tasks.create(user["id"], payload.model_dump())
    except Exception as exc:
        logger.exception("Failed to create task: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to create task")
    return jsonable_encoder(record)


@router.patch("/v1/tasks/{task_id}")
async def patch_task(task_id: str, payload: TaskPatch, user: dict = Depends(require_user)):
    try:
        record = await repositories.tasks.update(user["id"], task_id, payload.model_dump(exclude_unset=True))
    except LookupError:
        raise HTTPException(status_code=404, detail="Task not found")
    except Exception as exc:
        logger.exception("Failed to update task: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to update task")
    return jsonable_encoder(record)


@router.delete("/v1/tasks/{task_id}")
async def delete_task(task_id: str, user: dict = Depends(require_user)):
    try:
        await repositories.tasks.delete(user["id"], task_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"ok": True}
