from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder

from prodash.auth import require_user
from prodash.schemas import ProjectCreate, ProjectPatch
from prodash import repositories

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/projects")
async def list_projects(user: dict = Depends(require_user)):
    items = await repositories.projects.list_by_owner(user["id"])
    return {"items": jsonable_encoder(items), "total": len(items)}


@router.post("/v1/projects")
async def create_project(payload: ProjectCreate, user: dict = Depends(require_user)):
    try:
        record = await repositories.projects.create(user["id"], payload.model_dump())
    except Exception as exc:
        logger.exception("Failed to create project: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to create project")
    return jsonable_encoder(record)


@router.patch("/v1/projects/{project_id}")
async def patch_project(project_id: str, payload: ProjectPatch, user: dict = Depends(require_user)):
    try:
        record = await repositories.projects.update(
            user["id"], project_id, payload.model_dump(exclude_unset=True)
        )
    except LookupError:
        raise HTTPException(status_code=404, detail="Project not found")
    except Exception as exc:
        logger.exception("Failed to update project: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to update project")
    return jsonable_encoder(record)


@router.delete("/v1/projects/{project_id}")
async def delete_project(project_id: str, user: dict = Depends(require_user)):
    try:
        await repositories.projects.delete(user["id"], project_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Project not found")
    return {"ok": True}
