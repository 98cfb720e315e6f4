from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder

from prodash import dates, repositories
from prodash.auth import require_user
from prodash.pipeline import next_status
from prodash.schemas import JobCreate, JobPatch
from prodash.settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _with_next_status(record: dict) -> dict:
    payload = dict(record)
    payload["next_status"] = next_status(payload.get("status"))
    return payload


@router.get("/v1/jobs")
async def list_jobs(user: dict = Depends(require_user)):
    items = await repositories.jobs.list_by_owner(user["id"])
    return {"items": jsonable_encoder([_with_next_status(item) for item in items]), "total": len(items)}


@router.post("/v1/jobs")
async def create_job(payload: JobCreate, user: dict = Depends(require_user)):
    fields = payload.model_dump()
    if fields.get("date_applied") is None:
        fields["date_applied"] = dates.today(get_settings().timezone)
    try:
        record = await repositories.jobs.create(user["id"], fields)
    except Exception as exc:
        logger.exception("Failed to create job: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to add job")
    return jsonable_encoder(_with_next_status(record))


@router.patch("/v1/jobs/{job_id}")
async def patch_job(job_id: str, payload: JobPatch, user: dict = Depends(require_user)):
    try:
        record = await repositories.jobs.update(user["id"], job_id, payload.model_dump(exclude_unset=True))
    except LookupError:
        raise HTTPException(status_code=404, detail="Job not found")
    except Exception as exc:
        logger.exception("Failed to update job: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to update job")
    return jsonable_encoder(_with_next_status(record))


@router.post("/v1/jobs/{job_id}/advance")
async def advance_job(job_id: str, user: dict = Depends(require_user)):
    try:
        job = await repositories.jobs.get(user["id"], job_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Job not found")
    target = next_status(job.get("status"))
    if target is None:
        raise HTTPException(status_code=409, detail=f"No next stage after '{job.get('status')}'")
    try:
        record = await repositories.jobs.update(user["id"], job_id, {"status": target})
    except LookupError:
        raise HTTPException(status_code=404, detail="Job not found")
    except Exception as exc:
        logger.exception("Failed to move job: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to update job")
    return jsonable_encoder(_with_next_status(record))


@router.delete("/v1/jobs/{job_id}")
async def delete_job(job_id: str, user: dict = Depends(require_user)):
    try:
        await repositories.jobs.delete(user["id"], job_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Job not found")
    return {"ok": True}
