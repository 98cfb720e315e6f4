from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder

from prodash import budget, repositories
from prodash.auth import require_user
from prodash.schemas import BudgetEntryCreate, BudgetEntryPatch

logger = logging.getLogger(__name__)

router = APIRouter()


def _filter_month(entries: list[dict], month: str | None) -> list[dict]:
    if not month:
        return entries
    return [entry for entry in entries if str(entry.get("date") or "").startswith(month)]


@router.get("/v1/budget")
async def list_entries(user: dict = Depends(require_user)):
    items = await repositories.budget_entries.list_by_owner(user["id"])
    return {"items": jsonable_encoder(items), "total": len(items)}


@router.get("/v1/budget/summary")
async def budget_summary(
    month: str | None = Query(None, pattern=r"^\d{4}-\d{2}$"),
    user: dict = Depends(require_user),
):
    entries = await repositories.budget_entries.list_by_owner(user["id"])
    return jsonable_encoder(budget.summarize(_filter_month(entries, month)))


@router.get("/v1/budget/categories")
async def budget_categories(
    month: str | None = Query(None, pattern=r"^\d{4}-\d{2}$"),
    user: dict = Depends(require_user),
):
    entries = await repositories.budget_entries.list_by_owner(user["id"])
    return {"items": jsonable_encoder(budget.by_category(_filter_month(entries, month)))}


@router.post("/v1/budget")
async def create_entry(payload: BudgetEntryCreate, user: dict = Depends(require_user)):
    try:
        record = await repositories.budget_entries.create(user["id"], payload.model_dump())
    except Exception as exc:
        logger.exception("Failed to add budget entry: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to add entry")
    return jsonable_encoder(record)


@router.patch("/v1/budget/{entry_id}")
async def patch_entry(entry_id: str, payload: BudgetEntryPatch, user: dict = Depends(require_user)):
    try:
        record = await repositories.budget_entries.update(
            user["id"], entry_id, payload.model_dump(exclude_unset=True)
        )
    except LookupError:
        raise HTTPException(status_code=404, detail="Entry not found")
    except Exception as exc:
        logger.exception("Failed to update budget entry: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to update entry")
    return jsonable_encoder(record)


@router.delete("/v1/budget/{entry_id}")
async def delete_entry(entry_id: str, user: dict = Depends(require_user)):
    try:
        await repositories.budget_entries.delete(user["id"], entry_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Entry not found")
    return {"ok": True}
