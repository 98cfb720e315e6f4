from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder

from prodash import dates, repositories, streaks
from prodash.auth import require_user
from prodash.schemas import HabitCreate, HabitPatch
from prodash.settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def present_habit(habit: dict, today: date) -> dict:
    settings = get_settings()
    payload = dict(habit)
    if settings.streak_derive_on_read:
        payload["streak"] = streaks.compute_streak(payload.get("completed_dates"), today, settings.streak_mode)
    payload["done_today"] = dates.to_iso(today) in (payload.get("completed_dates") or [])
    return payload


@router.get("/v1/habits")
async def list_habits(user: dict = Depends(require_user)):
    today = dates.today(get_settings().timezone)
    items = await repositories.habits.list_by_owner(user["id"])
    return {"items": jsonable_encoder([present_habit(item, today) for item in items]), "total": len(items)}


@router.post("/v1/habits")
async def create_habit(payload: HabitCreate, user: dict = Depends(require_user)):
    today = dates.today(get_settings().timezone)
    fields = {**payload.model_dump(), "completed_dates": [], "streak": 0}
    try:
        record = await repositories.habits.create(user["id"], fields)
    except Exception as exc:
        logger.exception("Failed to create habit: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to create habit")
    return jsonable_encoder(present_habit(record, today))


@router.patch("/v1/habits/{habit_id}")
async def patch_habit(habit_id: str, payload: HabitPatch, user: dict = Depends(require_user)):
    settings = get_settings()
    today = dates.today(settings.timezone)
    patch = payload.model_dump(exclude_unset=True)
    if patch.get("completed_dates") is not None:
        patch["streak"] = streaks.compute_streak(patch["completed_dates"], today, settings.streak_mode)
    else:
        patch.pop("completed_dates", None)
    try:
        record = await repositories.habits.update(user["id"], habit_id, patch)
    except LookupError:
        raise HTTPException(status_code=404, detail="Habit not found")
    except Exception as exc:
        logger.exception("Failed to update habit: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to update habit")
    return jsonable_encoder(present_habit(record, today))


@router.post("/v1/habits/{habit_id}/toggle")
async def toggle_habit(habit_id: str, user: dict = Depends(require_user)):
    settings = get_settings()
    today = dates.today(settings.timezone)
    try:
        habit = await repositories.habits.get(user["id"], habit_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Habit not found")
    patch = streaks.toggle_habit(habit, today, settings.streak_mode)
    try:
        record = await repositories.habits.update(user["id"], habit_id, patch)
    except LookupError:
        raise HTTPException(status_code=404, detail="Habit not found")
    except Exception as exc:
        logger.exception("Failed to toggle habit: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to update habit")
    return jsonable_encoder(present_habit(record, today))


@router.delete("/v1/habits/{habit_id}")
async def delete_habit(habit_id: str, user: dict = Depends(require_user)):
    try:
        await repositories.habits.delete(user["id"], habit_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Habit not found")
    return {"ok": True}
