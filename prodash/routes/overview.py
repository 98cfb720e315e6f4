from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder

from prodash import dates, repositories
from prodash.auth import require_user
from prodash.routes.habits import present_habit
from prodash.settings import get_settings
from prodash.stats import dashboard_stats

router = APIRouter()


@router.get("/v1/overview")
async def overview(user: dict = Depends(require_user)):
    today = dates.today(get_settings().timezone)
    tasks = await repositories.tasks.list_by_owner(user["id"])
    jobs = await repositories.jobs.list_by_owner(user["id"])
    projects = await repositories.projects.list_by_owner(user["id"])
    habits = [present_habit(item, today) for item in await repositories.habits.list_by_owner(user["id"])]
    entries = await repositories.budget_entries.list_by_owner(user["id"])
    return {
        "today": dates.to_iso(today),
        "user_name": (user.get("name") or "").split(" ")[0],
        "stats": jsonable_encoder(dashboard_stats(tasks, jobs, projects, habits, entries, today)),
        "recent_tasks": jsonable_encoder(tasks[:5]),
    }
