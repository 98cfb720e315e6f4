from __future__ import annotations

from datetime import date

from prodash import budget, pipeline, streaks
from prodash.dates import month_key, to_iso


def dashboard_stats(
    tasks: list[dict],
    jobs: list[dict],
    projects: list[dict],
    habits: list[dict],
    entries: list[dict],
    today: date,
) -> dict:
    today_iso = to_iso(today)
    completed_tasks = sum(1 for task in tasks if task.get("status") == "done")
    totals = budget.summarize(entries)
    monthly = budget.monthly_summary(entries, month_key(today))
    return {
        "total_tasks": len(tasks),
        "completed_tasks": completed_tasks,
        "pending_tasks": len(tasks) - completed_tasks,
        "total_jobs": len(jobs),
        "active_jobs": sum(1 for job in jobs if pipeline.is_active(job.get("status"))),
        "interviews": sum(1 for job in jobs if job.get("status") == "interview"),
        "active_projects": sum(1 for project in projects if project.get("status") == "active"),
        "total_habits": len(habits),
        "habits_done_today": sum(1 for habit in habits if today_iso in (habit.get("completed_dates") or [])),
        "longest_streak": streaks.longest_streak(habits),
        "income": totals["income"],
        "expenses": totals["expenses"],
        "balance": totals["balance"],
        "monthly_balance": monthly["balance"],
    }
