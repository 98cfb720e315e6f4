from datetime import date
from decimal import Decimal

from prodash.stats import dashboard_stats


def test_dashboard_stats_counts() -> None:
    today = date(2024, 3, 15)
    tasks = [{"status": "done"}, {"status": "todo"}, {"status": "in-progress"}]
    jobs = [{"status": "applied"}, {"status": "interview"}, {"status": "rejected"}, {"status": "offer"}]
    projects = [{"status": "active"}, {"status": "planning"}]
    habits = [
        {"completed_dates": ["2024-03-14", "2024-03-15"], "streak": 2},
        {"completed_dates": ["2024-03-14"], "streak": 0},
    ]
    entries = [
        {"type": "income", "amount": "100", "category": "Pay", "date": "2024-03-01"},
        {"type": "expense", "amount": "40", "category": "Food", "date": "2024-02-20"},
    ]

    stats = dashboard_stats(tasks, jobs, projects, habits, entries, today)

    assert stats["total_tasks"] == 3
    assert stats["completed_tasks"] == 1
    assert stats["pending_tasks"] == 2
    assert stats["active_jobs"] == 2
    assert stats["interviews"] == 1
    assert stats["active_projects"] == 1
    assert stats["habits_done_today"] == 1
    assert stats["longest_streak"] == 2
    assert stats["balance"] == Decimal("60")
    assert stats["monthly_balance"] == Decimal("100")


def test_dashboard_stats_empty() -> None:
    stats = dashboard_stats([], [], [], [], [], date(2024, 1, 1))
    assert stats["total_tasks"] == 0
    assert stats["longest_streak"] == 0
    assert stats["balance"] == Decimal("0")
