from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from prodash.dates import to_iso

STREAK_MODES = ("parity", "trailing")


def _as_set(completed_dates: Iterable[str] | None) -> set[str]:
    return {str(item) for item in (completed_dates or []) if item}


def _run_from(done: set[str], start: date) -> int:
    count = 0
    current = start
    while to_iso(current) in done:
        count += 1
        current -= timedelta(days=1)
    return count


def current_streak(completed_dates: Iterable[str] | None, today: date) -> int:
    """Consecutive completed days counted backward from ``today``.

    An unchecked ``today`` yields 0 even when yesterday and earlier days are
    complete.
    """
    return _run_from(_as_set(completed_dates), today)


def trailing_run(completed_dates: Iterable[str] | None, today: date) -> int:
    """Like ``current_streak`` but an unchecked ``today`` does not break the run."""
    done = _as_set(completed_dates)
    if to_iso(today) in done:
        return _run_from(done, today)
    return _run_from(done, today - timedelta(days=1))


def compute_streak(completed_dates: Iterable[str] | None, today: date, mode: str = "parity") -> int:
    if mode not in STREAK_MODES:
        raise ValueError(f"Unknown streak mode: {mode}")
    if mode == "trailing":
        return trailing_run(completed_dates, today)
    return current_streak(completed_dates, today)


def toggle_day(completed_dates: Iterable[str] | None, day_iso: str) -> list[str]:
    dates = [str(item) for item in (completed_dates or [])]
    if day_iso in dates:
        return [item for item in dates if item != day_iso]
    return dates + [day_iso]


def toggle_habit(habit: dict, today: date, mode: str = "parity") -> dict:
    updated = toggle_day(habit.get("completed_dates"), to_iso(today))
    return {
        "completed_dates": updated,
        "streak": compute_streak(updated, today, mode),
    }


def longest_streak(habits: Iterable[dict]) -> int:
    return max((int(habit.get("streak") or 0) for habit in habits), default=0)
