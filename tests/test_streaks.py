from datetime import date, timedelta

import pytest
from hypothesis import assume, given, strategies as st

from prodash import streaks

TODAY = date(2024, 1, 3)


def test_consecutive_days_ending_today() -> None:
    assert streaks.current_streak(["2024-01-01", "2024-01-02", "2024-01-03"], TODAY) == 3


def test_unchecked_today_yields_zero() -> None:
    assert streaks.current_streak(["2024-01-01", "2024-01-02"], TODAY) == 0


def test_gap_stops_the_run() -> None:
    assert streaks.current_streak(["2024-01-01", "2024-01-03"], TODAY) == 1


def test_order_and_duplicates_do_not_matter() -> None:
    completed = ["2024-01-03", "2024-01-01", "2024-01-02", "2024-01-03"]
    assert streaks.current_streak(completed, TODAY) == 3


def test_future_dates_are_ignored() -> None:
    assert streaks.current_streak(["2024-01-03", "2024-01-04", "2024-01-05"], TODAY) == 1


def test_run_crosses_month_boundary() -> None:
    completed = ["2024-02-28", "2024-02-29", "2024-03-01"]
    assert streaks.current_streak(completed, date(2024, 3, 1)) == 3


def test_empty_history() -> None:
    assert streaks.current_streak([], TODAY) == 0
    assert streaks.current_streak(None, TODAY) == 0


def test_trailing_mode_keeps_yesterdays_run() -> None:
    completed = ["2024-01-01", "2024-01-02"]
    assert streaks.compute_streak(completed, TODAY, "trailing") == 2
    assert streaks.compute_streak(completed, TODAY, "parity") == 0


def test_unknown_mode_raises() -> None:
    with pytest.raises(ValueError):
        streaks.compute_streak([], TODAY, "weekly")


def test_toggle_day_adds_then_removes() -> None:
    once = streaks.toggle_day(["2024-01-01"], "2024-01-03")
    assert once == ["2024-01-01", "2024-01-03"]
    assert streaks.toggle_day(once, "2024-01-03") == ["2024-01-01"]


def test_toggle_day_removes_every_copy() -> None:
    assert streaks.toggle_day(["2024-01-03", "2024-01-01", "2024-01-03"], "2024-01-03") == ["2024-01-01"]


def test_toggle_habit_recomputes_streak() -> None:
    habit = {"completed_dates": ["2024-01-01", "2024-01-02"], "streak": 0}
    checked = streaks.toggle_habit(habit, TODAY)
    assert checked == {"completed_dates": ["2024-01-01", "2024-01-02", "2024-01-03"], "streak": 3}

    unchecked = streaks.toggle_habit(checked, TODAY)
    assert unchecked == {"completed_dates": ["2024-01-01", "2024-01-02"], "streak": 0}


def test_toggle_on_isolated_day_after_gap() -> None:
    habit = {"completed_dates": ["2024-01-01", "2024-01-02", "2024-01-03"]}
    result = streaks.toggle_habit(habit, date(2024, 1, 5))
    assert result["streak"] == 1


def test_longest_streak() -> None:
    assert streaks.longest_streak([{"streak": 2}, {"streak": 7}, {"streak": None}]) == 7
    assert streaks.longest_streak([]) == 0


days = st.dates(min_value=date(2000, 1, 1), max_value=date(2030, 12, 31))
day_sets = st.sets(days, max_size=60)


def _iso_list(day_set):
    return sorted(day.isoformat() for day in day_set)


@given(day_sets, days)
def test_unchecked_today_is_always_zero(day_set, today) -> None:
    assume(today not in day_set)
    assert streaks.current_streak(_iso_list(day_set), today) == 0


@given(day_sets, days)
def test_checked_today_extends_yesterdays_streak(day_set, today) -> None:
    completed = _iso_list(day_set | {today})
    yesterday = today - timedelta(days=1)
    assert streaks.current_streak(completed, today) == 1 + streaks.current_streak(completed, yesterday)


@given(day_sets, days)
def test_double_toggle_restores_dates_and_streak(day_set, today) -> None:
    habit = {"completed_dates": _iso_list(day_set)}
    twice = streaks.toggle_habit(streaks.toggle_habit(habit, today), today)
    assert set(twice["completed_dates"]) == set(habit["completed_dates"])
    assert twice["streak"] == streaks.current_streak(habit["completed_dates"], today)
