from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable

INCOME = "income"
EXPENSE = "expense"


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        # str() keeps the entered precision of floats like 0.1
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc


def summarize(entries: Iterable[dict]) -> dict:
    income = Decimal("0")
    expenses = Decimal("0")
    for entry in entries:
        entry_type = entry.get("type")
        if entry_type == INCOME:
            income += to_decimal(entry.get("amount", 0))
        elif entry_type == EXPENSE:
            expenses += to_decimal(entry.get("amount", 0))
    return {"income": income, "expenses": expenses, "balance": income - expenses}


def by_category(entries: Iterable[dict]) -> list[dict]:
    """Per-category totals in first-seen order.

    Income and expense amounts in the same category are added together, not
    netted, so the chart shows volume per category.
    """
    totals: dict[str, Decimal] = {}
    for entry in entries:
        category = entry.get("category")
        totals[category] = totals.get(category, Decimal("0")) + to_decimal(entry.get("amount", 0))
    return [{"category": category, "amount": amount} for category, amount in totals.items()]


def monthly_summary(entries: Iterable[dict], month: str) -> dict:
    return summarize(entry for entry in entries if str(entry.get("date") or "").startswith(month))
