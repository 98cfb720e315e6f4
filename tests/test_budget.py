from decimal import Decimal

import pytest

from prodash import budget

ENTRIES = [
    {"type": "income", "amount": "1000.50", "category": "Salary", "date": "2024-03-01"},
    {"type": "expense", "amount": "200.25", "category": "Rent", "date": "2024-03-02"},
    {"type": "expense", "amount": Decimal("50"), "category": "Food", "date": "2024-02-27"},
    {"type": "income", "amount": "20", "category": "Food", "date": "2024-03-05"},
]


def test_summarize_totals() -> None:
    summary = budget.summarize(ENTRIES)
    assert summary == {
        "income": Decimal("1020.50"),
        "expenses": Decimal("250.25"),
        "balance": Decimal("770.25"),
    }


def test_summarize_empty() -> None:
    assert budget.summarize([]) == {"income": Decimal("0"), "expenses": Decimal("0"), "balance": Decimal("0")}


def test_decimal_sum_is_exact() -> None:
    entries = [{"type": "expense", "amount": 0.1, "category": "x"} for _ in range(3)]
    assert budget.summarize(entries)["expenses"] == Decimal("0.3")


def test_by_category_keeps_first_seen_order_and_adds_types() -> None:
    result = budget.by_category(ENTRIES)
    assert [row["category"] for row in result] == ["Salary", "Rent", "Food"]
    assert result[2]["amount"] == Decimal("70")


def test_monthly_summary_filters_by_prefix() -> None:
    summary = budget.monthly_summary(ENTRIES, "2024-03")
    assert summary["expenses"] == Decimal("200.25")
    assert summary["balance"] == Decimal("820.25")


def test_to_decimal_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        budget.to_decimal("twelve")


def test_summarize_income_minus_expense() -> None:
    entries = [{"type": "income", "amount": 100}, {"type": "expense", "amount": 40}]
    assert budget.summarize(entries) == {"income": Decimal("100"), "expenses": Decimal("40"), "balance": Decimal("60")}


def test_by_category_combines_types() -> None:
    entries = [
        {"type": "expense", "amount": 10, "category": "Food"},
        {"type": "income", "amount": 5, "category": "Food"},
    ]
    assert budget.by_category(entries) == [{"category": "Food", "amount": Decimal("15")}]
