"""Tests for the financial profile builder."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.models import (
    Expense,
    ExpenseCategory,
    Income,
    IncomeType,
    MonthKey,
)
from src.domain.services.aggregation import compute_monthly_summary
from src.domain.services.profile import build_financial_profile, rank_categories


def _expense(day: datetime, amount: str, category: ExpenseCategory):
    return Expense(
        date=day,
        label=category.value,
        category=category,
        amount=Decimal(amount),
    )


def test_rank_categories_orders_by_total() -> None:
    ranked = rank_categories(
        {
            "Food": Decimal("300"),
            "Rent": Decimal("1200"),
            "Gas": Decimal("150"),
        }
    )

    assert ranked == [
        ("Rent", Decimal("1200")),
        ("Food", Decimal("300")),
        ("Gas", Decimal("150")),
    ]


def test_rank_categories_keeps_insertion_order_on_ties() -> None:
    ranked = rank_categories(
        {
            "Drink": Decimal("50"),
            "Food": Decimal("80"),
            "Market": Decimal("50"),
        }
    )

    assert [name for name, _ in ranked] == ["Food", "Drink", "Market"]


def test_rank_categories_respects_limit() -> None:
    totals = {f"c{i}": Decimal(i) for i in range(8)}

    assert len(rank_categories(totals)) == 5
    assert rank_categories(totals, limit=2) == [
        ("c7", Decimal("7")),
        ("c6", Decimal("6")),
    ]


def test_profile_uses_summary_month_and_trailing_trend() -> None:
    expenses = [
        _expense(datetime(2024, 3, 2), "100", ExpenseCategory.FOOD),
        _expense(datetime(2024, 3, 3), "400", ExpenseCategory.UTILITIES),
        _expense(datetime(2024, 1, 3), "900", ExpenseCategory.SHOPPING),
    ]
    summary = compute_monthly_summary(expenses, [], 3, 2024)

    profile = build_financial_profile(
        expenses,
        [],
        summary,
        date(2024, 3, 20),
        user_goals=("Save for a trip",),
    )

    assert profile.month == MonthKey(2024, 3)
    assert profile.total_monthly_expenses == Decimal("500")
    assert profile.top_spending_categories == (
        ("Utilities", Decimal("400")),
        ("Food", Decimal("100")),
    )
    assert list(profile.spending_trends) == [
        MonthKey(2024, 1),
        MonthKey(2024, 2),
        MonthKey(2024, 3),
    ]
    assert profile.spending_trends[MonthKey(2024, 1)] == Decimal("900")
    assert profile.user_goals == ("Save for a trip",)
    assert profile.net_income == Decimal("-500")


def test_profile_breaks_ties_in_category_enumeration_order() -> None:
    expenses = [
        _expense(datetime(2024, 3, 2), "50", ExpenseCategory.MARKET),
        _expense(datetime(2024, 3, 3), "50", ExpenseCategory.DRINK),
        _expense(datetime(2024, 3, 4), "20", ExpenseCategory.GAS),
    ]
    summary = compute_monthly_summary(expenses, [], 3, 2024)

    profile = build_financial_profile(expenses, [], summary, date(2024, 3, 20))

    assert profile.top_spending_categories == (
        ("Drink", Decimal("50")),
        ("Market", Decimal("50")),
        ("Gas", Decimal("20")),
    )


def test_income_trends_are_filled_only_on_request() -> None:
    incomes = [
        Income(
            date=datetime(2024, 2, 1),
            label="Salary",
            category=IncomeType.SALARY,
            amount=Decimal("3000"),
        ),
        Income(
            date=datetime(2024, 3, 1),
            label="Salary",
            category=IncomeType.SALARY,
            amount=Decimal("3100"),
        ),
    ]
    summary = compute_monthly_summary([], incomes, 3, 2024)

    default = build_financial_profile([], incomes, summary, date(2024, 3, 20))
    with_income = build_financial_profile(
        [],
        incomes,
        summary,
        date(2024, 3, 20),
        include_income_trends=True,
    )

    assert default.income_trends == {}
    assert with_income.income_trends == {
        MonthKey(2024, 1): Decimal("0"),
        MonthKey(2024, 2): Decimal("3000"),
        MonthKey(2024, 3): Decimal("3100"),
    }
