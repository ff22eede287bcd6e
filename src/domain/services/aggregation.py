"""Domain services aggregating ledger transactions."""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from src.domain.models import (
    CategoryShare,
    Expense,
    ExpenseCategory,
    Income,
    LedgerTotals,
    MonthKey,
    MonthlySummary,
    TrendPoint,
    calendar_day,
)


def shift_month(key: MonthKey, offset: int) -> MonthKey:
    """Return the month ``offset`` months away from ``key``.

    Args:
        key: Starting month.
        offset: Number of months to move; negative values go back in time.

    Returns:
        MonthKey: Resulting calendar month.
    """
    index = key.year * 12 + (key.month - 1) + offset
    return MonthKey(index // 12, index % 12 + 1)


def trailing_months(window_months: int, today: date) -> list[MonthKey]:
    """Return the ``window_months`` months ending at ``today``, oldest first."""
    current = MonthKey(today.year, today.month)
    return [
        shift_month(current, -offset)
        for offset in reversed(range(window_months))
    ]


def in_month(transaction: Expense | Income, month: int, year: int) -> bool:
    """Return True when the transaction's local date falls in the month."""
    day = calendar_day(transaction.date)
    return day.month == month and day.year == year


def filter_month(
    transactions: Iterable[Expense | Income],
    month: int,
    year: int,
) -> list:
    """Return transactions dated within the given calendar month."""
    return [tx for tx in transactions if in_month(tx, month, year)]


def sum_amounts(transactions: Iterable[Expense | Income]) -> Decimal:
    """Return the total amount of the transactions."""
    return sum((tx.amount for tx in transactions), Decimal("0"))


def category_totals(
    expenses: Iterable[Expense],
) -> dict[ExpenseCategory, Decimal]:
    """Sum expense amounts per category in enumeration order.

    Only categories with at least one expense appear in the result.
    """
    totals: dict[ExpenseCategory, Decimal] = {}
    for expense in expenses:
        totals[expense.category] = (
            totals.get(expense.category, Decimal("0")) + expense.amount
        )
    return {
        category: totals[category]
        for category in ExpenseCategory
        if category in totals
    }


def compute_monthly_summary(
    expenses: Iterable[Expense],
    incomes: Iterable[Income],
    month: int,
    year: int,
) -> MonthlySummary:
    """Compute totals and the category breakdown of one month.

    Args:
        expenses: All expenses of the ledger.
        incomes: All incomes of the ledger.
        month: Calendar month (1-12).
        year: Calendar year.

    Returns:
        MonthlySummary: Totals for the requested month.
    """
    monthly_expenses = filter_month(expenses, month, year)
    monthly_incomes = filter_month(incomes, month, year)
    return MonthlySummary(
        month=month,
        year=year,
        total_expenses=sum_amounts(monthly_expenses),
        total_income=sum_amounts(monthly_incomes),
        category_breakdown=category_totals(monthly_expenses),
    )


def compute_trend_series(
    expenses: Sequence[Expense],
    incomes: Sequence[Income],
    window_months: int,
    today: date,
) -> list[TrendPoint]:
    """Return monthly expense and income totals, oldest month first.

    Args:
        expenses: All expenses of the ledger.
        incomes: All incomes of the ledger.
        window_months: Number of months ending at ``today``.
        today: Reference date for the current month.

    Returns:
        list[TrendPoint]: One entry per month of the window.
    """
    points: list[TrendPoint] = []
    for key in trailing_months(window_months, today):
        points.append(
            TrendPoint(
                year=key.year,
                month=key.month,
                total_expenses=sum_amounts(
                    filter_month(expenses, key.month, key.year)
                ),
                total_income=sum_amounts(
                    filter_month(incomes, key.month, key.year)
                ),
            )
        )
    return points


def compute_spending_trend(
    transactions: Sequence[Expense | Income],
    today: date,
    window_months: int = 3,
) -> dict[MonthKey, Decimal]:
    """Return transaction totals keyed by month over the trailing window."""
    return {
        key: sum_amounts(filter_month(transactions, key.month, key.year))
        for key in trailing_months(window_months, today)
    }


def compute_category_shares(summary: MonthlySummary) -> list[CategoryShare]:
    """Return category totals with their share of the month, largest first."""
    total = summary.total_expenses
    shares = [
        CategoryShare(
            category=category,
            total=amount,
            percentage=(
                (amount / total) * Decimal("100") if total else Decimal("0")
            ),
        )
        for category, amount in summary.category_breakdown.items()
    ]
    return sorted(shares, key=lambda share: share.total, reverse=True)


def compute_ledger_totals(
    expenses: Sequence[Expense],
    incomes: Sequence[Income],
) -> LedgerTotals:
    """Return lifetime totals of the ledger."""
    return LedgerTotals(
        total_expenses=sum_amounts(expenses),
        total_income=sum_amounts(incomes),
        transaction_count=len(expenses) + len(incomes),
    )


__all__ = [
    "category_totals",
    "compute_category_shares",
    "compute_ledger_totals",
    "compute_monthly_summary",
    "compute_spending_trend",
    "compute_trend_series",
    "filter_month",
    "in_month",
    "shift_month",
    "sum_amounts",
    "trailing_months",
]
