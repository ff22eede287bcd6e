"""Domain service building the financial profile used for insights."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal

from src.domain.models import (
    Expense,
    FinancialProfile,
    Income,
    MonthlySummary,
)
from src.domain.services.aggregation import (
    category_totals,
    compute_spending_trend,
    filter_month,
)

DEFAULT_TOP_CATEGORIES = 5
DEFAULT_TREND_MONTHS = 3


def rank_categories(
    totals: Mapping[str, Decimal],
    limit: int = DEFAULT_TOP_CATEGORIES,
) -> list[tuple[str, Decimal]]:
    """Return the ``limit`` largest categories, largest first.

    The sort is stable: categories with equal totals keep the order in
    which they appear in ``totals``.

    Args:
        totals: Ordered mapping of category name to total.
        limit: Maximum number of categories returned.

    Returns:
        list[tuple[str, Decimal]]: ``(category, total)`` pairs.
    """
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def build_financial_profile(
    expenses: Sequence[Expense],
    incomes: Sequence[Income],
    summary: MonthlySummary,
    today: date,
    *,
    top_n: int = DEFAULT_TOP_CATEGORIES,
    trend_months: int = DEFAULT_TREND_MONTHS,
    user_goals: Iterable[str] = (),
    include_income_trends: bool = False,
) -> FinancialProfile:
    """Reduce a monthly summary and raw transactions into a profile.

    Args:
        expenses: All expenses of the ledger.
        incomes: All incomes of the ledger; only read when
            ``include_income_trends`` is set.
        summary: Summary of the month being analyzed.
        today: Reference date closing the trailing trend window.
        top_n: Number of top spending categories kept.
        trend_months: Length of the spending trend window.
        user_goals: Optional free-text goals.
        include_income_trends: Fill ``income_trends`` over the same
            trailing window as the spending trend.

    Returns:
        FinancialProfile: Normalized input for insight backends.
    """
    monthly_expenses = filter_month(expenses, summary.month, summary.year)
    totals = {
        category.value: amount
        for category, amount in category_totals(monthly_expenses).items()
    }
    return FinancialProfile(
        month=summary.key,
        total_monthly_income=summary.total_income,
        total_monthly_expenses=summary.total_expenses,
        top_spending_categories=tuple(rank_categories(totals, top_n)),
        spending_trends=compute_spending_trend(
            expenses,
            today,
            window_months=trend_months,
        ),
        income_trends=(
            compute_spending_trend(incomes, today, window_months=trend_months)
            if include_income_trends
            else {}
        ),
        user_goals=tuple(user_goals),
    )


__all__ = [
    "DEFAULT_TOP_CATEGORIES",
    "DEFAULT_TREND_MONTHS",
    "build_financial_profile",
    "rank_categories",
]
