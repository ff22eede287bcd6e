"""Domain models for financial aggregates."""

import calendar
from dataclasses import dataclass, field
from decimal import Decimal
from typing import NamedTuple

from .transactions import ExpenseCategory


class MonthKey(NamedTuple):
    """Calendar month identifier that keeps the year."""

    year: int
    month: int

    @property
    def month_name(self) -> str:
        """Return the full month name, e.g. ``"January"``."""
        return calendar.month_name[self.month]

    @property
    def short_label(self) -> str:
        """Return the abbreviated month name, e.g. ``"Jan"``."""
        return calendar.month_abbr[self.month]


@dataclass(frozen=True)
class MonthlySummary:
    """Totals for one calendar month.

    Attributes:
        month: Calendar month (1-12).
        year: Calendar year.
        total_expenses: Sum of expense amounts in the month.
        total_income: Sum of income amounts in the month.
        category_breakdown: Expense totals per category.
    """

    month: int
    year: int
    total_expenses: Decimal
    total_income: Decimal
    category_breakdown: dict[ExpenseCategory, Decimal] = field(
        default_factory=dict
    )

    @property
    def net_income(self) -> Decimal:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses

    @property
    def key(self) -> MonthKey:
        """Return the month key of the summary."""
        return MonthKey(self.year, self.month)


@dataclass(frozen=True)
class CategoryShare:
    """Expense total of one category and its share of the month."""

    category: ExpenseCategory
    total: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class TrendPoint:
    """Monthly totals used by trend charts."""

    year: int
    month: int
    total_expenses: Decimal
    total_income: Decimal

    @property
    def label(self) -> str:
        """Return the abbreviated month name."""
        return MonthKey(self.year, self.month).short_label


@dataclass(frozen=True)
class LedgerTotals:
    """Lifetime totals across the whole ledger."""

    total_expenses: Decimal
    total_income: Decimal
    transaction_count: int

    @property
    def net_income(self) -> Decimal:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses


@dataclass(frozen=True)
class FinancialProfile:
    """Normalized input for insight generation.

    Attributes:
        month: Month the income and expense totals refer to.
        total_monthly_income: Income received in ``month``.
        total_monthly_expenses: Expenses spent in ``month``.
        top_spending_categories: ``(category name, total)`` pairs, largest
            first.
        spending_trends: Expense totals per month over the trailing window,
            oldest first.
        income_trends: Optional income totals per month.
        user_goals: Optional free-text goals.
    """

    month: MonthKey
    total_monthly_income: Decimal
    total_monthly_expenses: Decimal
    top_spending_categories: tuple[tuple[str, Decimal], ...] = ()
    spending_trends: dict[MonthKey, Decimal] = field(default_factory=dict)
    income_trends: dict[MonthKey, Decimal] = field(default_factory=dict)
    user_goals: tuple[str, ...] = ()

    @property
    def net_income(self) -> Decimal:
        """Return total_monthly_income minus total_monthly_expenses."""
        return self.total_monthly_income - self.total_monthly_expenses


__all__ = [
    "MonthKey",
    "MonthlySummary",
    "CategoryShare",
    "TrendPoint",
    "LedgerTotals",
    "FinancialProfile",
]
