"""Domain models package."""

from .finance import (
    CategoryShare,
    FinancialProfile,
    LedgerTotals,
    MonthKey,
    MonthlySummary,
    TrendPoint,
)
from .insights import Insight, InsightPriority, InsightType
from .transactions import (
    Expense,
    ExpenseCategory,
    Income,
    IncomeType,
    LedgerSnapshot,
    Transaction,
    calendar_day,
    new_transaction_id,
)

__all__ = [
    "CategoryShare",
    "Expense",
    "ExpenseCategory",
    "FinancialProfile",
    "Income",
    "IncomeType",
    "Insight",
    "InsightPriority",
    "InsightType",
    "LedgerSnapshot",
    "LedgerTotals",
    "MonthKey",
    "MonthlySummary",
    "Transaction",
    "TrendPoint",
    "calendar_day",
    "new_transaction_id",
]
