"""Domain package for business rules and core models."""

from .models import (
    CategoryShare,
    Expense,
    ExpenseCategory,
    FinancialProfile,
    Income,
    IncomeType,
    Insight,
    InsightPriority,
    InsightType,
    LedgerSnapshot,
    LedgerTotals,
    MonthKey,
    MonthlySummary,
    TrendPoint,
)
from .policies import find_duplicate, is_duplicate
from .services import (
    build_financial_profile,
    compute_category_shares,
    compute_ledger_totals,
    compute_monthly_summary,
    compute_spending_trend,
    compute_trend_series,
    generate_rule_advice,
    generate_rule_insights,
    rank_categories,
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
    "TrendPoint",
    "build_financial_profile",
    "compute_category_shares",
    "compute_ledger_totals",
    "compute_monthly_summary",
    "compute_spending_trend",
    "compute_trend_series",
    "find_duplicate",
    "generate_rule_advice",
    "generate_rule_insights",
    "is_duplicate",
    "rank_categories",
]
