"""Domain services package."""

from .aggregation import (
    compute_category_shares,
    compute_ledger_totals,
    compute_monthly_summary,
    compute_spending_trend,
    compute_trend_series,
)
from .insight_rules import generate_rule_advice, generate_rule_insights
from .profile import build_financial_profile, rank_categories

__all__ = [
    "build_financial_profile",
    "compute_category_shares",
    "compute_ledger_totals",
    "compute_monthly_summary",
    "compute_spending_trend",
    "compute_trend_series",
    "generate_rule_advice",
    "generate_rule_insights",
    "rank_categories",
]
