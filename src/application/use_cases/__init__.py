"""Application use cases package."""

from .check_connection import CheckConnectionUseCase, ConnectionCheckResult
from .generate_insights import InsightPipeline
from .get_monthly_summary import (
    GetMonthlySummaryUseCase,
    GetTrendSeriesUseCase,
    MonthlySummaryView,
)
from .manage_ledger import LedgerService

__all__ = [
    "CheckConnectionUseCase",
    "ConnectionCheckResult",
    "InsightPipeline",
    "GetMonthlySummaryUseCase",
    "GetTrendSeriesUseCase",
    "MonthlySummaryView",
    "LedgerService",
]
