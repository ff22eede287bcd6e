"""Use cases computing monthly summaries and trend series of the ledger."""

from dataclasses import dataclass
from datetime import date

from src.application.use_cases.manage_ledger import LedgerService
from src.domain.models import CategoryShare, MonthlySummary, TrendPoint
from src.domain.services.aggregation import (
    compute_category_shares,
    compute_monthly_summary,
    compute_trend_series,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class MonthlySummaryView:
    """Monthly totals and category shares for UI rendering."""

    summary: MonthlySummary
    shares: list[CategoryShare]


class GetMonthlySummaryUseCase:
    """Compute the summary of one calendar month."""

    def __init__(self, ledger: LedgerService, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger: Service holding the current ledger.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger = ledger
        self._logger = logger or get_app_logger()

    def execute(self, month: int, year: int) -> MonthlySummaryView:
        """Return totals and category shares for the month.

        Args:
            month: Calendar month (1-12).
            year: Calendar year.

        Returns:
            MonthlySummaryView: Summary recomputed from the current ledger.
        """
        snapshot = self._ledger.snapshot()
        summary = compute_monthly_summary(
            snapshot.expenses,
            snapshot.incomes,
            month,
            year,
        )
        self._logger.info(
            f"Monthly summary {year}-{month:02d}: "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}"
        )
        return MonthlySummaryView(
            summary=summary,
            shares=compute_category_shares(summary),
        )


class GetTrendSeriesUseCase:
    """Compute monthly income and expense totals over a trailing window."""

    def __init__(self, ledger: LedgerService, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger: Service holding the current ledger.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger = ledger
        self._logger = logger or get_app_logger()

    def execute(
        self,
        window_months: int = 6,
        today: date | None = None,
    ) -> list[TrendPoint]:
        """Return one trend point per month, oldest first."""
        snapshot = self._ledger.snapshot()
        points = compute_trend_series(
            snapshot.expenses,
            snapshot.incomes,
            window_months,
            today or date.today(),
        )
        self._logger.info(f"Computed {len(points)} trend points")
        return points


__all__ = [
    "GetMonthlySummaryUseCase",
    "GetTrendSeriesUseCase",
    "MonthlySummaryView",
]
