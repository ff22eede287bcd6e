"""Use case orchestrating insight generation over the ledger.

The pipeline recomputes the current month's summary, reduces it into a
financial profile and hands the profile to the active backend. Whatever
goes wrong in the backend, the published insights come either from that
backend or from the deterministic rules, never from an earlier run.
"""

import asyncio
from collections.abc import Callable
from datetime import date

from src.application.backends.rule_based import RuleBasedBackend
from src.application.errors import BackendError
from src.application.ports.insight_backend import InsightBackendPort
from src.domain.models import (
    FinancialProfile,
    Insight,
    LedgerSnapshot,
    MonthlySummary,
)
from src.domain.services.aggregation import compute_monthly_summary
from src.domain.services.profile import build_financial_profile
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import InsightSettings

RemoteBackendFactory = Callable[[InsightSettings], InsightBackendPort]


class InsightPipeline:
    """Generate insights with the configured backend and rule fallback.

    Attributes:
        insights: Insights published by the latest completed refresh.
        error: User-visible message of the latest failed backend call.
        summary: Monthly summary used by the latest completed refresh.
        profile: Profile used by the latest completed refresh.
        is_loading: True while a refresh is awaiting its backend.
        used_fallback: True when the published insights come from rules
            after a backend failure.
    """

    def __init__(
        self,
        settings: InsightSettings,
        remote_backend_factory: RemoteBackendFactory | None = None,
        fallback_backend: RuleBasedBackend | None = None,
        logger=None,
        user_goals: tuple[str, ...] = (),
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Backend selection and timeout settings.
            remote_backend_factory: Builds the language-model backend from
                settings; without it the rules are always used.
            fallback_backend: Rule backend used directly and as recovery.
            logger: Optional logger compatible with logging.Logger-like API.
            user_goals: Free-text goals added to every profile.
        """
        self._logger = logger or get_app_logger()
        self._remote_backend_factory = remote_backend_factory
        self._fallback = fallback_backend or RuleBasedBackend()
        self._user_goals: tuple[str, ...] = ()
        self._sequence = 0
        self._settings = settings
        self._backend: InsightBackendPort = self._fallback

        self.insights: list[Insight] = []
        self.error: str | None = None
        self.summary: MonthlySummary | None = None
        self.profile: FinancialProfile | None = None
        self.is_loading = False
        self.used_fallback = False

        self.set_user_goals(user_goals)
        self.update_backend(settings)

    @property
    def settings(self) -> InsightSettings:
        return self._settings

    @property
    def backend(self) -> InsightBackendPort:
        return self._backend

    @property
    def backend_name(self) -> str:
        return self._backend.name

    def update_backend(self, settings: InsightSettings) -> None:
        """Select the active backend from new settings.

        The language-model backend is used only when requested and a
        non-blank credential is configured.

        Args:
            settings: New backend selection settings.
        """
        self._settings = settings
        backend: InsightBackendPort = self._fallback
        if settings.use_remote_backend and not settings.has_credential:
            self._logger.warning(
                "Remote insights requested without an API key; "
                "using rule-based insights"
            )
        elif settings.use_remote_backend and (
            self._remote_backend_factory is None
        ):
            self._logger.warning(
                "Remote insights requested but no remote backend is "
                "available; using rule-based insights"
            )
        elif settings.use_remote_backend:
            backend = self._remote_backend_factory(settings)
        self._backend = backend
        self._logger.info(f"Insight backend selected: {backend.name}")

    def set_user_goals(self, goals: tuple[str, ...]) -> None:
        """Replace the goals added to future profiles."""
        self._user_goals = tuple(goal for goal in goals if goal.strip())

    def build_profile(
        self,
        ledger: LedgerSnapshot,
        today: date,
    ) -> tuple[MonthlySummary, FinancialProfile]:
        """Return the current month's summary and its profile."""
        summary = compute_monthly_summary(
            ledger.expenses,
            ledger.incomes,
            today.month,
            today.year,
        )
        profile = build_financial_profile(
            ledger.expenses,
            ledger.incomes,
            summary,
            today,
            user_goals=self._user_goals,
        )
        return summary, profile

    async def refresh(
        self,
        ledger: LedgerSnapshot,
        today: date | None = None,
    ) -> bool:
        """Regenerate the insights for the current month.

        Backend failures are recorded in ``error`` and replaced by the rule
        insights. A refresh overtaken by a newer one is discarded.

        Args:
            ledger: Snapshot of the ledger to analyze.
            today: Reference date; defaults to the current date.

        Returns:
            bool: True when the results were published, False when a newer
            refresh superseded this one.
        """
        self._sequence += 1
        sequence = self._sequence
        summary, profile = self.build_profile(ledger, today or date.today())
        backend = self._backend
        timeout = self._settings.timeout_seconds
        self.is_loading = True
        try:
            error: str | None = None
            insights: list[Insight] = []
            try:
                insights = await asyncio.wait_for(
                    backend.analyze(profile),
                    timeout=timeout,
                )
            except asyncio.TimeoutError:
                error = (
                    f"Insight generation timed out after {timeout:g} seconds"
                )
            except BackendError as exc:
                error = f"Insight generation failed: {exc}"
            except Exception as exc:
                error = f"Unexpected insight generation error: {exc}"

            if error is not None:
                self._logger.warning(f"{error} ({backend.name}); using rules")
                insights = await self._fallback.analyze(profile)

            if sequence != self._sequence:
                self._logger.info(
                    f"Discarded stale insight refresh #{sequence} "
                    f"(latest is #{self._sequence})"
                )
                return False

            self.summary = summary
            self.profile = profile
            self.insights = list(insights)
            self.error = error
            self.used_fallback = error is not None
            self._logger.info(
                f"Published {len(self.insights)} insights from "
                f"{self._fallback.name if error else backend.name}"
            )
            return True
        finally:
            # a newer refresh owns the flag until it finishes
            if sequence == self._sequence:
                self.is_loading = False

    async def advise(
        self,
        ledger: LedgerSnapshot,
        today: date | None = None,
    ) -> str:
        """Return personalized advice, falling back to canned advice.

        Args:
            ledger: Snapshot of the ledger to analyze.
            today: Reference date; defaults to the current date.

        Returns:
            str: Advice text from the active backend or the rules.
        """
        _, profile = self.build_profile(ledger, today or date.today())
        backend = self._backend
        timeout = self._settings.timeout_seconds
        try:
            return await asyncio.wait_for(
                backend.advise(profile),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            self._logger.warning(
                f"Advice timed out after {timeout:g} seconds; using rules"
            )
        except Exception as exc:
            self._logger.warning(f"Advice generation failed: {exc}")
        return await self._fallback.advise(profile)


__all__ = ["InsightPipeline", "RemoteBackendFactory"]
