"""Use case probing the remote insight backend with a sample profile."""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from src.application.errors import MissingCredential
from src.application.ports.insight_backend import InsightBackendPort
from src.domain.models import FinancialProfile, MonthKey
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import InsightSettings

PREVIEW_LENGTH = 100

SAMPLE_PROFILE = FinancialProfile(
    month=MonthKey(2024, 2),
    total_monthly_income=Decimal("3000"),
    total_monthly_expenses=Decimal("2500"),
    top_spending_categories=(
        ("Rent", Decimal("1200")),
        ("Food", Decimal("500")),
    ),
    spending_trends={
        MonthKey(2024, 1): Decimal("2500"),
        MonthKey(2024, 2): Decimal("2400"),
    },
)


@dataclass(frozen=True)
class ConnectionCheckResult:
    """Outcome of a connection probe."""

    success: bool
    message: str


class CheckConnectionUseCase:
    """Request advice for a fixed sample profile from the remote backend."""

    def __init__(
        self,
        backend_factory: Callable[[InsightSettings], InsightBackendPort],
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            backend_factory: Builds the remote backend from settings.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._backend_factory = backend_factory
        self._logger = logger or get_app_logger()

    async def execute(self, settings: InsightSettings) -> ConnectionCheckResult:
        """Probe the endpoint described by ``settings``.

        Args:
            settings: Settings of the endpoint to probe.

        Returns:
            ConnectionCheckResult: Success with a preview of the answer, or
            failure with the error message.
        """
        if not settings.has_credential:
            return ConnectionCheckResult(
                success=False,
                message="Please enter your OpenAI API key first.",
            )
        try:
            backend = self._backend_factory(settings)
            advice = await backend.advise(SAMPLE_PROFILE)
        except MissingCredential as exc:
            return ConnectionCheckResult(success=False, message=str(exc))
        except Exception as exc:
            self._logger.warning(f"Connection check failed: {exc}")
            return ConnectionCheckResult(success=False, message=f"Error: {exc}")
        self._logger.info(f"Connection check succeeded with {settings.model}")
        return ConnectionCheckResult(
            success=True,
            message=(
                "Success! AI connection working. Response: "
                f"{advice[:PREVIEW_LENGTH]}..."
            ),
        )


__all__ = [
    "CheckConnectionUseCase",
    "ConnectionCheckResult",
    "SAMPLE_PROFILE",
]
