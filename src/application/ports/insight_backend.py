"""Port for pluggable insight backends."""

from typing import Protocol

from src.domain.models import FinancialProfile, Insight


class InsightBackendPort(Protocol):
    """Port turning a financial profile into insights."""

    name: str

    async def analyze(self, profile: FinancialProfile) -> list[Insight]:
        """Return insights for the profile, in backend order."""

    async def advise(self, profile: FinancialProfile) -> str:
        """Return free-text coaching advice for the profile."""


__all__ = ["InsightBackendPort"]
