"""Insight backend evaluating deterministic local rules."""

import asyncio

from src.domain.models import FinancialProfile, Insight
from src.domain.services.insight_rules import (
    generate_rule_advice,
    generate_rule_insights,
)


class RuleBasedBackend:
    """Local, deterministic insight backend.

    Optionally sleeps before answering so interfaces behave the same way
    as with the remote backend.
    """

    name = "rules"

    def __init__(self, simulated_latency: float = 0.0) -> None:
        """Initialize the backend.

        Args:
            simulated_latency: Seconds to wait before returning results.
        """
        self._simulated_latency = simulated_latency

    def analyze_now(self, profile: FinancialProfile) -> list[Insight]:
        """Evaluate the rules synchronously."""
        return generate_rule_insights(profile)

    async def analyze(self, profile: FinancialProfile) -> list[Insight]:
        """Return rule insights for the profile."""
        await self._pause()
        return self.analyze_now(profile)

    async def advise(self, profile: FinancialProfile) -> str:
        """Return canned coaching text for the profile."""
        await self._pause()
        return generate_rule_advice(profile)

    async def _pause(self) -> None:
        if self._simulated_latency > 0:
            await asyncio.sleep(self._simulated_latency)


__all__ = ["RuleBasedBackend"]
