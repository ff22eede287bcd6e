"""Insight backend delegating analysis to a remote language model."""

from src.application.backends.prompts import (
    build_advice_prompt,
    build_insights_prompt,
)
from src.application.backends.response_parser import (
    fallback_insight,
    parse_insights_response,
)
from src.application.errors import ParseError
from src.application.ports.completion_client import CompletionClientPort
from src.domain.models import FinancialProfile, Insight
from src.infrastructure.logging.logger import get_app_logger


class LanguageModelBackend:
    """Insight backend built on a text-completion endpoint.

    Transport and HTTP failures raised by the client propagate to the
    caller. Unparseable completions are not failures: they are wrapped
    into a single generic insight carrying the raw text.
    """

    name = "language_model"

    def __init__(self, client: CompletionClientPort, logger=None) -> None:
        """Initialize the backend.

        Args:
            client: Port sending prompts to the completion endpoint.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._client = client
        self._logger = logger or get_app_logger()

    async def analyze(self, profile: FinancialProfile) -> list[Insight]:
        """Return insights generated by the model for the profile.

        Args:
            profile: Profile of the analyzed month.

        Returns:
            list[Insight]: Parsed insights, or one generic insight when the
            completion does not follow the schema.
        """
        prompt = build_insights_prompt(profile)
        response = await self._client.complete(prompt)
        try:
            insights = parse_insights_response(response)
        except ParseError as exc:
            self._logger.warning(
                f"Model response did not match the insights schema: {exc}"
            )
            return [fallback_insight(response)]
        self._logger.info(f"Parsed {len(insights)} insights from the model")
        return insights

    async def advise(self, profile: FinancialProfile) -> str:
        """Return the model's coaching advice verbatim."""
        return await self._client.complete(build_advice_prompt(profile))


__all__ = ["LanguageModelBackend"]
