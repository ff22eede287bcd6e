"""Completion client for OpenAI-compatible chat completion endpoints."""

import openai
from openai import AsyncOpenAI

from src.application.errors import (
    HTTPStatusError,
    InvalidResponseShape,
    MissingCredential,
    TransportFailure,
)
from src.application.ports.completion_client import CompletionClientPort
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import InsightSettings


class OpenAICompletionClient(CompletionClientPort):
    """Send single-message prompts through the OpenAI SDK.

    The SDK's own retries are disabled; the insight pipeline decides what
    happens after a failure.
    """

    def __init__(
        self,
        settings: InsightSettings,
        client: AsyncOpenAI | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Model, endpoint and credential settings.
            client: Optional preconfigured SDK client.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            MissingCredential: If no API key is configured.
        """
        if not settings.has_credential:
            raise MissingCredential("OPENAI_API_KEY is not configured")
        self._settings = settings
        self._logger = logger or get_app_logger()
        self._client = client or AsyncOpenAI(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            max_retries=0,
        )

    async def complete(self, prompt: str) -> str:
        """Return the first choice's message content for ``prompt``.

        Args:
            prompt: User message sent to the model.

        Returns:
            str: Completion text.

        Raises:
            HTTPStatusError: If the endpoint answers with an error status.
            TransportFailure: If the endpoint cannot be reached.
            InvalidResponseShape: If the payload carries no message content.
        """
        self._logger.info(
            f"Requesting completion from {self._settings.model} "
            f"({len(prompt)} chars)"
        )
        try:
            response = await self._client.chat.completions.create(
                model=self._settings.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self._settings.max_tokens,
                temperature=self._settings.temperature,
            )
        except openai.APIStatusError as exc:
            raise HTTPStatusError(exc.status_code, exc.message) from exc
        except openai.APIConnectionError as exc:
            raise TransportFailure(f"Completion request failed: {exc}") from exc
        except openai.APIError as exc:
            raise InvalidResponseShape(
                f"Unexpected completion payload: {exc}"
            ) from exc

        choices = getattr(response, "choices", None) or []
        if not choices:
            raise InvalidResponseShape("Completion contained no choices")
        content = getattr(choices[0].message, "content", None)
        if not content:
            raise InvalidResponseShape("Completion message had no content")
        return content


__all__ = ["OpenAICompletionClient"]
