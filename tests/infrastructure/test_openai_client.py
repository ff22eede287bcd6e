"""Tests for the OpenAI completion client."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from src.application.errors import (
    HTTPStatusError,
    InvalidResponseShape,
    MissingCredential,
    TransportFailure,
)
from src.infrastructure.openai_client import OpenAICompletionClient
from src.infrastructure.settings import InsightSettings

SETTINGS = InsightSettings(
    use_remote_backend=True,
    api_key="sk-test",
    model="gpt-test",
    max_tokens=321,
    temperature=0.2,
)
REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _sdk(result=None, error: Exception | None = None) -> MagicMock:
    sdk = MagicMock()
    sdk.chat.completions.create = AsyncMock(return_value=result, side_effect=error)
    return sdk


def _completion(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


def _client(sdk) -> OpenAICompletionClient:
    return OpenAICompletionClient(SETTINGS, client=sdk, logger=MagicMock())


def test_complete_sends_single_user_message() -> None:
    sdk = _sdk(_completion("hello"))

    text = asyncio.run(_client(sdk).complete("prompt"))

    assert text == "hello"
    sdk.chat.completions.create.assert_awaited_once_with(
        model="gpt-test",
        messages=[{"role": "user", "content": "prompt"}],
        max_tokens=321,
        temperature=0.2,
    )


def test_missing_key_is_rejected() -> None:
    with pytest.raises(MissingCredential):
        OpenAICompletionClient(InsightSettings(), client=MagicMock())


def test_status_errors_keep_status_code() -> None:
    error = openai.InternalServerError(
        "server exploded",
        response=httpx.Response(503, request=REQUEST),
        body=None,
    )

    with pytest.raises(HTTPStatusError) as excinfo:
        asyncio.run(_client(_sdk(error=error)).complete("prompt"))

    assert excinfo.value.status_code == 503


def test_connection_errors_become_transport_failures() -> None:
    error = openai.APIConnectionError(request=REQUEST)

    with pytest.raises(TransportFailure):
        asyncio.run(_client(_sdk(error=error)).complete("prompt"))


@pytest.mark.parametrize(
    "payload",
    [
        SimpleNamespace(choices=[]),
        _completion(None),
        _completion(""),
    ],
)
def test_empty_payloads_are_invalid(payload) -> None:
    with pytest.raises(InvalidResponseShape):
        asyncio.run(_client(_sdk(payload)).complete("prompt"))
