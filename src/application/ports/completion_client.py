"""Port for remote text-completion endpoints."""

from typing import Protocol


class CompletionClientPort(Protocol):
    """Port sending a single user prompt to a language model.

    Implementations raise ``TransportFailure``, ``HTTPStatusError`` or
    ``InvalidResponseShape`` when no completion text can be returned.
    """

    async def complete(self, prompt: str) -> str:
        """Return the completion text for ``prompt``."""


__all__ = ["CompletionClientPort"]
