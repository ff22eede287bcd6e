"""Error taxonomy shared by the ledger and the insight pipeline."""


class StorageError(RuntimeError):
    """Reading or writing a ledger snapshot failed."""


class BackendError(RuntimeError):
    """An insight backend could not produce a result."""


class TransportFailure(BackendError):
    """The remote endpoint could not be reached or timed out."""


class HTTPStatusError(BackendError):
    """The remote endpoint answered with a non-success status."""

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        self.status_code = status_code
        message = f"Remote endpoint returned HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidResponseShape(BackendError):
    """The completion payload lacked the expected message content."""


class MissingCredential(BackendError):
    """The remote backend was requested without an API credential."""


class ParseError(ValueError):
    """The completion text did not match the insights schema."""


__all__ = [
    "BackendError",
    "HTTPStatusError",
    "InvalidResponseShape",
    "MissingCredential",
    "ParseError",
    "StorageError",
    "TransportFailure",
]
