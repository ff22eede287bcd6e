"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_BASE_URL = "https://api.openai.com/v1"


def _load_env() -> None:
    """Load variables from a local .env file when present."""
    dotenv.load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_number(name: str, default, cast, logger):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}; using {default}")
        return default


@dataclass(frozen=True)
class InsightSettings:
    """Settings for selecting and reaching the insight backend.

    Attributes:
        use_remote_backend: Whether the language-model backend is wanted.
        api_key: Bearer credential for the completion endpoint.
        model: Model identifier sent with each request.
        base_url: Root URL of the OpenAI-compatible API.
        max_tokens: Completion length limit.
        temperature: Sampling temperature.
        timeout_seconds: Upper bound for one remote analysis.
    """

    use_remote_backend: bool = False
    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    max_tokens: int = 1000
    temperature: float = 0.7
    timeout_seconds: float = 20.0

    @property
    def has_credential(self) -> bool:
        """Return True when a non-blank API key is configured."""
        return bool(self.api_key and self.api_key.strip())

    @property
    def remote_enabled(self) -> bool:
        """Return True when the remote backend can actually be used."""
        return self.use_remote_backend and self.has_credential

    @classmethod
    def from_env(cls) -> "InsightSettings":
        """Build settings from environment variables.

        Returns:
            InsightSettings: Settings sourced from environment variables.
        """
        _load_env()
        logger = get_app_logger()
        return cls(
            use_remote_backend=_env_flag("INSIGHTS_USE_REMOTE"),
            api_key=os.getenv("OPENAI_API_KEY", "").strip(),
            model=os.getenv("INSIGHTS_MODEL", DEFAULT_MODEL).strip()
            or DEFAULT_MODEL,
            base_url=os.getenv("INSIGHTS_BASE_URL", DEFAULT_BASE_URL).strip()
            or DEFAULT_BASE_URL,
            max_tokens=_env_number(
                "INSIGHTS_MAX_TOKENS", 1000, int, logger
            ),
            temperature=_env_number(
                "INSIGHTS_TEMPERATURE", 0.7, float, logger
            ),
            timeout_seconds=_env_number(
                "INSIGHTS_TIMEOUT_SECONDS", 20.0, float, logger
            ),
        )


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for selecting the ledger storage backend.

    Attributes:
        backend: Backend identifier (json or sqlalchemy).
        data_dir: Directory holding the JSON documents.
        db_url: Optional SQLAlchemy URL for the sqlalchemy backend.
    """

    backend: str = "json"
    data_dir: Path = get_project_root() / "data"
    db_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        _load_env()
        backend = os.getenv("LEDGER_BACKEND", "json").strip().lower()
        raw_dir = os.getenv("LEDGER_DATA_DIR")
        data_dir = (
            Path(raw_dir).expanduser().resolve()
            if raw_dir
            else get_project_root() / "data"
        )
        db_url = os.getenv("LEDGER_DB_URL") or None
        return cls(backend=backend, data_dir=data_dir, db_url=db_url)


__all__ = ["InsightSettings", "LedgerSettings"]
