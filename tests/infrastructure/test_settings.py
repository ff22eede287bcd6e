"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import InsightSettings, LedgerSettings

_INSIGHT_VARS = (
    "INSIGHTS_USE_REMOTE",
    "OPENAI_API_KEY",
    "INSIGHTS_MODEL",
    "INSIGHTS_BASE_URL",
    "INSIGHTS_MAX_TOKENS",
    "INSIGHTS_TEMPERATURE",
    "INSIGHTS_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in (*_INSIGHT_VARS, "LEDGER_BACKEND", "LEDGER_DATA_DIR",
                 "LEDGER_DB_URL"):
        monkeypatch.delenv(name, raising=False)


def test_insight_defaults_use_rules() -> None:
    settings = InsightSettings.from_env()

    assert settings.use_remote_backend is False
    assert settings.model == "gpt-3.5-turbo"
    assert settings.max_tokens == 1000
    assert settings.temperature == 0.7
    assert settings.timeout_seconds == 20.0
    assert settings.remote_enabled is False


def test_insight_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("INSIGHTS_USE_REMOTE", "Yes")
    monkeypatch.setenv("OPENAI_API_KEY", "  sk-live  ")
    monkeypatch.setenv("INSIGHTS_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("INSIGHTS_MAX_TOKENS", "500")
    monkeypatch.setenv("INSIGHTS_TIMEOUT_SECONDS", "5")

    settings = InsightSettings.from_env()

    assert settings.use_remote_backend is True
    assert settings.api_key == "sk-live"
    assert settings.model == "gpt-4o-mini"
    assert settings.max_tokens == 500
    assert settings.timeout_seconds == 5.0
    assert settings.remote_enabled is True


def test_invalid_numbers_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("INSIGHTS_TEMPERATURE", "warm")

    assert InsightSettings.from_env().temperature == 0.7


def test_blank_key_disables_remote_backend() -> None:
    settings = InsightSettings(use_remote_backend=True, api_key="   ")

    assert settings.has_credential is False
    assert settings.remote_enabled is False


def test_ledger_settings_resolve_data_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LEDGER_BACKEND", " SQLAlchemy ")
    monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LEDGER_DB_URL", "sqlite:///ledger.db")

    settings = LedgerSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.data_dir == tmp_path.resolve()
    assert settings.db_url == "sqlite:///ledger.db"


def test_ledger_settings_default_to_json() -> None:
    settings = LedgerSettings.from_env()

    assert settings.backend == "json"
    assert settings.data_dir.name == "data"
    assert settings.db_url is None
