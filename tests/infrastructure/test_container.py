"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

from src.infrastructure import container
from src.infrastructure.json_ledger_store import JsonLedgerStore
from src.infrastructure.settings import InsightSettings, LedgerSettings


def _quiet_logger(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)


def test_build_ledger_service_loads_store(monkeypatch, tmp_path: Path) -> None:
    _quiet_logger(monkeypatch)
    store = container.build_ledger_store(LedgerSettings(data_dir=tmp_path))

    service = container.build_ledger_service(store)

    assert isinstance(store, JsonLedgerStore)
    assert service.snapshot().is_empty


def test_build_insight_pipeline_defaults_to_rules(monkeypatch) -> None:
    _quiet_logger(monkeypatch)

    pipeline = container.build_insight_pipeline(InsightSettings())

    assert pipeline.backend_name == "rules"


def test_build_insight_pipeline_uses_language_model(monkeypatch) -> None:
    _quiet_logger(monkeypatch)
    settings = InsightSettings(use_remote_backend=True, api_key="sk-test")

    pipeline = container.build_insight_pipeline(settings)

    assert pipeline.backend_name == "language_model"
