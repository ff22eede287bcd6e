"""Tests for ledger store backend selection."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import ledger_store_factory as factory
from src.infrastructure.json_ledger_store import JsonLedgerStore
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sqlalchemy_ledger_store import SqlAlchemyLedgerStore


def test_factory_defaults_to_json(tmp_path: Path) -> None:
    """Factory should return the JSON store for the default backend."""
    store = factory.create_ledger_store(
        LedgerSettings(data_dir=tmp_path),
        logger=MagicMock(),
    )

    assert isinstance(store, JsonLedgerStore)
    assert store.data_dir == tmp_path.resolve()


def test_factory_uses_sqlalchemy_backend(monkeypatch) -> None:
    """Factory should wire the engine adapter with the configured URL."""
    captured = {}

    def _fake_adapter(db_url):
        captured["db_url"] = db_url
        return MagicMock()

    monkeypatch.setattr(factory, "SqlAlchemyDatabaseEngineAdapter", _fake_adapter)
    settings = LedgerSettings(backend="sqlalchemy", db_url="sqlite:///x.db")

    store = factory.create_ledger_store(settings, logger=MagicMock())

    assert isinstance(store, SqlAlchemyLedgerStore)
    assert captured["db_url"] == "sqlite:///x.db"


def test_sqlalchemy_backend_requires_url() -> None:
    with pytest.raises(RuntimeError):
        factory.create_ledger_store(
            LedgerSettings(backend="sqlalchemy"),
            logger=MagicMock(),
        )


def test_unknown_backend_is_rejected() -> None:
    with pytest.raises(ValueError):
        factory.create_ledger_store(
            LedgerSettings(backend="csv"),
            logger=MagicMock(),
        )
