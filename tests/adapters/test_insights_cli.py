"""Tests for the insights_cli adapter."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import insights_cli
from src.application.errors import StorageError
from src.domain.models import Insight, InsightPriority, InsightType


class _FakePipeline:
    def __init__(self, error=None) -> None:
        self.error = error
        self.summary = None
        self.insights = []
        self.snapshots = []

    async def refresh(self, snapshot):
        self.snapshots.append(snapshot)
        self.summary = SimpleNamespace(
            year=2024,
            month=3,
            total_income=Decimal("2500"),
            total_expenses=Decimal("3000"),
            net_income=Decimal("-500"),
        )
        self.insights = [
            Insight(
                title="Overspending Alert",
                message="You're spending $500.00 more than you earn.",
                type=InsightType.WARNING,
                priority=InsightPriority.HIGH,
                action_items=("Create a strict monthly budget",),
            )
        ]
        return True


def test_main_prints_insights(monkeypatch, capsys):
    """The CLI should refresh the pipeline and print every insight."""
    ledger = MagicMock()
    pipeline = _FakePipeline()
    monkeypatch.setattr(insights_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(insights_cli, "build_ledger_service", lambda: ledger)
    monkeypatch.setattr(insights_cli, "build_insight_pipeline", lambda: pipeline)

    insights_cli.main()

    captured = capsys.readouterr()
    assert pipeline.snapshots == [ledger.snapshot.return_value]
    assert "2024-03: income=2500, expenses=3000, net=-500" in captured.out
    assert "[HIGH] Overspending Alert (warning)" in captured.out
    assert "  - Create a strict monthly budget" in captured.out


def test_main_reports_backend_error(monkeypatch, capsys):
    pipeline = _FakePipeline(error="Insight generation failed: offline")
    monkeypatch.setattr(insights_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(insights_cli, "build_ledger_service", MagicMock)
    monkeypatch.setattr(insights_cli, "build_insight_pipeline", lambda: pipeline)

    insights_cli.main()

    assert "Backend error: Insight generation failed: offline" in (
        capsys.readouterr().out
    )


def test_main_logs_storage_errors(monkeypatch):
    logger = MagicMock()

    def _broken_ledger():
        raise StorageError("corrupt expenses.json")

    monkeypatch.setattr(insights_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(insights_cli, "build_ledger_service", _broken_ledger)

    insights_cli.main()

    logger.error.assert_called_once()
    assert "corrupt expenses.json" in logger.error.call_args.args[0]
