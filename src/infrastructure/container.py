"""Composition root for wiring infrastructure adapters."""

from src.application.backends import LanguageModelBackend, RuleBasedBackend
from src.application.ports.completion_client import CompletionClientPort
from src.application.ports.insight_backend import InsightBackendPort
from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.generate_insights import InsightPipeline
from src.application.use_cases.manage_ledger import LedgerService
from src.infrastructure.ledger_store_factory import create_ledger_store
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.openai_client import OpenAICompletionClient
from src.infrastructure.settings import InsightSettings, LedgerSettings


def build_ledger_store(
    settings: LedgerSettings | None = None,
) -> LedgerStorePort:
    """Return the configured ledger store."""
    return create_ledger_store(
        settings or LedgerSettings.from_env(),
        logger=get_app_logger(),
    )


def build_ledger_service(
    store: LedgerStorePort | None = None,
) -> LedgerService:
    """Return a ledger service loaded from the configured store."""
    service = LedgerService(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )
    service.load()
    return service


def build_completion_client(
    settings: InsightSettings,
) -> CompletionClientPort:
    """Return the completion client for the remote insight backend."""
    return OpenAICompletionClient(settings, logger=get_app_logger())


def build_insight_backend(settings: InsightSettings) -> InsightBackendPort:
    """Return the language-model backend built from settings."""
    return LanguageModelBackend(
        build_completion_client(settings),
        logger=get_app_logger(),
    )


def build_insight_pipeline(
    settings: InsightSettings | None = None,
) -> InsightPipeline:
    """Return an insight pipeline wired with both backends."""
    return InsightPipeline(
        settings or InsightSettings.from_env(),
        remote_backend_factory=build_insight_backend,
        fallback_backend=RuleBasedBackend(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_ledger_store",
    "build_ledger_service",
    "build_completion_client",
    "build_insight_backend",
    "build_insight_pipeline",
]
