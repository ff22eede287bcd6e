"""Application ports package."""

from .completion_client import CompletionClientPort
from .database import DatabaseEnginePort
from .insight_backend import InsightBackendPort
from .ledger_store import LedgerStorePort

__all__ = [
    "CompletionClientPort",
    "DatabaseEnginePort",
    "InsightBackendPort",
    "LedgerStorePort",
]
