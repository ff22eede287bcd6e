"""Factory helpers to select the ledger storage backend."""

from pathlib import Path

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.json_ledger_store import JsonLedgerStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sqlalchemy_ledger_store import SqlAlchemyLedgerStore


def _normalize_data_dir(raw_path: str | Path, logger) -> Path:
    """Normalize the JSON data directory.

    Args:
        raw_path: Raw directory path string or Path instance.
        logger: Logger used for informational messages.

    Returns:
        Path: Absolute directory path.
    """
    path = Path(raw_path).expanduser().resolve()
    if not path.exists():
        logger.info(f"Ledger data directory {path} will be created on save")
    return path


def create_ledger_store(
    settings: LedgerSettings | None = None,
    logger=None,
    db_port: DatabaseEnginePort | None = None,
) -> LedgerStorePort:
    """Return a ledger store implementation based on configuration.

    Args:
        settings: Optional ledger settings; read from the environment when
            omitted.
        logger: Optional logger compatible with logging.Logger-like API.
        db_port: Optional engine port for the sqlalchemy backend.

    Returns:
        LedgerStorePort: Concrete store implementation.

    Raises:
        RuntimeError: If the sqlalchemy backend has no database URL.
        ValueError: If the backend name is unknown.
    """
    resolved_logger = logger or get_app_logger()
    resolved = settings or LedgerSettings.from_env()
    selected_backend = resolved.backend.strip().lower()

    if selected_backend == "json":
        data_dir = _normalize_data_dir(resolved.data_dir, resolved_logger)
        return JsonLedgerStore(data_dir, logger=resolved_logger)

    if selected_backend == "sqlalchemy":
        if db_port is None and not resolved.db_url:
            raise RuntimeError(
                "SQLAlchemy ledger backend requires a LEDGER_DB_URL value."
            )
        resolved_db = db_port or SqlAlchemyDatabaseEngineAdapter(
            resolved.db_url
        )
        return SqlAlchemyLedgerStore(resolved_db, logger=resolved_logger)

    raise ValueError(
        "Unsupported ledger backend: "
        f"{selected_backend}. Expected json or sqlalchemy."
    )


__all__ = ["create_ledger_store"]
