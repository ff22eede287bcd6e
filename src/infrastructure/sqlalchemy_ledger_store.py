"""Ledger store backed by SQL tables through SQLAlchemy."""

from collections.abc import Sequence
from decimal import InvalidOperation

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import StorageError
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.domain.models import Expense, ExpenseCategory, Income, IncomeType
from src.infrastructure.json_ledger_store import parse_timestamp
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

EXPENSES_TABLE = "ledger_expenses"
INCOMES_TABLE = "ledger_incomes"

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS {table} (
    id TEXT PRIMARY KEY,
    position INTEGER NOT NULL,
    occurred_at TEXT NOT NULL,
    label TEXT NOT NULL,
    category TEXT NOT NULL,
    amount TEXT NOT NULL,
    note TEXT
)
"""

SELECT_SQL = """
SELECT id, occurred_at, label, category, amount, note
FROM {table}
ORDER BY position
"""

DELETE_SQL = "DELETE FROM {table}"

INSERT_SQL = """
INSERT INTO {table} (
    id,
    position,
    occurred_at,
    label,
    category,
    amount,
    note
)
VALUES (
    :id,
    :position,
    :occurred_at,
    :label,
    :category,
    :amount,
    :note
)
"""


def _to_row(record: Expense | Income, position: int) -> dict:
    return {
        "id": record.id,
        "position": position,
        "occurred_at": record.date.isoformat(),
        "label": record.label,
        "category": record.category.value,
        "amount": str(record.amount),
        "note": record.note,
    }


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store writing each collection to its own table.

    Every save deletes the table content and inserts the snapshot inside one
    transaction, mirroring the whole-document semantics of the JSON store.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._prepared = False

    def prepare(self) -> None:
        """Ensure both ledger tables exist."""
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                for table in (EXPENSES_TABLE, INCOMES_TABLE):
                    conn.exec_driver_sql(CREATE_TABLE_SQL.format(table=table))
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to create ledger tables: {exc}") from exc
        self._prepared = True

    def load_expenses(self) -> list[Expense]:
        rows = self._select(EXPENSES_TABLE)
        try:
            return [
                Expense(
                    id=row.id,
                    date=parse_timestamp(row.occurred_at),
                    label=row.label,
                    category=ExpenseCategory(row.category),
                    amount=coerce_decimal(row.amount),
                    note=row.note or "",
                )
                for row in rows
            ]
        except (ValueError, TypeError, InvalidOperation) as exc:
            raise StorageError(f"Invalid row in {EXPENSES_TABLE}: {exc}") from exc

    def save_expenses(self, expenses: Sequence[Expense]) -> None:
        self._replace(EXPENSES_TABLE, expenses)

    def load_incomes(self) -> list[Income]:
        rows = self._select(INCOMES_TABLE)
        try:
            return [
                Income(
                    id=row.id,
                    date=parse_timestamp(row.occurred_at),
                    label=row.label,
                    category=IncomeType(row.category),
                    amount=coerce_decimal(row.amount),
                    note=row.note or "",
                )
                for row in rows
            ]
        except (ValueError, TypeError, InvalidOperation) as exc:
            raise StorageError(f"Invalid row in {INCOMES_TABLE}: {exc}") from exc

    def save_incomes(self, incomes: Sequence[Income]) -> None:
        self._replace(INCOMES_TABLE, incomes)

    def _select(self, table: str) -> list:
        if not self._prepared:
            self.prepare()
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(text(SELECT_SQL.format(table=table))).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to read {table}: {exc}") from exc

    def _replace(self, table: str, records: Sequence[Expense | Income]) -> None:
        if not self._prepared:
            self.prepare()
        payload = [
            _to_row(record, position)
            for position, record in enumerate(records)
        ]
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                conn.exec_driver_sql(DELETE_SQL.format(table=table))
                if payload:
                    conn.execute(text(INSERT_SQL.format(table=table)), payload)
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to write {table}: {exc}") from exc
        self._logger.info(f"Saved {len(payload)} rows to {table}")


__all__ = [
    "EXPENSES_TABLE",
    "INCOMES_TABLE",
    "SqlAlchemyLedgerStore",
]
