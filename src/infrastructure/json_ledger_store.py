"""Ledger store persisting expenses and incomes as JSON documents."""

from collections.abc import Sequence
from datetime import datetime
from decimal import InvalidOperation
import json
import os
from pathlib import Path
import tempfile

from src.application.errors import StorageError
from src.application.ports.ledger_store import LedgerStorePort
from src.domain.models import Expense, ExpenseCategory, Income, IncomeType
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

EXPENSES_FILE = "expenses.json"
INCOMES_FILE = "incomes.json"

_DECODE_ERRORS = (
    KeyError,
    TypeError,
    ValueError,
    InvalidOperation,
)


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``.

    Raises:
        ValueError: If ``raw`` is not an ISO-8601 string.
    """
    if not isinstance(raw, str):
        raise ValueError(f"Timestamp must be a string, got {raw!r}")
    text = raw.strip()
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    return datetime.fromisoformat(text)


def expense_to_dict(expense: Expense) -> dict:
    """Return the JSON document of an expense."""
    return {
        "id": expense.id,
        "date": expense.date.isoformat(),
        "name": expense.label,
        "category": expense.category.value,
        "cost": str(expense.amount),
        "note": expense.note,
    }


def expense_from_dict(payload: dict) -> Expense:
    """Build an expense from its JSON document."""
    return Expense(
        id=str(payload["id"]),
        date=parse_timestamp(payload["date"]),
        label=str(payload["name"]),
        category=ExpenseCategory(payload["category"]),
        amount=coerce_decimal(payload["cost"]),
        note=str(payload.get("note") or ""),
    )


def income_to_dict(income: Income) -> dict:
    """Return the JSON document of an income."""
    return {
        "id": income.id,
        "date": income.date.isoformat(),
        "source": income.label,
        "type": income.category.value,
        "amount": str(income.amount),
        "note": income.note,
    }


def income_from_dict(payload: dict) -> Income:
    """Build an income from its JSON document."""
    return Income(
        id=str(payload["id"]),
        date=parse_timestamp(payload["date"]),
        label=str(payload["source"]),
        category=IncomeType(payload["type"]),
        amount=coerce_decimal(payload["amount"]),
        note=str(payload.get("note") or ""),
    )


class JsonLedgerStore(LedgerStorePort):
    """Ledger store writing one JSON array per collection.

    Saves go to a temporary file in the same directory which then replaces
    the document, so a failed write leaves the previous snapshot intact.
    """

    def __init__(self, data_dir: Path | str, logger=None) -> None:
        """Initialize the store.

        Args:
            data_dir: Directory holding ``expenses.json`` and
                ``incomes.json``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._data_dir = Path(data_dir)
        self._logger = logger or get_app_logger()

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def load_expenses(self) -> list[Expense]:
        return self._decode(EXPENSES_FILE, expense_from_dict)

    def save_expenses(self, expenses: Sequence[Expense]) -> None:
        self._write(EXPENSES_FILE, [expense_to_dict(e) for e in expenses])

    def load_incomes(self) -> list[Income]:
        return self._decode(INCOMES_FILE, income_from_dict)

    def save_incomes(self, incomes: Sequence[Income]) -> None:
        self._write(INCOMES_FILE, [income_to_dict(i) for i in incomes])

    def _decode(self, filename: str, builder) -> list:
        items = self._read(filename)
        try:
            return [builder(item) for item in items]
        except _DECODE_ERRORS as exc:
            raise StorageError(
                f"Invalid record in {self._data_dir / filename}: {exc}"
            ) from exc

    def _read(self, filename: str) -> list:
        path = self._data_dir / filename
        if not path.exists():
            self._logger.info(f"No ledger file at {path}; starting empty")
            return []
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Unable to read {path}: {exc}") from exc
        if not isinstance(payload, list):
            raise StorageError(f"Expected a JSON array in {path}")
        return payload

    def _write(self, filename: str, payload: list[dict]) -> None:
        path = self._data_dir / filename
        tmp_name = None
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._data_dir,
                prefix=f".{filename}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                json.dump(payload, handle, indent=2)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise StorageError(f"Unable to write {path}: {exc}") from exc
        self._logger.info(f"Saved {len(payload)} records to {path}")


__all__ = [
    "EXPENSES_FILE",
    "INCOMES_FILE",
    "JsonLedgerStore",
    "expense_from_dict",
    "expense_to_dict",
    "income_from_dict",
    "income_to_dict",
    "parse_timestamp",
]
