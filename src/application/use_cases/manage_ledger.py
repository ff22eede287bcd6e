"""Use case holding the in-memory ledger and persisting its snapshots.

Mutations are serialized by a single lock so that the duplicate check and
the append happen atomically. Every mutation writes the full collection
through the ledger store; memory is only updated once the save succeeded.
"""

from collections.abc import Callable, Sequence
import threading

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.models import (
    Expense,
    Income,
    LedgerSnapshot,
    LedgerTotals,
)
from src.domain.policies.duplicates import find_duplicate
from src.domain.services.aggregation import compute_ledger_totals, filter_month
from src.infrastructure.logging.logger import get_app_logger


class LedgerService:
    """Manage expenses and incomes backed by a ledger store."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the service.

        Args:
            store: Port persisting the expense and income collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._lock = threading.Lock()
        self._expenses: tuple[Expense, ...] = ()
        self._incomes: tuple[Income, ...] = ()

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return self._expenses

    @property
    def incomes(self) -> tuple[Income, ...]:
        return self._incomes

    def load(self) -> LedgerSnapshot:
        """Replace the in-memory ledger with the stored collections.

        Returns:
            LedgerSnapshot: Snapshot of the loaded ledger.

        Raises:
            StorageError: If the store cannot be read.
        """
        with self._lock:
            expenses = tuple(self._store.load_expenses())
            incomes = tuple(self._store.load_incomes())
            self._expenses = expenses
            self._incomes = incomes
        self._logger.info(
            f"Loaded {len(expenses)} expenses and {len(incomes)} incomes"
        )
        return self.snapshot()

    def snapshot(self) -> LedgerSnapshot:
        """Return an immutable snapshot of both collections."""
        return LedgerSnapshot(expenses=self._expenses, incomes=self._incomes)

    def add_expense(self, expense: Expense) -> bool:
        """Append an expense unless it duplicates an existing one.

        Returns:
            bool: True when stored, False when rejected as a duplicate.
        """
        with self._lock:
            updated = self._append(
                self._expenses, expense, self._store.save_expenses
            )
            if updated is None:
                return False
            self._expenses = updated
        return True

    def add_income(self, income: Income) -> bool:
        """Append an income unless it duplicates an existing one.

        Returns:
            bool: True when stored, False when rejected as a duplicate.
        """
        with self._lock:
            updated = self._append(
                self._incomes, income, self._store.save_incomes
            )
            if updated is None:
                return False
            self._incomes = updated
        return True

    def delete_expense(self, expense_id: str) -> bool:
        """Remove the expense with ``expense_id``; return True if found."""
        with self._lock:
            updated = self._remove(
                self._expenses, expense_id, self._store.save_expenses
            )
            if updated is None:
                return False
            self._expenses = updated
        return True

    def delete_income(self, income_id: str) -> bool:
        """Remove the income with ``income_id``; return True if found."""
        with self._lock:
            updated = self._remove(
                self._incomes, income_id, self._store.save_incomes
            )
            if updated is None:
                return False
            self._incomes = updated
        return True

    def replace_expense(self, expense_id: str, replacement: Expense) -> bool:
        """Delete an expense and insert its replacement in one save.

        Returns:
            bool: False when the original is missing or the replacement
            duplicates another record.
        """
        with self._lock:
            updated = self._replace(
                self._expenses,
                expense_id,
                replacement,
                self._store.save_expenses,
            )
            if updated is None:
                return False
            self._expenses = updated
        return True

    def replace_income(self, income_id: str, replacement: Income) -> bool:
        """Delete an income and insert its replacement in one save."""
        with self._lock:
            updated = self._replace(
                self._incomes,
                income_id,
                replacement,
                self._store.save_incomes,
            )
            if updated is None:
                return False
            self._incomes = updated
        return True

    def history(self) -> list[Expense | Income]:
        """Return every transaction, newest first."""
        transactions: list[Expense | Income] = [
            *self._expenses,
            *self._incomes,
        ]
        # timestamp() orders naive and aware datetimes together
        return sorted(
            transactions,
            key=lambda tx: tx.date.timestamp(),
            reverse=True,
        )

    def expenses_for_month(self, month: int, year: int) -> list[Expense]:
        """Return the expenses dated within the given month."""
        return filter_month(self._expenses, month, year)

    def totals(self) -> LedgerTotals:
        """Return lifetime totals of the ledger."""
        return compute_ledger_totals(self._expenses, self._incomes)

    def _append(
        self,
        current: tuple,
        record: Expense | Income,
        save: Callable[[Sequence], None],
    ) -> tuple | None:
        duplicate = find_duplicate(record, current)
        if duplicate is not None:
            self._logger.info(
                f"Duplicate skipped: {record.label} {record.amount} "
                f"(matches {duplicate.id})"
            )
            return None
        updated = (*current, record)
        save(updated)
        self._logger.info(
            f"Ledger appended: {record.date:%Y-%m-%d} {record.amount} "
            f"{record.label}"
        )
        return updated

    def _remove(
        self,
        current: tuple,
        record_id: str,
        save: Callable[[Sequence], None],
    ) -> tuple | None:
        updated = tuple(record for record in current if record.id != record_id)
        if len(updated) == len(current):
            self._logger.warning(f"No transaction found with id {record_id}")
            return None
        save(updated)
        self._logger.info(f"Ledger removed: {record_id}")
        return updated

    def _replace(
        self,
        current: tuple,
        record_id: str,
        replacement: Expense | Income,
        save: Callable[[Sequence], None],
    ) -> tuple | None:
        remaining = tuple(
            record for record in current if record.id != record_id
        )
        if len(remaining) == len(current):
            self._logger.warning(f"No transaction found with id {record_id}")
            return None
        if find_duplicate(replacement, remaining) is not None:
            self._logger.info(
                f"Replacement for {record_id} duplicates an existing record"
            )
            return None
        updated = (*remaining, replacement)
        save(updated)
        self._logger.info(f"Ledger replaced: {record_id} -> {replacement.id}")
        return updated


__all__ = ["LedgerService"]
