"""Port for persisting ledger snapshots."""

from collections.abc import Sequence
from typing import Protocol

from src.domain.models import Expense, Income


class LedgerStorePort(Protocol):
    """Port exposing whole-collection load and save of the ledger.

    Each save replaces the stored collection with the given snapshot.
    Implementations raise ``StorageError`` on I/O or decoding failures.
    """

    def load_expenses(self) -> list[Expense]:
        """Return every stored expense in stored order."""

    def save_expenses(self, expenses: Sequence[Expense]) -> None:
        """Replace the stored expenses with ``expenses``."""

    def load_incomes(self) -> list[Income]:
        """Return every stored income in stored order."""

    def save_incomes(self, incomes: Sequence[Income]) -> None:
        """Replace the stored incomes with ``incomes``."""


__all__ = ["LedgerStorePort"]
