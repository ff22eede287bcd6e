"""Tests for the LedgerService use case."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.errors import StorageError
from src.application.use_cases.manage_ledger import LedgerService
from src.domain.models import Expense, ExpenseCategory, Income, IncomeType


class _MemoryStore:
    def __init__(self, expenses=(), incomes=()) -> None:
        self.expenses = list(expenses)
        self.incomes = list(incomes)
        self.fail_saves = False
        self.save_calls = 0

    def load_expenses(self):
        return list(self.expenses)

    def save_expenses(self, expenses):
        self._check()
        self.expenses = list(expenses)

    def load_incomes(self):
        return list(self.incomes)

    def save_incomes(self, incomes):
        self._check()
        self.incomes = list(incomes)

    def _check(self) -> None:
        self.save_calls += 1
        if self.fail_saves:
            raise StorageError("disk full")


def _expense(label="Lunch", amount="12.00", day=datetime(2024, 3, 1, 12), **kw):
    return Expense(
        date=day,
        label=label,
        category=ExpenseCategory.FOOD,
        amount=Decimal(amount),
        **kw,
    )


def _income(label="Employer", amount="2000", day=datetime(2024, 3, 1, 9)):
    return Income(
        date=day,
        label=label,
        category=IncomeType.SALARY,
        amount=Decimal(amount),
    )


def _service(store=None) -> LedgerService:
    return LedgerService(store or _MemoryStore(), logger=MagicMock())


def test_load_reads_both_collections() -> None:
    store = _MemoryStore([_expense()], [_income()])
    service = _service(store)

    snapshot = service.load()

    assert len(snapshot.expenses) == 1
    assert len(snapshot.incomes) == 1


def test_add_expense_persists_full_collection() -> None:
    store = _MemoryStore()
    service = _service(store)

    assert service.add_expense(_expense()) is True
    assert service.add_expense(_expense(label="Dinner")) is True

    assert [e.label for e in store.expenses] == ["Lunch", "Dinner"]
    assert service.expenses == tuple(store.expenses)


def test_duplicate_expense_is_rejected_without_save() -> None:
    store = _MemoryStore()
    service = _service(store)
    service.add_expense(_expense())

    added = service.add_expense(_expense(day=datetime(2024, 3, 1, 18)))

    assert added is False
    assert store.save_calls == 1
    assert len(service.expenses) == 1


def test_duplicate_income_is_rejected() -> None:
    service = _service()
    service.add_income(_income())

    assert service.add_income(_income()) is False


def test_failed_save_leaves_memory_unchanged() -> None:
    store = _MemoryStore()
    service = _service(store)
    service.add_expense(_expense())
    store.fail_saves = True

    with pytest.raises(StorageError):
        service.add_expense(_expense(label="Dinner"))

    assert [e.label for e in service.expenses] == ["Lunch"]


def test_delete_removes_by_id() -> None:
    service = _service()
    expense = _expense()
    service.add_expense(expense)

    assert service.delete_expense(expense.id) is True
    assert service.delete_expense(expense.id) is False
    assert service.expenses == ()


def test_delete_income_by_id() -> None:
    service = _service()
    income = _income()
    service.add_income(income)

    assert service.delete_income(income.id) is True
    assert service.incomes == ()


def test_replace_expense_swaps_record() -> None:
    service = _service()
    original = _expense()
    service.add_expense(original)
    replacement = _expense(label="Brunch", amount="20")

    assert service.replace_expense(original.id, replacement) is True
    assert [e.label for e in service.expenses] == ["Brunch"]
    assert service.replace_expense("missing", _expense(label="X")) is False


def test_replace_rejects_duplicate_of_other_record() -> None:
    service = _service()
    keep = _expense(label="Keep")
    edit = _expense(label="Edit")
    service.add_expense(keep)
    service.add_expense(edit)

    assert service.replace_expense(edit.id, _expense(label="Keep")) is False
    assert [e.label for e in service.expenses] == ["Keep", "Edit"]


def test_replace_income_swaps_record() -> None:
    service = _service()
    original = _income()
    service.add_income(original)

    assert service.replace_income(original.id, _income(amount="2100")) is True
    assert service.incomes[0].amount == Decimal("2100")


def test_history_is_newest_first() -> None:
    service = _service()
    service.add_expense(_expense(day=datetime(2024, 3, 1, 12)))
    service.add_income(_income(day=datetime(2024, 3, 5, 9)))
    service.add_expense(_expense(label="Old", day=datetime(2024, 2, 1)))

    history = service.history()

    assert [tx.label for tx in history] == ["Employer", "Lunch", "Old"]


def test_month_filter_and_totals() -> None:
    service = _service()
    service.add_expense(_expense(amount="10"))
    service.add_expense(_expense(label="Old", amount="5", day=datetime(2024, 2, 1)))
    service.add_income(_income(amount="100"))

    assert [e.label for e in service.expenses_for_month(3, 2024)] == ["Lunch"]
    totals = service.totals()
    assert totals.total_expenses == Decimal("15")
    assert totals.total_income == Decimal("100")
    assert totals.transaction_count == 3
