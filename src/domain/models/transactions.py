"""Domain models for ledger transactions."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
import uuid


class ExpenseCategory(str, Enum):
    """Closed set of expense categories, in display order."""

    GAS = "Gas"
    FOOD = "Food"
    DRINK = "Drink"
    MARKET = "Market"
    ENTERTAINMENT = "Entertainment"
    TRANSPORTATION = "Transportation"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    SHOPPING = "Shopping"
    UTILITIES = "Utilities"
    OTHER = "Other"


class IncomeType(str, Enum):
    """Closed set of income types, in display order."""

    SALARY = "Salary"
    FREELANCE = "Freelance"
    INVESTMENT = "Investment"
    BUSINESS = "Business"
    GIFT = "Gift"
    BONUS = "Bonus"
    OTHER = "Other"


def new_transaction_id() -> str:
    """Return a fresh string-formatted unique identifier."""
    return str(uuid.uuid4()).upper()


def calendar_day(value: datetime | date) -> date:
    """Return the local calendar date of a transaction timestamp.

    Timezone-aware values keep their own offset; nothing is normalized
    to UTC.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def _validate_amount(amount: Decimal) -> None:
    if not isinstance(amount, Decimal):
        raise TypeError(f"Amount must be a Decimal, got {type(amount).__name__}")
    if not amount.is_finite() or amount < 0:
        raise ValueError(
            f"Amount must be finite and non-negative, got {amount}"
        )


@dataclass(frozen=True)
class Expense:
    """A single expense entry.

    Attributes:
        date: When the expense happened.
        label: Short name of the expense.
        category: Expense category.
        amount: Non-negative cost.
        note: Free text, may be empty.
        id: Unique identifier, generated when omitted.
    """

    date: datetime
    label: str
    category: ExpenseCategory
    amount: Decimal
    note: str = ""
    id: str = field(default_factory=new_transaction_id)

    def __post_init__(self) -> None:
        _validate_amount(self.amount)


@dataclass(frozen=True)
class Income:
    """A single income entry.

    Attributes:
        date: When the income was received.
        label: Source of the income.
        category: Income type.
        amount: Non-negative amount.
        note: Free text, may be empty.
        id: Unique identifier, generated when omitted.
    """

    date: datetime
    label: str
    category: IncomeType
    amount: Decimal
    note: str = ""
    id: str = field(default_factory=new_transaction_id)

    def __post_init__(self) -> None:
        _validate_amount(self.amount)


Transaction = Expense | Income


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of both ledger collections."""

    expenses: tuple[Expense, ...] = ()
    incomes: tuple[Income, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Return True when the ledger holds no transactions."""
        return not self.expenses and not self.incomes


__all__ = [
    "ExpenseCategory",
    "IncomeType",
    "Expense",
    "Income",
    "Transaction",
    "LedgerSnapshot",
    "calendar_day",
    "new_transaction_id",
]
