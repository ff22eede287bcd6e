"""Duplicate detection policies for ledger transactions.

Two independent strategies are composed with a logical OR:

* identity: the incoming record reuses an existing ID;
* content: label, amount, category and calendar day all match.
"""

from collections.abc import Iterable

from src.domain.models import Expense, Income, calendar_day


def normalize_label(label: str) -> str:
    """Collapse surrounding and repeated whitespace in a label."""
    return " ".join((label or "").split())


def same_identity(left: Expense | Income, right: Expense | Income) -> bool:
    """Return True when both records carry the same ID."""
    return left.id == right.id


def same_content(left: Expense | Income, right: Expense | Income) -> bool:
    """Return True when label, amount, category and day all match."""
    return (
        normalize_label(left.label) == normalize_label(right.label)
        and left.amount == right.amount
        and left.category == right.category
        and calendar_day(left.date) == calendar_day(right.date)
    )


def find_duplicate(
    candidate: Expense | Income,
    existing: Iterable[Expense | Income],
) -> Expense | Income | None:
    """Return the first existing record the candidate duplicates.

    Args:
        candidate: Incoming transaction.
        existing: Transactions already stored.

    Returns:
        Expense | Income | None: Matching record, or None.
    """
    for record in existing:
        if same_identity(candidate, record) or same_content(candidate, record):
            return record
    return None


def is_duplicate(
    candidate: Expense | Income,
    existing: Iterable[Expense | Income],
) -> bool:
    """Return True when the candidate duplicates an existing record."""
    return find_duplicate(candidate, existing) is not None


__all__ = [
    "find_duplicate",
    "is_duplicate",
    "normalize_label",
    "same_content",
    "same_identity",
]
