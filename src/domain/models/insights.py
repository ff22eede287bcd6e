"""Domain models for generated financial insights."""

from dataclasses import dataclass, field
from enum import Enum
import uuid


class InsightType(str, Enum):
    """Kind of observation an insight makes."""

    SPENDING = "spending"
    SAVING = "saving"
    INCOME = "income"
    BUDGET = "budget"
    WARNING = "warning"

    @classmethod
    def parse(cls, raw: str | None) -> "InsightType":
        """Match a raw value case-insensitively, defaulting to budget."""
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return cls.BUDGET


class InsightPriority(str, Enum):
    """How urgently an insight should be acted on."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, raw: str | None) -> "InsightPriority":
        """Match a raw value case-insensitively, defaulting to medium."""
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return cls.MEDIUM


@dataclass(frozen=True)
class Insight:
    """A single structured financial observation."""

    title: str
    message: str
    type: InsightType
    priority: InsightPriority
    action_items: tuple[str, ...] = ()
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


__all__ = ["Insight", "InsightType", "InsightPriority"]
