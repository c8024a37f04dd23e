"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
how they are stored. The serialized form mirrors the records kept in local
storage: one JSON object per transaction with an ISO date and a numeric
amount whose sign encodes income or expense.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union


class Direction(str, Enum):
    """Money direction, derived solely from the amount sign."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def of(cls, amount: Decimal) -> "Direction":
        """Return the direction encoded by a signed amount."""
        return cls.INCOME if amount > 0 else cls.EXPENSE


class TimeFilter(str, Enum):
    """Time window applied to the transaction list."""

    MONTH = "month"
    ALL = "all"


class Theme(str, Enum):
    """Presentation theme; only chart colors depend on it."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Theme":
        """Parse a stored theme value, defaulting to dark."""
        if value == cls.LIGHT.value:
            return cls.LIGHT
        return cls.DARK

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: str
    description: str
    amount: Decimal
    date: date
    category: str

    @property
    def direction(self) -> Direction:
        return Direction.of(self.amount)

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "amount": float(self.amount),
            "date": self.date.isoformat(),
            "category": self.category,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Transaction":
        """Build a transaction from its stored record.

        Raises:
            KeyError, TypeError, ValueError: If the record is malformed
        """
        amount = Decimal(str(d["amount"])).quantize(Decimal("0.01"))
        if not amount.is_finite() or amount == 0:
            raise ValueError(f"Invalid amount {d['amount']!r}")
        description = d["description"]
        if not isinstance(description, str) or not description.strip():
            raise ValueError("Empty description")
        category = d["category"]
        if not isinstance(category, str):
            raise TypeError("Category must be a string")
        return Transaction(
            id=str(d["id"]),
            description=description,
            amount=amount,
            date=date.fromisoformat(d["date"]),
            category=category,
        )


@dataclass(frozen=True)
class TransactionFields:
    """Raw form input for creating or editing a transaction.

    The amount is a magnitude; its sign is ignored and the direction decides
    whether the stored amount is positive or negative.
    """

    description: str
    amount: Union[str, Decimal, None]
    date: Union[str, date, None]
    direction: Direction = Direction.INCOME
    category: str = "other"

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionFields":
        """Pre-fill form fields from an existing transaction."""
        return cls(
            description=transaction.description,
            amount=abs(transaction.amount),
            date=transaction.date,
            direction=transaction.direction,
            category=transaction.category,
        )


@dataclass(frozen=True)
class DashboardTotals:
    """Income, expense and balance sums for a set of transactions."""

    income: Decimal
    expenses: Decimal
    balance: Decimal

    @property
    def expenses_display(self) -> Decimal:
        return abs(self.expenses)


@dataclass(frozen=True)
class FlowPoint:
    """Income and expense totals for one calendar day."""

    day: date
    label: str
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class Dashboard:
    """Everything derived from the collection for one render pass."""

    transactions: tuple[Transaction, ...]
    totals: DashboardTotals
    category_breakdown: dict[str, Decimal] = field(default_factory=dict)
    flow: tuple[FlowPoint, ...] = ()
