"""Domain records and type definitions for pocketbook.

These records mirror the JSON documents held in the key-value store:
- Transaction: a single income or expense entry
- Category: a named bucket for transactions, default or user-created
- BudgetGoal: a spending limit for a category

Records are immutable; "updates" produce a new record via dataclasses.replace.
JSON documents use camelCase keys, Python attributes use snake_case.
"""

from dataclasses import dataclass
from typing import Any, Literal, NewType, TypedDict

# Category name as referenced by transactions and goals
CategoryName = NewType("CategoryName", str)

TransactionType = Literal["income", "expense"]
GoalPeriod = Literal["monthly", "annual"]

TRANSACTION_TYPES: tuple[TransactionType, ...] = ("income", "expense")
GOAL_PERIODS: tuple[GoalPeriod, ...] = ("monthly", "annual")

# Sentinel category that absorbs references to deleted categories
FALLBACK_CATEGORY = CategoryName("Other")


class TransactionDraft(TypedDict, total=False):
    """Caller-supplied transaction fields, before an id is assigned."""

    type: TransactionType
    category: str
    amount: float
    description: str | None
    date: str


@dataclass(frozen=True)
class Transaction:
    """Immutable transaction record."""

    id: str
    type: TransactionType
    category: CategoryName
    amount: float
    date: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "category": self.category,
            "amount": self.amount,
            "date": self.date,
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        return cls(
            id=str(data["id"]),
            type=data["type"],
            category=CategoryName(data["category"]),
            amount=float(data["amount"]),
            date=str(data["date"]),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class Category:
    """Immutable category record."""

    id: str
    name: CategoryName
    type: TransactionType
    is_custom: bool
    created_at: str
    icon: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "isCustom": self.is_custom,
            "createdAt": self.created_at,
        }
        if self.icon is not None:
            data["icon"] = self.icon
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Category":
        return cls(
            id=str(data["id"]),
            name=CategoryName(data["name"]),
            type=data["type"],
            is_custom=bool(data.get("isCustom", False)),
            created_at=str(data.get("createdAt", "")),
            icon=data.get("icon"),
        )


@dataclass(frozen=True)
class BudgetGoal:
    """Immutable budget goal record."""

    id: str
    category: CategoryName
    amount: float
    period: GoalPeriod
    is_active: bool
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "amount": self.amount,
            "period": self.period,
            "isActive": self.is_active,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BudgetGoal":
        return cls(
            id=str(data["id"]),
            category=CategoryName(data["category"]),
            amount=float(data["amount"]),
            period=data.get("period", "monthly"),
            is_active=bool(data.get("isActive", True)),
            created_at=str(data.get("createdAt", "")),
        )
