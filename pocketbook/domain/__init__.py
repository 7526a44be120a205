"""Domain models and pure logic for pocketbook.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from storage and presentation
"""

from pocketbook.domain.models import (
    BudgetGoal,
    Category,
    CategoryName,
    GoalPeriod,
    Transaction,
    TransactionDraft,
    TransactionType,
)

__all__ = [
    "BudgetGoal",
    "Category",
    "CategoryName",
    "GoalPeriod",
    "Transaction",
    "TransactionDraft",
    "TransactionType",
]
