"""Pure functions for the category registry.

Default categories are seeded once with stable ids ("expense-0", "income-0",
...) and are never deletable. Names are unique case-insensitively within a
transaction type; the registry leaves that check to callers.
"""

from collections.abc import Iterable

from pocketbook.domain.models import Category, CategoryName, TransactionType

DEFAULT_EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Healthcare",
    "Utilities",
    "Housing",
    "Education",
    "Travel",
    "Other",
)

DEFAULT_INCOME_CATEGORIES: tuple[str, ...] = (
    "Salary",
    "Freelance",
    "Investment",
    "Business",
    "Gift",
    "Other Income",
)


def build_default_categories(created_at: str) -> list[Category]:
    """Build the default category set.

    Args:
        created_at: ISO timestamp stamped on every default category.

    Returns:
        Expense defaults followed by income defaults.
    """
    categories = [
        Category(
            id=f"expense-{index}",
            name=CategoryName(name),
            type="expense",
            is_custom=False,
            created_at=created_at,
        )
        for index, name in enumerate(DEFAULT_EXPENSE_CATEGORIES)
    ]
    categories.extend(
        Category(
            id=f"income-{index}",
            name=CategoryName(name),
            type="income",
            is_custom=False,
            created_at=created_at,
        )
        for index, name in enumerate(DEFAULT_INCOME_CATEGORIES)
    )
    return categories


def is_category_name_taken(
    categories: Iterable[Category],
    name: str,
    category_type: TransactionType,
    exclude_id: str | None = None,
) -> bool:
    """Check whether a name is already used within a transaction type.

    Args:
        categories: Existing categories.
        name: Candidate name; surrounding whitespace is ignored.
        category_type: Type the candidate belongs to.
        exclude_id: Id of a category being renamed, which may keep its name.

    Returns:
        True if another category of the same type has the name, ignoring case.
    """
    wanted = name.strip().lower()
    return any(
        cat.type == category_type and cat.name.lower() == wanted and cat.id != exclude_id for cat in categories
    )


def find_category(categories: Iterable[Category], category_id: str) -> Category | None:
    """Find a category by id."""
    return next((cat for cat in categories if cat.id == category_id), None)


def category_names(categories: Iterable[Category], category_type: TransactionType) -> list[CategoryName]:
    """Names of all categories of a type, in stored order."""
    return [cat.name for cat in categories if cat.type == category_type]


def unique_expense_categories(used: Iterable[str]) -> list[str]:
    """Sorted union of expense categories in use and the defaults."""
    return sorted(set(used) | set(DEFAULT_EXPENSE_CATEGORIES))
