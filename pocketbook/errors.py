"""Exception hierarchy for pocketbook.

Every error raised by the store layer derives from PocketbookError so the CLI
can report it in one place. Nothing here is retried.
"""


class PocketbookError(Exception):
    """Base class for all pocketbook errors."""


class NotFoundError(PocketbookError):
    """An update or delete target does not exist."""


class CategoryNotFoundError(NotFoundError):
    """No stored category has the requested id."""

    def __init__(self, category_id: str) -> None:
        super().__init__(f"Category not found: {category_id}")
        self.category_id = category_id


class InvariantViolationError(PocketbookError):
    """An operation would break a domain invariant."""


class DefaultCategoryError(InvariantViolationError):
    """Default (non-custom) categories cannot be deleted."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot delete default category: {name}")
        self.name = name


class ValidationError(PocketbookError):
    """Caller-supplied data is invalid."""


class InvalidGoalError(ValidationError):
    """Budget goal amounts must be positive."""


class PersistenceError(PocketbookError):
    """The underlying key-value store failed to read or write."""
