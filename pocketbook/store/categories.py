"""Category registry operations.

Transactions and goals reference categories by name, so renaming or deleting
a category rewrites those references. The rewritten transactions, goals and
categories are stored in one batch.
"""

import logging
from dataclasses import replace
from typing import Any

from pocketbook.domain.categories import build_default_categories, find_category
from pocketbook.domain.ledger import rename_references
from pocketbook.domain.models import FALLBACK_CATEGORY, Category, CategoryName, TransactionType
from pocketbook.errors import CategoryNotFoundError, DefaultCategoryError
from pocketbook.store.backend import KeyValueStore
from pocketbook.store.collections import (
    CATEGORIES_KEY,
    GOALS_KEY,
    TRANSACTIONS_KEY,
    encode_records,
    load_records,
    new_id,
    save_records,
    utc_now_iso,
    write_lock,
)
from pocketbook.store.goals import get_budget_goals
from pocketbook.store.transactions import get_transactions

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = {"name", "type", "icon"}


def get_categories(store: KeyValueStore) -> list[Category]:
    """Get all categories, seeding the defaults on first use.

    Raises:
        PersistenceError: If the categories cannot be read or seeded.
    """
    categories = load_records(store, CATEGORIES_KEY, Category.from_dict)
    if categories is not None:
        return categories

    with write_lock:
        categories = load_records(store, CATEGORIES_KEY, Category.from_dict)
        if categories is None:
            categories = build_default_categories(utc_now_iso())
            save_records(store, CATEGORIES_KEY, categories)
            logger.info("Seeded %d default categories", len(categories))
    return categories


def _stored_or_default_categories(store: KeyValueStore) -> list[Category]:
    """Stored categories, or the defaults without writing them."""
    categories = load_records(store, CATEGORIES_KEY, Category.from_dict)
    if categories is None:
        return build_default_categories(utc_now_iso())
    return categories


def add_category(
    store: KeyValueStore,
    name: str,
    category_type: TransactionType,
    is_custom: bool = True,
    icon: str | None = None,
) -> Category:
    """Append a category.

    Name uniqueness is the caller's responsibility; see
    pocketbook.domain.categories.is_category_name_taken.
    """
    category = Category(
        id=new_id(),
        name=CategoryName(name),
        type=category_type,
        is_custom=is_custom,
        created_at=utc_now_iso(),
        icon=icon,
    )

    with write_lock:
        categories = get_categories(store)
        save_records(store, CATEGORIES_KEY, [*categories, category])

    logger.info("Added %s category %r", category_type, category.name)
    return category


def _cascade_batch(store: KeyValueStore, old_name: str, new_name: str) -> dict[str, bytes]:
    """Encode transactions and goals with old_name rewritten to new_name."""
    transactions, txn_count = rename_references(get_transactions(store), old_name, new_name)
    goals, goal_count = rename_references(get_budget_goals(store), old_name, new_name)
    logger.info(
        "Moving %d transactions and %d goals from %r to %r",
        txn_count,
        goal_count,
        old_name,
        new_name,
    )
    return {
        TRANSACTIONS_KEY: encode_records(transactions),
        GOALS_KEY: encode_records(goals),
    }


def update_category(store: KeyValueStore, category_id: str, **updates: Any) -> Category:
    """Merge field updates into a category.

    A name change is carried over to every transaction and goal that used
    the old name.

    Args:
        store: Backend holding the collections.
        category_id: Category to update.
        **updates: Any of name, type, icon.

    Returns:
        The updated category.

    Raises:
        ValueError: If an unknown field is given.
        CategoryNotFoundError: If no category has the id.
        PersistenceError: If the store cannot be read or written.
    """
    unknown = set(updates) - _UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update category fields: {', '.join(sorted(unknown))}")
    if "name" in updates:
        updates["name"] = CategoryName(updates["name"])

    with write_lock:
        categories = get_categories(store)
        old = find_category(categories, category_id)
        if old is None:
            raise CategoryNotFoundError(category_id)

        new = replace(old, **updates)
        categories = [new if cat.id == category_id else cat for cat in categories]

        batch: dict[str, bytes] = {}
        if updates.get("name") and new.name != old.name:
            batch.update(_cascade_batch(store, old.name, new.name))
        batch[CATEGORIES_KEY] = encode_records(categories)
        store.set_many(batch)

    logger.info("Updated category %s", category_id)
    return new


def delete_category(store: KeyValueStore, category_id: str) -> None:
    """Delete a custom category, moving its references to "Other".

    Raises:
        CategoryNotFoundError: If no category has the id.
        DefaultCategoryError: If the category is one of the defaults.
        PersistenceError: If the store cannot be read or written.
    """
    with write_lock:
        categories = _stored_or_default_categories(store)
        category = find_category(categories, category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        if not category.is_custom:
            raise DefaultCategoryError(category.name)

        batch = _cascade_batch(store, category.name, FALLBACK_CATEGORY)
        batch[CATEGORIES_KEY] = encode_records(cat for cat in categories if cat.id != category_id)
        store.set_many(batch)

    logger.info("Deleted category %r", category.name)
