"""Store layer - persistence for the application.

This module re-exports all public store functions for easy importing.
"""

from pocketbook.store.backend import KeyValueStore, MemoryStore, SqliteStore
from pocketbook.store.categories import add_category, delete_category, get_categories, update_category
from pocketbook.store.goals import add_budget_goal, delete_budget_goal, get_budget_goals, update_budget_goal
from pocketbook.store.queries import (
    check_budget_alerts,
    clear_all_data,
    get_annual_stats,
    get_monthly_trend,
    get_transaction_stats,
)
from pocketbook.store.schema import database_exists, get_db_path, init_database
from pocketbook.store.transactions import (
    add_transaction,
    delete_transaction,
    get_transactions,
    get_unique_categories,
)

__all__ = [
    # Backends
    "KeyValueStore",
    "MemoryStore",
    "SqliteStore",
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Ledger
    "add_transaction",
    "delete_transaction",
    "get_transactions",
    "get_unique_categories",
    # Goals
    "add_budget_goal",
    "delete_budget_goal",
    "get_budget_goals",
    "update_budget_goal",
    # Categories
    "add_category",
    "delete_category",
    "get_categories",
    "update_category",
    # Queries
    "check_budget_alerts",
    "clear_all_data",
    "get_annual_stats",
    "get_monthly_trend",
    "get_transaction_stats",
]
