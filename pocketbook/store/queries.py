"""Derived queries and whole-store operations."""

import logging
from datetime import date

from pocketbook.dates import recent_months
from pocketbook.domain.alerts import BudgetAlerts, evaluate_budget_alerts
from pocketbook.domain.stats import (
    MonthlyTotals,
    TransactionStats,
    compute_annual_stats,
    compute_monthly_trend,
    compute_transaction_stats,
)
from pocketbook.store.backend import KeyValueStore
from pocketbook.store.collections import ALL_KEYS, write_lock
from pocketbook.store.goals import get_budget_goals
from pocketbook.store.transactions import get_transactions

logger = logging.getLogger(__name__)


def get_transaction_stats(
    store: KeyValueStore, month: int | None = None, year: int | None = None
) -> TransactionStats:
    """Compute income, expense and net totals for a month (or all time).

    Args:
        store: Backend holding the ledger.
        month: Optional month (1-12), used together with year.
        year: Optional year, used together with month.

    Returns:
        TransactionStats for the selected transactions.
    """
    return compute_transaction_stats(get_transactions(store, month, year))


def get_annual_stats(store: KeyValueStore, year: int) -> TransactionStats:
    """Compute income, expense and net totals for a whole calendar year."""
    return compute_annual_stats(get_transactions(store), year)


def get_monthly_trend(store: KeyValueStore, months: int = 6, today: date | None = None) -> list[MonthlyTotals]:
    """Income and expense totals for the last few months, oldest first.

    Args:
        store: Backend holding the ledger.
        months: Number of months to include, ending with the current one.
        today: Reference date, defaults to today.

    Raises:
        ValueError: If months is less than 1.
    """
    if today is None:
        today = date.today()
    return compute_monthly_trend(get_transactions(store), recent_months(today, months))


def check_budget_alerts(store: KeyValueStore, month: int | None = None, year: int | None = None) -> BudgetAlerts:
    """Classify active goals against spending for a month (or all time).

    Read-only; notifying the user is up to the caller.
    """
    goals = get_budget_goals(store)
    stats = get_transaction_stats(store, month, year)
    alerts = evaluate_budget_alerts(goals, stats)
    logger.debug(
        "Budget alerts: %d exceeded, %d warning",
        len(alerts.exceeded_goals),
        len(alerts.warning_goals),
    )
    return alerts


def clear_all_data(store: KeyValueStore) -> None:
    """Remove transactions, goals and categories in one batch.

    Default categories are seeded again on the next category read.
    """
    with write_lock:
        store.remove_many(ALL_KEYS)
    logger.info("Cleared all data")
