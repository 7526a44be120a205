"""Pure functions for transaction filtering, ordering and category cascades.

This module contains the functional core for ledger operations:
- No I/O operations (no storage, no console, no files)
- No side effects
- Pure data transformations
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from typing import TypeVar

from pocketbook.dates import month_bounds, parse_transaction_date
from pocketbook.domain.models import BudgetGoal, CategoryName, Transaction

_Referencing = TypeVar("_Referencing", Transaction, BudgetGoal)


def filter_by_month(transactions: Iterable[Transaction], month: int, year: int) -> list[Transaction]:
    """Keep transactions dated within a calendar month.

    Args:
        transactions: Transactions to filter.
        month: Month number (1-12).
        year: Four digit year.

    Returns:
        Transactions whose date falls within the first day 00:00:00 and the
        last day 23:59:59, inclusive. Unparseable dates never match.
    """
    start, end = month_bounds(month, year)
    matching: list[Transaction] = []
    for txn in transactions:
        when = parse_transaction_date(txn.date)
        if when is not None and start <= when <= end:
            matching.append(txn)
    return matching


def sort_by_date_desc(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort transactions most recent first.

    The sort is stable, so transactions sharing a date keep their stored
    order. Unparseable dates sort after every dated transaction.
    """

    def sort_key(txn: Transaction) -> tuple[bool, datetime]:
        when = parse_transaction_date(txn.date)
        return (when is not None, when or datetime.min)

    return sorted(transactions, key=sort_key, reverse=True)


def select_transactions(
    transactions: Iterable[Transaction],
    month: int | None = None,
    year: int | None = None,
) -> list[Transaction]:
    """Apply the optional month filter, then order by date descending.

    The month filter applies only when both month and year are given.
    """
    if month and year:
        transactions = filter_by_month(transactions, month, year)
    return sort_by_date_desc(transactions)


def rename_references(
    records: Iterable[_Referencing],
    old_name: str,
    new_name: str,
) -> tuple[list[_Referencing], int]:
    """Rewrite the category of every record that references old_name.

    Args:
        records: Transactions or budget goals.
        old_name: Category name to replace (exact match).
        new_name: Replacement category name.

    Returns:
        Tuple of (rewritten records in original order, number changed).
    """
    rewritten: list[_Referencing] = []
    changed = 0
    for record in records:
        if record.category == old_name:
            record = replace(record, category=CategoryName(new_name))
            changed += 1
        rewritten.append(record)
    return rewritten, changed
