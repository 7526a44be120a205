"""Pure functions for report rows and display helpers.

This module contains the functional core for exports:
- No storage or console access; CSV is written to a file object the caller opens
- Pure data transformations
"""

import csv
from collections.abc import Iterable
from typing import TextIO

from pocketbook.dates import parse_transaction_date
from pocketbook.domain.models import Transaction

CSV_HEADERS = ["Date", "Type", "Category", "Description", "Amount"]


def format_export_date(raw_date: str) -> str:
    """Format a stored date as MM/DD/YYYY, or return it unchanged if unparseable."""
    parsed = parse_transaction_date(raw_date)
    if parsed is None:
        return raw_date
    return parsed.strftime("%m/%d/%Y")


def format_export_amount(txn: Transaction) -> str:
    """Expenses are exported as negative amounts."""
    amount = str(int(txn.amount)) if float(txn.amount).is_integer() else repr(float(txn.amount))
    return f"-{amount}" if txn.type == "expense" else amount


def build_report_rows(transactions: Iterable[Transaction]) -> list[list[str]]:
    """Build CSV rows (without header) for transactions.

    Args:
        transactions: Transactions in the order they should appear.

    Returns:
        One row of Date, Type, Category, Description, Amount per transaction.
    """
    return [
        [
            format_export_date(txn.date),
            txn.type,
            txn.category,
            txn.description or "",
            format_export_amount(txn),
        ]
        for txn in transactions
    ]


def export_transactions_csv(transactions: Iterable[Transaction], fp: TextIO) -> int:
    """Write transactions as CSV with every field quoted.

    Args:
        transactions: Transactions in the order they should appear.
        fp: Text file opened with newline="".

    Returns:
        Number of transaction rows written.
    """
    rows = build_report_rows(transactions)
    writer = csv.writer(fp, quoting=csv.QUOTE_ALL)
    writer.writerow(CSV_HEADERS)
    writer.writerows(rows)
    return len(rows)


def format_money(amount: float, currency: str = "$", include_sign: bool = False) -> str:
    """Format an amount for display, e.g. "$1,234.50" or "-$12.00"."""
    formatted = f"{currency}{abs(amount):,.2f}"
    if amount < 0:
        return f"-{formatted}"
    if include_sign:
        return f"+{formatted}"
    return formatted


def calculate_histogram_bar_length(amount: float, max_amount: float, bar_width: int) -> int:
    """Calculate histogram bar length in characters."""
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)
