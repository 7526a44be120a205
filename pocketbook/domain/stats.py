"""Pure functions for transaction statistics.

All sums are left folds in the order of the input list, so totals equal the
plain float sum of the matching amounts.
"""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass, field

from pocketbook.domain.ledger import filter_by_month
from pocketbook.domain.models import CategoryName, Transaction


@dataclass(frozen=True)
class TransactionStats:
    """Immutable income/expense totals for a period."""

    total_income: float = 0.0
    total_expense: float = 0.0
    net_balance: float = 0.0
    expenses_by_category: dict[CategoryName, float] = field(default_factory=dict)


def compute_transaction_stats(transactions: Iterable[Transaction]) -> TransactionStats:
    """Compute totals and the per-category expense breakdown.

    Args:
        transactions: Transactions for the period, already filtered.

    Returns:
        TransactionStats. Categories without expenses are absent from
        expenses_by_category.
    """
    total_income = 0.0
    total_expense = 0.0
    expenses_by_category: dict[CategoryName, float] = {}

    for txn in transactions:
        if txn.type == "income":
            total_income += txn.amount
        elif txn.type == "expense":
            total_expense += txn.amount
            expenses_by_category[txn.category] = expenses_by_category.get(txn.category, 0) + txn.amount

    return TransactionStats(
        total_income=total_income,
        total_expense=total_expense,
        net_balance=total_income - total_expense,
        expenses_by_category=expenses_by_category,
    )


def sorted_expense_breakdown(stats: TransactionStats) -> list[tuple[CategoryName, float]]:
    """Expense categories ordered by amount, largest first."""
    return sorted(stats.expenses_by_category.items(), key=lambda x: x[1], reverse=True)


def goal_progress(current_spending: float, goal_amount: float) -> float:
    """Percentage of a goal used, capped at 100 for progress bars.

    Returns 0.0 for non-positive goal amounts.
    """
    if goal_amount <= 0:
        return 0.0
    return min(current_spending / goal_amount * 100, 100.0)


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and expense totals for one calendar month."""

    month: int
    year: int
    income: float = 0.0
    expenses: float = 0.0

    @property
    def label(self) -> str:
        return calendar.month_name[self.month]


def compute_annual_stats(transactions: Iterable[Transaction], year: int) -> TransactionStats:
    """Stats over the twelve months of a year.

    Each month is filtered on its own bounds and the months are summed in
    calendar order.
    """
    transactions = list(transactions)
    year_transactions: list[Transaction] = []
    for month in range(1, 13):
        year_transactions.extend(filter_by_month(transactions, month, year))
    return compute_transaction_stats(year_transactions)


def compute_monthly_trend(
    transactions: Iterable[Transaction], months: Iterable[tuple[int, int]]
) -> list[MonthlyTotals]:
    """Income and expense totals per month.

    Args:
        transactions: All transactions.
        months: (month, year) pairs, e.g. from pocketbook.dates.recent_months.

    Returns:
        One MonthlyTotals per requested month, in the order given.
    """
    transactions = list(transactions)
    trend: list[MonthlyTotals] = []
    for month, year in months:
        stats = compute_transaction_stats(filter_by_month(transactions, month, year))
        trend.append(MonthlyTotals(month, year, stats.total_income, stats.total_expense))
    return trend
