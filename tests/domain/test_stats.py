"""Tests for pocketbook.domain.stats pure functions."""

from pocketbook.domain.models import CategoryName, Transaction, TransactionType
from pocketbook.domain.stats import (
    MonthlyTotals,
    TransactionStats,
    compute_annual_stats,
    compute_monthly_trend,
    compute_transaction_stats,
    goal_progress,
    sorted_expense_breakdown,
)


def make_txn(txn_type: TransactionType, category: str, amount: float, date: str = "2024-01-05") -> Transaction:
    return Transaction(
        id=f"{category}-{amount}",
        type=txn_type,
        category=CategoryName(category),
        amount=amount,
        date=date,
    )


class TestComputeTransactionStats:
    """Tests for compute_transaction_stats."""

    def test_month_scenario(self) -> None:
        """Should total one expense and one income."""
        stats = compute_transaction_stats(
            [
                make_txn("expense", "Food", 50, "2024-01-05"),
                make_txn("income", "Salary", 2000, "2024-01-01"),
            ]
        )

        assert stats == TransactionStats(
            total_income=2000,
            total_expense=50,
            net_balance=1950,
            expenses_by_category={CategoryName("Food"): 50},
        )

    def test_breakdown_sums_to_total_expense(self) -> None:
        """Should make the category breakdown add up to the expense total."""
        stats = compute_transaction_stats(
            [
                make_txn("expense", "Food", 12.5),
                make_txn("expense", "Travel", 100),
                make_txn("expense", "Food", 7.5),
                make_txn("income", "Gift", 30),
            ]
        )

        assert sum(stats.expenses_by_category.values()) == stats.total_expense
        assert stats.expenses_by_category == {"Food": 20.0, "Travel": 100.0}

    def test_net_balance_is_income_minus_expense(self) -> None:
        """Should compute net as income minus expense, possibly negative."""
        stats = compute_transaction_stats([make_txn("income", "Salary", 100), make_txn("expense", "Rent", 250)])

        assert stats.net_balance == stats.total_income - stats.total_expense
        assert stats.net_balance == -150

    def test_income_categories_absent_from_breakdown(self) -> None:
        """Should only include categories with expenses."""
        stats = compute_transaction_stats([make_txn("income", "Salary", 100)])

        assert stats.expenses_by_category == {}
        assert stats.total_expense == 0

    def test_empty(self) -> None:
        """Should return zeros for no transactions."""
        assert compute_transaction_stats([]) == TransactionStats()


class TestSortedExpenseBreakdown:
    """Tests for sorted_expense_breakdown."""

    def test_largest_first(self) -> None:
        """Should order categories by amount descending."""
        stats = TransactionStats(expenses_by_category={CategoryName("A"): 5, CategoryName("B"): 50})

        assert sorted_expense_breakdown(stats) == [("B", 50), ("A", 5)]


class TestGoalProgress:
    """Tests for goal_progress."""

    def test_partial(self) -> None:
        """Should return the percentage used."""
        assert goal_progress(25, 100) == 25.0

    def test_capped_at_hundred(self) -> None:
        """Should never exceed 100."""
        assert goal_progress(300, 100) == 100.0

    def test_non_positive_goal(self) -> None:
        """Should return 0 for a zero goal."""
        assert goal_progress(10, 0) == 0.0


class TestComputeAnnualStats:
    """Tests for compute_annual_stats."""

    def test_matches_sum_of_months(self) -> None:
        """Should equal the twelve monthly stats added together."""
        transactions = [
            make_txn("expense", "Food", 10, "2024-03-01"),
            make_txn("expense", "Rent", 500, "2024-03-02"),
            make_txn("expense", "Food", 15, "2024-11-30"),
            make_txn("income", "Salary", 2000, "2024-03-25"),
            make_txn("expense", "Food", 7, "2025-01-01"),
            make_txn("expense", "Food", 3, "not a date"),
        ]

        stats = compute_annual_stats(transactions, 2024)

        assert stats == TransactionStats(
            total_income=2000,
            total_expense=525,
            net_balance=1475,
            expenses_by_category={CategoryName("Food"): 25, CategoryName("Rent"): 500},
        )

    def test_empty_year(self) -> None:
        """Should return zero totals for a year without transactions."""
        assert compute_annual_stats([make_txn("expense", "Food", 5, "2023-05-05")], 2024) == TransactionStats()


class TestComputeMonthlyTrend:
    """Tests for compute_monthly_trend."""

    def test_totals_per_month(self) -> None:
        """Should total income and expenses separately for each month given."""
        transactions = [
            make_txn("income", "Salary", 1000, "2024-12-01"),
            make_txn("expense", "Food", 30, "2024-12-15"),
            make_txn("expense", "Food", 20, "2025-01-02"),
        ]

        trend = compute_monthly_trend(transactions, [(12, 2024), (1, 2025), (2, 2025)])

        assert trend == [
            MonthlyTotals(12, 2024, income=1000, expenses=30),
            MonthlyTotals(1, 2025, income=0, expenses=20),
            MonthlyTotals(2, 2025),
        ]
        assert [t.label for t in trend] == ["December", "January", "February"]
