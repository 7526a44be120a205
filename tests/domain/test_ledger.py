"""Tests for pocketbook.domain.ledger pure functions."""

from pocketbook.domain.ledger import filter_by_month, rename_references, select_transactions, sort_by_date_desc
from pocketbook.domain.models import BudgetGoal, CategoryName, Transaction


def make_txn(txn_id: str, date: str, category: str = "Food", amount: float = 10.0) -> Transaction:
    return Transaction(id=txn_id, type="expense", category=CategoryName(category), amount=amount, date=date)


class TestFilterByMonth:
    """Tests for filter_by_month."""

    def test_keeps_only_matching_month(self) -> None:
        """Should drop transactions outside the month."""
        transactions = [
            make_txn("a", "2024-01-05"),
            make_txn("b", "2024-02-01"),
            make_txn("c", "2023-12-31"),
        ]

        result = filter_by_month(transactions, 1, 2024)

        assert [txn.id for txn in result] == ["a"]

    def test_bounds_are_inclusive(self) -> None:
        """Should include the first instant and the last second of the month."""
        transactions = [
            make_txn("first", "2024-01-01T00:00:00"),
            make_txn("last", "2024-01-31T23:59:59"),
            make_txn("after", "2024-02-01T00:00:00"),
        ]

        result = filter_by_month(transactions, 1, 2024)

        assert [txn.id for txn in result] == ["first", "last"]

    def test_unparseable_dates_never_match(self) -> None:
        """Should skip transactions with invalid dates."""
        result = filter_by_month([make_txn("bad", "someday")], 1, 2024)
        assert result == []


class TestSortByDateDesc:
    """Tests for sort_by_date_desc."""

    def test_most_recent_first(self) -> None:
        """Should order newest to oldest."""
        transactions = [make_txn("old", "2024-01-01"), make_txn("new", "2024-03-01"), make_txn("mid", "2024-02-01")]

        result = sort_by_date_desc(transactions)

        assert [txn.id for txn in result] == ["new", "mid", "old"]

    def test_ties_keep_stored_order(self) -> None:
        """Should be stable for equal dates."""
        transactions = [make_txn("x", "2024-01-01"), make_txn("y", "2024-01-01"), make_txn("z", "2024-01-01")]

        result = sort_by_date_desc(transactions)

        assert [txn.id for txn in result] == ["x", "y", "z"]

    def test_unparseable_dates_sort_last(self) -> None:
        """Should place invalid dates after dated transactions."""
        transactions = [make_txn("bad", "???"), make_txn("ok", "2020-01-01")]

        result = sort_by_date_desc(transactions)

        assert [txn.id for txn in result] == ["ok", "bad"]


class TestSelectTransactions:
    """Tests for select_transactions."""

    def test_no_filter_without_both_selectors(self) -> None:
        """Should ignore month when year is missing."""
        transactions = [make_txn("a", "2024-01-05"), make_txn("b", "2023-06-01")]

        result = select_transactions(transactions, month=1, year=None)

        assert [txn.id for txn in result] == ["a", "b"]

    def test_filter_and_sort(self) -> None:
        """Should filter to the month and sort descending."""
        transactions = [
            make_txn("a", "2024-01-05"),
            make_txn("b", "2024-01-20"),
            make_txn("c", "2024-02-01"),
        ]

        result = select_transactions(transactions, month=1, year=2024)

        assert [txn.id for txn in result] == ["b", "a"]


class TestRenameReferences:
    """Tests for rename_references."""

    def test_rewrites_only_exact_matches(self) -> None:
        """Should rename records using the old name and leave others alone."""
        transactions = [make_txn("a", "2024-01-01", "Food"), make_txn("b", "2024-01-01", "Food & Dining")]

        result, changed = rename_references(transactions, "Food", "Dining")

        assert changed == 1
        assert [txn.category for txn in result] == ["Dining", "Food & Dining"]

    def test_works_for_goals(self) -> None:
        """Should rewrite budget goals too."""
        goal = BudgetGoal(
            id="g1",
            category=CategoryName("Food"),
            amount=100.0,
            period="monthly",
            is_active=True,
            created_at="2024-01-01T00:00:00.000Z",
        )

        result, changed = rename_references([goal], "Food", "Other")

        assert changed == 1
        assert result[0].category == "Other"
        assert result[0].id == "g1"
