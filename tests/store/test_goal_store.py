"""Tests for pocketbook.store.goals and budget alerts."""

import pytest

from pocketbook.domain.models import TransactionDraft
from pocketbook.errors import InvalidGoalError
from pocketbook.store.backend import MemoryStore
from pocketbook.store.goals import add_budget_goal, delete_budget_goal, get_budget_goals, update_budget_goal
from pocketbook.store.queries import check_budget_alerts
from pocketbook.store.transactions import add_transaction


class TestBudgetGoals:
    """Tests for goal CRUD."""

    def test_add_and_get_newest_first(self, store: MemoryStore) -> None:
        """Should list goals newest first."""
        first = add_budget_goal(store, "Food", 500)
        second = add_budget_goal(store, "Travel", 200, period="annual")

        goals = get_budget_goals(store)

        assert [goal.id for goal in goals] == [second.id, first.id]
        assert goals[0].period == "annual"
        assert goals[1].is_active is True
        assert goals[1].created_at

    def test_rejects_non_positive_amount(self, store: MemoryStore) -> None:
        """Should refuse goals that cannot be evaluated."""
        with pytest.raises(InvalidGoalError):
            add_budget_goal(store, "Food", 0)
        with pytest.raises(InvalidGoalError):
            add_budget_goal(store, "Food", -5)

        assert get_budget_goals(store) == []

    def test_update_merges_fields(self, store: MemoryStore) -> None:
        """Should change only the given fields."""
        goal = add_budget_goal(store, "Food", 500)

        update_budget_goal(store, goal.id, amount=750, is_active=False)

        (updated,) = get_budget_goals(store)
        assert updated.amount == 750
        assert updated.is_active is False
        assert updated.category == "Food"
        assert updated.created_at == goal.created_at

    def test_update_missing_is_noop(self, store: MemoryStore) -> None:
        """Should ignore unknown ids."""
        goal = add_budget_goal(store, "Food", 500)

        update_budget_goal(store, "missing", amount=1)

        assert get_budget_goals(store) == [goal]

    def test_update_rejects_non_positive_amount(self, store: MemoryStore) -> None:
        """Should refuse to set a zero amount."""
        goal = add_budget_goal(store, "Food", 500)

        with pytest.raises(InvalidGoalError):
            update_budget_goal(store, goal.id, amount=0)

    def test_update_rejects_unknown_field(self, store: MemoryStore) -> None:
        """Should refuse fields goals do not have."""
        goal = add_budget_goal(store, "Food", 500)

        with pytest.raises(ValueError):
            update_budget_goal(store, goal.id, colour="red")

    def test_delete(self, store: MemoryStore) -> None:
        """Should remove the goal and ignore unknown ids."""
        goal = add_budget_goal(store, "Food", 500)

        delete_budget_goal(store, "missing")
        assert len(get_budget_goals(store)) == 1

        delete_budget_goal(store, goal.id)
        assert get_budget_goals(store) == []


class TestCheckBudgetAlerts:
    """Tests for check_budget_alerts."""

    def spend(self, store: MemoryStore, category: str, amount: float, date: str = "2024-01-10") -> None:
        add_transaction(
            store,
            TransactionDraft(type="expense", category=category, amount=amount, date=date),
        )

    def test_warning_and_exceeded(self, store: MemoryStore) -> None:
        """Should classify goals against the month's spending."""
        food = add_budget_goal(store, "Food", 500)
        travel = add_budget_goal(store, "Travel", 100)
        self.spend(store, "Food", 400)
        self.spend(store, "Travel", 100)
        self.spend(store, "Travel", 5000, date="2024-02-01")

        alerts = check_budget_alerts(store, 1, 2024)

        assert [(a.goal.id, a.percentage) for a in alerts.warning_goals] == [(food.id, 80.0)]
        assert [(a.goal.id, a.percentage) for a in alerts.exceeded_goals] == [(travel.id, 100.0)]

    def test_inactive_goal_ignored(self, store: MemoryStore) -> None:
        """Should not alert for paused goals."""
        goal = add_budget_goal(store, "Food", 100)
        update_budget_goal(store, goal.id, is_active=False)
        self.spend(store, "Food", 1000)

        alerts = check_budget_alerts(store, 1, 2024)

        assert not alerts.has_alerts

    def test_is_read_only(self, store: MemoryStore) -> None:
        """Should not modify the store."""
        add_budget_goal(store, "Food", 100)
        self.spend(store, "Food", 1000)
        before = {key: store.get(key) for key in store.keys()}

        check_budget_alerts(store, 1, 2024)
        check_budget_alerts(store, 1, 2024)

        assert {key: store.get(key) for key in store.keys()} == before
