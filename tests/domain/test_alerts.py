"""Tests for pocketbook.domain.alerts pure functions."""

from pocketbook.domain.alerts import (
    GoalAlert,
    classify_percentage,
    evaluate_budget_alerts,
    format_alert_message,
)
from pocketbook.domain.models import BudgetGoal, CategoryName
from pocketbook.domain.stats import TransactionStats


def make_goal(goal_id: str, category: str, amount: float, is_active: bool = True) -> BudgetGoal:
    return BudgetGoal(
        id=goal_id,
        category=CategoryName(category),
        amount=amount,
        period="monthly",
        is_active=is_active,
        created_at="2024-01-01T00:00:00.000Z",
    )


def stats_with(**spending: float) -> TransactionStats:
    breakdown = {CategoryName(k): v for k, v in spending.items()}
    return TransactionStats(total_expense=sum(breakdown.values()), expenses_by_category=breakdown)


class TestClassifyPercentage:
    """Tests for classify_percentage."""

    def test_tiers(self) -> None:
        """Should map boundaries to the right tier."""
        assert classify_percentage(79.99) is None
        assert classify_percentage(80.0) == "warning"
        assert classify_percentage(99.99) == "warning"
        assert classify_percentage(100.0) == "exceeded"
        assert classify_percentage(250.0) == "exceeded"


class TestEvaluateBudgetAlerts:
    """Tests for evaluate_budget_alerts."""

    def test_eighty_percent_is_warning(self) -> None:
        """Should warn, not exceed, at exactly 80%."""
        goal = make_goal("g1", "Food", 500)

        alerts = evaluate_budget_alerts([goal], stats_with(Food=400))

        assert alerts.exceeded_goals == []
        assert alerts.warning_goals == [GoalAlert(goal=goal, current_spending=400, percentage=80.0)]

    def test_hundred_percent_is_exceeded(self) -> None:
        """Should flag exceeded at exactly 100%."""
        goal = make_goal("g1", "Food", 500)

        alerts = evaluate_budget_alerts([goal], stats_with(Food=500))

        assert alerts.warning_goals == []
        assert alerts.exceeded_goals == [GoalAlert(goal=goal, current_spending=500, percentage=100.0)]

    def test_below_warning_has_no_alert(self) -> None:
        """Should not alert under 80%."""
        alerts = evaluate_budget_alerts([make_goal("g1", "Food", 500)], stats_with(Food=100))

        assert not alerts.has_alerts

    def test_no_spending_counts_as_zero(self) -> None:
        """Should treat a category without expenses as zero spending."""
        alerts = evaluate_budget_alerts([make_goal("g1", "Travel", 100)], stats_with(Food=1000))

        assert not alerts.has_alerts

    def test_inactive_goals_skipped(self) -> None:
        """Should never evaluate inactive goals."""
        alerts = evaluate_budget_alerts([make_goal("g1", "Food", 10, is_active=False)], stats_with(Food=1000))

        assert not alerts.has_alerts

    def test_non_positive_goals_skipped(self) -> None:
        """Should skip goals whose amount would divide by zero."""
        alerts = evaluate_budget_alerts([make_goal("g1", "Food", 0)], stats_with(Food=10))

        assert not alerts.has_alerts

    def test_preserves_goal_order(self) -> None:
        """Should list alerts in goal store order."""
        goals = [make_goal("g1", "Travel", 100), make_goal("g2", "Food", 100), make_goal("g3", "Rent", 100)]

        alerts = evaluate_budget_alerts(goals, stats_with(Food=150, Travel=120, Rent=90))

        assert [a.goal.id for a in alerts.exceeded_goals] == ["g1", "g2"]
        assert [a.goal.id for a in alerts.warning_goals] == ["g3"]


class TestFormatAlertMessage:
    """Tests for format_alert_message."""

    def test_exceeded_message(self) -> None:
        """Should mention spending and the budget."""
        alert = GoalAlert(goal=make_goal("g1", "Food", 500), current_spending=612.5, percentage=122.5)

        title, body = format_alert_message(alert, "exceeded", "$")

        assert title == "Budget Exceeded!"
        assert body == "You've spent $612.50 on Food, exceeding your budget of $500.00."

    def test_warning_message(self) -> None:
        """Should mention the rounded percentage."""
        alert = GoalAlert(goal=make_goal("g1", "Food", 500), current_spending=400, percentage=80.0)

        title, body = format_alert_message(alert, "warning", "£")

        assert title == "Budget Warning"
        assert body == "You've used 80% of your Food budget (£400.00 of £500.00)."
