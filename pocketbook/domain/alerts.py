"""Pure functions for budget alert evaluation.

Goals are classified against a period's expense breakdown:
- exceeded: spending is at or above 100% of the goal amount
- warning: spending is at or above 80% but below 100%
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from pocketbook.domain.models import BudgetGoal
from pocketbook.domain.stats import TransactionStats

EXCEEDED_THRESHOLD = 100.0
WARNING_THRESHOLD = 80.0

AlertKind = Literal["exceeded", "warning"]


@dataclass(frozen=True)
class GoalAlert:
    """Immutable alert for a single goal."""

    goal: BudgetGoal
    current_spending: float
    percentage: float


@dataclass(frozen=True)
class BudgetAlerts:
    """Immutable alert result, in goal store order."""

    exceeded_goals: list[GoalAlert] = field(default_factory=list)
    warning_goals: list[GoalAlert] = field(default_factory=list)

    @property
    def has_alerts(self) -> bool:
        return bool(self.exceeded_goals or self.warning_goals)


def classify_percentage(percentage: float) -> AlertKind | None:
    """Map a percentage-of-goal to its alert tier, or None below warning."""
    if percentage >= EXCEEDED_THRESHOLD:
        return "exceeded"
    if percentage >= WARNING_THRESHOLD:
        return "warning"
    return None


def evaluate_budget_alerts(goals: Iterable[BudgetGoal], stats: TransactionStats) -> BudgetAlerts:
    """Classify active goals into exceeded and warning tiers.

    Args:
        goals: Budget goals in store order.
        stats: Statistics for the period being checked.

    Returns:
        BudgetAlerts. Inactive goals and goals with a non-positive amount
        are never evaluated.
    """
    exceeded: list[GoalAlert] = []
    warning: list[GoalAlert] = []

    for goal in goals:
        if not goal.is_active or goal.amount <= 0:
            continue

        current_spending = stats.expenses_by_category.get(goal.category, 0.0)
        percentage = current_spending / goal.amount * 100

        kind = classify_percentage(percentage)
        if kind == "exceeded":
            exceeded.append(GoalAlert(goal=goal, current_spending=current_spending, percentage=percentage))
        elif kind == "warning":
            warning.append(GoalAlert(goal=goal, current_spending=current_spending, percentage=percentage))

    return BudgetAlerts(exceeded_goals=exceeded, warning_goals=warning)


def format_alert_message(alert: GoalAlert, kind: AlertKind, currency: str = "$") -> tuple[str, str]:
    """Build the title and body shown to the user for an alert.

    Returns:
        Tuple of (title, body).
    """
    category = alert.goal.category
    spent = f"{currency}{alert.current_spending:,.2f}"
    budget = f"{currency}{alert.goal.amount:,.2f}"

    if kind == "exceeded":
        return (
            "Budget Exceeded!",
            f"You've spent {spent} on {category}, exceeding your budget of {budget}.",
        )
    return (
        "Budget Warning",
        f"You've used {alert.percentage:.0f}% of your {category} budget ({spent} of {budget}).",
    )
