"""Budget goal store operations."""

import logging
from dataclasses import replace
from typing import Any

from pocketbook.domain.models import BudgetGoal, CategoryName, GoalPeriod
from pocketbook.errors import InvalidGoalError
from pocketbook.store.backend import KeyValueStore
from pocketbook.store.collections import GOALS_KEY, load_records, new_id, save_records, utc_now_iso, write_lock

logger = logging.getLogger(__name__)

# Record attribute names accepted by update_budget_goal
_UPDATABLE_FIELDS = {"category", "amount", "period", "is_active"}


def _check_amount(amount: float) -> None:
    if not amount > 0:
        raise InvalidGoalError(f"Goal amount must be positive, got {amount}")


def add_budget_goal(
    store: KeyValueStore,
    category: str,
    amount: float,
    period: GoalPeriod = "monthly",
    is_active: bool = True,
) -> BudgetGoal:
    """Store a new budget goal at the front of the goal list.

    Raises:
        InvalidGoalError: If amount is not positive.
        PersistenceError: If the goals cannot be read or written.
    """
    _check_amount(amount)
    goal = BudgetGoal(
        id=new_id(),
        category=CategoryName(category),
        amount=float(amount),
        period=period,
        is_active=is_active,
        created_at=utc_now_iso(),
    )

    with write_lock:
        existing = get_budget_goals(store)
        save_records(store, GOALS_KEY, [goal, *existing])

    logger.info("Added %s goal %s for %s", goal.period, goal.id, goal.category)
    return goal


def get_budget_goals(store: KeyValueStore) -> list[BudgetGoal]:
    """Get all budget goals, newest first."""
    return load_records(store, GOALS_KEY, BudgetGoal.from_dict) or []


def update_budget_goal(store: KeyValueStore, goal_id: str, **updates: Any) -> None:
    """Merge field updates into a goal. Unknown ids are ignored.

    Args:
        store: Backend holding the goals.
        goal_id: Goal to update.
        **updates: Any of category, amount, period, is_active.

    Raises:
        ValueError: If an unknown field is given.
        InvalidGoalError: If amount is updated to a non-positive value.
        PersistenceError: If the goals cannot be read or written.
    """
    unknown = set(updates) - _UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update goal fields: {', '.join(sorted(unknown))}")
    if "amount" in updates:
        _check_amount(updates["amount"])
        updates["amount"] = float(updates["amount"])
    if "category" in updates:
        updates["category"] = CategoryName(updates["category"])

    with write_lock:
        goals = get_budget_goals(store)
        found = False
        updated: list[BudgetGoal] = []
        for goal in goals:
            if goal.id == goal_id:
                goal = replace(goal, **updates)
                found = True
            updated.append(goal)
        save_records(store, GOALS_KEY, updated)

    if found:
        logger.info("Updated goal %s: %s", goal_id, ", ".join(sorted(updates)))
    else:
        logger.debug("Update ignored, no goal %s", goal_id)


def delete_budget_goal(store: KeyValueStore, goal_id: str) -> None:
    """Delete a budget goal. Unknown ids are ignored."""
    with write_lock:
        goals = get_budget_goals(store)
        save_records(store, GOALS_KEY, [goal for goal in goals if goal.id != goal_id])
    logger.info("Deleted goal %s", goal_id)
