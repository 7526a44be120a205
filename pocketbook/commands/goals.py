"""Budget goal commands (list, add, update, delete)."""

from typing import Any, cast

from rich.table import Table

from pocketbook.commands.common import compute_period, console, fail, load_settings, open_store
from pocketbook.commands.report import format_percentage_with_color
from pocketbook.config import get_currency_symbol
from pocketbook.domain.models import GOAL_PERIODS, GoalPeriod
from pocketbook.domain.report import format_money
from pocketbook.domain.stats import goal_progress
from pocketbook.errors import PocketbookError
from pocketbook.store.goals import add_budget_goal, delete_budget_goal, get_budget_goals, update_budget_goal
from pocketbook.store.queries import get_transaction_stats


def check_period(period: str) -> GoalPeriod:
    if period not in GOAL_PERIODS:
        fail(f"Period must be one of: {', '.join(GOAL_PERIODS)}")
    return cast(GoalPeriod, period)


def list_goals_command(month: str | None = None) -> None:
    """List goals with spending for the month."""
    month_int, year, period = compute_period(False, month)
    config = load_settings()
    store = open_store(config)
    currency = get_currency_symbol(config)

    try:
        goals = get_budget_goals(store)
        stats = get_transaction_stats(store, month_int, year)
    except PocketbookError as e:
        fail(f"Error: {e}")

    if not goals:
        console.print("[yellow]No budget goals yet[/yellow]")
        return

    table = Table(title=f"Budget goals - {period}")
    table.add_column("ID", style="dim")
    table.add_column("Category", style="magenta")
    table.add_column("Limit", justify="right")
    table.add_column("Spent", justify="right")
    table.add_column("Progress")
    table.add_column("Status", justify="center")

    bar_width = 20
    for goal in goals:
        spent = stats.expenses_by_category.get(goal.category, 0.0)
        progress = goal_progress(spent, goal.amount)
        bar = "█" * int(progress / 100 * bar_width)
        percentage = spent / goal.amount * 100 if goal.amount > 0 else 0.0
        table.add_row(
            goal.id,
            goal.category,
            f"{format_money(goal.amount, currency)} / {goal.period}",
            format_money(spent, currency),
            f"{bar:<{bar_width}} {format_percentage_with_color(percentage)}",
            "active" if goal.is_active else "[dim]paused[/dim]",
        )

    console.print(table)


def add_goal_command(category: str, amount: float, period: str = "monthly") -> None:
    """Create a budget goal."""
    goal_period = check_period(period)
    if not category.strip():
        fail("Please select a category")

    store = open_store()
    try:
        goal = add_budget_goal(store, category.strip(), amount, goal_period)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print(f"[green]✓[/green] Added {goal.period} goal for {goal.category}: {goal.amount:,.2f} ({goal.id})")


def update_goal_command(
    goal_id: str,
    category: str | None = None,
    amount: float | None = None,
    period: str | None = None,
    active: bool | None = None,
) -> None:
    """Update fields of a goal."""
    updates: dict[str, Any] = {}
    if category is not None:
        updates["category"] = category.strip()
    if amount is not None:
        updates["amount"] = amount
    if period is not None:
        updates["period"] = check_period(period)
    if active is not None:
        updates["is_active"] = active

    if not updates:
        fail("Nothing to update")

    store = open_store()
    try:
        if not any(goal.id == goal_id for goal in get_budget_goals(store)):
            console.print(f"[yellow]No goal with ID {goal_id}[/yellow]")
            return
        update_budget_goal(store, goal_id, **updates)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print(f"[green]✓[/green] Updated goal {goal_id}")


def delete_goal_command(goal_id: str) -> None:
    """Delete a goal."""
    store = open_store()
    try:
        delete_budget_goal(store, goal_id)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print(f"[green]✓[/green] Deleted goal {goal_id}")
