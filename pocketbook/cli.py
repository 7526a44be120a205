"""CLI entry point for pocketbook."""

import datetime
import logging

import typer
from rich.logging import RichHandler

from pocketbook.commands.admin import clear_command, init_command
from pocketbook.commands.categories import (
    add_category_command,
    delete_category_command,
    list_categories_command,
    rename_category_command,
)
from pocketbook.commands.goals import add_goal_command, delete_goal_command, list_goals_command, update_goal_command
from pocketbook.commands.report import alerts_command, export_command, stats_command, trend_command
from pocketbook.commands.transactions import add_command, delete_command, list_command

app = typer.Typer(
    name="pocketbook",
    help="Pocketbook - track your income, expenses and budget goals",
    add_completion=False,
)
category_app = typer.Typer(help="Manage your categories.", add_completion=False)
goal_app = typer.Typer(help="Manage your budget goals.", add_completion=False)
app.add_typer(category_app, name="category")
app.add_typer(goal_app, name="goal")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Pocketbook - track your income, expenses and budget goals."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize pocketbook database and configuration."""
    init_command(force)


@app.command()
def add(
    txn_type: str = typer.Argument(..., metavar="TYPE", help="'income' or 'expense'"),
    category: str = typer.Argument(..., help="Category name"),
    amount: float = typer.Argument(..., help="Amount (positive)"),
    date: str = typer.Option(None, "--date", "-d", help="Transaction date (default: today)"),
    description: str = typer.Option(None, "--description", "-m", help="Optional description"),
) -> None:
    """Add an income or expense transaction."""
    if date is None:
        date = datetime.date.today().isoformat()
    add_command(txn_type, category, amount, date, description)


@app.command(name="list")
def list_transactions(
    limit: int = typer.Option(50, help="Maximum transactions to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all time"),
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
) -> None:
    """List your transactions, most recent first."""
    list_command(all, month, limit)


@app.command()
def delete(transaction_id: str) -> None:
    """Delete a transaction."""
    delete_command(transaction_id)


@app.command()
def stats(
    all: bool = typer.Option(False, "--all", "-a", help="Show all time"),
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
    year: int = typer.Option(None, "--year", help="Whole calendar year (YYYY)"),
    histogram: bool = typer.Option(True, help="Show histogram of your spending"),
) -> None:
    """Show your income, spending and net balance."""
    stats_command(all, month, histogram, year)


@app.command()
def trend(
    months: int = typer.Option(6, "--months", "-n", help="Number of months to show (e.g. 6 or 12)"),
) -> None:
    """Show income and expenses month by month."""
    trend_command(months)


@app.command()
def alerts(
    all: bool = typer.Option(False, "--all", "-a", help="Check against all time"),
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
) -> None:
    """Show budget goals that are exceeded or close to their limit."""
    alerts_command(all, month)


@app.command()
def export(
    output: str = typer.Option(None, "--output", "-o", help="CSV file to write (default: ./budget_data_<date>.csv)"),
) -> None:
    """Export your transactions as CSV."""
    export_command(output)


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete all your data."""
    clear_command(yes)


@category_app.command(name="list")
def category_list(
    category_type: str = typer.Option(None, "--type", "-t", help="'income' or 'expense'"),
) -> None:
    """List categories."""
    list_categories_command(category_type)


@category_app.command(name="add")
def category_add(
    name: str,
    category_type: str = typer.Option("expense", "--type", "-t", help="'income' or 'expense'"),
) -> None:
    """Create a custom category."""
    add_category_command(name, category_type)


@category_app.command(name="rename")
def category_rename(category_id: str, new_name: str) -> None:
    """Rename a category and update everything that uses it."""
    rename_category_command(category_id, new_name)


@category_app.command(name="delete")
def category_delete(category_id: str) -> None:
    """Delete a custom category."""
    delete_category_command(category_id)


@goal_app.command(name="list")
def goal_list(
    month: str = typer.Option(None, "--month", help="Month to compare spending against (YYYY-MM)"),
) -> None:
    """List budget goals with this month's spending."""
    list_goals_command(month)


@goal_app.command(name="add")
def goal_add(
    category: str,
    amount: float,
    period: str = typer.Option("monthly", "--period", "-p", help="'monthly' or 'annual'"),
) -> None:
    """Add a budget goal for a category."""
    add_goal_command(category, amount, period)


@goal_app.command(name="update")
def goal_update(
    goal_id: str,
    category: str = typer.Option(None, "--category", help="New category"),
    amount: float = typer.Option(None, "--amount", help="New limit"),
    period: str = typer.Option(None, "--period", help="'monthly' or 'annual'"),
    active: bool = typer.Option(None, "--active/--inactive", help="Enable or pause the goal"),
) -> None:
    """Update a budget goal."""
    update_goal_command(goal_id, category, amount, period, active)


@goal_app.command(name="delete")
def goal_delete(goal_id: str) -> None:
    """Delete a budget goal."""
    delete_goal_command(goal_id)


if __name__ == "__main__":
    app()
