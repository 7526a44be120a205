"""Report commands: statistics, budget alerts and CSV export."""

from datetime import datetime
from pathlib import Path

from rich.table import Table

from pocketbook.commands.common import compute_period, console, fail, load_settings, open_store
from pocketbook.config import get_currency_symbol
from pocketbook.domain.alerts import BudgetAlerts, format_alert_message
from pocketbook.domain.report import calculate_histogram_bar_length, export_transactions_csv, format_money
from pocketbook.domain.stats import sorted_expense_breakdown
from pocketbook.errors import PocketbookError
from pocketbook.store.queries import check_budget_alerts, get_annual_stats, get_monthly_trend, get_transaction_stats
from pocketbook.store.transactions import get_transactions


def format_percentage_with_color(percentage: float) -> str:
    """Color a goal percentage by alert tier."""
    text = f"({percentage:.0f}%)"
    if percentage >= 100:
        return f"[red]{text}[/red]"
    elif percentage >= 80:
        return f"[yellow]{text}[/yellow]"
    else:
        return f"[green]{text}[/green]"


def stats_command(
    all: bool = False, month: str | None = None, histogram: bool = True, year: int | None = None
) -> None:
    """Show income, expense and net totals with the expense breakdown."""
    if year is not None and (all or month):
        fail("Use only one of --all, --month or --year")

    month_int: int | None = None
    if year is not None:
        period = f"{year} (annual)"
    else:
        month_int, year, period = compute_period(all, month)
    config = load_settings()
    store = open_store(config)
    currency = get_currency_symbol(config)

    try:
        if month_int is None and year is not None:
            stats = get_annual_stats(store, year)
        else:
            stats = get_transaction_stats(store, month_int, year)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print(f"[bold cyan]{period}[/bold cyan]\n")
    console.print(f"  [bold green]Income:[/bold green]   {format_money(stats.total_income, currency)}")
    console.print(f"  [bold red]Expenses:[/bold red] {format_money(stats.total_expense, currency)}")
    net_color = "green" if stats.net_balance >= 0 else "red"
    net_display = format_money(stats.net_balance, currency)
    console.print(f"  [bold cyan]Net:[/bold cyan]      [{net_color}]{net_display}[/{net_color}]\n")

    breakdown = sorted_expense_breakdown(stats)
    if not breakdown:
        console.print("[dim]No expenses in this period[/dim]")
        return

    console.print("[bold red]Expenses by category:[/bold red]\n")
    max_amount = breakdown[0][1]
    bar_width = 30
    for category, amount in breakdown:
        amount_display = format_money(amount, currency)
        if histogram:
            bar = "█" * calculate_histogram_bar_length(amount, max_amount, bar_width)
            console.print(f"  {category:20} {amount_display:>12} {bar}")
        else:
            console.print(f"  {category}: {amount_display}")


def trend_command(months: int = 6) -> None:
    """Show income and expenses for each of the last few months."""
    if months < 1:
        fail("Months must be at least 1")
    config = load_settings()
    store = open_store(config)
    currency = get_currency_symbol(config)

    try:
        trend = get_monthly_trend(store, months)
    except PocketbookError as e:
        fail(f"Error: {e}")

    table = Table(title=f"Last {months} months")
    table.add_column("Month", style="cyan")
    table.add_column("Income", justify="right", style="green")
    table.add_column("Expenses", justify="right", style="red")
    table.add_column("Net", justify="right")

    for totals in trend:
        net = totals.income - totals.expenses
        net_color = "green" if net >= 0 else "red"
        table.add_row(
            f"{totals.label} {totals.year}",
            format_money(totals.income, currency),
            format_money(totals.expenses, currency),
            f"[{net_color}]{format_money(net, currency)}[/{net_color}]",
        )

    console.print(table)


def render_alerts(alerts: BudgetAlerts, currency: str) -> None:
    for alert in alerts.exceeded_goals:
        title, body = format_alert_message(alert, "exceeded", currency)
        console.print(f"[bold red]{title}[/bold red] {format_percentage_with_color(alert.percentage)}")
        console.print(f"  {body}")
    for alert in alerts.warning_goals:
        title, body = format_alert_message(alert, "warning", currency)
        console.print(f"[bold yellow]{title}[/bold yellow] {format_percentage_with_color(alert.percentage)}")
        console.print(f"  {body}")


def alerts_command(all: bool = False, month: str | None = None) -> None:
    """Show goals that are exceeded or close to their limit."""
    month_int, year, period = compute_period(all, month)
    config = load_settings()
    store = open_store(config)

    try:
        alerts = check_budget_alerts(store, month_int, year)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print(f"[bold cyan]Budget alerts - {period}[/bold cyan]\n")
    if not alerts.has_alerts:
        console.print("[green]✓ All budget goals are on track[/green]")
        return

    render_alerts(alerts, get_currency_symbol(config))


def export_command(output: str | None = None) -> None:
    """Export every transaction to a CSV file."""
    store = open_store()

    try:
        transactions = get_transactions(store)
    except PocketbookError as e:
        fail(f"Error: {e}")

    if not transactions:
        console.print("[yellow]No transactions found to export.[/yellow]")
        return

    if output:
        path = Path(output).expanduser()
    else:
        path = Path.cwd() / f"budget_data_{datetime.now().strftime('%Y-%m-%d')}.csv"

    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            count = export_transactions_csv(transactions, f)
    except OSError as e:
        fail(f"Export failed: {e}")

    console.print(f"[green]✓[/green] Exported {count} transactions to: {path}")
