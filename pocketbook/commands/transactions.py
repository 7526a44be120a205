"""Transaction commands (add, list, delete)."""

from typing import cast

from rich.table import Table

from pocketbook.commands.common import compute_period, console, fail, load_settings, open_store
from pocketbook.config import get_currency_symbol
from pocketbook.dates import normalize_date
from pocketbook.domain.categories import category_names, is_category_name_taken
from pocketbook.domain.models import TRANSACTION_TYPES, TransactionDraft, TransactionType
from pocketbook.domain.report import format_money
from pocketbook.errors import PocketbookError
from pocketbook.store.categories import get_categories
from pocketbook.store.transactions import add_transaction, delete_transaction, get_transactions


def validate_draft(txn_type: str, category: str, amount: float, date: str) -> str | None:
    """Check the fields a transaction needs before it is stored.

    Returns:
        Error message, or None if the fields are valid.
    """
    if txn_type not in TRANSACTION_TYPES:
        return f"Type must be one of: {', '.join(TRANSACTION_TYPES)}"
    if not category.strip():
        return "Category is required"
    if not date.strip():
        return "Date is required"
    if not amount > 0:
        return "Please enter a valid amount greater than 0"
    return None


def add_command(
    txn_type: str,
    category: str,
    amount: float,
    date: str,
    description: str | None = None,
) -> None:
    """Add a transaction.

    Args:
        txn_type: "income" or "expense".
        category: Category name.
        amount: Positive amount.
        date: Transaction date (YYYY-MM-DD, DD/MM/YYYY, or other formats).
        description: Optional description.
    """
    error = validate_draft(txn_type, category, amount, date)
    if error:
        fail(error)

    try:
        normalized_date = normalize_date(date)
    except ValueError as e:
        console.print(f"[red]Invalid date format: {e}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        fail("Transaction not added")

    kind = cast(TransactionType, txn_type)

    config = load_settings()
    store = open_store(config)

    try:
        categories = get_categories(store)
        if not is_category_name_taken(categories, category, kind):
            console.print(f"[yellow]Category '{category}' is not a known {txn_type} category[/yellow]")
            known = category_names(categories, kind)
            console.print(f"[dim]Known: {', '.join(known)}[/dim]")

        draft = TransactionDraft(
            type=kind,
            category=category.strip(),
            amount=amount,
            date=normalized_date,
            description=description.strip() if description else None,
        )
        txn = add_transaction(store, draft)
    except PocketbookError as e:
        fail(f"Error: {e}")

    currency = get_currency_symbol(config)
    console.print("[green]✓[/green] Transaction added:")
    console.print(f"  ID: {txn.id}")
    console.print(f"  Date: {txn.date}")
    console.print(f"  Type: {txn.type}")
    console.print(f"  Category: {txn.category}")
    console.print(f"  Amount: {format_money(txn.amount, currency)}")
    if txn.description:
        console.print(f"  Description: {txn.description}")


def list_command(
    all: bool = False,
    month: str | None = None,
    limit: int | None = 50,
) -> None:
    """List transactions, most recent first."""
    month_int, year, period = compute_period(all, month)
    config = load_settings()
    store = open_store(config)
    currency = get_currency_symbol(config)

    try:
        transactions = get_transactions(store, month_int, year)
    except PocketbookError as e:
        fail(f"Error: {e}")

    if not transactions:
        console.print(f"[yellow]No transactions found ({period})[/yellow]")
        return

    shown = transactions[:limit] if limit else transactions
    table = Table(title=f"Transactions - {period} (showing {len(shown)} of {len(transactions)})")
    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")

    for txn in shown:
        if txn.type == "expense":
            amount_display = f"[red]-{format_money(txn.amount, currency)}[/red]"
        else:
            amount_display = f"[green]+{format_money(txn.amount, currency)}[/green]"
        table.add_row(txn.id, txn.date, txn.category, txn.description or "[dim]-[/dim]", amount_display)

    console.print(table)


def delete_command(transaction_id: str) -> None:
    """Delete a transaction by id."""
    store = open_store()

    try:
        before = len(get_transactions(store))
        delete_transaction(store, transaction_id)
        after = len(get_transactions(store))
    except PocketbookError as e:
        fail(f"Error: {e}")

    if before == after:
        console.print(f"[yellow]No transaction with ID {transaction_id}[/yellow]")
    else:
        console.print(f"[green]✓[/green] Deleted transaction {transaction_id}")
