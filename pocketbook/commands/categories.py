"""Category commands (list, add, rename, delete)."""

from typing import cast

from rich.table import Table

from pocketbook.commands.common import console, fail, open_store
from pocketbook.domain.categories import find_category, is_category_name_taken
from pocketbook.domain.models import TRANSACTION_TYPES, TransactionType
from pocketbook.errors import PocketbookError
from pocketbook.store.categories import add_category, delete_category, get_categories, update_category


def check_type(category_type: str) -> TransactionType:
    if category_type not in TRANSACTION_TYPES:
        fail(f"Type must be one of: {', '.join(TRANSACTION_TYPES)}")
    return cast(TransactionType, category_type)


def list_categories_command(category_type: str | None = None) -> None:
    """List categories, optionally of one type."""
    store = open_store()

    try:
        categories = get_categories(store)
    except PocketbookError as e:
        fail(f"Error: {e}")

    if category_type:
        check_type(category_type)
        categories = [cat for cat in categories if cat.type == category_type]

    table = Table(title=f"Categories ({len(categories)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="magenta")
    table.add_column("Type", style="cyan")
    table.add_column("Custom", justify="center")

    for cat in categories:
        table.add_row(cat.id, cat.name, cat.type, "✓" if cat.is_custom else "")

    console.print(table)


def add_category_command(name: str, category_type: str) -> None:
    """Create a custom category."""
    kind = check_type(category_type)
    name = name.strip()
    if not name:
        fail("Please enter a category name")

    store = open_store()
    try:
        if is_category_name_taken(get_categories(store), name, kind):
            fail("A category with this name already exists")
        category = add_category(store, name, kind)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print(f"[green]✓[/green] Created {kind} category: {category.name} ({category.id})")


def rename_category_command(category_id: str, new_name: str) -> None:
    """Rename a category, updating every transaction and goal that uses it."""
    new_name = new_name.strip()
    if not new_name:
        fail("Please enter a category name")

    store = open_store()
    try:
        categories = get_categories(store)
        existing = find_category(categories, category_id)
        if existing is None:
            fail(f"Category not found: {category_id}")
        if is_category_name_taken(categories, new_name, existing.type, exclude_id=category_id):
            fail("A category with this name already exists")
        updated = update_category(store, category_id, name=new_name)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print(f"[green]✓[/green] Renamed {existing.name} to {updated.name}")


def delete_category_command(category_id: str) -> None:
    """Delete a custom category; its transactions and goals move to "Other"."""
    store = open_store()
    try:
        delete_category(store, category_id)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print(f"[green]✓[/green] Deleted category {category_id}")
    console.print("[dim]Transactions and goals using it now use 'Other'[/dim]")
