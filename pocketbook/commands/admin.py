"""Admin commands for initialization and clearing data."""

import sqlite3
import sys
import tomllib
from pathlib import Path

import typer

from pocketbook.commands.common import console, fail, open_store
from pocketbook.config import (
    create_default_config,
    default_config,
    get_config_path,
    get_database_path,
    load_config_or_default,
)
from pocketbook.errors import PocketbookError
from pocketbook.store.categories import get_categories
from pocketbook.store.queries import clear_all_data
from pocketbook.store.schema import get_db_path, init_database


def run_full_init(db_path: Path, config_path: Path) -> None:
    """Initialize new database and config."""
    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
    init_database(db_path)
    console.print("[green]✓[/green] Database initialized")

    try:
        categories = get_categories(open_store())
    except PocketbookError as e:
        fail(f"Error: {e}")
    console.print(f"[green]✓[/green] {len(categories)} categories available")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Database: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize pocketbook database and configuration."""
    config_path = get_config_path()
    try:
        config = load_config_or_default(config_path)
    except tomllib.TOMLDecodeError as e:
        # --force rewrites the broken file with defaults
        if not force:
            fail(f"Invalid config file {config_path}: {e}")
        config = default_config()
    db_path = get_database_path(config) or get_db_path()

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Database already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'pocketbook init --force' to overwrite[/yellow]")
            sys.exit(1)

        run_full_init(db_path, config_path)

    except sqlite3.Error as e:
        fail(f"Database error: {e}")
    except OSError as e:
        fail(f"Filesystem error: {e}")


def clear_command(yes: bool = False) -> None:
    """Delete every transaction, goal and custom category."""
    if not yes:
        confirmed = typer.confirm(
            "This will permanently delete all transactions, goals and custom categories. Continue?",
            default=False,
        )
        if not confirmed:
            console.print("[dim]Cancelled[/dim]")
            return

    store = open_store()
    try:
        clear_all_data(store)
    except PocketbookError as e:
        fail(f"Error: {e}")

    console.print("[green]✓[/green] All data cleared")
