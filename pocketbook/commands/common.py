"""Helpers shared by the CLI commands."""

import sys
import tomllib
from datetime import datetime
from typing import Any, NoReturn

from rich.console import Console

from pocketbook.config import get_config_path, get_database_path, load_config_or_default
from pocketbook.dates import month_label, parse_month
from pocketbook.errors import PocketbookError
from pocketbook.store.backend import SqliteStore

console = Console()


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]{message}[/red]", style="bold")
    sys.exit(1)


def load_settings() -> dict[str, Any]:
    """Load the config file, exiting if it is not valid TOML."""
    try:
        return load_config_or_default()
    except tomllib.TOMLDecodeError as e:
        fail(f"Invalid config file {get_config_path()}: {e}")


def open_store(config: dict[str, Any] | None = None) -> SqliteStore:
    """Open the configured sqlite store, exiting on failure."""
    if config is None:
        config = load_settings()
    try:
        return SqliteStore(get_database_path(config))
    except PocketbookError as e:
        fail(str(e))


def compute_period(all: bool, month: str | None) -> tuple[int | None, int | None, str]:
    """Compute the month/year selector and a display label.

    Args:
        all: Whether to cover all time.
        month: Optional specific month (YYYY-MM format).

    Returns:
        Tuple of (month, year, label). Month and year are None for all time.
    """
    if all:
        return None, None, "All Time"

    if month:
        try:
            month_int, year = parse_month(month)
        except ValueError:
            fail(f"Invalid month '{month}', expected YYYY-MM")
        return month_int, year, month_label(month_int, year)

    now = datetime.now()
    return now.month, now.year, month_label(now.month, now.year)
