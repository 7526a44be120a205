"""Transaction ledger operations."""

import logging

from pocketbook.domain.categories import unique_expense_categories
from pocketbook.domain.ledger import select_transactions
from pocketbook.domain.models import CategoryName, Transaction, TransactionDraft
from pocketbook.store.backend import KeyValueStore
from pocketbook.store.collections import TRANSACTIONS_KEY, load_records, new_id, save_records, write_lock

logger = logging.getLogger(__name__)


def _load_transactions(store: KeyValueStore) -> list[Transaction]:
    return load_records(store, TRANSACTIONS_KEY, Transaction.from_dict) or []


def add_transaction(store: KeyValueStore, draft: TransactionDraft) -> Transaction:
    """Store a new transaction at the front of the ledger.

    The caller is responsible for validating the draft (positive amount,
    required fields present).

    Args:
        store: Backend holding the ledger.
        draft: Transaction fields without an id.

    Returns:
        The stored transaction, with its generated id.

    Raises:
        PersistenceError: If the ledger cannot be read or written.
    """
    transaction = Transaction(
        id=new_id(),
        type=draft["type"],
        category=CategoryName(draft["category"]),
        amount=float(draft["amount"]),
        date=draft["date"],
        description=draft.get("description"),
    )

    with write_lock:
        existing = _load_transactions(store)
        save_records(store, TRANSACTIONS_KEY, [transaction, *existing])

    logger.info("Added %s transaction %s (%s)", transaction.type, transaction.id, transaction.category)
    return transaction


def get_transactions(store: KeyValueStore, month: int | None = None, year: int | None = None) -> list[Transaction]:
    """Get transactions, most recent first.

    Args:
        store: Backend holding the ledger.
        month: Optional month (1-12). Filters only together with year.
        year: Optional year. Filters only together with month.

    Returns:
        Transactions ordered by date descending; ties keep stored order.

    Raises:
        PersistenceError: If the ledger cannot be read.
    """
    return select_transactions(_load_transactions(store), month, year)


def delete_transaction(store: KeyValueStore, transaction_id: str) -> None:
    """Delete a transaction. Unknown ids are ignored.

    Raises:
        PersistenceError: If the ledger cannot be read or written.
    """
    with write_lock:
        transactions = get_transactions(store)
        remaining = [txn for txn in transactions if txn.id != transaction_id]
        save_records(store, TRANSACTIONS_KEY, remaining)

    if len(remaining) == len(transactions):
        logger.debug("Delete ignored, no transaction %s", transaction_id)
    else:
        logger.info("Deleted transaction %s", transaction_id)


def get_unique_categories(store: KeyValueStore) -> list[str]:
    """Expense categories used in the ledger merged with the defaults, sorted."""
    used = (txn.category for txn in _load_transactions(store) if txn.type == "expense")
    return unique_expense_categories(used)
