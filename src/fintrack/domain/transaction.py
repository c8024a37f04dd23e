"""Transaction store.

The store owns the ordered collection of transactions and persists it as a
single JSON document in key-value storage. Every save rewrites the whole
collection; there are no partial writes.
"""

import json
import secrets
import string
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Optional

from fintrack.database.base import Storage
from fintrack.domain.entities import Direction, Transaction, TransactionFields
from fintrack.domain.errors import MISSING_FIELDS, StorageError, ValidationError
from fintrack.logging_setup import get_logger
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date

logger = get_logger(__name__)

TRANSACTIONS_KEY = "financeAppTransactions_v2"

CENTS = Decimal("0.01")

# Largest magnitude whose cents survive the JSON number round trip
MAX_AMOUNT = Decimal("9999999999999.99")

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Return a short random identifier such as ``_k3j9x0a1b``."""
    return "_" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


def validate_fields(fields: TransactionFields) -> tuple[str, Decimal, date, str]:
    """Validate form fields and sign the amount by direction.

    The magnitude's own sign is ignored: expenses are always stored negative
    and income always positive.

    Args:
        fields: Raw form input

    Returns:
        Tuple of (description, signed amount, date, category)

    Raises:
        ValidationError: If any field is missing or invalid
    """
    description = (fields.description or "").strip()
    category = (fields.category or "").strip()
    if not description or not category:
        raise ValidationError(MISSING_FIELDS)

    try:
        if isinstance(fields.amount, Decimal):
            magnitude = fields.amount
        elif isinstance(fields.amount, str):
            magnitude = parse_amount(fields.amount)
        elif isinstance(fields.amount, (int, float)):
            magnitude = Decimal(str(fields.amount))
        else:
            raise ValueError("Missing amount")
        magnitude = abs(magnitude).quantize(CENTS)
    except (ArithmeticError, ValueError) as e:
        raise ValidationError(MISSING_FIELDS) from e
    if not magnitude.is_finite() or magnitude == 0 or magnitude > MAX_AMOUNT:
        raise ValidationError(MISSING_FIELDS)

    if isinstance(fields.date, date):
        txn_date = fields.date
    elif isinstance(fields.date, str) and fields.date.strip():
        try:
            txn_date = parse_date(fields.date)
        except ValueError as e:
            raise ValidationError(MISSING_FIELDS) from e
    else:
        raise ValidationError(MISSING_FIELDS)

    try:
        direction = Direction(fields.direction)
    except ValueError as e:
        raise ValidationError(MISSING_FIELDS) from e
    amount = -magnitude if direction is Direction.EXPENSE else magnitude
    return description, amount, txn_date, category


def serialize_transactions(transactions: Iterable[Transaction]) -> str:
    """Serialize a collection to the stored JSON document."""
    return json.dumps([txn.to_dict() for txn in transactions], ensure_ascii=False)


def deserialize_transactions(payload: str) -> list[Transaction]:
    """Parse the stored JSON document.

    Raises:
        ValueError: If the document is not a well-formed collection
    """
    records = json.loads(payload)
    if not isinstance(records, list):
        raise ValueError("Stored transactions are not a list")
    transactions = []
    seen_ids = set()
    for record in records:
        if not isinstance(record, dict):
            raise ValueError(f"Stored transaction is not an object: {record!r}")
        try:
            txn = Transaction.from_dict(record)
        except (KeyError, TypeError, ArithmeticError) as e:
            raise ValueError(f"Malformed stored transaction: {record!r}") from e
        if txn.id in seen_ids:
            raise ValueError(f"Duplicate transaction id {txn.id}")
        seen_ids.add(txn.id)
        transactions.append(txn)
    return transactions


class TransactionStore:
    """Store owning the ordered transaction collection."""

    def __init__(
        self,
        storage: Storage,
        id_factory: Callable[[], str] = generate_id,
    ):
        """Initialize transaction store.

        Args:
            storage: Key-value storage backend
            id_factory: Callable producing candidate transaction IDs
        """
        self.storage = storage
        self.id_factory = id_factory
        self.transactions: list[Transaction] = []

    def load(self) -> list[Transaction]:
        """Load the collection from storage.

        Missing or unreadable data yields an empty collection; this never
        raises.

        Returns:
            The loaded transactions, in insertion order
        """
        try:
            payload = self.storage.get_item(TRANSACTIONS_KEY)
        except StorageError as e:
            logger.warning("%s; starting with an empty collection", e)
            payload = None

        if payload is None:
            self.transactions = []
        else:
            try:
                self.transactions = deserialize_transactions(payload)
            except ValueError as e:
                logger.warning("Ignoring corrupt stored transactions: %s", e)
                self.transactions = []

        logger.debug("Loaded %d transactions", len(self.transactions))
        return list(self.transactions)

    def save(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        """Persist the full collection, overwriting the stored one.

        Args:
            transactions: Collection to store; defaults to the in-memory one
        """
        if transactions is not None:
            self.transactions = list(transactions)
        try:
            self.storage.set_item(TRANSACTIONS_KEY, serialize_transactions(self.transactions))
        except StorageError as e:
            # In-memory state stays correct for the rest of the session
            logger.warning("%s; changes kept in memory only", e)
            return
        logger.debug("Saved %d transactions", len(self.transactions))

    def list_transactions(self) -> list[Transaction]:
        """List transactions in insertion order."""
        return list(self.transactions)

    def get(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID, or None if not found."""
        for txn in self.transactions:
            if txn.id == transaction_id:
                return txn
        return None

    def _new_id(self) -> str:
        existing = {txn.id for txn in self.transactions}
        transaction_id = self.id_factory()
        while transaction_id in existing:
            transaction_id = self.id_factory()
        return transaction_id

    def create(self, fields: TransactionFields) -> Transaction:
        """Create and append a transaction.

        Args:
            fields: Form input

        Returns:
            The new transaction

        Raises:
            ValidationError: If the fields are invalid
        """
        description, amount, txn_date, category = validate_fields(fields)
        txn = Transaction(
            id=self._new_id(),
            description=description,
            amount=amount,
            date=txn_date,
            category=category,
        )
        self.transactions.append(txn)
        logger.info("Created transaction %s", txn.id)
        return txn

    def update(self, transaction_id: str, fields: TransactionFields) -> Optional[Transaction]:
        """Replace every field of a transaction except its ID.

        Args:
            transaction_id: Transaction ID
            fields: Form input

        Returns:
            The updated transaction, or None if the ID does not exist

        Raises:
            ValidationError: If the fields are invalid
        """
        description, amount, txn_date, category = validate_fields(fields)
        for index, txn in enumerate(self.transactions):
            if txn.id == transaction_id:
                updated = Transaction(
                    id=txn.id,
                    description=description,
                    amount=amount,
                    date=txn_date,
                    category=category,
                )
                self.transactions[index] = updated
                logger.info("Updated transaction %s", transaction_id)
                return updated
        logger.debug("Update ignored, transaction %s not found", transaction_id)
        return None

    def delete(self, transaction_id: str) -> bool:
        """Remove a transaction. Returns False if it does not exist."""
        remaining = [txn for txn in self.transactions if txn.id != transaction_id]
        if len(remaining) == len(self.transactions):
            logger.debug("Delete ignored, transaction %s not found", transaction_id)
            return False
        self.transactions = remaining
        logger.info("Deleted transaction %s", transaction_id)
        return True

    def clear(self) -> None:
        """Remove every transaction."""
        count = len(self.transactions)
        self.transactions = []
        logger.info("Cleared %d transactions", count)
