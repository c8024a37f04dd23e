"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StorageError(DomainError):
    """The key-value storage backend could not be read or written."""


MISSING_FIELDS = "Please fill in all fields."

CONFIRM_DELETE = "Are you sure you want to delete this transaction?"

CONFIRM_RESET = (
    "WARNING! This will permanently erase ALL of your data. Do you want to continue?"
)


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def storage_failure(key: str, operation: str) -> str:
    """Return message for a failed storage operation."""
    return f"Could not {operation} storage entry '{key}'"
