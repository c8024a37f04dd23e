"""Domain layer for fintrack application."""

from fintrack.domain.transaction import TransactionStore
from fintrack.domain.theme import ThemePreference
from fintrack.domain.controller import ViewController

__all__ = [
    "TransactionStore",
    "ThemePreference",
    "ViewController",
]
