"""Currency and date formatting for the fixed pt-BR locale."""

from datetime import date
from decimal import Decimal
from typing import Union

CURRENCY_PREFIX = "R$"

Number = Union[Decimal, int, float]


def format_number(value: Number) -> str:
    """Format with two decimals, "." for thousands and "," for decimals."""
    formatted = f"{Decimal(str(value)):,.2f}"
    return formatted.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(value: Number) -> str:
    """Format a value as currency, e.g. ``R$ 1.234,56``."""
    return f"{CURRENCY_PREFIX} {format_number(value)}"


def format_signed_amount(amount: Decimal) -> str:
    """Format a signed amount for list rows, e.g. ``- R$ 50,00``."""
    sign = "+" if amount > 0 else "-"
    return f"{sign} {format_currency(abs(amount))}"


def format_date(value: date) -> str:
    """Format a date as day/month/year."""
    return value.strftime("%d/%m/%Y")


def short_label(value: date) -> str:
    """Format a date as day/month for chart axes."""
    return value.strftime("%d/%m")
