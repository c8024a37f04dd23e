"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

# Dot-grouped integers such as "1.234" or "12.345.678"
_THOUSANDS_ONLY = re.compile(r"-?[1-9]\d{0,2}(?:\.\d{3})+")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "123,45" (comma as decimal separator)
    - "R$ 123,45"
    - "-123.45"
    - "1,234.56" and "1.234,56"
    - "1.234" (dots followed by groups of three digits separate thousands)
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"R\$|[$€£¥]", "", amount_str).strip()

    # Dots before three-digit groups are thousands separators; otherwise the
    # rightmost separator is the decimal one
    if _THOUSANDS_ONLY.fullmatch(amount_str):
        amount_str = amount_str.replace(".", "")
    elif "," in amount_str and "." in amount_str:
        if amount_str.rfind(",") > amount_str.rfind("."):
            amount_str = amount_str.replace(".", "").replace(",", ".")
        else:
            amount_str = amount_str.replace(",", "")
    elif "," in amount_str:
        amount_str = amount_str.replace(",", ".")

    # Remove whitespace again
    amount_str = amount_str.replace(" ", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    if is_negative:
        amount = -amount
    return amount
