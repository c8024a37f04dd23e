"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date, month_start, trailing_window
from fintrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "month_start", "trailing_window", "parse_amount"]
