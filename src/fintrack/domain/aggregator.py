"""Dashboard aggregation.

Pure functions over a transaction collection. Nothing here reads the clock:
callers pass ``today`` so the same inputs always produce the same views.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence

from fintrack.domain.entities import (
    Dashboard,
    DashboardTotals,
    FlowPoint,
    TimeFilter,
    Transaction,
)
from fintrack.formatting import short_label
from fintrack.utils.date_parser import month_start, trailing_window

FLOW_DAYS = 30

ZERO = Decimal("0")


def filter_transactions(
    transactions: Iterable[Transaction],
    time_filter: TimeFilter,
    search: str,
    today: date,
) -> list[Transaction]:
    """Apply the time window and description search, newest first.

    The month window has no upper bound: future-dated entries of later months
    stay visible. Same-date entries keep their input order.
    """
    needle = (search or "").lower()
    start = month_start(today) if TimeFilter(time_filter) is TimeFilter.MONTH else None

    kept = [
        txn
        for txn in transactions
        if (start is None or txn.date >= start) and needle in txn.description.lower()
    ]
    return sorted(kept, key=lambda txn: txn.date, reverse=True)


def compute_totals(transactions: Iterable[Transaction]) -> DashboardTotals:
    """Sum income and expenses; expenses stay negative."""
    income = ZERO
    expenses = ZERO
    for txn in transactions:
        if txn.amount > 0:
            income += txn.amount
        elif txn.amount < 0:
            expenses += txn.amount
    return DashboardTotals(income=income, expenses=expenses, balance=income + expenses)


def category_breakdown(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Group expenses by category, summing absolute magnitudes.

    Categories appear in first-seen order; categories without expenses are
    absent.
    """
    breakdown: dict[str, Decimal] = {}
    for txn in transactions:
        if txn.amount < 0:
            breakdown[txn.category] = breakdown.get(txn.category, ZERO) + abs(txn.amount)
    return breakdown


def daily_flow(
    transactions: Sequence[Transaction],
    today: date,
    days: int = FLOW_DAYS,
) -> list[FlowPoint]:
    """Daily income and expense totals for the trailing window ending today.

    Args:
        transactions: Full collection, not the filtered view
        today: Last day of the window (inclusive)
        days: Window length

    Returns:
        One point per day, oldest first, zero-filled
    """
    income_by_day: dict[date, Decimal] = {}
    expense_by_day: dict[date, Decimal] = {}
    for txn in transactions:
        if txn.amount > 0:
            income_by_day[txn.date] = income_by_day.get(txn.date, ZERO) + txn.amount
        elif txn.amount < 0:
            expense_by_day[txn.date] = expense_by_day.get(txn.date, ZERO) + abs(txn.amount)

    return [
        FlowPoint(
            day=day,
            label=short_label(day),
            income=income_by_day.get(day, ZERO),
            expense=expense_by_day.get(day, ZERO),
        )
        for day in trailing_window(today, days)
    ]


def build_dashboard(
    transactions: Sequence[Transaction],
    time_filter: TimeFilter,
    search: str,
    today: date,
) -> Dashboard:
    """Compute every derived view for one render pass."""
    filtered = filter_transactions(transactions, time_filter, search, today)
    return Dashboard(
        transactions=tuple(filtered),
        totals=compute_totals(filtered),
        category_breakdown=category_breakdown(filtered),
        flow=tuple(daily_flow(transactions, today)),
    )
