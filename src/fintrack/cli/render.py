"""Console rendering of dashboard data."""

from typing import Iterable, Sequence

import click

from fintrack.domain.charts import CategoryChart, FlowChart
from fintrack.domain.controller import TransactionRow
from fintrack.domain.entities import DashboardTotals, Direction
from fintrack.formatting import format_currency

TOTALS = "totals"
LIST = "list"
CHARTS = "charts"

ALL_SECTIONS = (TOTALS, LIST, CHARTS)


class ConsoleRenderer:
    """Renderer printing the enabled sections with click."""

    def __init__(self, sections: Iterable[str] = ALL_SECTIONS):
        self.sections = frozenset(sections)

    def render_totals(self, totals: DashboardTotals) -> None:
        if TOTALS not in self.sections:
            return
        click.echo(f"Balance:  {format_currency(totals.balance)}")
        click.echo(f"Income:   {format_currency(totals.income)}")
        click.echo(f"Expenses: {format_currency(totals.expenses_display)}")

    def render_list(self, rows: Sequence[TransactionRow]) -> None:
        if LIST not in self.sections:
            return
        if not rows:
            click.echo("No transactions found.")
            return

        click.echo(f"\nFound {len(rows)} transaction(s):")
        click.echo("-" * 100)
        click.echo(
            f"{'ID':<12} {'Date':<12} {'Icon':<15} {'Category':<14} {'Description':<28} {'Amount':>16}"
        )
        click.echo("-" * 100)
        for row in rows:
            color = "green" if row.direction is Direction.INCOME else "red"
            amount = click.style(f"{row.amount_label:>16}", fg=color)
            click.echo(
                f"{row.id:<12} {row.date_label:<12} {row.icon:<15} {row.category[:14]:<14} "
                f"{row.description[:28]:<28} {amount}"
            )

    def render_charts(self, category: CategoryChart, flow: FlowChart) -> None:
        if CHARTS not in self.sections:
            return

        click.echo("\nExpenses by category:")
        total = sum(category.values)
        if not category.labels:
            click.echo("  (no expenses)")
        for label, value in zip(category.labels, category.values):
            share = value / total * 100
            click.echo(f"  {label:<14} {format_currency(value):>16} {share:6.1f}%")

        click.echo(f"\nLast {len(flow.labels)} days:")
        active = [
            (label, income, expense)
            for label, income, expense in zip(flow.labels, flow.income.data, flow.expense.data)
            if income or expense
        ]
        if not active:
            click.echo("  (no activity)")
        for label, income, expense in active:
            income_str = click.style(f"+{format_currency(income):>16}", fg="green")
            expense_str = click.style(f"-{format_currency(expense):>16}", fg="red")
            click.echo(f"  {label}  {income_str}  {expense_str}")
