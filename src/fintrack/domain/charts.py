"""Chart-ready datasets for the category and flow charts.

Only colors depend on the theme; the data itself comes from the aggregator.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Sequence

from fintrack.domain.entities import FlowPoint, Theme

CATEGORY_COLORS = (
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#E7E9ED",
    "#8B008B",
)

INCOME_LINE = ("rgba(46, 204, 113, 1)", "rgba(46, 204, 113, 0.1)")
EXPENSE_LINE = ("rgba(231, 76, 60, 1)", "rgba(231, 76, 60, 0.1)")


@dataclass(frozen=True)
class ChartPalette:
    """Theme-dependent chart colors."""

    border: str
    legend: str
    grid: str

    @classmethod
    def for_theme(cls, theme: Theme) -> "ChartPalette":
        if Theme(theme) is Theme.DARK:
            return cls(border="#1e1e1e", legend="#f1f1f1", grid="#333")
        return cls(border="#ffffff", legend="#0a0a0a", grid="#eee")


@dataclass(frozen=True)
class CategoryChart:
    """Doughnut chart of expenses per category."""

    labels: tuple[str, ...]
    values: tuple[Decimal, ...]
    colors: tuple[str, ...]
    border_color: str
    legend_color: str


@dataclass(frozen=True)
class FlowDataset:
    label: str
    data: tuple[Decimal, ...]
    border_color: str
    background_color: str


@dataclass(frozen=True)
class FlowChart:
    """Line chart of daily income and expense."""

    labels: tuple[str, ...]
    income: FlowDataset
    expense: FlowDataset
    tick_color: str
    grid_color: str
    legend_color: str


def category_chart(breakdown: Mapping[str, Decimal], theme: Theme) -> CategoryChart:
    """Build the category chart from an expense breakdown."""
    palette = ChartPalette.for_theme(theme)
    return CategoryChart(
        labels=tuple(breakdown.keys()),
        values=tuple(breakdown.values()),
        colors=CATEGORY_COLORS,
        border_color=palette.border,
        legend_color=palette.legend,
    )


def flow_chart(points: Sequence[FlowPoint], theme: Theme) -> FlowChart:
    """Build the flow chart from daily flow points."""
    palette = ChartPalette.for_theme(theme)
    return FlowChart(
        labels=tuple(point.label for point in points),
        income=FlowDataset(
            label="Income",
            data=tuple(point.income for point in points),
            border_color=INCOME_LINE[0],
            background_color=INCOME_LINE[1],
        ),
        expense=FlowDataset(
            label="Expense",
            data=tuple(point.expense for point in points),
            border_color=EXPENSE_LINE[0],
            background_color=EXPENSE_LINE[1],
        ),
        tick_color=palette.legend,
        grid_color=palette.grid,
        legend_color=palette.legend,
    )
