"""View controller.

Maps user actions onto the transaction store and re-renders every derived
view after each change. The controller never talks to a UI toolkit directly:
it hands plain data to a renderer and asks a confirmation callable before
destructive actions, so it can be driven headless from the CLI or tests.
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Optional, Protocol, Sequence

from fintrack.domain.charts import CategoryChart, FlowChart, category_chart, flow_chart
from fintrack.domain.aggregator import build_dashboard
from fintrack.domain.category import category_icon
from fintrack.domain.entities import (
    Dashboard,
    DashboardTotals,
    Direction,
    TimeFilter,
    Transaction,
    TransactionFields,
)
from fintrack.domain.errors import CONFIRM_DELETE, CONFIRM_RESET, ValidationError
from fintrack.domain.theme import ThemePreference
from fintrack.domain.transaction import TransactionStore
from fintrack.formatting import format_date, format_signed_amount
from fintrack.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransactionRow:
    """One display-ready row of the transaction list."""

    id: str
    description: str
    category: str
    date_label: str
    amount_label: str
    direction: Direction
    icon: str

    @classmethod
    def from_transaction(cls, txn: Transaction) -> "TransactionRow":
        return cls(
            id=txn.id,
            description=txn.description,
            category=txn.category,
            date_label=format_date(txn.date),
            amount_label=format_signed_amount(txn.amount),
            direction=txn.direction,
            icon=category_icon(txn.category, txn.direction),
        )


class Renderer(Protocol):
    """Receives display-ready data after every refresh."""

    def render_totals(self, totals: DashboardTotals) -> None: ...

    def render_list(self, rows: Sequence[TransactionRow]) -> None: ...

    def render_charts(self, category: CategoryChart, flow: FlowChart) -> None: ...


@dataclass(frozen=True)
class ViewState:
    """Session-only controller state."""

    modal_open: bool = False
    editing_id: Optional[str] = None
    form: Optional[TransactionFields] = None
    form_error: Optional[str] = None
    time_filter: TimeFilter = TimeFilter.MONTH
    search: str = ""

    @property
    def editing(self) -> bool:
        return self.editing_id is not None


# Actions
@dataclass(frozen=True)
class OpenCreate:
    pass


@dataclass(frozen=True)
class StartEdit:
    transaction_id: str


@dataclass(frozen=True)
class Submit:
    fields: TransactionFields


@dataclass(frozen=True)
class Close:
    pass


@dataclass(frozen=True)
class Delete:
    transaction_id: str


@dataclass(frozen=True)
class ResetAll:
    pass


@dataclass(frozen=True)
class SetFilter:
    time_filter: TimeFilter


@dataclass(frozen=True)
class SetSearch:
    search: str


@dataclass(frozen=True)
class ToggleTheme:
    pass


class ViewController:
    """Controller wiring user actions to the store and the renderer."""

    def __init__(
        self,
        store: TransactionStore,
        theme: ThemePreference,
        renderer: Renderer,
        confirm: Callable[[str], bool],
        clock: Callable[[], date] = date.today,
    ):
        """Initialize the controller.

        Args:
            store: Loaded transaction store
            theme: Loaded theme preference
            renderer: Receiver of display-ready data
            confirm: Asks the user a yes/no question
            clock: Returns today's date
        """
        self.store = store
        self.theme = theme
        self.renderer = renderer
        self.confirm = confirm
        self.clock = clock
        self.state = ViewState()

    def dashboard(self) -> Dashboard:
        """Compute the derived views for the current state."""
        return build_dashboard(
            self.store.list_transactions(),
            self.state.time_filter,
            self.state.search,
            self.clock(),
        )

    def refresh(self) -> Dashboard:
        """Recompute and render every view, then persist the collection."""
        dashboard = self.dashboard()
        self.renderer.render_totals(dashboard.totals)
        self.renderer.render_list([TransactionRow.from_transaction(t) for t in dashboard.transactions])
        self._render_charts(dashboard)
        self.store.save()
        return dashboard

    def _render_charts(self, dashboard: Dashboard) -> None:
        theme = self.theme.theme
        self.renderer.render_charts(
            category_chart(dashboard.category_breakdown, theme),
            flow_chart(dashboard.flow, theme),
        )

    def open_create(self) -> ViewState:
        """Open an empty form dated today."""
        self.state = replace(
            self.state,
            modal_open=True,
            editing_id=None,
            form=TransactionFields(description="", amount=None, date=self.clock()),
            form_error=None,
        )
        return self.state

    def start_edit(self, transaction_id: str) -> ViewState:
        """Open the form pre-filled with an existing transaction.

        Unknown IDs leave the state untouched.
        """
        txn = self.store.get(transaction_id)
        if txn is None:
            logger.debug("Edit ignored, transaction %s not found", transaction_id)
            return self.state
        self.state = replace(
            self.state,
            modal_open=True,
            editing_id=txn.id,
            form=TransactionFields.from_transaction(txn),
            form_error=None,
        )
        return self.state

    def close(self) -> ViewState:
        """Close the form and leave edit mode."""
        self.state = replace(self.state, modal_open=False, editing_id=None, form=None, form_error=None)
        return self.state

    def submit(self, fields: TransactionFields) -> Optional[Transaction]:
        """Create or update depending on the current mode.

        On validation failure the form stays open with the error message and
        nothing is persisted.

        Returns:
            The created or updated transaction, or None if nothing changed
        """
        try:
            if self.state.editing:
                txn = self.store.update(self.state.editing_id, fields)
            else:
                txn = self.store.create(fields)
        except ValidationError as e:
            self.state = replace(self.state, modal_open=True, form=fields, form_error=str(e))
            return None
        self.close()
        self.refresh()
        return txn

    def delete(self, transaction_id: str) -> bool:
        """Delete a transaction after confirmation."""
        if not self.confirm(CONFIRM_DELETE):
            return False
        deleted = self.store.delete(transaction_id)
        self.refresh()
        return deleted

    def reset_all(self) -> bool:
        """Erase every transaction after a stronger confirmation."""
        if not self.confirm(CONFIRM_RESET):
            return False
        self.store.clear()
        self.refresh()
        return True

    def set_view(self, time_filter: TimeFilter, search: str) -> ViewState:
        """Change the time window and search text, then refresh once."""
        self.state = replace(self.state, time_filter=TimeFilter(time_filter), search=search or "")
        self.refresh()
        return self.state

    def set_filter(self, time_filter: TimeFilter) -> ViewState:
        return self.set_view(time_filter, self.state.search)

    def set_search(self, search: str) -> ViewState:
        return self.set_view(self.state.time_filter, search)

    def toggle_theme(self) -> ViewState:
        """Flip the theme and redraw the charts only."""
        self.theme.toggle()
        self._render_charts(self.dashboard())
        return self.state

    def dispatch(self, action) -> ViewState:
        """Apply one action and return the resulting view state."""
        if isinstance(action, OpenCreate):
            self.open_create()
        elif isinstance(action, StartEdit):
            self.start_edit(action.transaction_id)
        elif isinstance(action, Submit):
            self.submit(action.fields)
        elif isinstance(action, Close):
            self.close()
        elif isinstance(action, Delete):
            self.delete(action.transaction_id)
        elif isinstance(action, ResetAll):
            self.reset_all()
        elif isinstance(action, SetFilter):
            self.set_filter(action.time_filter)
        elif isinstance(action, SetSearch):
            self.set_search(action.search)
        elif isinstance(action, ToggleTheme):
            self.toggle_theme()
        else:
            raise TypeError(f"Unknown action {action!r}")
        return self.state
