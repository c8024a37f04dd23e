"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from fintrack.database.factories import create_sqlite_storage
from fintrack.domain.controller import ViewController
from fintrack.domain.entities import Transaction
from fintrack.domain.theme import ThemePreference
from fintrack.domain.transaction import TransactionStore


TODAY = date(2024, 1, 20)


class RecordingRenderer:
    """Renderer capturing every call for assertions."""

    def __init__(self):
        self.totals = []
        self.lists = []
        self.charts = []

    def render_totals(self, totals):
        self.totals.append(totals)

    def render_list(self, rows):
        self.lists.append(list(rows))

    def render_charts(self, category, flow):
        self.charts.append((category, flow))


def make_transaction(id, description, amount, day, category="other"):
    """Build a transaction with a Decimal amount from a string."""
    return Transaction(
        id=id,
        description=description,
        amount=Decimal(amount),
        date=day,
        category=category,
    )


@pytest.fixture
def temp_storage():
    """Create a temporary storage database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    # Cleanup
    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def store(temp_storage):
    """Create an empty TransactionStore with sequential IDs."""
    counter = iter(range(1, 10_000))
    store = TransactionStore(temp_storage, id_factory=lambda: f"_t{next(counter)}")
    store.load()
    return store


@pytest.fixture
def theme_preference(temp_storage):
    """Create a ThemePreference with a temporary storage."""
    preference = ThemePreference(temp_storage)
    preference.load()
    return preference


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def confirmations():
    """Answers given to confirmation prompts, consumed in order."""
    return []


@pytest.fixture
def controller(store, theme_preference, renderer, confirmations):
    """Create a ViewController with a fixed clock."""
    prompts = []

    def confirm(message):
        prompts.append(message)
        return confirmations.pop(0) if confirmations else True

    controller = ViewController(
        store=store,
        theme=theme_preference,
        renderer=renderer,
        confirm=confirm,
        clock=lambda: TODAY,
    )
    controller.prompts = prompts
    return controller


@pytest.fixture
def sample_transactions():
    """Income and expenses spread over December and January."""
    return [
        make_transaction("_a", "Salary", "1000.00", date(2024, 1, 5), "salary"),
        make_transaction("_b", "Supermarket", "-50.00", date(2024, 1, 6), "food"),
        make_transaction("_c", "Rent", "-800.00", date(2023, 12, 31), "housing"),
        make_transaction("_d", "Bus pass", "-30.00", date(2024, 1, 1), "transport"),
        make_transaction("_e", "Market snacks", "-12.50", date(2024, 1, 6), "food"),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
