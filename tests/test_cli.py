"""Tests for CLI commands."""

from datetime import date
from decimal import Decimal

from fintrack.cli.main import cli
from fintrack.domain.entities import Theme
from fintrack.domain.theme import ThemePreference
from fintrack.domain.transaction import TransactionStore


def invoke(cli_runner, temp_storage, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_storage.database_path, *args], **kwargs)


def stored(temp_storage):
    return TransactionStore(temp_storage).load()


def add(cli_runner, temp_storage, description, amount, kind, category="other", day="2024-01-15"):
    return invoke(
        cli_runner,
        temp_storage,
        "add",
        "--description",
        description,
        "--amount",
        amount,
        "--type",
        kind,
        "--category",
        category,
        "--date",
        day,
    )


def test_add_expense(cli_runner, temp_storage):
    result = add(cli_runner, temp_storage, "Groceries", "50,00", "expense", "food")

    assert result.exit_code == 0
    assert "Created transaction" in result.output
    assert "- R$ 50,00" in result.output
    assert "15/01/2024" in result.output

    transactions = stored(temp_storage)
    assert len(transactions) == 1
    assert transactions[0].amount == Decimal("-50.00")
    assert transactions[0].category == "food"


def test_add_ignores_typed_sign(cli_runner, temp_storage):
    result = add(cli_runner, temp_storage, "Salary", "-1000", "income", "salary")

    assert result.exit_code == 0
    assert stored(temp_storage)[0].amount == Decimal("1000.00")


def test_add_reads_displayed_formats(cli_runner, temp_storage):
    result = add(cli_runner, temp_storage, "Rent", "1.234", "expense", "housing", day="05/01/2024")

    assert result.exit_code == 0
    assert "- R$ 1.234,00" in result.output
    assert "05/01/2024" in result.output
    assert stored(temp_storage)[0].date == date(2024, 1, 5)


def test_add_defaults_to_today(cli_runner, temp_storage):
    result = invoke(cli_runner, temp_storage, "add", "-d", "Gift", "-a", "20")

    assert result.exit_code == 0
    txn = stored(temp_storage)[0]
    assert txn.date == date.today()
    assert txn.category == "other"
    assert txn.amount == Decimal("20.00")


def test_add_validation_error(cli_runner, temp_storage):
    result = add(cli_runner, temp_storage, "  ", "50", "expense")

    assert result.exit_code == 1
    assert "Please fill in all fields." in result.output
    assert stored(temp_storage) == []


def test_add_zero_amount(cli_runner, temp_storage):
    result = add(cli_runner, temp_storage, "Nothing", "0", "expense")

    assert result.exit_code == 1
    assert stored(temp_storage) == []


def test_edit(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Rent", "800", "expense", "housing")
    txn_id = stored(temp_storage)[0].id

    result = invoke(cli_runner, temp_storage, "edit", txn_id, "--amount", "850", "--category", "other")

    assert result.exit_code == 0
    assert f"Updated transaction {txn_id}" in result.output
    txn = stored(temp_storage)[0]
    assert txn.id == txn_id
    assert txn.amount == Decimal("-850.00")
    assert txn.description == "Rent"
    assert txn.category == "other"


def test_edit_switch_direction(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Refund", "30", "expense")
    txn_id = stored(temp_storage)[0].id

    result = invoke(cli_runner, temp_storage, "edit", txn_id, "--type", "income")

    assert result.exit_code == 0
    assert stored(temp_storage)[0].amount == Decimal("30.00")


def test_edit_unknown(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Rent", "800", "expense", "housing")
    before = stored(temp_storage)

    result = invoke(cli_runner, temp_storage, "edit", "_missing", "--amount", "1")

    assert result.exit_code == 1
    assert "not found" in result.output
    assert stored(temp_storage) == before


def test_edit_invalid(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Rent", "800", "expense", "housing")
    before = stored(temp_storage)

    result = invoke(cli_runner, temp_storage, "edit", before[0].id, "--amount", "abc")

    assert result.exit_code == 1
    assert stored(temp_storage) == before


def test_delete_with_confirmation(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Rent", "800", "expense", "housing")
    txn_id = stored(temp_storage)[0].id

    result = invoke(cli_runner, temp_storage, "delete", txn_id, input="n\n")
    assert result.exit_code == 0
    assert "Cancelled." in result.output
    assert len(stored(temp_storage)) == 1

    result = invoke(cli_runner, temp_storage, "delete", txn_id, input="y\n")
    assert result.exit_code == 0
    assert "Are you sure you want to delete this transaction?" in result.output
    assert f"Deleted transaction {txn_id}" in result.output
    assert stored(temp_storage) == []


def test_delete_yes_flag(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Rent", "800", "expense", "housing")
    txn_id = stored(temp_storage)[0].id

    result = invoke(cli_runner, temp_storage, "delete", txn_id, "--yes")

    assert result.exit_code == 0
    assert stored(temp_storage) == []


def test_delete_unknown(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Rent", "800", "expense", "housing")

    result = invoke(cli_runner, temp_storage, "delete", "_missing", "--yes")

    assert result.exit_code == 1
    assert len(stored(temp_storage)) == 1


def test_reset(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Rent", "800", "expense", "housing")
    add(cli_runner, temp_storage, "Salary", "1000", "income", "salary")

    result = invoke(cli_runner, temp_storage, "reset", input="n\n")
    assert "permanently erase ALL" in result.output
    assert len(stored(temp_storage)) == 2

    result = invoke(cli_runner, temp_storage, "reset", "--yes")
    assert result.exit_code == 0
    assert "Erased 2 transactions" in result.output
    assert stored(temp_storage) == []


def test_list_filters(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Old rent", "800", "expense", "housing", day="2020-05-01")
    add(cli_runner, temp_storage, "Coffee", "4,50", "expense", "food", day="today")

    result = invoke(cli_runner, temp_storage, "list")
    assert result.exit_code == 0
    assert "Found 1 transaction(s)" in result.output
    assert "Coffee" in result.output
    assert "Old rent" not in result.output

    result = invoke(cli_runner, temp_storage, "list", "--filter", "all")
    assert "Found 2 transaction(s)" in result.output
    assert "shopping-cart" in result.output

    result = invoke(cli_runner, temp_storage, "list", "--filter", "all", "--search", "RENT")
    assert "Old rent" in result.output
    assert "Coffee" not in result.output

    result = invoke(cli_runner, temp_storage, "list", "--filter", "all", "--search", "housing")
    assert "No transactions found." in result.output


def test_dashboard(cli_runner, temp_storage):
    add(cli_runner, temp_storage, "Salary", "1000", "income", "salary", day="today")
    add(cli_runner, temp_storage, "Groceries", "50", "expense", "food", day="today")

    result = invoke(cli_runner, temp_storage, "dashboard")

    assert result.exit_code == 0
    assert "Balance:  R$ 950,00" in result.output
    assert "Income:   R$ 1.000,00" in result.output
    assert "Expenses: R$ 50,00" in result.output
    assert "food" in result.output
    assert "100.0%" in result.output
    assert "Last 30 days:" in result.output


def test_dashboard_empty(cli_runner, temp_storage):
    result = invoke(cli_runner, temp_storage, "dashboard")

    assert result.exit_code == 0
    assert "Balance:  R$ 0,00" in result.output
    assert "(no expenses)" in result.output
    assert "(no activity)" in result.output


def test_theme_commands(cli_runner, temp_storage):
    result = invoke(cli_runner, temp_storage, "theme", "show")
    assert "Theme: dark" in result.output

    result = invoke(cli_runner, temp_storage, "theme", "toggle")
    assert "Theme: light" in result.output
    assert ThemePreference(temp_storage).load() is Theme.LIGHT

    result = invoke(cli_runner, temp_storage, "theme", "set", "dark")
    assert result.exit_code == 0
    assert ThemePreference(temp_storage).load() is Theme.DARK


def test_categories(cli_runner, temp_storage):
    result = invoke(cli_runner, temp_storage, "categories")

    assert result.exit_code == 0
    assert "Income:" in result.output
    assert "briefcase" in result.output
    assert "trending-down" in result.output


def test_help_does_not_need_storage(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "Personal finance tracker" in result.output


def test_unknown_log_level_is_rejected(cli_runner, temp_storage):
    result = invoke(cli_runner, temp_storage, "--log-level", "chatty", "categories")

    assert result.exit_code == 2
    assert "chatty" in result.output


def test_log_level_option(cli_runner, temp_storage):
    result = invoke(cli_runner, temp_storage, "--log-level", "info", "categories")

    assert result.exit_code == 0
