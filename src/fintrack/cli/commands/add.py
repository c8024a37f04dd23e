"""Add transaction command."""

import click
from fintrack.cli.app import build_controller
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import Direction, TransactionFields
from fintrack.domain.errors import ValidationError
from fintrack.formatting import format_date, format_signed_amount


@click.command("add")
@click.option("--description", "-d", default="", help="Transaction description")
@click.option("--amount", "-a", default="", help="Amount magnitude (e.g., 50.00, 50,00 or 1.234,56; 1.234 is read as 1234)")
@click.option(
    "--date",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to today",
)
@click.option(
    "--type",
    "direction",
    type=click.Choice([d.value for d in Direction], case_sensitive=False),
    default=Direction.INCOME.value,
    show_default=True,
    help="Income or expense",
)
@click.option("--category", "-c", default="other", show_default=True, help="Category tag (see 'categories')")
@click.pass_context
def add_transaction(
    ctx,
    description: str,
    amount: str,
    date: str | None,
    direction: str,
    category: str,
):
    """Add a transaction.

    The amount is always taken as a magnitude: --type decides whether it is
    stored as income or expense.

    Examples:
        fintrack add -d "Salary" -a 1000 --type income -c salary
        fintrack add -d "Groceries" -a 50,00 --type expense -c food --date yesterday
    """
    controller = build_controller(ctx, sections=())
    state = controller.open_create()

    fields = TransactionFields(
        description=description,
        amount=amount,
        date=date if date is not None else state.form.date,
        direction=Direction(direction.lower()),
        category=category,
    )
    txn = controller.submit(fields)
    if txn is None:
        handle_domain_error(ctx, ValidationError(controller.state.form_error))

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Date: {format_date(txn.date)}")
    click.echo(f"  Amount: {format_signed_amount(txn.amount)}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Category: {txn.category}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
