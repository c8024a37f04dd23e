"""Transaction management commands."""

from dataclasses import replace

import click
from fintrack.cli.app import build_controller
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import Direction
from fintrack.domain.errors import NotFoundError, ValidationError, transaction_not_found
from fintrack.formatting import format_date, format_signed_amount


@click.command("edit")
@click.argument("transaction_id")
@click.option("--description", "-d", help="Transaction description")
@click.option("--amount", "-a", help="Amount magnitude (e.g., 50.00, 50,00 or 1.234,56; 1.234 is read as 1234)")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option(
    "--type",
    "direction",
    type=click.Choice([d.value for d in Direction], case_sensitive=False),
    help="Income or expense",
)
@click.option("--category", "-c", help="Category tag (see 'categories')")
@click.pass_context
def edit_transaction(
    ctx,
    transaction_id: str,
    description: str | None,
    amount: str | None,
    date: str | None,
    direction: str | None,
    category: str | None,
) -> None:
    """Edit a transaction.

    Fields that are not given keep their current values.

    Examples:
        fintrack edit _k3j9x0a1b --amount 75
        fintrack edit _k3j9x0a1b --type expense --category housing
    """
    controller = build_controller(ctx, sections=())
    state = controller.start_edit(transaction_id)
    if not state.editing:
        handle_domain_error(ctx, NotFoundError(transaction_not_found(transaction_id)))

    # Start from the pre-filled form and override what was given
    fields = state.form
    if description is not None:
        fields = replace(fields, description=description)
    if amount is not None:
        fields = replace(fields, amount=amount)
    if date is not None:
        fields = replace(fields, date=date)
    if direction is not None:
        fields = replace(fields, direction=Direction(direction.lower()))
    if category is not None:
        fields = replace(fields, category=category)

    txn = controller.submit(fields)
    if txn is None:
        handle_domain_error(ctx, ValidationError(controller.state.form_error))

    click.echo(f"Updated transaction {txn.id}")
    click.echo(f"  Date: {format_date(txn.date)}")
    click.echo(f"  Amount: {format_signed_amount(txn.amount)}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Category: {txn.category}")


@click.command("delete")
@click.argument("transaction_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool) -> None:
    """Delete a transaction."""
    controller = build_controller(ctx, sections=(), assume_yes=yes)
    if controller.store.get(transaction_id) is None:
        handle_domain_error(ctx, NotFoundError(transaction_not_found(transaction_id)))

    if controller.delete(transaction_id):
        click.echo(f"Deleted transaction {transaction_id}")
    else:
        click.echo("Cancelled.")


@click.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def reset_data(ctx, yes: bool) -> None:
    """Permanently erase every transaction."""
    controller = build_controller(ctx, sections=(), assume_yes=yes)
    count = len(controller.store.list_transactions())
    if controller.reset_all():
        click.echo(f"Erased {count} transaction{'s' if count != 1 else ''}")
    else:
        click.echo("Cancelled.")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(edit_transaction)
    cli.add_command(delete_transaction)
    cli.add_command(reset_data)
