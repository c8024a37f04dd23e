"""Transaction viewing commands."""

import click
from fintrack.cli.app import build_controller
from fintrack.cli.render import CHARTS, LIST, TOTALS
from fintrack.domain.entities import TimeFilter


def view_options(func):
    """Shared time window and search options."""
    func = click.option(
        "--search",
        "-s",
        default="",
        help="Only show transactions whose description contains this text",
    )(func)
    func = click.option(
        "--filter",
        "-f",
        "time_filter",
        type=click.Choice([f.value for f in TimeFilter], case_sensitive=False),
        default=TimeFilter.MONTH.value,
        show_default=True,
        help="Time window: this month or all time",
    )(func)
    return func


@click.command("list")
@view_options
@click.pass_context
def list_transactions(ctx, time_filter: str, search: str):
    """List transactions, newest first."""
    controller = build_controller(ctx, sections=[LIST])
    controller.set_view(TimeFilter(time_filter.lower()), search)


@click.command("dashboard")
@view_options
@click.pass_context
def show_dashboard(ctx, time_filter: str, search: str):
    """Show balance, totals, spending by category and the 30-day flow."""
    controller = build_controller(ctx, sections=[TOTALS, CHARTS])
    controller.set_view(TimeFilter(time_filter.lower()), search)


def register_commands(cli):
    """Register view commands with main CLI."""
    cli.add_command(list_transactions)
    cli.add_command(show_dashboard)
