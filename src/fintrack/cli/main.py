"""Main CLI entry point."""

import click
from fintrack.database.factories import create_sqlite_storage
from fintrack.logging_setup import LOG_LEVELS, configure_logging, reset_logging

# Import and register all commands at module level
from fintrack.cli.commands import (
    add,
    transaction,
    view,
    theme,
    category,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides FINTRACK_LOG_LEVEL environment variable)",
    envvar="FINTRACK_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Fintrack - Personal finance tracker.

    Record income and expenses, then review your balance, spending by
    category and the daily flow of the last 30 days.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.call_on_close(reset_logging)

    # Initialize storage only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        storage = create_sqlite_storage(database_path=db_path)
        storage.connect()
        storage.initialize_schema()
        ctx.obj["storage"] = storage
        ctx.call_on_close(storage.disconnect)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
view.register_commands(cli)
theme.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
