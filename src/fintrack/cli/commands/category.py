"""Category listing command."""

import click
from fintrack.domain.category import category_icon, suggested_categories
from fintrack.domain.entities import Direction


@click.command("categories")
def list_categories():
    """List suggested categories and their icons."""
    for direction in Direction:
        click.echo(f"\n{direction.value.capitalize()}:")
        for name in suggested_categories(direction):
            click.echo(f"  {name:<14} {category_icon(name, direction)}")


def register_commands(cli):
    """Register category command with main CLI."""
    cli.add_command(list_categories)
