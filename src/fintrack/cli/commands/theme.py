"""Theme preference commands."""

import click
from fintrack.cli.app import build_controller
from fintrack.domain.entities import Theme


@click.group("theme")
def theme_group():
    """Manage the light/dark theme."""
    pass


@theme_group.command("show")
@click.pass_context
def show_theme(ctx):
    """Show the current theme."""
    controller = build_controller(ctx, sections=())
    click.echo(f"Theme: {controller.theme.theme.value}")


@theme_group.command("toggle")
@click.pass_context
def toggle_theme(ctx):
    """Switch between light and dark."""
    controller = build_controller(ctx, sections=())
    controller.toggle_theme()
    click.echo(f"Theme: {controller.theme.theme.value}")


@theme_group.command("set")
@click.argument("theme", type=click.Choice([t.value for t in Theme], case_sensitive=False))
@click.pass_context
def set_theme(ctx, theme: str):
    """Set the theme explicitly."""
    controller = build_controller(ctx, sections=())
    controller.theme.set(Theme(theme.lower()))
    click.echo(f"Theme: {controller.theme.theme.value}")


def register_commands(cli):
    """Register theme commands with main CLI."""
    cli.add_command(theme_group)
