"""CLI helpers building a controller for one command."""

from typing import Callable, Iterable

import click

from fintrack.cli.render import ALL_SECTIONS, ConsoleRenderer
from fintrack.domain.controller import ViewController
from fintrack.domain.theme import ThemePreference
from fintrack.domain.transaction import TransactionStore


def ask(assume_yes: bool) -> Callable[[str], bool]:
    """Return the confirmation callable for destructive commands."""
    if assume_yes:
        return lambda message: True
    return lambda message: click.confirm(message, default=False)


def build_controller(
    ctx: click.Context,
    sections: Iterable[str] = ALL_SECTIONS,
    assume_yes: bool = False,
) -> ViewController:
    """Load stored state and wire a controller to the console."""
    storage = ctx.obj["storage"]
    store = TransactionStore(storage)
    store.load()
    theme = ThemePreference(storage)
    theme.load()
    return ViewController(
        store=store,
        theme=theme,
        renderer=ConsoleRenderer(sections),
        confirm=ask(assume_yes),
    )
