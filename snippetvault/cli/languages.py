"""Languages command for SnippetVault CLI."""

from __future__ import annotations

import click

from ..languages import LANGUAGES


@click.command(name="languages")
def languages() -> None:
    """Show the catalogue of suggested language labels."""

    for name in LANGUAGES:
        click.secho(name, fg="cyan")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(languages)
