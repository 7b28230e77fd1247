"""Version command for SnippetVault CLI."""

from __future__ import annotations

import click

from .. import __version__


@click.command(name="version")
def version() -> None:
    """Show version information."""

    click.secho(f"SnippetVault Version: {__version__}", fg="green")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(version)
