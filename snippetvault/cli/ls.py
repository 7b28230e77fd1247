"""List command for SnippetVault CLI."""

from __future__ import annotations

import click

from ..services.snippets import SnippetRootMissingError, browse
from ..tools import ToolError
from ._common import SnippetVaultCliError, get_app


@click.command(name="list")
@click.pass_context
def ls(ctx: click.Context) -> None:
    """Pick a snippet with the fuzzy finder and open it."""

    app = get_app(ctx)

    try:
        selected = browse(app)
    except SnippetRootMissingError as exc:
        raise SnippetVaultCliError(str(exc)) from exc
    except ToolError as exc:
        raise SnippetVaultCliError(f"Failed to list snippets. {exc}") from exc

    if not selected:
        click.echo("No snippet selected.")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(ls)
