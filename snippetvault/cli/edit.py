"""Edit command for SnippetVault CLI."""

from __future__ import annotations

import click

from ..services.snippets import SnippetRootMissingError, browse
from ..tools import ToolError
from ._common import SnippetVaultCliError, get_app


@click.command(name="edit")
@click.pass_context
def edit(ctx: click.Context) -> None:
    """Pick one or more snippets and open them together in the editor."""

    app = get_app(ctx)

    try:
        selected = browse(app, multi=True)
    except SnippetRootMissingError as exc:
        raise SnippetVaultCliError(str(exc)) from exc
    except ToolError as exc:
        raise SnippetVaultCliError(f"Failed to edit snippets. {exc}") from exc

    if not selected:
        click.echo("No snippet selected.")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(edit)
