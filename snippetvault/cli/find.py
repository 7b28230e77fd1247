"""Find command for SnippetVault CLI."""

from __future__ import annotations

import click

from ..services.snippets import SnippetRootMissingError, find as find_snippets
from ..tools import ToolError
from ._common import SnippetVaultCliError, get_app


@click.command(name="find")
@click.argument("search_term")
@click.pass_context
def find(ctx: click.Context, search_term: str) -> None:
    """Search snippet contents and open the chosen match."""

    if not search_term.strip():
        raise SnippetVaultCliError("Search term must not be empty.")

    app = get_app(ctx)

    try:
        selected = find_snippets(app, search_term)
    except SnippetRootMissingError as exc:
        raise SnippetVaultCliError(str(exc)) from exc
    except ToolError as exc:
        raise SnippetVaultCliError(
            f"Failed to find or open files with the term '{search_term}'. {exc}"
        ) from exc

    if not selected:
        click.echo(f"No snippet selected for '{search_term}'.")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(find)
