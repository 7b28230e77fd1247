"""Create command for SnippetVault CLI."""

from __future__ import annotations

import click

from ..services.snippets import create_and_open
from ..snippets import SnippetError
from ._common import SnippetVaultCliError, get_app, success, warn


@click.command(name="create")
@click.argument("language")
@click.argument("tags", nargs=-1)
@click.pass_context
def create(ctx: click.Context, language: str, tags: tuple[str, ...]) -> None:
    """Create a new snippet for LANGUAGE, optionally labelled with TAGS."""

    app = get_app(ctx)

    try:
        create_and_open(app, language, tags, notify=success, warn=warn)
    except SnippetError as exc:
        raise SnippetVaultCliError(str(exc)) from exc


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(create)
