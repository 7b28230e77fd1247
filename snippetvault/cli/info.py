"""Info command for SnippetVault CLI."""

from __future__ import annotations

from typing import Any

import click
import yaml

from ..config import VaultConfig
from ..services.snippets import count_snippets
from ._common import get_app


@click.command(name="info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display the snippet directory, the resolved editor and configuration."""

    app = get_app(ctx)
    config: VaultConfig = app.config

    root = app.snippet_dir
    exists = "yes" if root.is_dir() else "no"
    source = str(config.source_path) if config.source_path else "(built-in defaults)"

    click.echo("SnippetVault info:\n")
    click.echo(f"  Snippet directory : {root}")
    click.echo(f"  Directory exists  : {exists}")
    click.echo(f"  Total snippets    : {count_snippets(app)}")
    click.echo(f"  Editor            : {app.editor()}")
    click.echo(f"  Config file       : {source}")
    click.echo("\nConfiguration:\n")
    click.echo(_format_config(config))


def _format_config(config: VaultConfig) -> str:
    data: dict[str, Any] = {
        "snippet_dir": str(config.snippet_dir),
        "editor_candidates": list(config.editor_candidates),
        "editor_fallback": config.editor_fallback,
        "finder": config.finder,
        "renderer": config.renderer,
        "searcher": config.searcher,
    }

    return yaml.safe_dump(data, sort_keys=False).strip()


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(info)
