"""Config command for SnippetVault CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..app import bootstrap
from ..config import DEFAULT_CONFIG_PATH, ConfigError, bootstrap_config_file
from ..editor import resolve_editor
from ..tools import ToolError, open_in_editor
from ._common import SnippetVaultCliError, warn


@click.command(name="config")
@click.pass_context
def config(ctx: click.Context) -> None:
    """Open the SnippetVault configuration file in the editor."""

    selected_path: Path | None = ctx.obj.get("config_path")
    config_path = (selected_path or DEFAULT_CONFIG_PATH).expanduser()

    try:
        created = bootstrap_config_file(config_path)
    except OSError as exc:
        raise SnippetVaultCliError(f"Failed to create configuration: {exc}") from exc

    try:
        editor = bootstrap(config_path).editor()
    except ConfigError as exc:
        # A broken file must still be editable; use the built-in candidates.
        warn(str(exc))
        editor = resolve_editor()

    try:
        open_in_editor(editor, [config_path])
    except ToolError as exc:
        raise SnippetVaultCliError(f"Failed to launch editor: {exc}") from exc

    if created:
        click.echo(f"Created configuration at {config_path}")
    else:
        click.echo(f"Opened configuration at {config_path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
