"""Shared helpers for SnippetVault CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}

OK_MARK = "✔"
FAIL_MARK = "✘"


class SnippetVaultCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""

    def show(self, file: IO[Any] | None = None) -> None:
        message = f"{FAIL_MARK} {self.format_message()}"
        click.secho(message, fg="red", file=file, err=file is None)


def success(message: str) -> None:
    click.echo(f"{click.style(OK_MARK, fg='green')} {message}")


def warn(message: str) -> None:
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app = bootstrap(config_path_opt)
    except ConfigError as exc:
        raise SnippetVaultCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app
