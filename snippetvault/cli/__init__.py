"""SnippetVault CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from . import config_cmd, create, edit, find, info, languages, ls, version
from ._common import CONTEXT_SETTINGS, SnippetVaultCliError

__all__ = ["cli", "main", "SnippetVaultCliError"]


# Shown under `sv --help`; "\b" keeps click from rewrapping the table.
SEARCH_SYNTAX_EPILOG = """\
\b
Fuzzy finder search syntax:
  'wild     exact match: items that include wild
  ^music    prefix match: items that start with music
  .mp3$     suffix match: items that end with .mp3
  !fire     inverse match: items that do not include fire
  !^music   items that do not start with music
  !.mp3$    items that do not end with .mp3

\b
A space acts as AND and | as OR. For example, items that start with
music and end with mp3, wav or flac:
  ^music mp3$ | wav$ | flac$
"""


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    epilog=SEARCH_SYNTAX_EPILOG,
)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path_opt: Path | None) -> None:
    """A secure and organized vault for managing your code snippets."""

    ctx.ensure_object(dict)
    invoked = ctx.invoked_subcommand

    if invoked is None:
        click.echo(ctx.command.get_help(ctx))
        ctx.exit(0)

    ctx.obj["config_path"] = config_path_opt


for register_command in (
    create.register,
    ls.register,
    edit.register,
    find.register,
    version.register,
    languages.register,
    info.register,
    config_cmd.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        return cli.main(args=args, prog_name="sv", standalone_mode=False) or 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
