"""Wrappers around the external programs SnippetVault drives.

Every process gets an explicit argument vector; nothing is passed through a
shell. Interactive programs inherit the terminal and are waited on.
"""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import Iterable, Sequence

# fzf: 1 = no match, 130 = interrupted with Ctrl-C/Esc.
FINDER_EMPTY_CODES = frozenset({1, 130})
# rg: 1 = no file matched.
SEARCH_NO_MATCH_CODE = 1

FINDER_LAYOUT_ARGS: tuple[str, ...] = (
    "--exact",
    "--info=inline",
    "--border",
    "--margin=1",
    "--padding=1",
    "--sort",
    "--preview-window",
    "down:80%:wrap",
)
FIND_LAYOUT_ARGS: tuple[str, ...] = ("--sort", "--preview-window", "down:80%:wrap")


class ToolError(RuntimeError):
    """Raised when an external program is missing or fails."""


def render_preview_command(renderer: str) -> str:
    """Return the fuzzy-finder preview command rendering the highlighted file."""

    return f"{shlex.quote(renderer)} --style=dark {{}}"


def search_preview_command(searcher: str, term: str) -> str:
    """Return the fuzzy-finder preview command showing match context for ``term``."""

    # The finder runs previews through a shell; the term must stay one word.
    return (
        f"{shlex.quote(searcher)} --ignore-case --pretty --context 10 "
        "--colors 'match:bg:red' --colors 'match:fg:white' "
        f"-- {shlex.quote(term)} {{}}"
    )


def list_snippet_files(root: Path) -> list[str]:
    """Return the non-hidden files below ``root`` as sorted relative paths."""

    found: list[str] = []
    for path in root.rglob("*"):
        relative = path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.is_file():
            found.append(relative.as_posix())
    return sorted(found)


def search_files(searcher: str, term: str, root: Path) -> list[str]:
    """Return files below ``root`` containing ``term`` (relative to ``root``)."""

    process = _run(
        [searcher, "--files-with-matches", "--no-messages", "--", term],
        cwd=root,
        capture=True,
    )
    if process.returncode == SEARCH_NO_MATCH_CODE:
        return []
    if process.returncode != 0:
        raise ToolError(f"{searcher} failed (exit {process.returncode})")
    return sorted(_lines(process.stdout))


def fuzzy_select(
    finder: str,
    candidates: Iterable[str],
    *,
    cwd: Path,
    preview: str,
    layout: Sequence[str] = FINDER_LAYOUT_ARGS,
    multi: bool = False,
) -> list[str]:
    """Let the user pick from ``candidates`` and return the selected lines.

    An empty list means nothing was selected (no match or cancelled).
    """

    argv = [finder, *layout, "--preview", preview]
    if multi:
        argv.append("--multi")
    process = _run(argv, cwd=cwd, capture=True, stdin="\n".join(candidates))
    if process.returncode in FINDER_EMPTY_CODES:
        return []
    if process.returncode != 0:
        raise ToolError(f"{finder} failed (exit {process.returncode})")
    return _lines(process.stdout)


def open_in_editor(
    editor: str, paths: Sequence[str | Path], *, cwd: Path | None = None
) -> int:
    """Open ``paths`` in a single editor session and return its exit status."""

    return _run([editor, *(str(path) for path in paths)], cwd=cwd).returncode


def render_preview(renderer: str, path: Path) -> int:
    """Render ``path`` in the terminal and return the renderer's exit status."""

    return _run([renderer, str(path)]).returncode


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def _run(
    argv: Sequence[str],
    *,
    cwd: Path | None = None,
    capture: bool = False,
    stdin: str | None = None,
) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(
            list(argv),
            cwd=cwd,
            input=stdin,
            stdout=subprocess.PIPE if capture else None,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ToolError(f"Command not found: {argv[0]}") from exc
    except OSError as exc:
        raise ToolError(f"Failed to run {argv[0]}: {exc}") from exc
