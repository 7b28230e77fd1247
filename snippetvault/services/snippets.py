"""High-level snippet workflows used by the CLI."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Callable, Sequence

from ..app import AppContext
from ..snippets import create_snippet, is_snippet_name
from ..tools import (
    FIND_LAYOUT_ARGS,
    ToolError,
    fuzzy_select,
    list_snippet_files,
    open_in_editor,
    render_preview,
    render_preview_command,
    search_files,
    search_preview_command,
)
from ..utils.datetime_fmt import snippet_timestamp

WarnFunc = Callable[[str], None]


class SnippetRootMissingError(RuntimeError):
    """Raised when browsing a snippet directory that does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__("Snippet directory does not exist.")
        self.path = path


def create_and_open(
    ctx: AppContext,
    language: str,
    tags: Sequence[str],
    *,
    now: datetime | None = None,
    notify: WarnFunc | None = None,
    warn: WarnFunc | None = None,
) -> Path:
    """Write a new snippet, then open it in the editor and preview it.

    Writing failures propagate. The editor and the renderer are best effort:
    their exit statuses are ignored and a missing program only warns.
    """

    path = create_snippet(
        ctx.snippet_dir,
        language,
        tags,
        snippet_timestamp(now),
        notify=notify,
    )
    if notify is not None:
        notify(f"Snippet created: {path}")

    editor = ctx.editor()
    _best_effort(lambda: open_in_editor(editor, [path]), warn)
    _best_effort(lambda: render_preview(ctx.config.renderer, path), warn)
    return path


def browse(ctx: AppContext, *, multi: bool = False) -> list[str]:
    """Pick snippet file(s) with the fuzzy-finder and open them in the editor.

    Returns the selected paths, relative to the snippet directory. Nothing is
    opened when the selection is empty.
    """

    root = _require_root(ctx)
    selected = fuzzy_select(
        ctx.config.finder,
        list_snippet_files(root),
        cwd=root,
        preview=render_preview_command(ctx.config.renderer),
        multi=multi,
    )
    if not selected:
        return []
    if not multi:
        selected = selected[:1]
    _open_selection(ctx, root, selected)
    return selected


def find(ctx: AppContext, term: str) -> list[str]:
    """Search snippets for ``term``, pick among the matches and open the choice."""

    if not term.strip():
        raise ValueError("Search term must not be empty.")

    root = _require_root(ctx)
    matches = search_files(ctx.config.searcher, term, root)
    if not matches:
        return []
    selected = fuzzy_select(
        ctx.config.finder,
        matches,
        cwd=root,
        preview=search_preview_command(ctx.config.searcher, term),
        layout=FIND_LAYOUT_ARGS,
    )
    if not selected:
        return []
    _open_selection(ctx, root, selected)
    return selected


def count_snippets(ctx: AppContext) -> int:
    """Count snippet files among the entries offered by ``list`` and ``edit``."""

    root = ctx.snippet_dir
    if not root.is_dir():
        return 0
    return sum(
        1
        for relative in list_snippet_files(root)
        if is_snippet_name(PurePosixPath(relative).name)
    )


def _best_effort(run: Callable[[], int], warn: WarnFunc | None) -> None:
    try:
        run()
    except ToolError as exc:
        if warn is not None:
            warn(str(exc))


def _require_root(ctx: AppContext) -> Path:
    root = ctx.snippet_dir
    if not root.is_dir():
        raise SnippetRootMissingError(root)
    return root


def _open_selection(ctx: AppContext, root: Path, selected: Sequence[str]) -> None:
    editor = ctx.editor()
    status = open_in_editor(editor, selected, cwd=root)
    if status != 0:
        raise ToolError(f"{editor} exited with status {status}")
