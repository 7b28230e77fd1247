"""Locate the text editor used to open snippets."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

DEFAULT_EDITOR_CANDIDATES: tuple[str, ...] = (
    "$HOME/dev/nvim/bin/nvim",
    "$HOME/dev/neovim/build/bin/nvim",
    "$HOME/dev/neovim/bin/nvim",
    "/usr/local/bin/nvim",
)
DEFAULT_EDITOR_FALLBACK = "nvim"


def expand_home(raw: str, home: Path) -> str:
    """Expand ``~`` and ``$HOME`` placeholders in ``raw`` to ``home``."""

    home_str = str(home)
    expanded = raw.replace("${HOME}", home_str).replace("$HOME", home_str)
    if expanded == "~" or expanded.startswith("~/"):
        expanded = home_str + expanded[1:]
    return expanded


def resolve_editor(
    candidates: Iterable[str] = DEFAULT_EDITOR_CANDIDATES,
    fallback: str = DEFAULT_EDITOR_FALLBACK,
    *,
    home: Path | None = None,
) -> str:
    """Return the first candidate that exists as a regular file, else ``fallback``.

    Candidates are probed in order on every call; the result is never cached.
    The fallback is a bare command name left for ``PATH`` lookup.
    """

    home_dir = home if home is not None else Path.home()
    for raw in candidates:
        expanded = expand_home(raw, home_dir)
        if Path(expanded).is_file():
            return expanded
    return fallback
