"""Snippet naming, document template and file creation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Sequence

SNIPPET_PREFIX = "snippet_"
SNIPPET_SUFFIX = ".md"

NotifyFunc = Callable[[str], None]

_FORBIDDEN_NAMES = {".", ".."}


class SnippetError(RuntimeError):
    """Base error for snippet creation issues."""


class InvalidSnippetNameError(SnippetError):
    """Raised when a language or tag cannot be embedded in a filename."""


class SnippetWriteError(SnippetError):
    """Raised when the snippet directory or file cannot be written."""


def validate_component(value: str, kind: str) -> str:
    """Return ``value`` unchanged, or raise if it cannot be part of a filename.

    Values are never escaped or truncated. Empty strings, path separators,
    NUL bytes and the special names ``.``/``..`` are rejected.
    """

    if not value:
        raise InvalidSnippetNameError(f"{kind} must not be empty.")
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    if any(sep in value for sep in separators) or "\0" in value:
        raise InvalidSnippetNameError(
            f"{kind} '{value}' must not contain path separators."
        )
    if value in _FORBIDDEN_NAMES:
        raise InvalidSnippetNameError(f"{kind} '{value}' is not a valid name.")
    return value


def snippet_filename(timestamp: str, language: str, tags: Sequence[str] = ()) -> str:
    """Build ``snippet_<timestamp>_<language>[_<tag>...].md``.

    Tags keep the order in which they were given.
    """

    parts = [timestamp, validate_component(language, "Language")]
    parts.extend(validate_component(tag, "Tag") for tag in tags)
    return f"{SNIPPET_PREFIX}{'_'.join(parts)}{SNIPPET_SUFFIX}"


def snippet_path(
    root: Path, timestamp: str, language: str, tags: Sequence[str] = ()
) -> Path:
    return root / snippet_filename(timestamp, language, tags)


def render_snippet(language: str, tags: Sequence[str] = ()) -> str:
    """Render the initial markdown document for a new snippet."""

    return (
        f"# Title: {language} - Snippet\n"
        "# ---\n"
        f"### Tags: {', '.join(tags)}\n"
        "\n"
        "### Content\n"
        "\n"
        f"```{language}\n"
        "\n"
        "```\n"
        "### Link:\n"
        "### Note:\n"
    )


def ensure_snippet_dir(root: Path, *, notify: NotifyFunc | None = None) -> bool:
    """Create ``root`` recursively when missing. Returns True if it was created."""

    if root.is_dir():
        return False
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SnippetWriteError(f"Failed to create directory {root}: {exc}") from exc
    if notify is not None:
        notify(f"Directory created: {root}")
    return True


def create_snippet(
    root: Path,
    language: str,
    tags: Sequence[str],
    timestamp: str,
    *,
    notify: NotifyFunc | None = None,
) -> Path:
    """Write a new snippet file under ``root`` and return its path.

    The file is opened in exclusive-create mode, so an existing snippet is
    never overwritten.
    """

    path = snippet_path(root, timestamp, language, tags)
    content = render_snippet(language, tags)

    ensure_snippet_dir(root, notify=notify)
    try:
        with path.open("x", encoding="utf-8") as fh:
            fh.write(content)
    except OSError as exc:
        raise SnippetWriteError(f"Failed to write snippet {path}: {exc}") from exc
    return path


def is_snippet_name(name: str) -> bool:
    return name.startswith(SNIPPET_PREFIX) and name.endswith(SNIPPET_SUFFIX)
