"""Datetime formatting utilities for snippet naming."""

from __future__ import annotations

from datetime import datetime

# Local wall-clock time, second resolution: "2024-01-01-120000"
_SNIPPET_FORMAT = "%Y-%m-%d-%H%M%S"


def snippet_timestamp(dt: datetime | None = None) -> str:
    """Return ``dt`` (or the current local time) formatted for snippet filenames."""

    if dt is None:
        dt = datetime.now()
    return dt.strftime(_SNIPPET_FORMAT)
