"""Application bootstrap and context container for SnippetVault."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import VaultConfig, load_config
from .editor import resolve_editor


@dataclass(slots=True)
class AppContext:
    """Aggregates configuration for the CLI lifecycle."""

    config: VaultConfig

    @property
    def snippet_dir(self) -> Path:
        return self.config.snippet_dir

    def editor(self) -> str:
        """Resolve the editor afresh from the configured candidates."""

        return resolve_editor(
            self.config.editor_candidates,
            self.config.editor_fallback,
            home=self.config.home,
        )


def bootstrap(config_path: Path | None) -> AppContext:
    """Load configuration and build the context shared by all commands."""

    # Defer error mapping to the CLI, which knows how to present messages.
    return AppContext(config=load_config(config_path))
