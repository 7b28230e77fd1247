"""Configuration management for SnippetVault."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .editor import DEFAULT_EDITOR_CANDIDATES, DEFAULT_EDITOR_FALLBACK

DEFAULT_CONFIG_DIR = Path("~/.config/snippetvault").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_SNIPPET_DIRNAME = "Documents/myObsidianDoc/mysnippetsCollection"
DEFAULT_FINDER = "fzf"
DEFAULT_RENDERER = "glow"
DEFAULT_SEARCHER = "rg"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file holds malformed values."""


@dataclass(slots=True)
class VaultConfig:
    """In-memory representation of the SnippetVault configuration."""

    snippet_dir: Path
    editor_candidates: tuple[str, ...] = DEFAULT_EDITOR_CANDIDATES
    editor_fallback: str = DEFAULT_EDITOR_FALLBACK
    finder: str = DEFAULT_FINDER
    renderer: str = DEFAULT_RENDERER
    searcher: str = DEFAULT_SEARCHER
    home: Path = field(default_factory=Path.home)
    source_path: Path | None = None


def default_config(home: Path | None = None) -> VaultConfig:
    """Return the built-in configuration rooted at ``home``."""

    home_dir = home if home is not None else Path.home()
    return VaultConfig(snippet_dir=home_dir / DEFAULT_SNIPPET_DIRNAME, home=home_dir)


def load_config(path: Path | None = None, *, home: Path | None = None) -> VaultConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/snippetvault/config.toml``) is used, and a missing
        default file simply yields the built-in defaults.
    home:
        Home directory used to resolve a relative ``snippet_dir``. Defaults to
        the current user's home.

    Raises
    ------
    MissingConfigError
        If an explicitly requested file cannot be found.
    InvalidConfigError
        If settings are malformed.
    """

    home_dir = home if home is not None else Path.home()
    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        if path is not None:
            raise MissingConfigError(config_path)
        return default_config(home_dir)

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Failed to parse {config_path}: {exc}") from exc

    section = raw.get("snippetvault", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'snippetvault' section must be a table")

    snippet_dir_raw = section.get("snippet_dir")
    if snippet_dir_raw is None:
        snippet_dir = home_dir / DEFAULT_SNIPPET_DIRNAME
    elif isinstance(snippet_dir_raw, str) and snippet_dir_raw.strip():
        # Relative paths are anchored at the home directory, not the config dir.
        sd = Path(snippet_dir_raw.strip()).expanduser()
        snippet_dir = sd if sd.is_absolute() else home_dir / sd
    else:
        raise InvalidConfigError("'snippet_dir' must be a non-empty string")

    candidates_raw = section.get("editor_candidates")
    if candidates_raw is None:
        candidates = DEFAULT_EDITOR_CANDIDATES
    elif isinstance(candidates_raw, list) and all(
        isinstance(item, str) and item.strip() for item in candidates_raw
    ):
        candidates = tuple(item.strip() for item in candidates_raw)
    else:
        raise InvalidConfigError("'editor_candidates' must be a list of strings")

    return VaultConfig(
        snippet_dir=snippet_dir,
        editor_candidates=candidates,
        editor_fallback=_command_name(
            section, "editor_fallback", DEFAULT_EDITOR_FALLBACK
        ),
        finder=_command_name(section, "finder", DEFAULT_FINDER),
        renderer=_command_name(section, "renderer", DEFAULT_RENDERER),
        searcher=_command_name(section, "searcher", DEFAULT_SEARCHER),
        home=home_dir,
        source_path=config_path,
    )


def _command_name(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise InvalidConfigError(f"'{key}' must be a non-empty string when provided")
    return value.strip()


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    candidates = ", ".join(f'"{item}"' for item in DEFAULT_EDITOR_CANDIDATES)
    default_content = (
        "[snippetvault]\n"
        f'snippet_dir = "{DEFAULT_SNIPPET_DIRNAME}"\n'
        f"editor_candidates = [{candidates}]\n"
        f'editor_fallback = "{DEFAULT_EDITOR_FALLBACK}"\n'
        f'finder = "{DEFAULT_FINDER}"\n'
        f'renderer = "{DEFAULT_RENDERER}"\n'
        f'searcher = "{DEFAULT_SEARCHER}"\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True
