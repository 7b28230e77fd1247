from __future__ import annotations

from pathlib import Path

import pytest


def write_vault_config(base_dir: Path, snippet_dir: Path) -> Path:
    config_path = base_dir / "config.toml"
    config_path.write_text(
        (
            "[snippetvault]\n"
            f'snippet_dir = "{snippet_dir}"\n'
            f'editor_candidates = ["{base_dir}/bin/missing-editor"]\n'
            'editor_fallback = "fake-editor"\n'
            'finder = "fake-fzf"\n'
            'renderer = "fake-glow"\n'
            'searcher = "fake-rg"\n'
        ),
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def vault(tmp_path: Path, monkeypatch) -> tuple[Path, Path]:
    """Return (config_path, snippet_dir) for an isolated vault."""

    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    snippet_dir = tmp_path / "snippets"
    return write_vault_config(tmp_path, snippet_dir), snippet_dir
