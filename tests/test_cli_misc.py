"""Tests for version, languages, info, config and dispatch edge cases."""

from __future__ import annotations

from pathlib import Path

import yaml
from click.testing import CliRunner
from snippetvault import __version__, cli
from snippetvault.editor import resolve_editor
from snippetvault.languages import LANGUAGES


def test_version_prints_banner() -> None:
    result = CliRunner().invoke(cli.cli, ["version"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"SnippetVault Version: {__version__}"


def test_languages_catalogue_is_static_and_non_empty() -> None:
    runner = CliRunner()
    first = runner.invoke(cli.cli, ["languages"])
    second = runner.invoke(cli.cli, ["languages"])

    assert first.exit_code == 0, first.output
    assert first.output == second.output
    lines = first.output.splitlines()
    assert lines == list(LANGUAGES)
    assert "python" in lines
    assert len(set(lines)) == len(lines)


def test_create_accepts_language_outside_catalogue(vault, monkeypatch) -> None:
    config_path, snippet_dir = vault
    monkeypatch.setattr(
        "snippetvault.services.snippets.open_in_editor", lambda *a, **k: 0
    )
    monkeypatch.setattr(
        "snippetvault.services.snippets.render_preview", lambda *a, **k: 0
    )

    result = CliRunner().invoke(
        cli.cli, ["-c", str(config_path), "create", "brainfuck"]
    )

    assert result.exit_code == 0, result.output
    assert "brainfuck" not in LANGUAGES
    assert any(p.name.endswith("_brainfuck.md") for p in snippet_dir.iterdir())


def test_unknown_subcommand_exits_with_usage_error() -> None:
    result = CliRunner().invoke(cli.cli, ["--create_snippet", "python"])

    assert result.exit_code == 2
    assert "Usage:" in result.output


def test_no_subcommand_prints_help() -> None:
    result = CliRunner().invoke(cli.cli, [])

    assert result.exit_code == 0
    assert "create" in result.output
    assert "languages" in result.output


def test_main_returns_exit_status() -> None:
    assert cli.main(["version"]) == 0
    assert cli.main(["no-such-command"]) == 2


def test_missing_explicit_config_is_reported(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli.cli, ["-c", str(tmp_path / "absent.toml"), "list"]
    )

    assert result.exit_code == 1
    assert "Configuration file not found" in result.output


def test_info_displays_directory_editor_and_config(vault) -> None:
    config_path, snippet_dir = vault
    snippet_dir.mkdir()
    (snippet_dir / "snippet_2024-01-01-120000_python.md").write_text(
        "x", encoding="utf-8"
    )
    (snippet_dir / "readme.txt").write_text("x", encoding="utf-8")

    result = CliRunner().invoke(cli.cli, ["-c", str(config_path), "info"])

    assert result.exit_code == 0, result.output
    output = result.output
    assert f"Snippet directory : {snippet_dir}" in output
    assert "Directory exists  : yes" in output
    assert "Total snippets    : 1" in output
    assert "Editor            : fake-editor" in output

    dumped = yaml.safe_load(output.split("Configuration:\n", 1)[1])
    assert dumped["snippet_dir"] == str(snippet_dir)
    assert dumped["finder"] == "fake-fzf"


def _capture_editor(monkeypatch) -> list[tuple[str, list[str]]]:
    opened: list[tuple[str, list[str]]] = []

    def fake_open(editor: str, paths, *, cwd=None) -> int:
        opened.append((editor, [str(p) for p in paths]))
        return 0

    monkeypatch.setattr("snippetvault.cli.config_cmd.open_in_editor", fake_open)
    return opened


def test_config_command_bootstraps_when_missing(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    config_path = tmp_path / "config" / "config.toml"
    opened = _capture_editor(monkeypatch)

    result = CliRunner().invoke(cli.cli, ["-c", str(config_path), "config"])

    assert result.exit_code == 0, result.output
    assert config_path.exists()
    assert opened == [(resolve_editor(home=tmp_path / "home"), [str(config_path)])]
    assert f"Created configuration at {config_path}" in result.output


def test_config_command_uses_configured_editor(vault, monkeypatch) -> None:
    config_path, _ = vault
    opened = _capture_editor(monkeypatch)
    runner = CliRunner()

    info_result = runner.invoke(cli.cli, ["-c", str(config_path), "info"])
    result = runner.invoke(cli.cli, ["-c", str(config_path), "config"])

    assert result.exit_code == 0, result.output
    assert "Editor            : fake-editor" in info_result.output
    assert opened == [("fake-editor", [str(config_path)])]
    assert f"Opened configuration at {config_path}" in result.output


def test_config_command_keeps_editor_path_with_spaces_whole(
    tmp_path: Path, monkeypatch
) -> None:
    editor_path = tmp_path / "my tools" / "bin" / "nvim"
    editor_path.parent.mkdir(parents=True)
    editor_path.write_text("#!/bin/sh\n", encoding="utf-8")
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        f'[snippetvault]\neditor_candidates = ["{editor_path}"]\n', encoding="utf-8"
    )
    opened = _capture_editor(monkeypatch)

    result = CliRunner().invoke(cli.cli, ["-c", str(config_path), "config"])

    assert result.exit_code == 0, result.output
    assert opened == [(str(editor_path), [str(config_path)])]


def test_config_command_still_opens_a_broken_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    config_path = tmp_path / "config.toml"
    config_path.write_text("[snippetvault\n", encoding="utf-8")
    opened = _capture_editor(monkeypatch)

    result = CliRunner().invoke(cli.cli, ["-c", str(config_path), "config"])

    assert result.exit_code == 0, result.output
    assert "Warning:" in result.output
    assert opened == [(resolve_editor(home=tmp_path / "home"), [str(config_path)])]


def test_info_counts_the_snippets_list_offers(vault) -> None:
    config_path, snippet_dir = vault
    (snippet_dir / "python").mkdir(parents=True)
    (snippet_dir / "snippet_2024-01-01-120000_bash.md").write_text(
        "x", encoding="utf-8"
    )
    (snippet_dir / "python" / "snippet_2024-01-02-120000_python.md").write_text(
        "x", encoding="utf-8"
    )
    (snippet_dir / ".trash").mkdir()
    (snippet_dir / ".trash" / "snippet_2023-01-01-120000_go.md").write_text(
        "x", encoding="utf-8"
    )

    result = CliRunner().invoke(cli.cli, ["-c", str(config_path), "info"])

    assert result.exit_code == 0, result.output
    assert "Total snippets    : 2" in result.output


def test_help_explains_fuzzy_search_syntax() -> None:
    result = CliRunner().invoke(cli.cli, ["--help"])

    assert result.exit_code == 0, result.output
    assert "Fuzzy finder search syntax:" in result.output
    assert "  ^music    prefix match: items that start with music" in result.output
    assert "  ^music mp3$ | wav$ | flac$" in result.output
