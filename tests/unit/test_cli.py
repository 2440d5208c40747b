"""Tests for the command line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pathfinder.cli import app, _setup_logging
from pathfinder.tools import worker as worker_module
from pathfinder.tools.lister import list_directory


runner = CliRunner()


@pytest.fixture
def fruit_tree(tmp_path: Path) -> Path:
    (tmp_path / "apple.txt").write_text("apple")
    (tmp_path / "banana.txt").write_text("banana")
    (tmp_path / "fruits").mkdir()
    (tmp_path / "fruits" / "apple-pie.txt").write_text("pie")
    return tmp_path


def _match_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.startswith("[+] ")]


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("pathfinder.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode only shows warnings and above."""
        with patch("pathfinder.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.WARNING


class TestSearchCommand:
    """Tests for the search command."""

    def test_text_output(self, fruit_tree: Path) -> None:
        """Prints one line per match and a summary."""
        result = runner.invoke(app, ["--root", str(fruit_tree), "--query", "apple"])

        assert result.exit_code == 0
        assert sorted(_match_lines(result.output)) == sorted([
            f"[+] {fruit_tree / 'apple.txt'}",
            f"[+] {fruit_tree / 'fruits' / 'apple-pie.txt'}",
        ])
        assert "-> Searching for `apple`" in result.output
        assert "-> Found 2 results in " in result.output

    def test_positional_query(self, fruit_tree: Path) -> None:
        """Uses the positional argument when --query is not given."""
        result = runner.invoke(app, ["banana", "--root", str(fruit_tree)])

        assert result.exit_code == 0
        assert _match_lines(result.output) == [f"[+] {fruit_tree / 'banana.txt'}"]

    def test_json_output(self, fruit_tree: Path) -> None:
        """Emits one JSON record per match."""
        result = runner.invoke(app, ["--root", str(fruit_tree), "--query", "fruits", "--json"])

        assert result.exit_code == 0
        records = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        assert sorted(records, key=lambda r: r["path"]) == [
            {"name": "fruits", "path": str(fruit_tree / "fruits"), "type": "directory"},
            {"name": "apple-pie.txt", "path": str(fruit_tree / "fruits" / "apple-pie.txt"), "type": "file"},
        ]

    def test_emoji_codes_printed_literally(self, fruit_tree: Path) -> None:
        """Names holding :code: sequences are printed as written in both modes."""
        (fruit_tree / ":smile:.txt").write_text("smile")
        expected = str(fruit_tree / ":smile:.txt")

        text = runner.invoke(app, ["--root", str(fruit_tree), ":smile:"])
        assert text.exit_code == 0
        assert _match_lines(text.output) == [f"[+] {expected}"]
        assert "-> Searching for `:smile:`" in text.output

        as_json = runner.invoke(app, ["--root", str(fruit_tree), ":smile:", "--json"])
        assert as_json.exit_code == 0
        records = [json.loads(line) for line in as_json.output.splitlines() if line.startswith("{")]
        assert records == [{"name": ":smile:.txt", "path": expected, "type": "file"}]

    def test_no_match(self, fruit_tree: Path) -> None:
        """A search without matches still succeeds."""
        result = runner.invoke(app, ["--root", str(fruit_tree), "zzz-nonexistent"])

        assert result.exit_code == 0
        assert _match_lines(result.output) == []
        assert "-> Found 0 results in " in result.output

    def test_no_query(self, fruit_tree: Path) -> None:
        """Fails when no query is given."""
        result = runner.invoke(app, ["--root", str(fruit_tree)])

        assert result.exit_code == 1
        assert "No query provided" in result.output
        assert "-> Searching" not in result.output

    def test_root_is_file(self, fruit_tree: Path) -> None:
        """Fails without printing matches when the root is a file."""
        result = runner.invoke(app, ["--root", str(fruit_tree / "apple.txt"), "apple"])

        assert result.exit_code == 1
        assert "Root is a file" in result.output
        assert _match_lines(result.output) == []

    def test_missing_root(self, tmp_path: Path) -> None:
        """Fails when the root does not exist."""
        result = runner.invoke(app, ["--root", str(tmp_path / "missing"), "apple"])

        assert result.exit_code == 1
        assert _match_lines(result.output) == []

    def test_unreadable_subtree(self, fruit_tree: Path) -> None:
        """Skips unreadable directories and still exits successfully."""
        (fruit_tree / "locked").mkdir()
        (fruit_tree / "visible-apple.txt").write_text("visible")
        locked = str(fruit_tree / "locked")

        def fake_list(path):
            if path == locked:
                raise PermissionError(13, "Permission denied", path)
            return list_directory(path)

        with patch.object(worker_module, "list_directory", side_effect=fake_list):
            result = runner.invoke(app, ["--root", str(fruit_tree), "apple"])

        assert result.exit_code == 0
        assert f"[+] {fruit_tree / 'visible-apple.txt'}" in _match_lines(result.output)

    def test_relative_root(self, fruit_tree: Path, monkeypatch) -> None:
        """Relative roots are reported and searched as absolute paths."""
        monkeypatch.chdir(fruit_tree)
        result = runner.invoke(app, ["--root", "fruits", "pie"])

        assert result.exit_code == 0
        assert _match_lines(result.output) == [f"[+] {fruit_tree / 'fruits' / 'apple-pie.txt'}"]

    def test_config_file_defaults(self, fruit_tree: Path, tmp_path_factory) -> None:
        """Reads the root and output mode from a YAML defaults file."""
        config_dir = tmp_path_factory.mktemp("config")
        config_file = config_dir / "pathfinder.yaml"
        config_file.write_text(f"root: {fruit_tree}\njson: true\n")

        result = runner.invoke(app, ["--config", str(config_file), "banana"])

        assert result.exit_code == 0
        records = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        assert records == [{"name": "banana.txt", "path": str(fruit_tree / "banana.txt"), "type": "file"}]

    def test_invalid_config_file(self, fruit_tree: Path) -> None:
        """Fails on a malformed defaults file."""
        config_file = fruit_tree / "bad.yaml"
        config_file.write_text("- not\n- a mapping\n")

        result = runner.invoke(app, ["--config", str(config_file), "apple"])

        assert result.exit_code == 1
        assert "YAML object" in result.output
