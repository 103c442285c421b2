"""Tests for ``dependy graph``."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from dependy.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


class TestGraphCommand:
    """Tests for DOT export from the command line."""

    def test_dot_to_stdout(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["graph", "first", "-r", "first=second", "-u", "second"]
        )
        assert result.exit_code == 0
        assert result.output.startswith('digraph "dependencies" {')
        assert '"second" -> "first" [label="requires"];' in result.output

    def test_follows_edges_exported(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["graph", "-u", "a", "-u", "b"])
        assert result.exit_code == 0
        assert '"a" -> "b" [label="follows"];' in result.output

    def test_custom_name(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["graph", "-u", "a", "--name", "suite"])
        assert result.exit_code == 0
        assert result.output.startswith('digraph "suite" {')

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "deps.dot"
        result = runner.invoke(
            cli, ["graph", "app", "-s", "app=cache", "-u", "cache", "-o", str(out)]
        )
        assert result.exit_code == 0
        assert "Graph written to" in result.output
        text = out.read_text(encoding="utf-8")
        assert '"cache" -> "app" [label="suggests"];' in text

    def test_resolution_failure(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["graph", "a", "-r", "a=a"])
        assert result.exit_code == 1
