"""Tests for the fix CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from yamlsort.cli import cli


@pytest.mark.usefixtures("project")
class TestFixCommand:
    def test_rewrites_file(
        self, cli_runner: CliRunner, project: Path, unsorted_yaml: str, sorted_yaml: str
    ) -> None:
        (project / "doc.yaml").write_text(unsorted_yaml)
        result = cli_runner.invoke(cli, ["fix", "doc.yaml"])
        assert result.exit_code == 0
        assert "fixed" in result.output
        assert (project / "doc.yaml").read_text() == sorted_yaml

    def test_directory(
        self, cli_runner: CliRunner, project: Path, unsorted_yaml: str, sorted_yaml: str
    ) -> None:
        (project / "conf").mkdir()
        (project / "conf" / "a.yml").write_text(unsorted_yaml)
        result = cli_runner.invoke(cli, ["--json", "fix", "conf"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["changed_count"] == 1
        assert (project / "conf" / "a.yml").read_text() == sorted_yaml

    def test_stdout_mode(
        self, cli_runner: CliRunner, project: Path, unsorted_yaml: str, sorted_yaml: str
    ) -> None:
        (project / "doc.yaml").write_text(unsorted_yaml)
        result = cli_runner.invoke(cli, ["fix", "--stdout", "doc.yaml"])
        assert result.exit_code == 0
        assert result.stdout == sorted_yaml
        assert (project / "doc.yaml").read_text() == unsorted_yaml

    def test_stdin(self, cli_runner: CliRunner, unsorted_yaml: str, sorted_yaml: str) -> None:
        result = cli_runner.invoke(cli, ["fix", "--stdout", "-"], input=unsorted_yaml)
        assert result.exit_code == 0
        assert result.stdout == sorted_yaml

    def test_stdin_requires_stdout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["fix", "-"], input="a: 1\n")
        assert result.exit_code == 2
        assert "requires --stdout" in result.output

    def test_stdout_single_path(self, cli_runner: CliRunner, project: Path) -> None:
        (project / "a.yaml").write_text("a: 1\n")
        (project / "b.yaml").write_text("b: 1\n")
        result = cli_runner.invoke(cli, ["fix", "--stdout", "a.yaml", "b.yaml"])
        assert result.exit_code == 2

    def test_parse_error_leaves_file(self, cli_runner: CliRunner, project: Path) -> None:
        (project / "bad.yaml").write_text("items: [a, b\n")
        result = cli_runner.invoke(cli, ["fix", "bad.yaml"])
        assert result.exit_code == 1
        assert "could not be processed" in result.output
        assert (project / "bad.yaml").read_text() == "items: [a, b\n"

    def test_dropped_comment_warning(self, cli_runner: CliRunner, project: Path) -> None:
        (project / "doc.yaml").write_text("items:\n  - name: b  # inline\n  - name: a\n")
        result = cli_runner.invoke(cli, ["fix", "doc.yaml"])
        assert result.exit_code == 0
        assert "WARNING" in result.output
        assert "could not be reattached" in result.output


class TestFixWithoutConfig:
    def test_no_rules_is_noop(
        self,
        cli_runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        unsorted_yaml: str,
    ) -> None:
        monkeypatch.delenv("YAMLSORT_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / "doc.yaml").write_text(unsorted_yaml)
        result = cli_runner.invoke(cli, ["fix", "doc.yaml"])
        assert result.exit_code == 0
        assert (tmp_path / "doc.yaml").read_text() == unsorted_yaml

    def test_explicit_config(
        self,
        cli_runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        unsorted_yaml: str,
        sorted_yaml: str,
    ) -> None:
        monkeypatch.delenv("YAMLSORT_CONFIG", raising=False)
        config = tmp_path / "rules.toml"
        config.write_text('[[arrays]]\npath = "items"\nsortKey = "name"\n')
        doc = tmp_path / "doc.yaml"
        doc.write_text(unsorted_yaml)
        result = cli_runner.invoke(cli, ["-c", str(config), "fix", str(doc)])
        assert result.exit_code == 0
        assert doc.read_text() == sorted_yaml
