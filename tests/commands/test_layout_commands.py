"""Tests for the list, show, and compat commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from slidegrid.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestListCommand:
    def test_lists_builtins(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "two-column" in result.output
        assert "comparison" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["count"] == 11

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "list"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "title"

    def test_builtins_disabled_by_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "slidegrid.toml").write_text("[catalog]\nbuiltins = false\n")
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["count"] == 0

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list", "--examples"])
        assert result.exit_code == 0
        assert "slidegrid --json list" in result.output


@pytest.mark.usefixtures("_isolated_config")
class TestShowCommand:
    def test_show(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "image-left"])
        assert result.exit_code == 0
        assert "image" in result.output
        assert "system (priority 0)" in result.output

    def test_show_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "quote"])
        assert result.exit_code == 0
        layout = json.loads(result.output)["data"]["layout"]
        assert [z["name"] for z in layout["zones"]] == ["quote", "attribution"]

    def test_show_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "show", "code"])
        assert result.exit_code == 0
        assert result.output.strip() == "title\ncode"

    def test_unknown_layout_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "ghost"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "ghost" in result.output


@pytest.mark.usefixtures("_isolated_config")
class TestCompatCommand:
    def test_compatible(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "compat", "two-column", "split-60-40"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["compatible"] is True
        assert data["shared_zones"] == ["left", "right", "title"]

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compat", "title", "quote"])
        assert result.exit_code == 0
        assert "(none)" in result.output

    def test_missing_layout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compat", "title", "ghost"])
        assert result.exit_code == 1
