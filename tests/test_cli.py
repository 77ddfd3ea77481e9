"""Tests for the root wgraph CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from wgraph import __version__
from wgraph.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "wgraph" in result.output
    for name in ("node", "edge", "info", "connected", "path", "export"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flag",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/none.toml"], ["-g", "x.json"]],
)
def test_global_flag_accepted(cli_runner: CliRunner, flag: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_workspace")
def test_explicit_config(cli_runner: CliRunner, tmp_path: Path) -> None:
    custom = tmp_path / "conf" / "alt.toml"
    custom.parent.mkdir()
    custom.write_text("[graph]\ndefault_weight = 9.0\n")
    cli_runner.invoke(cli, ["-c", str(custom), "node", "add", "1"])
    cli_runner.invoke(cli, ["-c", str(custom), "node", "add", "2"])
    result = cli_runner.invoke(cli, ["--json", "-c", str(custom), "edge", "add", "1", "2"])
    assert result.exit_code == 0
    assert json.loads(result.output)["data"]["weight"] == 9.0


@pytest.mark.usefixtures("_isolated_workspace")
def test_invalid_config_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "wgraph.toml").write_text("[graph\n")
    result = cli_runner.invoke(cli, ["info"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
