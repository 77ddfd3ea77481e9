"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest

from wgraph.output.formatters import OutputSettings, format_result
from wgraph.services.result import ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult.fail(op, "ERR", msg)


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(Exception):
            s.quiet = True  # type: ignore[misc]


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("connect", a=1, b=2), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "connect"
        assert data["data"] == {"a": 1, "b": 2}

    def test_json_mode_error(self) -> None:
        output = format_result(_err("path", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True

    def test_quiet_mode(self) -> None:
        assert format_result(_ok("info"), settings=OutputSettings(quiet=True)) == "OK: info"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("info", nodes=3))
        assert "OK" in output
        assert "nodes: 3" in output
