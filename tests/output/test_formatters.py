"""Tests for the format_result dispatcher and OutputSettings."""

import json

from dagconfig.output.formatters import OutputSettings, format_result
from dagconfig.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            _ok("find_service", id="s1"), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "find_service"
        assert data["data"]["id"] == "s1"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("show", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        output = format_result(
            _ok("find_service", id="s1"),
            settings=OutputSettings(json_output=True, quiet=True),
        )
        assert json.loads(output)["data"]["id"] == "s1"


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(_ok("custom_op", key="value"))
        assert "OK" in output
        assert "custom_op" in output
        assert "key: value" in output

    def test_quiet_prints_id(self) -> None:
        output = format_result(
            _ok("find_service", id="s1", name="web"), settings=OutputSettings(quiet=True)
        )
        assert output == "s1"
