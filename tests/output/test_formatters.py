"""Tests for the format_result dispatcher and OutputSettings."""

import json

from gradectl.output.formatters import OutputSettings, format_result
from gradectl.services.result import ServiceError, ServiceResult


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
        assert s.decimals == 1


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            _ok("evaluate", score=95.0, letter="A"), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "evaluate"
        assert data["data"]["letter"] == "A"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("evaluate", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg(self) -> None:
        data = json.loads(format_result(_ok("test", key="val"), json_output=True))
        assert data["ok"] is True

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(_ok("test", key="val"), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK")

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(
            _ok("evaluate", letter="B"), settings=OutputSettings(json_output=True, quiet=True)
        )
        assert json.loads(output)["data"]["letter"] == "B"


class TestFormatResultHuman:
    def test_default_is_human(self) -> None:
        output = format_result(_ok("test", key="val"))
        assert "OK" in output
        assert "key: val" in output

    def test_quiet(self) -> None:
        output = format_result(_ok("evaluate", letter="C"), settings=OutputSettings(quiet=True))
        assert output == "C"

    def test_decimals_forwarded(self) -> None:
        result = _ok("evaluate", score=72.0, letter="C", message="m")
        output = format_result(result, settings=OutputSettings(decimals=3))
        assert "72.000" in output
