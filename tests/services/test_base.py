"""Tests for load failure conversion in the service layer."""

from __future__ import annotations

from pathlib import Path

from dagconfig.infrastructure.document import DocumentParseError, DocumentReadError
from dagconfig.services.base import load_error_result


class TestLoadErrorResult:
    def test_read_error(self) -> None:
        exc = DocumentReadError(Path("/nope/dag.yaml"), "No such file or directory")
        result = load_error_result(exc)
        assert result.ok is False
        assert result.op == "load"
        assert result.error is not None
        assert result.error.code == "IO_ERROR"
        assert result.error.detail["path"] == "/nope/dag.yaml"
        assert "No such file" in result.error.message

    def test_parse_error(self) -> None:
        exc = DocumentParseError(["Services: Input should be a valid tuple"])
        result = load_error_result(exc, op="show")
        assert result.op == "show"
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert result.error.detail["errors"] == ["Services: Input should be a valid tuple"]
