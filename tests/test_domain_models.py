"""Tests for diagnostic records and the diagnostics collector."""

import logging

import pytest
from pydantic import ValidationError

from namedexport.cst.diagnostics import Diagnostics
from namedexport.cst.domain_models import Diagnostic, TransformResult


def test_diagnostic_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        Diagnostic(kind="bogus", message="m", filepath="a.js")


def test_transform_result_defaults():
    result = TransformResult(filepath="a.js", source="", changed=False)
    assert result.formatted is False
    assert result.diagnostics == []


def test_transform_result_serializes():
    result = TransformResult(
        filepath="a.js",
        source="export const a = 1;\n",
        changed=True,
        diagnostics=[Diagnostic(kind="dropped-comment", message="m", filepath="a.js", line=3)],
    )
    data = result.model_dump()
    assert data["diagnostics"][0] == {
        "kind": "dropped-comment",
        "message": "m",
        "filepath": "a.js",
        "line": 3,
    }


def test_warn_records_and_logs(caplog):
    collector = Diagnostics("a.js")
    with caplog.at_level(logging.WARNING, logger="namedexport"):
        record = collector.warn("dropped-comment", "Deleted a trailing comment in a.js!", 4)
    assert list(collector) == [record]
    assert record.filepath == "a.js"
    assert caplog.records[0].levelno == logging.WARNING
    assert caplog.records[0].getMessage() == "Deleted a trailing comment in a.js!"


def test_check_filename_matches_substring():
    collector = Diagnostics("src/components/Widget/index.js")
    assert collector.check_filename("Widget", "class") is None
    assert len(collector) == 0


def test_check_filename_mismatch():
    collector = Diagnostics("src/other.ts")
    record = collector.check_filename("greet", "function", 1)
    assert record is not None
    assert collector.of_kind("filename-mismatch") == [record]
    assert collector.of_kind("dropped-comment") == []
