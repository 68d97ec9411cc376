"""Unit tests for validation-summary report rendering."""

from datetime import UTC, datetime
import json
from pathlib import Path

import pytest

from clinval.application.models import ValidationSummary
from clinval.domain.entities.validation_check import CheckResult
from clinval.domain.services.check_catalog import default_checks
from clinval.infrastructure.reporting import (
    format_summary_report,
    summary_to_dict,
    write_summary_report,
)


@pytest.fixture
def summary() -> ValidationSummary:
    checks = default_checks()
    results = [CheckResult(check=c, passed=True, detail="ok") for c in checks]
    results[4] = CheckResult(
        check=checks[4], passed=False, detail="Observed 31, expected 32"
    )
    return ValidationSummary(
        package="mypkg",
        version="1.2.0",
        tolerance=1e-4,
        run_at=datetime(2024, 5, 1, 9, 30, tzinfo=UTC),
        results=results,
    )


class TestTextReport:
    def test_header_and_totals(self, summary):
        report = format_summary_report(summary, "text")
        assert "VALIDATION SUMMARY" in report
        assert "Package:   mypkg" in report
        assert "Version:   1.2.0" in report
        assert "Run at:    2024-05-01 09:30:00 UTC" in report
        assert "Total Checks: 8 (7 passed, 1 failed)" in report

    def test_grouped_by_function(self, summary):
        report = format_summary_report(summary)
        bmi_at = report.index("Function: calculate_bmi")
        temp_at = report.index("Function: convert_temperature")
        assert bmi_at < temp_at
        assert report.index("[BMI-004]") < temp_at

    def test_failures_and_verdict(self, summary):
        report = format_summary_report(summary)
        assert "Failures (1):" in report
        assert "TEMP-001: Observed 31, expected 32" in report
        assert "Overall result: FAILED" in report

    def test_passing_verdict(self, summary):
        summary.results[4] = CheckResult(check=summary.results[4].check, passed=True)
        report = format_summary_report(summary)
        assert "Failures" not in report
        assert "Overall result: PASSED" in report


class TestJsonReport:
    def test_document_shape(self, summary):
        document = json.loads(format_summary_report(summary, "json"))
        assert document["package"] == "mypkg"
        assert document["version"] == "1.2.0"
        assert document["run_at"] == "2024-05-01T09:30:00+00:00"
        assert document["totals"] == {"checks": 8, "passed": 7, "failed": 1}
        assert document["ok"] is False
        assert len(document["checks"]) == 8

    def test_check_entry(self, summary):
        entry = summary_to_dict(summary)["checks"][6]
        assert entry == {
            "check_id": "TEMP-003",
            "function": "convert_temperature",
            "kind": "error",
            "description": "Non-numeric value is rejected",
            "call": "convert_temperature('a', 'F')",
            "passed": True,
            "detail": "ok",
        }


class TestReportOutput:
    def test_unknown_format(self, summary):
        with pytest.raises(ValueError, match="Unsupported report format 'html'"):
            format_summary_report(summary, "html")

    def test_write_creates_parent_directories(self, summary, tmp_path: Path):
        target = tmp_path / "reports" / "nested" / "summary.json"
        written = write_summary_report(summary, target, "json")
        assert written == target
        assert json.loads(target.read_text(encoding="utf-8"))["package"] == "mypkg"
