"""Validation-summary reports.

A report records which package version was checked, when, with what
tolerance, and the outcome of every check. Two renderings are supported:
a fixed-width text report for filing, and JSON for automation.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ...constants import ReportFormats

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import ValidationSummary

_RULE = "=" * 80


def summary_to_dict(summary: ValidationSummary) -> dict[str, Any]:
    return {
        "package": summary.package,
        "version": summary.version,
        "run_at": summary.run_at.isoformat(),
        "tolerance": summary.tolerance,
        "totals": {
            "checks": summary.total,
            "passed": summary.passed_count,
            "failed": summary.failed_count,
        },
        "ok": summary.ok,
        "checks": [
            {
                "check_id": r.check.check_id,
                "function": r.check.function,
                "kind": r.check.kind.value,
                "description": r.check.description,
                "call": r.check.call_signature(),
                "passed": r.passed,
                "detail": r.detail,
            }
            for r in summary.results
        ],
    }


def _format_text(summary: ValidationSummary) -> str:
    lines = [_RULE, "VALIDATION SUMMARY", _RULE, ""]
    lines.append(f"Package:   {summary.package}")
    lines.append(f"Version:   {summary.version}")
    lines.append(f"Run at:    {summary.run_at.strftime('%Y-%m-%d %H:%M:%S %Z')}")
    lines.append(f"Tolerance: {summary.tolerance:g}")
    lines.append("")
    lines.append(
        f"Total Checks: {summary.total} "
        f"({summary.passed_count} passed, {summary.failed_count} failed)"
    )

    for function in summary.functions():
        results = [r for r in summary.results if r.check.function == function]
        lines.append(f"\nFunction: {function}")
        lines.append("-" * 80)
        for result in results:
            lines.append(f"  {result}")

    failures = summary.failures()
    if failures:
        lines.append(f"\nFailures ({len(failures)}):")
        for result in failures:
            lines.append(f"  {result.check.check_id}: {result.detail}")

    verdict = "PASSED" if summary.ok else "FAILED"
    lines.append(f"\nOverall result: {verdict}")
    lines.append("\n" + _RULE)
    return "\n".join(lines)


def format_summary_report(
    summary: ValidationSummary, report_format: str = ReportFormats.TEXT
) -> str:
    """Render a validation summary.

    Args:
        summary: Completed validation run
        report_format: "text" or "json"

    Returns:
        The rendered report

    Raises:
        ValueError: If the format is not supported
    """
    if report_format == ReportFormats.TEXT:
        return _format_text(summary)
    if report_format == ReportFormats.JSON:
        return json.dumps(summary_to_dict(summary), indent=2)
    supported = ", ".join(ReportFormats.SUPPORTED)
    raise ValueError(
        f"Unsupported report format '{report_format}' (expected one of: {supported})"
    )


def write_summary_report(
    summary: ValidationSummary,
    path: Path,
    report_format: str = ReportFormats.TEXT,
) -> Path:
    content = format_summary_report(summary, report_format)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")
    return path
