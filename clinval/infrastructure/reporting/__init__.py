"""Validation-summary report rendering and output."""

from .report_writer import format_summary_report, summary_to_dict, write_summary_report

__all__ = [
    "format_summary_report",
    "summary_to_dict",
    "write_summary_report",
]
