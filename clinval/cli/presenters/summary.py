from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from ...application.models import ValidationSummary


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, summary: ValidationSummary, report_path: Path | None = None) -> None:
        self.console.print()
        self.console.print(self._build_summary_table(summary))
        self.console.print()
        self._print_status_summary(summary)
        if report_path is not None:
            self.console.print(f"[bold]Report:[/bold] {escape(str(report_path))}")

    def _build_summary_table(self, summary: ValidationSummary) -> Table:
        table = Table(
            title=escape(f"Validation Summary: {summary.package} {summary.version}"),
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Check", style="cyan", no_wrap=True)
        table.add_column("Function", style="white", no_wrap=True)
        table.add_column("Kind", style="dim", no_wrap=True)
        table.add_column("Description", overflow="fold", ratio=3)
        table.add_column("Result", justify="center", no_wrap=True)
        table.add_column("Detail", style="dim", overflow="fold", ratio=2)
        for result in summary.results:
            status = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
            table.add_row(
                result.check.check_id,
                result.check.function,
                result.check.kind.value,
                escape(result.check.description),
                status,
                escape(result.detail),
            )
        return table

    def _print_status_summary(self, summary: ValidationSummary) -> None:
        if summary.ok:
            self.console.print(
                f"[bold green]✓ {summary.passed_count}/{summary.total} checks passed[/bold green]"
            )
        else:
            self.console.print(
                f"[bold red]✗ {summary.failed_count}/{summary.total} checks failed[/bold red]"
            )
