from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...application.models import ValidationSummary
    from ...domain.entities.validation_check import CheckResult


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    package: str = ""
    function: str = ""
    check_id: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = {
            "checks_run": 0,
            "checks_passed": 0,
            "checks_failed": 0,
            "warnings": 0,
            "errors": 0,
        }

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_run_start(
        self, package: str, version: str, check_count: int, tolerance: float
    ) -> None:
        self.set_context(package=package)
        self.console.print()
        self.console.print(
            f"[bold]Validating {escape(package)} {escape(version)}[/bold]"
        )
        self.verbose(f"Checks selected: {check_count}")
        self.verbose(f"Numeric tolerance: {tolerance:g}")

    @override
    def log_check_result(self, result: CheckResult) -> None:
        check = result.check
        self.set_context(function=check.function, check_id=check.check_id)
        self._stats["checks_run"] += 1
        if result.passed:
            self._stats["checks_passed"] += 1
            self.verbose(f"  PASS {check.check_id}: {escape(check.description)}")
        else:
            self._stats["checks_failed"] += 1
            self.warning(
                f"{check.check_id} failed: {escape(check.description)}"
                f" ({escape(result.detail)})"
            )
        self.debug(f"    {escape(check.call_signature())} -> {escape(result.detail)}")

    @override
    def log_run_complete(self, summary: ValidationSummary) -> None:
        self.clear_context()
        if summary.ok:
            self.success(f"All {summary.total} checks passed")
        else:
            self.error(f"{summary.failed_count} of {summary.total} checks failed")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Validation Statistics:[/dim]")
            self.console.print(f"[dim]  Checks run: {self._stats['checks_run']}[/dim]")
            self.console.print(
                f"[dim]  Checks passed: {self._stats['checks_passed']}[/dim]"
            )
            if self._stats["checks_failed"] > 0:
                self.console.print(
                    f"[dim red]  Checks failed: {self._stats['checks_failed']}[/dim red]"
                )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = {
            "checks_run": 0,
            "checks_passed": 0,
            "checks_failed": 0,
            "warnings": 0,
            "errors": 0,
        }

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.function:
            parts.append(self._context.function)
        if self._context.check_id:
            parts.append(self._context.check_id)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
