from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...application.models import ValidationSummary
    from ...domain.entities.validation_check import CheckResult


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_run_start(
        self, package: str, version: str, check_count: int, tolerance: float
    ) -> None:
        return None

    @override
    def log_check_result(self, result: CheckResult) -> None:
        return None

    @override
    def log_run_complete(self, summary: ValidationSummary) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
