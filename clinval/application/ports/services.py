from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.validation_check import CheckResult
    from ..models import ValidationSummary


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_run_start(
        self, package: str, version: str, check_count: int, tolerance: float
    ) -> None: ...

    def log_check_result(self, result: CheckResult) -> None: ...

    def log_run_complete(self, summary: ValidationSummary) -> None: ...

    def log_final_stats(self) -> None: ...
