from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from ..domain.entities.validation_check import CheckResult


def _empty_results() -> list[CheckResult]:
    return []


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class ValidationRequest:
    package: str = Defaults.PACKAGE_NAME
    version: str = Defaults.PACKAGE_VERSION
    tolerance: float = Defaults.TOLERANCE
    functions: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")


@dataclass(slots=True)
class ValidationSummary:
    package: str
    version: str
    tolerance: float
    run_at: datetime = field(default_factory=_utc_now)
    results: list[CheckResult] = field(default_factory=_empty_results)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        return self.total - self.passed_count

    @property
    def ok(self) -> bool:
        return self.failed_count == 0

    def failures(self) -> list[CheckResult]:
        return [r for r in self.results if not r.passed]

    def functions(self) -> list[str]:
        seen: dict[str, None] = {}
        for result in self.results:
            seen.setdefault(result.check.function, None)
        return list(seen)
