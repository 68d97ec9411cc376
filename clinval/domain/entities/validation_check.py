from dataclasses import dataclass, field
from enum import Enum


class CheckKind(str, Enum):
    """How a check decides pass or fail."""

    SILENT = "silent"  # Call completes without error or warning
    ERROR = "error"  # Call raises a precondition violation matching a pattern
    EQUAL = "equal"  # Result equals the expected value within tolerance


@dataclass(frozen=True, slots=True)
class ValidationCheck:
    check_id: str
    function: str
    description: str
    kind: CheckKind
    args: tuple[object, ...] = field(default_factory=tuple)
    expected: float | None = None
    pattern: str | None = None

    def __post_init__(self) -> None:
        if self.kind is CheckKind.EQUAL and self.expected is None:
            raise ValueError(f"{self.check_id}: equal checks need an expected value")
        if self.kind is CheckKind.ERROR and not self.pattern:
            raise ValueError(f"{self.check_id}: error checks need a pattern")

    def call_signature(self) -> str:
        rendered = ", ".join(repr(arg) for arg in self.args)
        return f"{self.function}({rendered})"


@dataclass(frozen=True, slots=True)
class CheckResult:
    check: ValidationCheck
    passed: bool
    detail: str = ""

    @property
    def status(self) -> str:
        return "PASS" if self.passed else "FAIL"

    def __str__(self) -> str:
        parts = [f"[{self.check.check_id}] {self.status}: {self.check.description}"]
        parts.append(f"Call: {self.check.call_signature()}")
        if self.detail:
            parts.append(self.detail)
        return " | ".join(parts)
