"""Domain entities for validation checks."""

from .validation_check import CheckKind, CheckResult, ValidationCheck

__all__ = [
    "CheckKind",
    "CheckResult",
    "ValidationCheck",
]
