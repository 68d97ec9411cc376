"""Evaluate a single validation check.

Check failures are reported in the returned CheckResult, never raised.
"""

import math
import re
import warnings

from ..entities.validation_check import CheckKind, CheckResult, ValidationCheck
from ..errors import PreconditionViolationError
from .check_catalog import resolve_function


def evaluate_check(check: ValidationCheck, tolerance: float) -> CheckResult:
    function = resolve_function(check.function)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            result = function(*check.args)
        except PreconditionViolationError as exc:
            return _evaluate_error(check, exc)
        except Exception as exc:  # reported, not raised
            return CheckResult(
                check=check,
                passed=False,
                detail=f"Unexpected {type(exc).__name__}: {exc}",
            )

    if check.kind is CheckKind.ERROR:
        return CheckResult(
            check=check,
            passed=False,
            detail=f"Expected an error matching '{check.pattern}', got {result!r}",
        )
    if check.kind is CheckKind.SILENT:
        if caught:
            messages = "; ".join(str(w.message) for w in caught)
            return CheckResult(check=check, passed=False, detail=f"Warned: {messages}")
        return CheckResult(check=check, passed=True, detail="No output")
    return _evaluate_equal(check, result, tolerance)


def _evaluate_error(
    check: ValidationCheck, exc: PreconditionViolationError
) -> CheckResult:
    if check.kind is not CheckKind.ERROR:
        return CheckResult(check=check, passed=False, detail=f"Error: {exc}")
    pattern = check.pattern or ""
    if re.search(pattern, str(exc)):
        return CheckResult(check=check, passed=True, detail=f"Error: {exc}")
    return CheckResult(
        check=check,
        passed=False,
        detail=f"Error '{exc}' does not match '{pattern}'",
    )


def _evaluate_equal(
    check: ValidationCheck, result: float, tolerance: float
) -> CheckResult:
    expected = float(check.expected if check.expected is not None else math.nan)
    difference = abs(result - expected)
    if difference <= tolerance:
        return CheckResult(check=check, passed=True, detail=f"Observed {result:.6g}")
    return CheckResult(
        check=check,
        passed=False,
        detail=(
            f"Observed {result:.6g}, expected {expected:.6g} "
            f"(difference {difference:.3g} > tolerance {tolerance:g})"
        ),
    )
