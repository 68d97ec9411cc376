"""Registry of checkable functions and the example check set.

The example set holds four checks per function: arithmetic results,
a silent pass for valid input, and error-message checks for each guard.
"""

from collections.abc import Callable

from ..calculations import calculate_bmi, convert_temperature
from ..entities.validation_check import CheckKind, ValidationCheck

FUNCTIONS: dict[str, Callable[..., float]] = {
    "calculate_bmi": calculate_bmi,
    "convert_temperature": convert_temperature,
}


def resolve_function(name: str) -> Callable[..., float]:
    try:
        return FUNCTIONS[name]
    except KeyError:
        raise KeyError(f"Unknown function: {name}") from None


def default_checks() -> list[ValidationCheck]:
    return [
        ValidationCheck(
            check_id="BMI-001",
            function="calculate_bmi",
            description="BMI equals weight / height^2",
            kind=CheckKind.EQUAL,
            args=(70, 1.75),
            expected=22.85714,
        ),
        ValidationCheck(
            check_id="BMI-002",
            function="calculate_bmi",
            description="Valid inputs complete silently",
            kind=CheckKind.SILENT,
            args=(70, 1.75),
        ),
        ValidationCheck(
            check_id="BMI-003",
            function="calculate_bmi",
            description="Negative weight is rejected",
            kind=CheckKind.ERROR,
            args=(-70, 1.75),
            pattern="weight",
        ),
        ValidationCheck(
            check_id="BMI-004",
            function="calculate_bmi",
            description="Zero height is rejected",
            kind=CheckKind.ERROR,
            args=(70, 0),
            pattern="height",
        ),
        ValidationCheck(
            check_id="TEMP-001",
            function="convert_temperature",
            description="0 C converts to 32 F",
            kind=CheckKind.EQUAL,
            args=(0, "F"),
            expected=32.0,
        ),
        ValidationCheck(
            check_id="TEMP-002",
            function="convert_temperature",
            description="32 F converts to 0 C",
            kind=CheckKind.EQUAL,
            args=(32, "C"),
            expected=0.0,
        ),
        ValidationCheck(
            check_id="TEMP-003",
            function="convert_temperature",
            description="Non-numeric value is rejected",
            kind=CheckKind.ERROR,
            args=("a", "F"),
            pattern="numeric",
        ),
        ValidationCheck(
            check_id="TEMP-004",
            function="convert_temperature",
            description="Unknown target unit is rejected",
            kind=CheckKind.ERROR,
            args=(0, "K"),
            pattern="target_unit",
        ),
    ]
