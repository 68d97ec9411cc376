"""Input-validated arithmetic used as the worked validation example.

Both functions are pure: they check their preconditions, then compute.
A failed check raises PreconditionViolationError naming the argument.
Inputs and results outside the finite float range are rejected the same way.
"""

import math
from numbers import Complex, Number, Real

from ..constants import TemperatureUnits
from .errors import PreconditionViolationError


def _require_numeric(value: object, name: str) -> float:
    # bool is a Real subclass but not a measurement; Decimal is only a Number
    if (
        isinstance(value, bool)
        or not isinstance(value, Number)
        or (isinstance(value, Complex) and not isinstance(value, Real))
    ):
        raise PreconditionViolationError(f"{name} must be numeric", argument=name)
    try:
        number = float(value)
    except OverflowError:
        raise PreconditionViolationError(
            f"{name} is out of range", argument=name
        ) from None
    except (TypeError, ValueError):
        raise PreconditionViolationError(
            f"{name} must be numeric", argument=name
        ) from None
    if math.isinf(number):
        raise PreconditionViolationError(f"{name} is out of range", argument=name)
    return number


def _require_positive(value: object, name: str) -> float:
    number = _require_numeric(value, name)
    if not number > 0:
        raise PreconditionViolationError(f"{name} must be positive", argument=name)
    return number


def calculate_bmi(weight: float, height: float) -> float:
    """Calculate body-mass index from weight and height.

    Formula: BMI = weight / height²

    Args:
        weight: Body weight (kg), must be > 0
        height: Body height (m), must be > 0

    Returns:
        The unrounded BMI value

    Raises:
        PreconditionViolationError: If either input is non-numeric, not
            positive, or the result does not fit a finite positive float

    Examples:
        >>> round(calculate_bmi(70, 1.75), 5)
        22.85714
    """
    weight_value = _require_positive(weight, "weight")
    height_value = _require_positive(height, "height")
    # height**2 may underflow to 0.0 or overflow; divide twice instead
    bmi = weight_value / height_value / height_value
    if not math.isfinite(bmi) or bmi == 0:
        raise PreconditionViolationError(
            "weight / height^2 is out of range", argument="height"
        )
    return bmi


def convert_temperature(value: float, target_unit: str) -> float:
    """Convert a temperature to Fahrenheit ("F") or Celsius ("C").

    Raises:
        PreconditionViolationError: If value is non-numeric or out of range,
            or target_unit is not one of the supported units
    """
    number = _require_numeric(value, "value")
    if target_unit not in TemperatureUnits.SUPPORTED:
        allowed = ", ".join(f"'{unit}'" for unit in TemperatureUnits.SUPPORTED)
        raise PreconditionViolationError(
            f"target_unit must be one of {allowed}", argument="target_unit"
        )
    if target_unit == TemperatureUnits.FAHRENHEIT:
        result = number * 9 / 5 + 32
    else:
        result = (number - 32) * 5 / 9
    if math.isinf(result):
        raise PreconditionViolationError("value is out of range", argument="value")
    return result
