"""Clinical package validation toolkit.

This package holds the worked example used when validating third-party
statistical-language packages for clinical research:

- Input-guarded calculators (BMI, temperature conversion)
- The fixed set of example checks run against them
- Validation-summary reports in text and JSON form
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("clinval")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from clinval.domain.calculations import calculate_bmi, convert_temperature
from clinval.domain.errors import ClinvalError, PreconditionViolationError

__all__ = [
    "__version__",
    # Calculators
    "calculate_bmi",
    "convert_temperature",
    # Errors
    "ClinvalError",
    "PreconditionViolationError",
]
