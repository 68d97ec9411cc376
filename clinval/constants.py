from typing import ClassVar


class Defaults:
    TOLERANCE = 1e-4
    REPORT_FORMAT = "text"
    PACKAGE_NAME = "clinval"
    PACKAGE_VERSION = "0.0.0"
    FAIL_ON_ERRORS = True
    PRECISION = 5
    CONFIG_FILE = "clinval.toml"


class TemperatureUnits:
    FAHRENHEIT = "F"
    CELSIUS = "C"
    SUPPORTED: ClassVar[tuple[str, ...]] = ("F", "C")


class ReportFormats:
    TEXT = "text"
    JSON = "json"
    SUPPORTED: ClassVar[tuple[str, ...]] = ("text", "json")
