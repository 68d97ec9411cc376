from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, ReportFormats


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    tolerance: float = Defaults.TOLERANCE
    report_format: str = Defaults.REPORT_FORMAT
    package_name: str = Defaults.PACKAGE_NAME
    fail_on_errors: bool = Defaults.FAIL_ON_ERRORS

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")
        if self.report_format not in ReportFormats.SUPPORTED:
            raise ValueError(
                f"report_format must be one of {', '.join(ReportFormats.SUPPORTED)}, "
                f"got {self.report_format!r}"
            )
        if not self.package_name.strip():
            raise ValueError("package_name must not be empty")

    @classmethod
    def from_env(cls) -> ValidationConfig:
        return cls(
            tolerance=float(os.getenv("CLINVAL_TOLERANCE", str(Defaults.TOLERANCE))),
            report_format=os.getenv("CLINVAL_REPORT_FORMAT", Defaults.REPORT_FORMAT),
            package_name=os.getenv("CLINVAL_PACKAGE", Defaults.PACKAGE_NAME),
            fail_on_errors=_parse_bool(
                os.getenv("CLINVAL_FAIL_ON_ERRORS"), default=Defaults.FAIL_ON_ERRORS
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ValidationConfig:
        config = ValidationConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ValidationConfig
    ) -> ValidationConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        validation = _get_table(data, "validation")
        report = _get_table(data, "report")
        tolerance = base_config.tolerance
        if (value := validation.get("tolerance")) is not None:
            tolerance = _coerce_float(value, key="validation.tolerance")
        package_name = base_config.package_name
        if value := validation.get("package"):
            package_name = str(value)
        fail_on_errors = base_config.fail_on_errors
        if (value := validation.get("fail_on_errors")) is not None:
            if not isinstance(value, bool):
                raise ValueError(
                    f"validation.fail_on_errors must be a bool, got {type(value).__name__}"
                )
            fail_on_errors = value
        report_format = base_config.report_format
        if value := report.get("format"):
            report_format = str(value)
        return ValidationConfig(
            tolerance=tolerance,
            report_format=report_format,
            package_name=package_name,
            fail_on_errors=fail_on_errors,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric, got bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")


def _parse_bool(raw: str | None, *, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}
