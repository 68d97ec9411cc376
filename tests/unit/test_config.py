"""Unit tests for configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from clinval.config import ConfigLoader, ValidationConfig


class TestValidationConfig:
    """Test suite for ValidationConfig class."""

    def test_default_config(self):
        config = ValidationConfig()

        assert config.tolerance == 1e-4
        assert config.report_format == "text"
        assert config.package_name == "clinval"
        assert config.fail_on_errors is True

    def test_config_is_immutable(self):
        config = ValidationConfig()

        with pytest.raises(Exception):  # FrozenInstanceError
            config.tolerance = 0.1

    def test_config_validation_tolerance(self):
        ValidationConfig(tolerance=0.0)
        with pytest.raises(ValueError, match="tolerance must be non-negative"):
            ValidationConfig(tolerance=-0.1)

    def test_config_validation_report_format(self):
        ValidationConfig(report_format="json")
        with pytest.raises(ValueError, match="report_format must be one of"):
            ValidationConfig(report_format="html")

    def test_config_validation_package_name(self):
        with pytest.raises(ValueError, match="package_name must not be empty"):
            ValidationConfig(package_name="  ")

    def test_config_from_env(self, monkeypatch):
        monkeypatch.setenv("CLINVAL_TOLERANCE", "0.01")
        monkeypatch.setenv("CLINVAL_REPORT_FORMAT", "json")
        monkeypatch.setenv("CLINVAL_PACKAGE", "envpkg")
        monkeypatch.setenv("CLINVAL_FAIL_ON_ERRORS", "no")

        config = ValidationConfig.from_env()

        assert config.tolerance == 0.01
        assert config.report_format == "json"
        assert config.package_name == "envpkg"
        assert config.fail_on_errors is False

    def test_blank_bool_env_uses_default(self, monkeypatch):
        monkeypatch.setenv("CLINVAL_FAIL_ON_ERRORS", " ")
        assert ValidationConfig.from_env().fail_on_errors is True


class TestConfigLoader:
    """Test suite for ConfigLoader class."""

    def test_load_with_no_toml_file(self):
        config = ConfigLoader.load(config_file=Path("/nonexistent/clinval.toml"))

        assert config.tolerance == 1e-4
        assert config.report_format == "text"

    def test_load_from_toml(self, tmp_path: Path):
        toml_file = tmp_path / "custom.toml"
        toml_file.write_text(
            """
[validation]
tolerance = 0.001
package = "tomlpkg"
fail_on_errors = false

[report]
format = "json"
"""
        )

        config = ConfigLoader.load(config_file=toml_file)

        assert config.tolerance == 0.001
        assert config.package_name == "tomlpkg"
        assert config.fail_on_errors is False
        assert config.report_format == "json"

    def test_default_file_in_working_directory(self, tmp_path: Path):
        (tmp_path / "clinval.toml").write_text('[validation]\npackage = "cwdpkg"\n')

        assert ConfigLoader.load().package_name == "cwdpkg"

    def test_toml_overrides_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CLINVAL_PACKAGE", "envpkg")
        monkeypatch.setenv("CLINVAL_TOLERANCE", "0.5")
        toml_file = tmp_path / "custom.toml"
        toml_file.write_text('[validation]\npackage = "tomlpkg"\n')

        config = ConfigLoader.load(config_file=toml_file)

        assert config.package_name == "tomlpkg"
        assert config.tolerance == 0.5

    def test_invalid_toml_warns_and_falls_back(self, tmp_path: Path):
        toml_file = tmp_path / "broken.toml"
        toml_file.write_text("[validation\ntolerance = ")

        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file=toml_file)

        assert config.tolerance == 1e-4

    def test_invalid_value_warns_and_falls_back(self, tmp_path: Path):
        toml_file = tmp_path / "bad.toml"
        toml_file.write_text('[validation]\ntolerance = "loose"\n')

        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file=toml_file)

        assert config.tolerance == 1e-4

    def test_non_bool_fail_on_errors_rejected(self, tmp_path: Path):
        toml_file = tmp_path / "bad.toml"
        toml_file.write_text("[validation]\nfail_on_errors = 1\n")

        with pytest.warns(UserWarning, match="fail_on_errors must be a bool"):
            ConfigLoader.load(config_file=toml_file)
