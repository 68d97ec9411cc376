"""Validate command - run the example checks and produce a validation summary.

This module is a thin adapter between the Click CLI framework and the
application layer's ValidationUseCase. It is responsible for:
1. Resolving configuration (config file, environment, CLI overrides)
2. Creating the ValidationRequest
3. Calling the use case
4. Presenting and optionally writing the summary report
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import click
from rich.console import Console
from rich.markup import escape

from ...application.models import ValidationRequest
from ...application.validation_use_case import ValidationUseCase
from ...config import ConfigLoader
from ...constants import Defaults, ReportFormats
from ...domain.services.check_catalog import FUNCTIONS
from ...infrastructure.reporting.report_writer import (
    format_summary_report,
    write_summary_report,
)
from ..logging_config import create_logger
from ..presenters.summary import SummaryPresenter

console = Console()


@dataclass(frozen=True)
class ValidateCommandOptions:
    config_file: Path | None
    package: str | None
    package_version: str
    functions: tuple[str, ...]
    report_format: str | None
    output: Path | None
    tolerance: float | None
    fail_on_errors: bool | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ValidateCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            package=cast("str | None", options.get("package")),
            package_version=cast("str", options["package_version"]),
            functions=cast("tuple[str, ...]", options.get("functions") or ()),
            report_format=cast("str | None", options.get("report_format")),
            output=cast("Path | None", options.get("output")),
            tolerance=cast("float | None", options.get("tolerance")),
            fail_on_errors=cast("bool | None", options.get("fail_on_errors")),
            verbose=cast("int", options["verbose"]),
        )


@click.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a clinval.toml config file (default: ./clinval.toml)",
)
@click.option(
    "--package",
    help="Name of the package under validation (default: from config)",
)
@click.option(
    "--package-version",
    default=Defaults.PACKAGE_VERSION,
    show_default=True,
    help="Version of the package under validation",
)
@click.option(
    "--function",
    "functions",
    multiple=True,
    type=click.Choice(sorted(FUNCTIONS)),
    help="Only run checks for this function (repeatable)",
)
@click.option(
    "--format",
    "report_format",
    type=click.Choice(list(ReportFormats.SUPPORTED)),
    help="Report format (default: from config, text)",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the validation report to this file (default: print to console)",
)
@click.option(
    "--tolerance",
    type=click.FloatRange(min=0.0),
    help="Absolute tolerance for numeric checks (default: from config, 1e-4)",
)
@click.option(
    "--fail-on-errors/--no-fail-on-errors",
    "fail_on_errors",
    default=None,
    help="Exit non-zero when any check fails (default: from config, on)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def validate_command(**options: object) -> None:
    """Run the validation checks and produce a validation summary.

    Every check is evaluated and reported:

    \b
    - equal: result matches the expected value within tolerance
    - silent: valid input completes without error or warning
    - error: invalid input is rejected with a matching message

    Examples:

    \b
        # Run all checks and print the report
        clinval validate --package mypkg --package-version 1.2.0

    \b
        # Save a JSON report for the validation file
        clinval validate --format json --output reports/validation.json
    """
    command_options = ValidateCommandOptions.from_kwargs(dict(options))
    try:
        config = ConfigLoader.load(command_options.config_file)
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    logger = create_logger(console, command_options.verbose)
    request = ValidationRequest(
        package=command_options.package or config.package_name,
        version=command_options.package_version,
        tolerance=(
            command_options.tolerance
            if command_options.tolerance is not None
            else config.tolerance
        ),
        functions=command_options.functions or None,
    )
    report_format = command_options.report_format or config.report_format
    fail_on_errors = (
        command_options.fail_on_errors
        if command_options.fail_on_errors is not None
        else config.fail_on_errors
    )

    summary = ValidationUseCase(logger).execute(request)

    report_path = None
    if command_options.output:
        report_path = write_summary_report(
            summary, command_options.output, report_format
        )
        logger.success(f"Validation report saved to {escape(str(report_path))}")
    else:
        console.print()
        click.echo(format_summary_report(summary, report_format))

    SummaryPresenter(console).present(summary, report_path)
    logger.log_final_stats()

    if not summary.ok and fail_on_errors:
        raise click.ClickException(
            f"Validation failed with {summary.failed_count} failed checks"
        )
