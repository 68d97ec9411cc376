"""Calculator commands - run the example functions from the shell.

Arguments are read as text and only coerced to numbers when they parse,
so that non-numeric input reaches the function's own precondition checks.
"""

import click
from rich.console import Console

from ...constants import Defaults
from ...domain.calculations import calculate_bmi, convert_temperature
from ...domain.errors import PreconditionViolationError

console = Console()

# Allow negative numbers as positional arguments
_NUMERIC_ARGS = {"ignore_unknown_options": True}


def _as_number(text: str) -> object:
    try:
        return float(text)
    except ValueError:
        return text


@click.command(context_settings=_NUMERIC_ARGS)
@click.argument("weight")
@click.argument("height")
@click.option(
    "--precision",
    type=click.IntRange(0, 15),
    default=Defaults.PRECISION,
    show_default=True,
    help="Decimal places in the printed result",
)
def bmi_command(weight: str, height: str, precision: int) -> None:
    """Calculate body-mass index from WEIGHT (kg) and HEIGHT (m).

    Examples:

    \b
        clinval bmi 70 1.75
    """
    try:
        result = calculate_bmi(_as_number(weight), _as_number(height))
    except PreconditionViolationError as exc:
        raise click.ClickException(str(exc)) from exc
    console.print(f"BMI: {result:.{precision}f}")


@click.command(context_settings=_NUMERIC_ARGS)
@click.argument("value")
@click.option(
    "--to",
    "target_unit",
    required=True,
    help="Target unit: F (Fahrenheit) or C (Celsius)",
)
@click.option(
    "--precision",
    type=click.IntRange(0, 15),
    default=Defaults.PRECISION,
    show_default=True,
    help="Decimal places in the printed result",
)
def convert_command(value: str, target_unit: str, precision: int) -> None:
    """Convert temperature VALUE to the unit given by --to.

    Examples:

    \b
        clinval convert 0 --to F
        clinval convert 98.6 --to C
    """
    try:
        result = convert_temperature(_as_number(value), target_unit)
    except PreconditionViolationError as exc:
        raise click.ClickException(str(exc)) from exc
    console.print(f"{result:.{precision}f} {target_unit}")
