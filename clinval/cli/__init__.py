import click

from .commands.calculate import bmi_command, convert_command
from .commands.checks import list_checks_command
from .commands.validate import validate_command


@click.group()
def app() -> None:
    pass


app.add_command(bmi_command, name="bmi")
app.add_command(convert_command, name="convert")
app.add_command(validate_command, name="validate")
app.add_command(list_checks_command, name="checks")
__all__ = ["app"]
