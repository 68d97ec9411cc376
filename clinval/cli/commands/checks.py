import click
from rich.console import Console
from rich.table import Table

from ...domain.services.check_catalog import default_checks

console = Console()


@click.command()
def list_checks_command() -> None:
    """List the example validation checks."""
    table = Table(title="Validation Checks")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Function")
    table.add_column("Kind")
    table.add_column("Call", overflow="fold")
    table.add_column("Description")
    for check in default_checks():
        table.add_row(
            check.check_id,
            check.function,
            check.kind.value,
            check.call_signature(),
            check.description,
        )
    console.print(table)
