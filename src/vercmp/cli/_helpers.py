"""Output helpers for the CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..version import Version

console = Console()
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]✗[/red] {escape(message)}")


def symbol_for(result: int | None) -> str:
    """Return the relation symbol for a comparison result."""
    if result is None:
        return "incomparable"
    if result < 0:
        return "<"
    if result > 0:
        return ">"
    return "="


def version_table(version: Version) -> Table:
    """Build a table describing the components of a version.

    Args:
        version: Version to describe.

    Returns:
        Rich table with one row per component.
    """
    table = Table(title=f"Version {version}")
    table.add_column("Component", style="cyan")
    table.add_column("Value")
    table.add_column("Defined")

    table.add_row("major", str(version.major), "yes")
    table.add_row("minor", str(version.minor), "yes")
    for name, component in (("build", version.build), ("revision", version.revision)):
        table.add_row(
            name,
            str(component) or "-",
            "yes" if component.defined else "no",
        )
    return table
