"""Command-line interface for vercmp."""

import json
from pathlib import Path
from typing import Annotated

import typer

from .._logging import configure_logging
from ..comparator import compare as compare_values
from ..comparator import sort_key
from ..config import Settings, load_settings
from ..exceptions import (
    ConfigError,
    InvalidArgumentError,
    ParseError,
)
from ..version import Version
from ._helpers import console, print_error, print_success, symbol_for, version_table

app = typer.Typer(help="Parse, compare and sort version numbers")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or vercmp.toml)",
    ),
]


@app.callback()
def main(
    ctx: typer.Context,
    config: ConfigOption = None,
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", help="Show debug logging")
    ] = False,
) -> None:
    """Parse, compare and sort version numbers."""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if verbose:
        configure_logging("DEBUG")
    elif settings.log_level != "WARNING":
        configure_logging(settings.log_level)

    ctx.obj = settings


def _parse(text: str, settings: Settings) -> Version:
    return Version.parse(text, strict=settings.strict_parsing)


@app.command()
def parse(
    ctx: typer.Context,
    version: Annotated[str, typer.Argument(..., help="Version string")],
    as_json: Annotated[
        bool, typer.Option(..., "--json", help="Print the components as JSON")
    ] = False,
) -> None:
    """Show the components of a version."""
    try:
        ver = _parse(version, ctx.obj)
    except (ParseError, InvalidArgumentError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "major": ver.major,
                    "minor": ver.minor,
                    "build": ver.build.value,
                    "revision": ver.revision.value,
                    "text": str(ver),
                    "valid": ver.is_valid(),
                },
                indent=2,
            )
        )
        return

    console.print(version_table(ver))
    console.print(f"\nRendered: [bold]{ver}[/bold]")
    console.print(f"Valid: {'yes' if ver.is_valid() else 'no'}")


@app.command()
def compare(
    ctx: typer.Context,
    left: Annotated[str, typer.Argument(..., help="Left operand")],
    right: Annotated[str, typer.Argument(..., help="Right operand")],
    values: Annotated[
        bool,
        typer.Option(
            ...,
            "--values",
            help="Treat operands as JSON values and compare them generically",
        ),
    ] = False,
) -> None:
    """Compare two versions (or two JSON values with --values)."""
    settings: Settings = ctx.obj
    try:
        if values:
            result = compare_values(
                json.loads(left), json.loads(right), max_depth=settings.max_depth
            )
        else:
            result = Version.compare(_parse(left, settings), _parse(right, settings))
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON: {e}")
        raise typer.Exit(1) from e
    except (ParseError, InvalidArgumentError, RecursionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    relation = symbol_for(result)
    if result is None:
        typer.echo(f"{left} and {right} are {relation}")
    else:
        typer.echo(f"{left} {relation} {right} ({result})")


@app.command(name="sort")
def sort_versions(
    ctx: typer.Context,
    versions: Annotated[list[str], typer.Argument(..., help="Versions to sort")],
    reverse: Annotated[
        bool, typer.Option(..., "--reverse", "-r", help="Sort in descending order")
    ] = False,
) -> None:
    """Sort versions in ascending order."""
    try:
        parsed = [(_parse(text, ctx.obj), text) for text in versions]
    except (ParseError, InvalidArgumentError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    key = sort_key(Version.compare)
    for _, text in sorted(parsed, key=lambda pair: key(pair[0]), reverse=reverse):
        typer.echo(text)


@app.command()
def check(
    ctx: typer.Context,
    version: Annotated[str, typer.Argument(..., help="Version string")],
) -> None:
    """Exit with 0 if a version carries information, 1 otherwise."""
    try:
        ver = _parse(version, ctx.obj)
    except (ParseError, InvalidArgumentError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if not ver.is_valid():
        print_error(f"{version} is not a valid version (all components are zero)")
        raise typer.Exit(1)

    print_success(f"{version} is valid")
