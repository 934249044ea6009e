"""Command-line interface for reltime."""

import re
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from reltime.catalog import LocaleCatalog
from reltime.exceptions import RelativeFormatError
from reltime.formatter import RelativeFormatter
from reltime.loader import LocaleLoader, load_builtin_locales

app = typer.Typer(
    name="reltime",
    help="Locale-aware relative time formatting",
    add_completion=False,
)

_TIMESTAMP = re.compile(r"-?\d+(\.\d+)?")


def _build_catalog(data: Optional[list[Path]], builtin: bool) -> LocaleCatalog:
    """Create a catalog from bundled data and any extra locale files."""
    catalog = LocaleCatalog()
    if builtin:
        load_builtin_locales(catalog=catalog)

    loader = LocaleLoader(catalog)
    for path in data or []:
        if path.is_dir():
            loader.load_directory(path, "*.json")
            loader.load_directory(path, "*.y*ml")
        else:
            loader.load_file(path)
    return catalog


@app.command(name="format")
def format_cmd(
    value: Annotated[
        str,
        typer.Argument(help="Date, datetime or POSIX timestamp (put -- before a negative timestamp)"),
    ],
    locale: Annotated[
        Optional[list[str]],
        typer.Option("--locale", "-l", help="Requested locale tag (repeatable, first match wins)"),
    ] = None,
    units: Annotated[
        Optional[str],
        typer.Option("--units", "-u", help="Fixed unit (second, minute, hour, day, month, year)"),
    ] = None,
    data: Annotated[
        Optional[list[Path]],
        typer.Option("--data", "-d", help="Extra locale file or directory (JSON/YAML)"),
    ] = None,
    builtin: Annotated[
        bool,
        typer.Option("--builtin/--no-builtin", help="Register bundled locale data"),
    ] = True,
) -> None:
    """Format a date relative to now.

    Negative timestamps look like options, so pass them after "--":
    reltime format -u year -- -86400
    """
    target: object = float(value) if _TIMESTAMP.fullmatch(value) else value

    try:
        catalog = _build_catalog(data, builtin)
        formatter = RelativeFormatter(locale, units, catalog=catalog)
        typer.echo(formatter.format(target))
    except (RelativeFormatError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command(name="locales")
def locales_cmd(
    data: Annotated[
        Optional[list[Path]],
        typer.Option("--data", "-d", help="Extra locale file or directory (JSON/YAML)"),
    ] = None,
) -> None:
    """List registered locales and the units they cover."""
    try:
        catalog = _build_catalog(data, builtin=True)
    except (RelativeFormatError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Locale", style="cyan")
    table.add_column("Units")
    table.add_column("Exact phrases", justify="right")

    for key in catalog.available_locales:
        fields = catalog.lookup(key) or {}
        table.add_row(
            key,
            ", ".join(fields),
            str(sum(len(field.relative) for field in fields.values())),
        )

    Console().print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
