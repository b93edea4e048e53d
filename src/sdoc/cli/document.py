"""
Single-document CLI commands: check, dump, list.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from sdoc.core import ir
from sdoc.core.errors import ParseError
from sdoc.core.parser import parse_file

console = Console()


def _load(path: Path) -> list[ir.DefinitionSpec]:
    """Parse ``path``, turning failures into a CLI exit."""
    try:
        return parse_file(path)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: cannot read {path}: {e.strerror}", err=True)
        raise typer.Exit(code=1)


def check_command(
    files: list[Path] = typer.Argument(..., help="Definition files to parse"),  # noqa: B008
) -> None:
    """
    Parse definition files and report how many definitions each contains.
    """
    for path in files:
        definitions = _load(path)
        if not definitions:
            typer.echo(f"⚠ {path}: no definitions found")
            continue
        typer.echo(f"✓ {path}: {len(definitions)} definition(s)")


def dump_command(
    file: Path = typer.Argument(..., help="Definition file to parse"),  # noqa: B008
    indent: int = typer.Option(2, "--indent", "-i", help="JSON indentation"),
) -> None:
    """
    Print the parsed definitions as JSON.
    """
    definitions = _load(file)
    payload = [d.model_dump(mode="json") for d in definitions]
    typer.echo(json.dumps(payload, indent=indent or None))


def list_command(
    file: Path = typer.Argument(..., help="Definition file to parse"),  # noqa: B008
) -> None:
    """
    Show a table of the definitions in a file.
    """
    definitions = _load(file)

    table = Table(title=str(file))
    table.add_column("Kind", style="cyan")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Fields", justify="right")
    table.add_column("Deprecated")

    for d in definitions:
        table.add_row(
            d.kind.value,
            d.name or "-",
            d.category,
            str(len(d.fields)),
            "yes" if d.is_deprecated else "",
        )

    console.print(table)
