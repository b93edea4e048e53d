"""
Project CLI commands driven by an sdoc.toml manifest.
"""

import json
from pathlib import Path

import typer

from sdoc.core.errors import ConfigError, ParseError
from sdoc.core.fileset import discover_sources
from sdoc.core.index import build_name_map, summarize
from sdoc.core.manifest import MANIFEST_FILENAME, load_manifest
from sdoc.core.parser import parse_files


def _display_path(path: Path, root: Path) -> str:
    """Path relative to the project root, or absolute when it lies outside it."""
    if path.is_relative_to(root):
        return str(path.relative_to(root))
    return str(path)


def index_command(
    manifest: str = typer.Option(
        MANIFEST_FILENAME, "--manifest", "-m", help="Path to sdoc.toml"
    ),
) -> None:
    """
    Parse every source in the project and print the page index as JSON.

    The index maps each definition name to its page and carries the counts
    shown on an index page.
    """
    manifest_path = Path(manifest).resolve()
    root = manifest_path.parent

    if not manifest_path.is_file():
        typer.echo(f"Error: manifest not found: {manifest_path}", err=True)
        raise typer.Exit(code=1)

    try:
        mf = load_manifest(manifest_path)
        files = discover_sources(root, mf)
        definitions = parse_files(files)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not definitions:
        typer.echo("Warning: no definitions found", err=True)
        raise typer.Exit(code=1)

    payload = {
        "project": mf.name,
        "version": mf.version,
        "files": [_display_path(f, root) for f in files],
        "pages": build_name_map(definitions, mf.output.page_suffix),
        "summary": summarize(definitions).model_dump(),
    }
    typer.echo(json.dumps(payload, indent=2))
