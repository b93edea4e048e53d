"""
SDOC CLI Utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform

import typer

from sdoc import __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"sdoc {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library logging to stderr; DEBUG when verbose, else WARNING."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("sdoc").setLevel(logging.DEBUG if verbose else logging.WARNING)
