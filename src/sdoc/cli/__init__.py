"""
SDOC CLI Package.

- document.py: check, dump, list (single files)
- project.py: index (sdoc.toml projects)
- utils.py: shared helpers
"""

import sys

import typer

from sdoc.cli.document import check_command, dump_command, list_command
from sdoc.cli.project import index_command
from sdoc.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""SDOC – definition language parser

Commands:
  • check, dump, list: inspect single definition files
  • index: parse every source listed in sdoc.toml
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """SDOC CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="check")(check_command)
app.command(name="dump")(dump_command)
app.command(name="list")(list_command)
app.command(name="index")(index_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])

__all__ = ["app", "main"]
