import logging
from pathlib import Path

from . import ir
from .dsl_parser_impl import parse_dsl
from .errors import ParseError

logger = logging.getLogger(__name__)


def parse_file(path: Path) -> list[ir.DefinitionSpec]:
    """
    Read and parse one definition file.

    Raises:
        ParseError: If the document is malformed
        OSError: If the file cannot be read
    """
    text = path.read_text(encoding="utf-8")
    definitions = parse_dsl(text, path)
    logger.info("Parsed %d definition(s) from %s", len(definitions), path)
    return definitions


def parse_files(files: list[Path]) -> list[ir.DefinitionSpec]:
    """
    Parse definition files into one list.

    Each file is parsed independently; definitions keep file order and
    source order within a file. The first fatal error aborts the run.

    Args:
        files: Definition file paths

    Returns:
        Definitions from all files
    """
    definitions: list[ir.DefinitionSpec] = []
    for f in files:
        definitions.extend(parse_file(f))
    return definitions


def try_parse(text: str, file: Path = Path("<string>")) -> ir.ParseResult:
    """
    Parse definition text without raising on fatal errors.

    Returns:
        ParseResult carrying either the definitions or the error details
    """
    try:
        definitions = parse_dsl(text, file)
    except ParseError as e:
        logger.debug("Parse of %s failed: %s", file, e.message)
        context = e.context
        return ir.ParseResult(
            error=ir.ParseErrorInfo(
                message=e.message,
                token=e.token,
                file=str(file),
                line=context.line if context else 0,
                column=context.column if context else 0,
            )
        )
    return ir.ParseResult(definitions=definitions)
