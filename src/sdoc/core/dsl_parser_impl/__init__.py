"""
SDOC Definition Parser Package.

The parser is built from mixins that separate parsing logic by construct:

- ValueParserMixin: tag lists, item lists, free-form text, type expressions
- FieldParserMixin: field declarations
- ClauseParserMixin: clause classification and keyword clauses
- DefinitionParserMixin: top-level definition blocks

Usage:
    from sdoc.core.dsl_parser_impl import parse_dsl

    definitions = parse_dsl(text, Path("api.sdoc"))
"""

from pathlib import Path

from .. import ir
from ..lexer import TokenType
from .base import BaseParser
from .clauses import CLAUSE_KEYWORDS, ClauseKind, ClauseParserMixin
from .definition import DefinitionParserMixin
from .field import FieldParserMixin
from .values import ValueParserMixin


class Parser(
    BaseParser,
    ValueParserMixin,
    FieldParserMixin,
    ClauseParserMixin,
    DefinitionParserMixin,
):
    """
    Complete SDOC document parser.

    One instance parses exactly one document.
    """

    def parse(self) -> list[ir.DefinitionSpec]:
        """
        Parse the entire document.

        Returns:
            Definitions in source order

        Raises:
            ParseError: On a missing kind keyword or brace
        """
        definitions: list[ir.DefinitionSpec] = []
        while not self.match(TokenType.EOF):
            definitions.append(self.parse_definition())
        return definitions


def parse_dsl(text: str, file: Path = Path("<string>")) -> list[ir.DefinitionSpec]:
    """
    Parse definition text into DefinitionSpecs.

    Args:
        text: Source text
        file: Source file path (for error reporting)

    Returns:
        Definitions in source order
    """
    parser = Parser(text, file)
    return parser.parse()


__all__ = [
    "CLAUSE_KEYWORDS",
    "ClauseKind",
    "Parser",
    "parse_dsl",
]
