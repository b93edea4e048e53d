"""
Definition parser mixin for SDOC documents.

DSL Syntax:

    @core, geometry
    fn distance {
      desc: "Euclidean distance between two points";
      returns: float;
      links: Point;
      Point a;
      Point b;
    }
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType
from .clauses import new_definition_body

logger = logging.getLogger(__name__)

KIND_KEYWORDS = ", ".join(kind.value for kind in ir.DefinitionKind)


class DefinitionParserMixin:
    """Parser mixin for top-level definition blocks."""

    if TYPE_CHECKING:
        token: Any
        match: Any
        accept: Any
        advance: Any
        expect: Any
        error: Any
        parse_tag_list: Any
        parse_clause: Any

    def parse_definition(self) -> ir.DefinitionSpec:
        """
        Parse one definition block.

        Grammar:
            ('@' tagList)* KIND IDENTIFIER? '{' clause* '}'

        Returns:
            DefinitionSpec with parsed values

        Raises:
            ParseError: If the kind keyword or either brace is missing
        """
        tags: list[str] = []
        while self.accept(TokenType.AT):
            tags.extend(self.parse_tag_list(before_definition=True))

        kind_token = self.token
        if kind_token.type != TokenType.IDENTIFIER or not ir.DefinitionKind.is_kind(
            kind_token.value
        ):
            raise self.error(
                f"Expected definition kind keyword ({KIND_KEYWORDS}), "
                f"got {kind_token.describe()}",
                kind_token,
            )
        kind = ir.DefinitionKind(self.advance().value)

        name = ""
        if self.match(TokenType.IDENTIFIER):
            name = self.advance().value

        self.expect(TokenType.LBRACE)

        body = new_definition_body()
        body["tags"].extend(tags)
        while not self.match(TokenType.RBRACE, TokenType.EOF):
            self.parse_clause(body)

        self.expect(TokenType.RBRACE)

        definition = ir.DefinitionSpec(kind=kind, name=name, **body)
        logger.debug(
            "Parsed %s %r with %d field(s)",
            definition.kind.value,
            definition.name,
            len(definition.fields),
        )
        return definition
