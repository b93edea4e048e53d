"""
Field parser mixin for SDOC documents.

DSL Syntax:

    @required, internal
    int* count : "how many" = 0;
    char name : the display name;
    Vec<u8> payload
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType


class FieldParserMixin:
    """Parser mixin for field declarations inside a definition body."""

    if TYPE_CHECKING:
        match: Any
        accept: Any
        advance: Any
        parse_tag_list: Any
        parse_type_expr: Any
        parse_text_value: Any
        parse_scalar: Any

    def parse_field(self, lead: str | None = None) -> ir.FieldSpec:
        """
        Parse a field declaration.

        Grammar:
            ('@' tagList)* typeExpr IDENTIFIER? (':' value)? ('=' scalar)? ';'?

        Args:
            lead: First identifier of the type, when the caller has already
                consumed it while looking for a ':'

        Returns:
            FieldSpec with parsed values
        """
        tags: list[str] = []
        if lead is None:
            while self.accept(TokenType.AT):
                tags.extend(self.parse_tag_list())

        field_type = self.parse_type_expr(lead)

        name = ""
        if self.match(TokenType.IDENTIFIER):
            name = self.advance().value

        description = ""
        if self.accept(TokenType.COLON):
            description = self.parse_text_value()

        default_value = ""
        if self.accept(TokenType.EQUALS):
            default_value = self.parse_scalar(
                TokenType.STRING, TokenType.NUMBER, TokenType.IDENTIFIER
            )

        self.accept(TokenType.SEMICOLON)

        return ir.FieldSpec(
            type=field_type,
            name=name,
            description=description,
            default_value=default_value,
            annotation_tags=tags,
        )
