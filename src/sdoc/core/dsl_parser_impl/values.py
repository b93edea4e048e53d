"""
Value parser mixin for SDOC documents.

Parses the small value forms shared by definition clauses and fields:
tag lists, item lists, scalars, free-form text and type expressions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ir import DefinitionKind
from ..lexer import TokenType

# Tokens that end an unquoted multi-token value.
VALUE_TERMINATORS = (TokenType.SEMICOLON, TokenType.RBRACE, TokenType.EOF, TokenType.AT)
VALUE_TERMINATOR_WORDS = frozenset({"links"})

# Leading characters that continue a space-separated type (`int *`, `Foo &`).
TYPE_CONTINUATION_PREFIXES = ("*", "&")

SCALAR_TYPES = (TokenType.STRING, TokenType.IDENTIFIER, TokenType.NUMBER)


class ValueParserMixin:
    """Parser mixin for clause and field values."""

    if TYPE_CHECKING:
        token: Any
        advance: Any
        match: Any
        accept: Any

    def parse_item_list(self) -> list[str]:
        """
        Parse identifier-or-string items separated by optional commas.

        Grammar:
            (item ','?)*
        """
        items: list[str] = []
        while self.match(TokenType.IDENTIFIER, TokenType.STRING):
            items.append(self.advance().value)
            self.accept(TokenType.COMMA)
        return items

    def parse_tag_list(self, before_definition: bool = False) -> list[str]:
        """
        Parse the tags following an '@' marker.

        Before a definition the list is space or comma separated and ends at
        the kind keyword. Before a field the list is comma separated, so the
        field's type is not taken as another tag.
        """
        tags: list[str] = []
        while self.match(TokenType.IDENTIFIER, TokenType.STRING):
            if before_definition:
                if self.token.type == TokenType.IDENTIFIER and DefinitionKind.is_kind(
                    self.token.value
                ):
                    break
                tags.append(self.advance().value)
                self.accept(TokenType.COMMA)
            else:
                tags.append(self.advance().value)
                if not self.accept(TokenType.COMMA):
                    break
        return tags

    def parse_scalar(self, *token_types: TokenType) -> str:
        """Consume a single token of one of the given types, or return ""."""
        if self.match(*token_types):
            return str(self.advance().value)
        return ""

    def parse_multiline_value(self) -> str:
        """
        Reassemble an unquoted value from consecutive tokens.

        Tokens are joined with single spaces, except that no space goes
        before a comma. Stops at ';', '}', '@', end of input or the word
        'links'.
        """
        value = ""
        while not self.match(*VALUE_TERMINATORS) and self.token.value not in VALUE_TERMINATOR_WORDS:
            token = self.advance()
            if value and token.type != TokenType.COMMA:
                value += " "
            value += token.value
        return value

    def parse_text_value(self) -> str:
        """A quoted string taken verbatim, else a reassembled multi-token value."""
        if self.match(TokenType.STRING):
            return str(self.advance().value)
        return self.parse_multiline_value()

    def parse_type_expr(self, lead: str | None = None) -> str:
        """
        Compose a type expression from consecutive identifiers.

        The first identifier (``lead`` if the caller already consumed it) is
        followed only by identifiers starting with '*' or '&'; the parts are
        concatenated without separators, so `int * *` becomes `int**`.
        """
        if lead is None:
            if not self.match(TokenType.IDENTIFIER):
                return ""
            lead = self.advance().value

        parts = [lead]
        while self.match(TokenType.IDENTIFIER) and self.token.value.startswith(
            TYPE_CONTINUATION_PREFIXES
        ):
            parts.append(self.advance().value)
        return "".join(parts)
