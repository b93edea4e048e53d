"""
Base parser class for SDOC definition documents.

Provides single-token lookahead over an on-demand Lexer plus the matching
and error helpers used by all parser mixins.
"""

from pathlib import Path

from ..errors import ParseError, extract_snippet, make_parse_error
from ..lexer import Lexer, Token, TokenType


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    Unlike a list-backed parser only the current token is held; consuming
    it pulls the next one from the lexer.
    """

    def __init__(self, text: str, file: Path):
        """
        Initialize parser.

        Args:
            text: Source text of one document
            file: Source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self.lexer = Lexer(text)
        self.token = self.lexer.next_token()

    def current_token(self) -> Token:
        """Get current token."""
        return self.token

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.token
        if token.type != TokenType.EOF:
            self.token = self.lexer.next_token()
        return token

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.token.type in token_types

    def accept(self, token_type: TokenType) -> bool:
        """Consume the current token if it has the given type."""
        if self.token.type == token_type:
            self.advance()
            return True
        return False

    def expect(self, token_type: TokenType) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        token = self.token
        if token.type != token_type:
            raise self.error(f"Expected '{token_type.value}', got {token.describe()}", token)
        return self.advance()

    def error(self, message: str, token: Token) -> ParseError:
        """Build a ParseError located at ``token`` with a source excerpt."""
        return make_parse_error(
            message,
            self.file,
            token.line,
            token.column,
            snippet=extract_snippet(self.text, token.line),
            token=token.value,
        )
