"""
Lexer/Tokenizer for the SDOC definition language.

Produces tokens on demand with source location tracking. The lexer never
fails: unterminated strings and block comments run to the end of input,
and characters outside the token alphabet are skipped.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types in the SDOC definition language."""

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Punctuation
    LBRACE = "{"
    RBRACE = "}"
    SEMICOLON = ";"
    EQUALS = "="
    COLON = ":"
    COMMA = ","
    AT = "@"

    # Special
    EOF = "EOF"


PUNCTUATION = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    "=": TokenType.EQUALS,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    "@": TokenType.AT,
}

# Type sigils are identifier characters, so `Vec<int>` or `char*` lex as one token.
IDENTIFIER_SYMBOLS = frozenset("_*&<>")


def is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in IDENTIFIER_SYMBOLS


@dataclass
class Token:
    """
    A single token in the definition language.

    Attributes:
        type: Type of token
        value: Raw text of the token (punctuation carries its own symbol)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        return repr(self.value)


class Lexer:
    """
    Lexer for SDOC definition files.

    Call next_token() repeatedly; once the input is exhausted every call
    returns an EOF token.
    """

    def __init__(self, text: str):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
        """
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def skip_line(self) -> None:
        """Skip to the end of the current line (the newline itself is kept)."""
        while self.current_char() is not None and self.current_char() != "\n":
            self.advance()

    def skip_block_comment(self) -> None:
        """Skip a /* ... */ comment; an unterminated one runs to end of input."""
        self.advance()
        self.advance()
        while self.current_char() is not None:
            if self.current_char() == "*" and self.peek_char() == "/":
                self.advance()
                self.advance()
                return
            self.advance()

    def skip_insignificant(self) -> None:
        """Skip whitespace, comments and characters that cannot start a token."""
        while (ch := self.current_char()) is not None:
            if ch.isspace():
                self.advance()
            elif ch == "#" or (ch == "/" and self.peek_char() == "/"):
                self.skip_line()
            elif ch == "/" and self.peek_char() == "*":
                self.skip_block_comment()
            elif self._starts_token(ch):
                break
            else:
                self.advance()

    def _starts_token(self, ch: str) -> bool:
        if ch in ('"', "'") or ch in PUNCTUATION or is_identifier_char(ch):
            return True
        next_ch = self.peek_char()
        return ch == "-" and next_ch is not None and next_ch.isdigit()

    def read_string(self) -> str:
        """
        Read a quoted string.

        A backslash keeps the following character verbatim; no escape
        sequences are interpreted. An unterminated string yields whatever
        was collected before the end of input.
        """
        quote = self.current_char()
        self.advance()

        chars = []
        while (current := self.current_char()) is not None and current != quote:
            if current == "\\" and self.peek_char() is not None:
                self.advance()
            chars.append(self.current_char() or "")
            self.advance()

        if self.current_char() == quote:
            self.advance()
        return "".join(chars)

    def read_number(self) -> str:
        """Read an optionally negative integer or decimal."""
        chars = []
        if self.current_char() == "-":
            chars.append("-")
            self.advance()

        while (current := self.current_char()) is not None and current.isdigit():
            chars.append(current)
            self.advance()

        if self.current_char() == ".":
            chars.append(".")
            self.advance()
            while (current := self.current_char()) is not None and current.isdigit():
                chars.append(current)
                self.advance()

        return "".join(chars)

    def read_identifier(self) -> str:
        """Read a maximal run of identifier characters."""
        chars = []
        while (current := self.current_char()) is not None and is_identifier_char(current):
            chars.append(current)
            self.advance()
        return "".join(chars)

    def next_token(self) -> Token:
        """
        Produce the next token.

        Returns:
            The next token; EOF once input is exhausted
        """
        self.skip_insignificant()

        ch = self.current_char()
        token_line = self.line
        token_col = self.column

        if ch is None:
            return Token(TokenType.EOF, "", token_line, token_col)

        if ch in ('"', "'"):
            return Token(TokenType.STRING, self.read_string(), token_line, token_col)

        if ch in PUNCTUATION:
            self.advance()
            return Token(PUNCTUATION[ch], ch, token_line, token_col)

        if ch.isdigit() or ch == "-":
            return Token(TokenType.NUMBER, self.read_number(), token_line, token_col)

        return Token(TokenType.IDENTIFIER, self.read_identifier(), token_line, token_col)

    def __iter__(self) -> Iterator[Token]:
        """Iterate tokens up to, but not including, EOF."""
        while (token := self.next_token()).type != TokenType.EOF:
            yield token


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize definition text.

    Args:
        text: Source text

    Returns:
        List of tokens ending with a single EOF token
    """
    lexer = Lexer(text)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens
