"""
Error types for SDOC parsing and project configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class SdocError(Exception):
    """Base exception for all SDOC errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(SdocError):
    """
    Raised when a definition document cannot be parsed.

    Only two situations are fatal:
    - A block does not start with a definition kind keyword
    - A block is missing its opening or closing brace

    Attributes:
        token: Text of the offending token ("" at end of input)
    """

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        token: str = "",
    ):
        self.token = token
        super().__init__(message, context)


class ConfigError(SdocError):
    """
    Raised when an sdoc.toml manifest cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - A section that is not a table
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source excerpt starting two lines before the error
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "api.sdoc:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def extract_snippet(text: str, line: int, context_lines: int = 2) -> str:
    """
    Cut the lines surrounding ``line`` out of ``text``.

    The excerpt starts ``context_lines`` before the error line, which is what
    ErrorContext._format_snippet expects when numbering the lines.
    """
    lines = text.split("\n")
    start = max(1, line - context_lines)
    end = min(len(lines), line + context_lines)
    return "\n".join(lines[start - 1 : end])


def make_parse_error(
    message: str,
    file: Path,
    line: int,
    column: int,
    snippet: str | None = None,
    token: str = "",
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional code snippet
        token: Text of the offending token

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return ParseError(message, context, token=token)


def make_config_error(message: str, file: Path | None = None) -> ConfigError:
    """
    Helper to create a ConfigError, prefixed with the manifest path if known.
    """
    if file is not None:
        return ConfigError(f"{file}: {message}")
    return ConfigError(message)
