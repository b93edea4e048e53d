"""
Clause parser mixin for SDOC documents.

Every body clause is classified in a single step by looking at one
identifier and whether a ':' follows it:

    desc: a point in 2D space;     -> KEYWORD   (recognized clause keyword)
    weight: 42;                    -> METADATA  (any other key)
    float x = 0;                   -> FIELD     (no colon after the identifier)
    @required int id;              -> FIELD     (leading tags)
    ) 123 "stray"                  -> SKIP      (one token discarded)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType
from .values import SCALAR_TYPES

logger = logging.getLogger(__name__)


class ClauseKind(Enum):
    """Outcome of classifying the next body clause."""

    KEYWORD = "keyword"
    METADATA = "metadata"
    FIELD = "field"
    SKIP = "skip"


# Recognized clause keywords, in priority order.
CLAUSE_KEYWORDS = (
    "desc",
    "returns",
    "links",
    "examples",
    "notes",
    "category",
    "version",
    "author",
    "since",
    "deprecated",
    "tags",
)

LIST_CLAUSES = ("links", "examples", "notes", "tags")

# Scalar clause -> (DefinitionSpec attribute, accepted token types)
SCALAR_CLAUSES = {
    "category": ("category", (TokenType.IDENTIFIER, TokenType.STRING)),
    "version": ("version", SCALAR_TYPES),
    "author": ("author", (TokenType.IDENTIFIER, TokenType.STRING)),
    "since": ("since_version", SCALAR_TYPES),
}


def new_definition_body() -> dict[str, Any]:
    """Empty accumulator for the clauses of one definition."""
    body: dict[str, Any] = {name: [] for name in LIST_CLAUSES}
    body["metadata"] = {}
    body["fields"] = []
    return body


class ClauseParserMixin:
    """Parser mixin for the clauses of a definition body."""

    if TYPE_CHECKING:
        match: Any
        accept: Any
        advance: Any
        parse_item_list: Any
        parse_text_value: Any
        parse_type_expr: Any
        parse_field: Any

    def classify_clause(self) -> tuple[ClauseKind, str]:
        """
        Classify the next clause, consuming its key and ':' where present.

        Returns:
            (kind, key) where key is the consumed identifier, or "" when
            nothing was consumed
        """
        if self.match(TokenType.AT):
            return ClauseKind.FIELD, ""

        if self.match(TokenType.IDENTIFIER):
            key = self.advance().value
            if self.accept(TokenType.COLON):
                if key in CLAUSE_KEYWORDS:
                    return ClauseKind.KEYWORD, key
                return ClauseKind.METADATA, key
            return ClauseKind.FIELD, key

        return ClauseKind.SKIP, ""

    def parse_clause(self, body: dict[str, Any]) -> None:
        """
        Parse one body clause into ``body``.

        Always consumes at least one token, so the body loop terminates on
        any input.
        """
        kind, key = self.classify_clause()

        if kind == ClauseKind.KEYWORD:
            self.parse_keyword_clause(key, body)
            self.accept(TokenType.SEMICOLON)

        elif kind == ClauseKind.METADATA:
            if self.match(*SCALAR_TYPES):
                body["metadata"][key] = self.advance().value
            self.accept(TokenType.SEMICOLON)

        elif kind == ClauseKind.FIELD:
            body["fields"].append(self.parse_field(lead=key or None))

        else:
            skipped = self.advance()
            logger.debug("Skipping stray token %r", skipped)

    def parse_keyword_clause(self, key: str, body: dict[str, Any]) -> None:
        """Parse the value of a recognized clause; the key and ':' are consumed."""
        if key == "desc":
            body["description"] = self.parse_text_value()

        elif key == "returns":
            body["return_type"] = self.parse_type_expr()

        elif key in LIST_CLAUSES:
            body[key].extend(self.parse_item_list())

        elif key in SCALAR_CLAUSES:
            attr, token_types = SCALAR_CLAUSES[key]
            if self.match(*token_types):
                body[attr] = self.advance().value

        elif key == "deprecated":
            if self.match(TokenType.STRING):
                body["deprecated_note"] = self.advance().value
            else:
                body["deprecated_note"] = ir.DEPRECATED_SENTINEL
                if not self.match(TokenType.SEMICOLON):
                    self.advance()
