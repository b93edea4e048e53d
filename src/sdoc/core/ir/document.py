"""
Document-level models for SDOC IR.

These wrap a parse run: the non-raising ParseResult and the DocumentSummary
consumed by page generators (kind counts, tag and category listings).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .definitions import DefinitionSpec


class ParseErrorInfo(BaseModel):
    """Structured description of a fatal parse error."""

    message: str
    token: str = ""
    file: str = ""
    line: int = 0
    column: int = 0

    model_config = ConfigDict(frozen=True)


class ParseResult(BaseModel):
    """
    Outcome of a parse run.

    Exactly one of ``definitions`` (possibly empty) or ``error`` is meaningful:
    a fatal error discards every definition parsed before it.
    """

    definitions: list[DefinitionSpec] = Field(default_factory=list)
    error: ParseErrorInfo | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None


class DocumentSummary(BaseModel):
    """
    Aggregate view over a list of definitions.

    Attributes:
        total: Number of definitions
        kind_counts: Definitions per kind, ordered by kind name
        tags: Sorted unique tags across all definitions
        categories: Sorted unique non-empty categories
        by_category: Definition names grouped by category ("General" for
            uncategorized), categories sorted, names in source order
    """

    total: int = 0
    kind_counts: dict[str, int] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    by_category: dict[str, list[str]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
