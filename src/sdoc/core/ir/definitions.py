"""
Definition specifications for SDOC IR.

A definition is one top-level block of a document:

    @core
    struct Point {
      desc: a point in 2D space;
      category: geometry;
      float x : "horizontal offset" = 0;
      float y : "vertical offset" = 0;
    }
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .fields import FieldSpec

# Stored when `deprecated:` is present without a string message.
DEPRECATED_SENTINEL = "true"


class DefinitionKind(str, Enum):
    """Keywords that may open a definition block."""

    STRUCT = "struct"
    UNION = "union"
    FN = "fn"
    ENUM = "enum"
    TYPE = "type"
    CONST = "const"
    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"

    @classmethod
    def is_kind(cls, value: str) -> bool:
        return any(kind.value == value for kind in cls)


class DefinitionSpec(BaseModel):
    """
    One top-level declarative unit.

    Scalar clauses default to "" when absent from the source; list clauses
    keep source order and duplicates. ``metadata`` collects colon clauses
    that are not recognized keywords (last write wins).
    """

    kind: DefinitionKind
    name: str = ""
    description: str = ""
    return_type: str = ""
    category: str = ""
    version: str = ""
    author: str = ""
    since_version: str = ""
    deprecated_note: str = ""
    links: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)
    fields: list[FieldSpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def is_deprecated(self) -> bool:
        return bool(self.deprecated_note)

    @property
    def deprecation_message(self) -> str:
        """Explanatory deprecation text, or "" for a bare `deprecated:` clause."""
        if self.deprecated_note == DEPRECATED_SENTINEL:
            return ""
        return self.deprecated_note

    @property
    def required_fields(self) -> list[FieldSpec]:
        return [f for f in self.fields if f.required]

    def get_field(self, name: str) -> FieldSpec | None:
        """Return the first field with the given name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None
