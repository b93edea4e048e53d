"""
SDOC Internal Representation (IR).

Immutable pydantic models produced by the parser:

- fields.py: FieldSpec
- definitions.py: DefinitionKind, DefinitionSpec
- document.py: ParseResult, ParseErrorInfo, DocumentSummary
"""

from .definitions import DEPRECATED_SENTINEL, DefinitionKind, DefinitionSpec
from .document import DocumentSummary, ParseErrorInfo, ParseResult
from .fields import REQUIRED_TAG, FieldSpec

__all__ = [
    "DEPRECATED_SENTINEL",
    "REQUIRED_TAG",
    "DefinitionKind",
    "DefinitionSpec",
    "DocumentSummary",
    "FieldSpec",
    "ParseErrorInfo",
    "ParseResult",
]
