"""
Cross-definition lookups for page generators.

A generator writes one page per definition plus an index page; these
helpers give it the name-to-page map used for cross-links and the
aggregate counts shown on the index.
"""

from __future__ import annotations

import re
from collections import Counter

from . import ir

DEFAULT_PAGE_SUFFIX = ".html"
UNCATEGORIZED = "General"

_WORD_RE = re.compile(r"[A-Za-z0-9_]+")


def page_id(name: str, suffix: str = DEFAULT_PAGE_SUFFIX) -> str:
    return f"{name}{suffix}"


def build_name_map(
    definitions: list[ir.DefinitionSpec],
    suffix: str = DEFAULT_PAGE_SUFFIX,
) -> dict[str, str]:
    """
    Map each definition name to its page identifier.

    A later definition with the same name replaces an earlier one.
    """
    return {d.name: page_id(d.name, suffix) for d in definitions}


def type_references(type_expr: str) -> list[str]:
    """
    Split a type expression into the words a generator may link.

    Example:
        type_references("Map<Key,Value>*") -> ["Map", "Key", "Value"]
    """
    return _WORD_RE.findall(type_expr)


def resolve_references(
    definition: ir.DefinitionSpec,
    name_map: dict[str, str],
) -> dict[str, str]:
    """
    Collect the known names referenced by a definition.

    Looks at the return type, field types and links; unknown names are
    left out since no referenced name is ever validated.
    """
    words: list[str] = type_references(definition.return_type)
    for f in definition.fields:
        words.extend(type_references(f.type))
    words.extend(definition.links)
    return {w: name_map[w] for w in words if w in name_map}


def summarize(definitions: list[ir.DefinitionSpec]) -> ir.DocumentSummary:
    """Compute the aggregate view shown on an index page."""
    kind_counts = Counter(d.kind.value for d in definitions)

    by_category: dict[str, list[str]] = {}
    for d in definitions:
        by_category.setdefault(d.category or UNCATEGORIZED, []).append(d.name)

    return ir.DocumentSummary(
        total=len(definitions),
        kind_counts=dict(sorted(kind_counts.items())),
        tags=sorted({t for d in definitions for t in d.tags}),
        categories=sorted({d.category for d in definitions if d.category}),
        by_category=dict(sorted(by_category.items())),
    )
