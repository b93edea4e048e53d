"""
SDOC - Simple Documentation definition language.

Parses schema-like definition files (structs, functions, enums, ...) into
an immutable document model that page generators consume.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import ir
from .core.dsl_parser_impl import parse_dsl
from .core.errors import ConfigError, ParseError, SdocError
from .core.parser import parse_file, parse_files, try_parse


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("sdoc")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_dsl",
    "parse_file",
    "parse_files",
    "try_parse",
    "SdocError",
    "ParseError",
    "ConfigError",
]
