"""Shared pytest fixtures for SDOC tests."""

from pathlib import Path

import pytest

from sdoc.core import ir
from sdoc.core.dsl_parser_impl import parse_dsl


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def geometry_file(fixtures_dir: Path) -> Path:
    """Return path to the sample geometry document."""
    return fixtures_dir / "geometry.sdoc"


@pytest.fixture
def geometry_definitions(geometry_file: Path) -> list[ir.DefinitionSpec]:
    """Return the parsed sample geometry document."""
    return parse_dsl(geometry_file.read_text(encoding="utf-8"), geometry_file)


@pytest.fixture
def simple_struct() -> ir.DefinitionSpec:
    """Return a small struct definition for testing."""
    return ir.DefinitionSpec(
        kind=ir.DefinitionKind.STRUCT,
        name="Task",
        category="todo",
        tags=["core"],
        fields=[
            ir.FieldSpec(type="u64", name="id", annotation_tags=["required"]),
            ir.FieldSpec(type="char*", name="title", description="Short title"),
            ir.FieldSpec(type="bool", name="done", default_value="false"),
        ],
    )
