import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import make_config_error
from .index import DEFAULT_PAGE_SUFFIX

MANIFEST_FILENAME = "sdoc.toml"
DEFAULT_EXTENSIONS = [".sdoc", ".sdt"]


@dataclass
class SourcesConfig:
    """Where definition files live."""

    paths: list[str] = field(default_factory=lambda: ["."])  # files or directories
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))


@dataclass
class OutputConfig:
    """How generated pages are named."""

    page_suffix: str = DEFAULT_PAGE_SUFFIX


@dataclass
class ProjectManifest:
    name: str
    version: str
    project_root: Path
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _table(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise make_config_error(f"[{key}] must be a table", path)
    return value


def _string_list(
    table: dict[str, Any], key: str, default: list[str], section: str, path: Path
) -> list[str]:
    value = table.get(key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise make_config_error(f"[{section}] {key} must be a list of strings", path)
    return list(value)


def load_manifest(path: Path) -> ProjectManifest:
    """
    Load an sdoc.toml manifest.

    Missing sections and keys fall back to defaults.

    Raises:
        ConfigError: If the file is not valid TOML or a section is malformed
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise make_config_error(f"invalid TOML: {e}", path) from e

    project = _table(data, "project", path)
    sources_data = _table(data, "sources", path)
    output_data = _table(data, "output", path)

    sources = SourcesConfig(
        paths=_string_list(sources_data, "paths", ["."], "sources", path),
        extensions=_string_list(sources_data, "extensions", DEFAULT_EXTENSIONS, "sources", path),
    )
    output = OutputConfig(page_suffix=output_data.get("page_suffix", DEFAULT_PAGE_SUFFIX))

    return ProjectManifest(
        name=project.get("name", path.parent.name),
        version=project.get("version", "0.0.0"),
        project_root=path.parent,
        sources=sources,
        output=output,
    )
