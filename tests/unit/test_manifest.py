"""Tests for sdoc.toml loading and source discovery."""

from pathlib import Path

import pytest

from sdoc.core.errors import ConfigError
from sdoc.core.fileset import discover_sources
from sdoc.core.manifest import DEFAULT_EXTENSIONS, load_manifest


def write_manifest(root: Path, content: str) -> Path:
    path = root / "sdoc.toml"
    path.write_text(content)
    return path


class TestLoadManifest:
    def test_defaults(self, tmp_path: Path):
        manifest = load_manifest(write_manifest(tmp_path, ""))
        assert manifest.name == tmp_path.name
        assert manifest.version == "0.0.0"
        assert manifest.project_root == tmp_path
        assert manifest.sources.paths == ["."]
        assert manifest.sources.extensions == DEFAULT_EXTENSIONS
        assert manifest.output.page_suffix == ".html"

    def test_full_manifest(self, tmp_path: Path):
        path = write_manifest(
            tmp_path,
            """
[project]
name = "geometry"
version = "1.4.0"

[sources]
paths = ["defs", "extra/api.txt"]
extensions = [".sdoc"]

[output]
page_suffix = ".md"
""",
        )
        manifest = load_manifest(path)
        assert manifest.name == "geometry"
        assert manifest.version == "1.4.0"
        assert manifest.sources.paths == ["defs", "extra/api.txt"]
        assert manifest.sources.extensions == [".sdoc"]
        assert manifest.output.page_suffix == ".md"

    def test_invalid_toml(self, tmp_path: Path):
        with pytest.raises(ConfigError) as exc_info:
            load_manifest(write_manifest(tmp_path, "[project\nname = "))
        assert "invalid TOML" in str(exc_info.value)

    def test_section_must_be_a_table(self, tmp_path: Path):
        with pytest.raises(ConfigError) as exc_info:
            load_manifest(write_manifest(tmp_path, 'sources = "defs"\n'))
        assert "[sources] must be a table" in str(exc_info.value)

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('[sources]\npaths = "defs"\n', "[sources] paths must be a list of strings"),
            ("[sources]\npaths = [1, 2]\n", "[sources] paths must be a list of strings"),
            ('[sources]\nextensions = ".sdoc"\n', "[sources] extensions must be a list of strings"),
        ],
    )
    def test_source_lists_must_hold_strings(self, tmp_path: Path, content: str, message: str):
        with pytest.raises(ConfigError) as exc_info:
            load_manifest(write_manifest(tmp_path, content))
        assert message in str(exc_info.value)


class TestDiscoverSources:
    def test_directories_are_searched_by_extension(self, tmp_path: Path):
        defs = tmp_path / "defs"
        (defs / "nested").mkdir(parents=True)
        (defs / "a.sdoc").write_text("")
        (defs / "nested" / "b.sdt").write_text("")
        (defs / "readme.md").write_text("")
        manifest = load_manifest(write_manifest(tmp_path, '[sources]\npaths = ["defs"]\n'))

        files = discover_sources(tmp_path, manifest)
        assert [f.name for f in files] == ["a.sdoc", "b.sdt"]

    def test_explicit_files_and_missing_paths(self, tmp_path: Path):
        (tmp_path / "api.txt").write_text("")
        manifest = load_manifest(
            write_manifest(tmp_path, '[sources]\npaths = ["api.txt", "missing"]\n')
        )
        files = discover_sources(tmp_path, manifest)
        assert [f.name for f in files] == ["api.txt"]

    def test_duplicates_collapse(self, tmp_path: Path):
        (tmp_path / "a.sdoc").write_text("")
        manifest = load_manifest(write_manifest(tmp_path, '[sources]\npaths = [".", "a.sdoc"]\n'))
        assert len(discover_sources(tmp_path, manifest)) == 1
