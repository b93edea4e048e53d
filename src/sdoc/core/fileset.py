from pathlib import Path

from .manifest import ProjectManifest


def discover_sources(root: Path, manifest: ProjectManifest) -> list[Path]:
    """
    Expand the manifest's source paths into definition files.

    Directories are searched recursively for the configured extensions;
    explicitly listed files are kept whatever their extension. Missing
    paths are ignored.
    """
    files: list[Path] = []
    extensions = set(manifest.sources.extensions)
    for rel in manifest.sources.paths:
        base = (root / rel).resolve()
        if base.is_file():
            files.append(base)
            continue
        if not base.exists():
            continue
        for p in base.rglob("*"):
            if p.is_file() and p.suffix in extensions:
                files.append(p)
    return sorted(set(files))
