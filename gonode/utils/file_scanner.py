"""File scanner — expand configured glob patterns into Go source files."""

from __future__ import annotations

from pathlib import Path

# Directories never scanned for exported functions
SKIP_DIRS = {".git", "vendor", "node_modules", "testdata"}


def discover_source_files(project_dir: str | Path, patterns: list[str]) -> list[Path]:
    """Expand *patterns* relative to *project_dir*.

    Matches of each pattern are sorted; patterns are applied in order and a
    file matched twice keeps its first position.
    """
    root = Path(project_dir)
    seen: set[Path] = set()
    files = []
    for pattern in patterns:
        for path in sorted(root.glob(pattern)):
            if path in seen or not _should_include(root, path):
                continue
            seen.add(path)
            files.append(path)
    return files


def _should_include(root: Path, path: Path) -> bool:
    try:
        parts = path.relative_to(root).parts
    except ValueError:
        parts = path.parts
    for part in parts[:-1]:
        if part in SKIP_DIRS:
            return False
    return path.is_file()
