"""Find candidate source files under a root directory."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def find_source_files(
    root_dir: str | Path,
    extensions: Iterable[str] = (".ts",),
    exclude: Iterable[str | Path] = (),
) -> list[Path]:
    """Return every file below ``root_dir`` whose suffix is in ``extensions``.

    Directories listed in ``exclude`` (typically the output directory) are
    skipped. Results are sorted so builds are reproducible.
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Source root not found: {root}")
    suffixes = set(extensions)
    skipped = [Path(p).resolve() for p in exclude]
    files: list[Path] = []
    for path in root.rglob("*"):
        if not path.is_file() or path.suffix not in suffixes:
            continue
        resolved = path.resolve()
        if any(resolved.is_relative_to(skip) for skip in skipped):
            continue
        files.append(path)
    return sorted(files)
