from pathlib import Path

import pytest

from ischema.discovery import find_source_files


def test_finds_matching_files_recursively(project: Path) -> None:
    files = find_source_files(project / "src")
    assert files == [project / "src" / "foo.ts", project / "src" / "models" / "deep.ts"]


def test_multiple_extensions(project: Path) -> None:
    files = find_source_files(project / "src", [".ts", ".md"])
    assert project / "src" / "notes.md" in files
    assert len(files) == 3


def test_excluded_directories_are_skipped(project: Path) -> None:
    files = find_source_files(project / "src", exclude=[project / "src" / "models"])
    assert files == [project / "src" / "foo.ts"]


def test_missing_root(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        find_source_files(tmp_path / "nope")
