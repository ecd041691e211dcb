"""Public API for downstream modules."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .compiler import IndexEncoding, compile_interface
from .config import ResolvedConfig, load_config
from .discovery import find_source_files
from .extract import Markers
from .model import Interface
from .parser import Grammar, parse_source
from .sink import SchemaSink

__all__ = [
    "BuildReport",
    "parse_text",
    "parse_file",
    "compile_text",
    "compile_file",
    "build",
    "run_build",
]

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """Files read and schemas written by a build."""

    files: list[Path] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)

    def summary(self) -> dict[str, Any]:
        return {"files": len(self.files), "schemas": len(self.written)}


def parse_text(
    text: str, markers: Markers | None = None, grammar: Grammar | None = None
) -> list[Interface]:
    """Parse every marked declaration in ``text``."""
    return parse_source(text, markers, grammar)


def parse_file(
    path: str | Path, markers: Markers | None = None, grammar: Grammar | None = None
) -> list[Interface]:
    return parse_text(Path(path).read_text(encoding="utf-8"), markers, grammar)


def compile_text(
    text: str,
    markers: Markers | None = None,
    encoding: IndexEncoding = "legacy",
    grammar: Grammar | None = None,
) -> list[dict[str, Any]]:
    """Parse ``text`` and compile each declaration to a schema."""
    interfaces = parse_text(text, markers, grammar)
    return [compile_interface(inter, encoding) for inter in interfaces]


def compile_file(
    path: str | Path,
    markers: Markers | None = None,
    encoding: IndexEncoding = "legacy",
    grammar: Grammar | None = None,
) -> list[dict[str, Any]]:
    text = Path(path).read_text(encoding="utf-8")
    return compile_text(text, markers, encoding, grammar)


def _excluded_dirs(config: ResolvedConfig) -> list[Path]:
    root = config.root_dir.resolve()
    out = config.out_dir.resolve()
    if root == out or root.is_relative_to(out):
        return []
    return [out]


def run_build(
    config: ResolvedConfig, validate: bool = True, grammar: Grammar | None = None
) -> BuildReport:
    """Compile every marked declaration under ``config.root_dir``.

    Files and blocks are processed in order. The first rejected schema
    aborts the build with :class:`~ischema.errors.SchemaRejectedError`;
    schemas written before it are kept.
    """
    config.out_dir.mkdir(parents=True, exist_ok=True)
    sink = SchemaSink(config.out_dir, validate=validate)
    report = BuildReport()
    files = find_source_files(
        config.root_dir, config.extensions, exclude=_excluded_dirs(config)
    )
    for path in files:
        report.files.append(path)
        interfaces = parse_file(path, config.markers, grammar)
        if interfaces:
            logger.info("%s: %d declaration(s)", path, len(interfaces))
        for inter in interfaces:
            schema = compile_interface(inter, config.index_encoding)
            report.written.append(sink.emit(schema))
    return report


def build(
    root: str | Path, validate: bool = True, grammar: Grammar | None = None
) -> BuildReport:
    """Entry point used by the CLI: load ``root``'s config and build."""
    return run_build(load_config(root), validate=validate, grammar=grammar)
