"""
ischema
=======

Compile interface declarations marked with ``/* SCHEMA */`` comments in
source files into JSON Schema (draft-07) documents.
"""

from importlib.metadata import PackageNotFoundError, version

from .compiler import compile_interface
from .errors import ConfigError, IschemaError, SchemaRejectedError
from .extract import Markers, extract_blocks, tokenize_block
from .model import IndexEntry, Interface, Leaf, Nested
from .parser import Grammar, parse_declaration, parse_source


def get_version() -> str:
    """Return the installed package version or '0.0.0' when unavailable."""
    try:
        return version("ischema")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "get_version",
    "compile_interface",
    "extract_blocks",
    "tokenize_block",
    "parse_declaration",
    "parse_source",
    "Grammar",
    "Markers",
    "Interface",
    "IndexEntry",
    "Leaf",
    "Nested",
    "IschemaError",
    "ConfigError",
    "SchemaRejectedError",
]
