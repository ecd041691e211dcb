"""Block extraction and declaration tokenizing.

Source files mark declarations to compile with comment lines::

    /* SCHEMA */
    interface Foo {
        a: string;
    }
    /* END SCHEMA */

Only the lines between a start and an end marker are kept. A block that is
never closed is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

START_MARKER = "/* SCHEMA */"
END_MARKER = "/* END SCHEMA */"


@dataclass(frozen=True)
class Markers:
    """Marker lines delimiting a block; matched against the trimmed line."""

    start: str = START_MARKER
    end: str = END_MARKER


@dataclass
class Declaration:
    """Tokenized block: the declared name plus the tokens inside its braces."""

    name: str
    body: list[str] = field(default_factory=list)


def normalize_text(text: str) -> str:
    return text.replace("\t", " ").replace("\r", "")


def extract_blocks(text: str, markers: Markers | None = None) -> list[list[str]]:
    """Return the trimmed lines of every closed block in ``text``."""
    markers = markers or Markers()
    blocks: list[list[str]] = []
    current: list[str] = []
    capturing = False
    for line in normalize_text(text).split("\n"):
        stripped = line.strip()
        if stripped == markers.start:
            if not capturing:
                capturing = True
            continue
        if stripped == markers.end:
            if capturing:
                capturing = False
                blocks.append(current)
                current = []
            continue
        if capturing:
            current.append(stripped)
    if capturing:
        logger.debug("Dropping unterminated block (%d lines)", len(current))
    return blocks


def tokenize(lines: list[str]) -> list[str]:
    """Split every line on single spaces and join the pieces in order."""
    tokens: list[str] = []
    for line in lines:
        tokens.extend(line.split(" "))
    return tokens


def tokenize_block(lines: list[str]) -> Declaration:
    """Turn a block into its name and body tokens.

    The first token is the declaration keyword and is dropped; the next two
    are the name and the opening brace, and the last is the closing brace.
    """
    tokens = tokenize(lines)[1:]
    name = tokens[0] if tokens else ""
    return Declaration(name=name, body=tokens[2:-1])
