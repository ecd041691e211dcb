"""Structural parser for tokenized declarations.

The parser is a flat state machine over the body tokens. Anonymous nested
objects are tracked with an explicit stack of open frames instead of
recursion, so nesting depth is not bounded by the call stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from .extract import Declaration, Markers, extract_blocks, tokenize_block
from .model import IndexEntry, Interface, Leaf, Nested

logger = logging.getLogger(__name__)


class ParseState(Enum):
    NONE = auto()
    FOUND_INDEX = auto()
    INDEX_VALUE = auto()
    FOUND_PROP = auto()


@dataclass(frozen=True)
class Grammar:
    """Literal tokens recognised inside a declaration body."""

    name_suffix: str = ":"
    index_opener: str = "[key"
    index_key_suffix: str = "]:"
    terminator: str = ";"
    open_object: str = "{"
    close_object: tuple[str, ...] = ("}", "};")


class _Machine:
    """Mutable parse state for a single declaration."""

    def __init__(self, name: str, grammar: Grammar) -> None:
        self.grammar = grammar
        self.root = Interface(name=name)
        self.frames: list[Interface] = []
        self.state = ParseState.NONE
        self.pending_name = ""
        self.pending_key = ""

    @property
    def target(self) -> Interface:
        """Innermost open object, or the root when none is open."""
        return self.frames[-1] if self.frames else self.root

    def feed(self, token: str) -> None:
        handler = {
            ParseState.NONE: self._on_none,
            ParseState.FOUND_INDEX: self._on_found_index,
            ParseState.INDEX_VALUE: self._on_index_value,
            ParseState.FOUND_PROP: self._on_found_prop,
        }[self.state]
        if not handler(token):
            logger.debug("Ignoring token %r in state %s", token, self.state.name)

    def _on_none(self, token: str) -> bool:
        g = self.grammar
        if token.endswith(g.name_suffix):
            name = token[: -len(g.name_suffix)]
            if not name:
                return False
            if name == g.index_opener:
                self.state = ParseState.FOUND_INDEX
            else:
                self.pending_name = name
                self.state = ParseState.FOUND_PROP
            return True
        if token in g.close_object and self.frames:
            closed = self.frames.pop()
            self.target.add_prop(closed.name, Nested(closed))
            return True
        return False

    def _on_found_index(self, token: str) -> bool:
        suffix = self.grammar.index_key_suffix
        if not token.endswith(suffix):
            return False
        self.pending_key = token[: -len(suffix)]
        self.state = ParseState.INDEX_VALUE
        return True

    def _on_index_value(self, token: str) -> bool:
        terminator = self.grammar.terminator
        if not token.endswith(terminator):
            return False
        value = token[: -len(terminator)]
        self.target.indices.append(IndexEntry(key=self.pending_key, value=Leaf(value)))
        self.pending_key = ""
        self.state = ParseState.NONE
        return True

    def _on_found_prop(self, token: str) -> bool:
        g = self.grammar
        if token == g.open_object:
            self.frames.append(Interface(name=self.pending_name))
            self.state = ParseState.NONE
            return True
        if token.endswith(g.terminator):
            self.target.add_prop(self.pending_name, Leaf(token[: -len(g.terminator)]))
            self.state = ParseState.NONE
            return True
        return False


def parse_tokens(name: str, body: list[str], grammar: Grammar | None = None) -> Interface:
    """Build an :class:`Interface` named ``name`` from its body tokens."""
    machine = _Machine(name, grammar or Grammar())
    for token in body:
        machine.feed(token)
    if machine.frames:
        logger.debug(
            "%s: %d nested object(s) left open at end of body", name, len(machine.frames)
        )
    return machine.root


def parse_declaration(decl: Declaration, grammar: Grammar | None = None) -> Interface:
    return parse_tokens(decl.name, decl.body, grammar)


def parse_blocks(blocks: list[list[str]], grammar: Grammar | None = None) -> list[Interface]:
    """Parse every extracted block, in order."""
    return [parse_declaration(tokenize_block(block), grammar) for block in blocks]


def parse_source(
    text: str, markers: Markers | None = None, grammar: Grammar | None = None
) -> list[Interface]:
    """Extract and parse all marked declarations in ``text``."""
    return parse_blocks(extract_blocks(text, markers), grammar)
