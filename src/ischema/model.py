"""Parse tree for interface declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Leaf:
    """A bare type token such as ``string`` or ``number``."""

    type: str

    def to_dict(self) -> str:
        return self.type


@dataclass
class Nested:
    """An anonymous object property with its own interface body."""

    interface: Interface

    def to_dict(self) -> dict[str, Any]:
        return self.interface.to_dict()


PropValue = Leaf | Nested


@dataclass
class IndexEntry:
    """A ``[key: K]: V`` index signature."""

    key: str
    value: PropValue

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value.to_dict()}


@dataclass
class Interface:
    """One parsed declaration, or a nested object under the key ``name``."""

    name: str
    props: dict[str, PropValue] = field(default_factory=dict)
    indices: list[IndexEntry] = field(default_factory=list)

    def add_prop(self, name: str, value: PropValue) -> None:
        self.props[name] = value

    def nested(self) -> dict[str, Interface]:
        return {k: v.interface for k, v in self.props.items() if isinstance(v, Nested)}

    def depth(self) -> int:
        """Number of object levels, counting this one."""
        children = self.nested().values()
        return 1 + max((child.depth() for child in children), default=0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "props": {k: v.to_dict() for k, v in self.props.items()},
            "indices": [entry.to_dict() for entry in self.indices],
        }
