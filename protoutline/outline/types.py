"""Types for the protobuf document outline.

This module provides the symbol kinds, line ranges and outline nodes
produced by the outline parser.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class SymbolKind(IntEnum):
    """Kind of an outline node.

    Values match the Language Server Protocol ``SymbolKind`` numbers so
    hosts can forward them unchanged.
    """

    CLASS = 5  # service
    METHOD = 6  # rpc
    FIELD = 8
    ENUM = 10  # enum, oneof
    BOOLEAN = 17
    ARRAY = 18  # repeated field
    OBJECT = 19  # map field
    ENUM_MEMBER = 22
    STRUCT = 23  # message


@dataclass(frozen=True)
class LineRange:
    """Inclusive span of source lines.

    Attributes:
        start: First line (0-indexed)
        end: Last line (0-indexed)
    """

    start: int
    end: int

    @classmethod
    def point(cls, line: int) -> LineRange:
        """Create a collapsed range on a single line."""
        return cls(line, line)

    @property
    def is_point(self) -> bool:
        return self.start == self.end

    def contains(self, other: LineRange) -> bool:
        """Check whether other lies entirely within this range."""
        return self.start <= other.start and other.end <= self.end

    def to_host(self) -> tuple[int, int]:
        """Get the (start, end) pair as 1-indexed lines."""
        return (self.start + 1, self.end + 1)


@dataclass
class OutlineNode:
    """A single declaration in a document outline.

    Attributes:
        name: Declared identifier
        detail: Short description: keyword for blocks, type or cardinality
            and type for fields, signature for rpc methods, empty for enum values
        kind: Symbol kind
        range: Lines covered by the whole declaration
        selection_range: Collapsed range on the line of the declaring name
        children: Nested declarations in source order
    """

    name: str
    detail: str
    kind: SymbolKind
    range: LineRange
    selection_range: LineRange
    children: list[OutlineNode] = field(default_factory=list)

    def walk(self) -> Iterator[OutlineNode]:
        """Yield this node and all descendants, depth-first in source order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> OutlineNode | None:
        """Get the first direct child with the given name."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the host representation with 1-indexed lines."""
        start, end = self.range.to_host()
        return {
            "name": self.name,
            "detail": self.detail,
            "kind": self.kind.name,
            "range": [start, end],
            "selection_line": self.selection_range.start + 1,
            "children": [child.to_dict() for child in self.children],
        }
