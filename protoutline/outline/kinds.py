"""Symbol kind inference for outline nodes.

Block kinds come from the declaring keyword. Field kinds come from an
ordered rule table; the first matching rule wins.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from protoutline.outline.types import SymbolKind

FieldCardinality = Literal["required", "optional", "repeated"]

CARDINALITIES: frozenset[str] = frozenset({"required", "optional", "repeated"})

BLOCK_KINDS: dict[str, SymbolKind] = {
    "message": SymbolKind.STRUCT,
    "enum": SymbolKind.ENUM,
    "service": SymbolKind.CLASS,
}


def is_cardinality(token: str) -> bool:
    """Check whether a token is a field cardinality keyword."""
    return token in CARDINALITIES


@dataclass(frozen=True)
class FieldShape:
    """What the field builder learned about a declaration before naming it.

    Attributes:
        type_name: Declared type ("map" for map fields, the value name for enum values)
        cardinality: Cardinality keyword, or None when absent
        is_map: True for ``map<K, V>`` fields
        in_enum: True when declared directly inside an enum body
    """

    type_name: str
    cardinality: FieldCardinality | None = None
    is_map: bool = False
    in_enum: bool = False


FieldKindRule = tuple[str, Callable[[FieldShape], bool], SymbolKind]

FIELD_KIND_RULES: tuple[FieldKindRule, ...] = (
    ("map", lambda shape: shape.is_map, SymbolKind.OBJECT),
    ("enum value", lambda shape: shape.in_enum, SymbolKind.ENUM_MEMBER),
    ("oneof", lambda shape: shape.type_name == "oneof", SymbolKind.ENUM),
    ("repeated", lambda shape: shape.cardinality == "repeated", SymbolKind.ARRAY),
    ("bool", lambda shape: shape.type_name == "bool", SymbolKind.BOOLEAN),
)


def field_kind(shape: FieldShape) -> SymbolKind:
    """Infer the symbol kind of a field-like declaration."""
    for _label, matches, kind in FIELD_KIND_RULES:
        if matches(shape):
            return kind
    return SymbolKind.FIELD
