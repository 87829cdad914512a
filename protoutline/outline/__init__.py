"""Outline (symbol tree) construction for protobuf documents.

Main components:
- Types: SymbolKind, LineRange, OutlineNode - the produced tree
- Kinds: field_kind() - ordered kind inference rules for field declarations
- Parser: parse_document_symbols() - build the outline from source text

Example usage:
    >>> from protoutline.outline import parse_document_symbols
    >>> text = '''
    ... service FooService {
    ...   rpc DoBar(Foo) returns (Bar);
    ... }
    ... '''
    >>> service = parse_document_symbols(text)[0]
    >>> service.children[0].detail
    'rpc(Foo) returns (Bar)'
"""

from protoutline.outline.kinds import FieldShape, field_kind
from protoutline.outline.parser import OutlineParser, ParseContext, parse_document_symbols
from protoutline.outline.types import LineRange, OutlineNode, SymbolKind

__all__ = [
    # Types
    "LineRange",
    "OutlineNode",
    "SymbolKind",
    # Kinds
    "FieldShape",
    "field_kind",
    # Parser
    "OutlineParser",
    "ParseContext",
    "parse_document_symbols",
]
