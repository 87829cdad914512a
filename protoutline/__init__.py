"""Outline (symbol tree) builder for Protocol Buffers source files."""

from protoutline.core.errors import (
    BracketMismatchError,
    StructuralParseError,
    UnexpectedEndOfInputError,
)
from protoutline.outline import LineRange, OutlineNode, SymbolKind, parse_document_symbols

__version__ = "0.1.0"

__all__ = [
    "BracketMismatchError",
    "LineRange",
    "OutlineNode",
    "StructuralParseError",
    "SymbolKind",
    "UnexpectedEndOfInputError",
    "parse_document_symbols",
]
