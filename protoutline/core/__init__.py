"""Core errors and constants."""

from protoutline.core.errors import (
    BracketMismatchError,
    ConfigError,
    LoadError,
    OutlineError,
    StructuralParseError,
    UnexpectedEndOfInputError,
)

__all__ = [
    "OutlineError",
    "ConfigError",
    "LoadError",
    "StructuralParseError",
    "BracketMismatchError",
    "UnexpectedEndOfInputError",
]
