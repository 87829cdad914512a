"""Typed exception hierarchy for protoutline."""

from __future__ import annotations

from collections.abc import Sequence


class OutlineError(Exception):
    """Base class for all protoutline errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(OutlineError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class LoadError(OutlineError):
    """Base class for loading errors (config files, source files)."""

    pass


class StructuralParseError(OutlineError):
    """Raised when brackets in the token stream do not nest.

    The whole parse is aborted; no partial outline is returned.

    Attributes:
        line: 1-based source line where the problem was detected.
    """

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        super().__init__(message)


class BracketMismatchError(StructuralParseError):
    """A closing bracket does not match the innermost open bracket."""

    def __init__(self, line: int, opener: str | None, closer: str) -> None:
        self.opener = opener
        self.closer = closer
        if opener is None:
            message = f"Bracket mismatch at line {line}: unexpected '{closer}'"
        else:
            message = f"Bracket mismatch at line {line}: '{opener}' closed by '{closer}'"
        super().__init__(line, message)


class UnexpectedEndOfInputError(OutlineError):
    """The token stream ended before a declaration was terminated.

    Brackets may be balanced; the text is incomplete rather than malformed.
    Only raised when the parser runs in strict mode.

    Attributes:
        line: 1-based line of the last token read.
        expected: Terminators the interrupted scan was waiting for.
        unclosed: Brackets still open when the stream ended.
    """

    def __init__(
        self,
        line: int,
        expected: Sequence[str] = (),
        unclosed: Sequence[str] = (),
    ) -> None:
        self.line = line
        self.expected = tuple(expected)
        self.unclosed = tuple(unclosed)
        details: list[str] = []
        if self.expected:
            details.append("expected " + " or ".join(f"'{t}'" for t in self.expected))
        if self.unclosed:
            details.append("unclosed " + " ".join(f"'{b}'" for b in self.unclosed))
        message = f"Unexpected end of input at line {line}"
        if details:
            message += ": " + ", ".join(details)
        super().__init__(message)
