"""Tokenizer for protobuf (.proto) source text.

Tokens are plain strings. Punctuation and brackets are single-character
tokens, string literals keep their quotes, and everything else is split on
whitespace and punctuation, so dotted names such as ``google.protobuf.Empty``
and signed numbers such as ``-1`` come out as one token. Comments are skipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Single-character tokens
DELIMITERS = frozenset("{}[]()<>=;:,")

_QUOTES = frozenset("\"'")
_WHITESPACE = frozenset(" \t\r\n\f\v")


@dataclass(frozen=True)
class Token:
    """A lexical token and the 1-based line it starts on."""

    value: str
    line: int


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of a protobuf source string in order."""
    i = 0
    line = 1
    n = len(text)

    while i < n:
        ch = text[i]

        if ch == "\n":
            line += 1
            i += 1
            continue

        if ch in _WHITESPACE:
            i += 1
            continue

        # Single-line comment
        if ch == "/" and i + 1 < n and text[i + 1] == "/":
            while i < n and text[i] != "\n":
                i += 1
            continue

        # Multi-line comment
        if ch == "/" and i + 1 < n and text[i + 1] == "*":
            i += 2
            while i < n and not (text[i] == "*" and i + 1 < n and text[i + 1] == "/"):
                if text[i] == "\n":
                    line += 1
                i += 1
            i += 2
            continue

        if ch in DELIMITERS:
            yield Token(ch, line)
            i += 1
            continue

        # String literal, quotes included. Literals cannot span lines.
        if ch in _QUOTES:
            start = i
            i += 1
            while i < n and text[i] != ch and text[i] != "\n":
                if text[i] == "\\" and i + 1 < n and text[i + 1] != "\n":
                    i += 1
                i += 1
            if i < n and text[i] == ch:
                i += 1
            yield Token(text[start:i], line)
            continue

        # Identifier, keyword, number or any other run of characters
        start = i
        while i < n:
            c = text[i]
            if c in _WHITESPACE or c in DELIMITERS or c in _QUOTES:
                break
            if c == "/" and i + 1 < n and text[i + 1] in "/*":
                break
            i += 1
        yield Token(text[start:i], line)


class TokenStream:
    """Pull-based token source.

    ``next()`` returns the next token string, or None once the stream is
    exhausted. ``line`` is the 1-based line of the most recently returned
    token and stays on the last token's line after exhaustion.
    """

    def __init__(self, tokens: str | Iterable[Token]) -> None:
        if isinstance(tokens, str):
            tokens = tokenize(tokens)
        self._tokens = iter(tokens)
        self.line = 1

    def next(self) -> str | None:
        token = next(self._tokens, None)
        if token is None:
            return None
        self.line = token.line
        return token.value

    def __iter__(self) -> Iterator[str]:
        while (token := self.next()) is not None:
            yield token
