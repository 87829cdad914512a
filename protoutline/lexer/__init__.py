"""Lexical token source for protobuf source text."""

from protoutline.lexer.tokenizer import DELIMITERS, Token, TokenStream, tokenize

__all__ = [
    "DELIMITERS",
    "Token",
    "TokenStream",
    "tokenize",
]
