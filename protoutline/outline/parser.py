"""Parser that builds a document outline from a protobuf token stream.

The parser is a recursive descent over a single pull-based token stream.
Builders for blocks, rpc methods and fields call back into the declaration
dispatcher for every token inside their bodies, and all of them use
``read_to`` to scan while checking bracket nesting.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from protoutline.core.errors import BracketMismatchError, UnexpectedEndOfInputError
from protoutline.lexer.tokenizer import TokenStream
from protoutline.outline.kinds import (
    BLOCK_KINDS,
    FieldCardinality,
    FieldShape,
    field_kind,
    is_cardinality,
)
from protoutline.outline.types import LineRange, OutlineNode, SymbolKind

logger = logging.getLogger(__name__)

MATCHING_BRACKETS: dict[str, str] = {
    "[": "]",
    "(": ")",
    "{": "}",
    "<": ">",
}
CLOSING_BRACKETS = frozenset(MATCHING_BRACKETS.values())
BRACKETS = frozenset(MATCHING_BRACKETS) | CLOSING_BRACKETS

# Constructs skipped without producing a node, by terminator
_DISCARD_TO_BRACE = frozenset({"group", "extend"})
_DISCARD_TO_SEMICOLON = frozenset({"option", "reserved"})


@dataclass
class ParseContext:
    """The container whose body is currently being scanned.

    Attributes:
        keyword: Keyword that opened the container (message, enum, service, oneof)
        node: Outline node that receives the members as children
    """

    keyword: str
    node: OutlineNode

    @property
    def in_enum(self) -> bool:
        return self.keyword == "enum"


class OutlineParser:
    """Single-use outline parser over one token stream.

    Args:
        source: Source text, or an already constructed TokenStream
        strict: Raise UnexpectedEndOfInputError when the stream ends inside
            a declaration. When False the truncated outline is returned.
    """

    def __init__(self, source: str | TokenStream, *, strict: bool = True) -> None:
        self._tok = source if isinstance(source, TokenStream) else TokenStream(source)
        self.strict = strict

    def _position(self) -> int:
        return self._tok.line - 1

    def _end_of_input(self, expected: tuple[str, ...], unclosed: list[str]) -> None:
        if self.strict:
            raise UnexpectedEndOfInputError(self._tok.line, expected, unclosed)
        logger.debug(
            "Token stream ended at line %d (expected %s, unclosed %s)",
            self._tok.line, expected, unclosed,
        )

    def _next_name(self) -> str:
        token = self._tok.next()
        if token is None:
            self._end_of_input(("name",), [])
            return ""
        return token

    def read_to(self, *ends: str, visit: Callable[[str], None] | None = None) -> None:
        """Consume tokens until one of ``ends`` appears outside any bracket pair.

        Every consumed token, brackets and the terminator included, is passed
        to ``visit``. With no ``ends`` the rest of the stream is consumed.

        Raises:
            BracketMismatchError: If a closing bracket does not match the
                innermost bracket opened during this scan.
            UnexpectedEndOfInputError: In strict mode, if the stream ends
                before a terminator or with brackets still open.
        """
        stack: list[str] = []
        while (token := self._tok.next()) is not None:
            if token in CLOSING_BRACKETS:
                opener = stack.pop() if stack else None
                if opener is None or MATCHING_BRACKETS[opener] != token:
                    raise BracketMismatchError(self._tok.line, opener, token)
            elif token in MATCHING_BRACKETS:
                stack.append(token)
            if visit is not None:
                visit(token)
            if not stack and token in ends:
                return
        if ends or stack:
            self._end_of_input(ends, stack)

    def _visit_member(self, context: ParseContext, token: str) -> None:
        child = self.parse_declaration(token, context)
        if child is not None:
            context.node.children.append(child)

    def parse_declaration(
        self, token: str, parent: ParseContext | None = None
    ) -> OutlineNode | None:
        """Route a token that may start a declaration to its builder.

        Returns:
            The built node, or None when the token was ignored or the
            construct discarded.
        """
        if token in BRACKETS or token == ";":
            return None
        if token in BLOCK_KINDS:
            return self.parse_block(token)
        if token == "rpc":
            return self.parse_method()
        if token in _DISCARD_TO_BRACE:
            self.read_to("}")
            return None
        if token in _DISCARD_TO_SEMICOLON:
            self.read_to(";")
            return None
        if parent is not None:
            return self.parse_field(token, parent)
        # syntax, package, import and other top-level statements
        self.read_to(";")
        return None

    def parse_block(self, keyword: str) -> OutlineNode:
        """Build a message, enum or service node with its members."""
        start = self._position()
        name = self._next_name()
        node = OutlineNode(
            name=name,
            detail=keyword,
            kind=BLOCK_KINDS[keyword],
            range=LineRange.point(start),
            selection_range=LineRange.point(start),
        )
        context = ParseContext(keyword, node)
        self.read_to("}", visit=lambda token: self._visit_member(context, token))
        node.range = LineRange(start, self._position())
        return node

    def parse_method(self) -> OutlineNode:
        """Build an rpc node whose detail is the compact signature.

        The declaration ends at ``;`` or at the ``}`` closing a trailing
        option block. Tokens from the option block on are not part of the
        signature.
        """
        start = self._position()
        name = self._next_name()
        signature = ["rpc"]
        in_options = False

        def visit(token: str) -> None:
            nonlocal in_options
            if in_options:
                return
            if token == "{":
                in_options = True
            elif token == "returns":
                signature.append(" returns ")
            elif token != ";":
                signature.append(token)

        self.read_to(";", "}", visit=visit)
        return OutlineNode(
            name=name,
            detail="".join(signature),
            kind=SymbolKind.METHOD,
            range=LineRange(start, self._position()),
            selection_range=LineRange.point(start),
        )

    def parse_field(self, token: str, parent: ParseContext) -> OutlineNode:
        """Build a field, map field, enum value or oneof node.

        ``token`` is the already consumed first token of the declaration.
        """
        start = self._position()
        type_name = token
        cardinality: FieldCardinality | None = None

        if token == "map":
            detail_parts = ["map"]

            def visit(t: str) -> None:
                detail_parts.append(t)
                if t == ",":
                    detail_parts.append(" ")

            self.read_to(">", visit=visit)
            detail = "".join(detail_parts)
            name = self._next_name()
            shape = FieldShape(type_name, is_map=True)
        elif parent.in_enum:
            name = token
            detail = ""
            shape = FieldShape(type_name, in_enum=True)
        else:
            name = self._next_name()
            if is_cardinality(token):
                cardinality = token  # type: ignore[assignment]
                type_name = name
                name = self._next_name()
                detail = f"{cardinality} {type_name}"
            else:
                detail = type_name
            shape = FieldShape(type_name, cardinality)

        selection = LineRange.point(self._position())
        node = OutlineNode(
            name=name,
            detail=detail,
            kind=field_kind(shape),
            range=selection,
            selection_range=selection,
        )
        if shape.type_name == "oneof" and not (shape.is_map or shape.in_enum):
            context = ParseContext("oneof", node)
            self.read_to("}", visit=lambda t: self._visit_member(context, t))
        else:
            # A closing brace ends proto2 group bodies.
            self.read_to(";", "}")
        node.range = LineRange(start, self._position())
        return node

    def parse(self) -> list[OutlineNode]:
        """Parse the whole stream into top-level outline nodes.

        Raises:
            StructuralParseError: If brackets are mismatched.
            UnexpectedEndOfInputError: In strict mode, if the stream ends
                inside a declaration.
        """
        symbols: list[OutlineNode] = []

        def visit(token: str) -> None:
            node = self.parse_declaration(token)
            if node is not None:
                symbols.append(node)

        self.read_to(visit=visit)
        return symbols


def parse_document_symbols(text: str, *, strict: bool = True) -> list[OutlineNode]:
    """Build the outline of a protobuf document.

    Args:
        text: Full source text of the document
        strict: Treat a stream ending inside a declaration as an error

    Returns:
        Top-level outline nodes in source order.

    Raises:
        StructuralParseError: If brackets are mismatched.
        UnexpectedEndOfInputError: In strict mode, if the text ends inside a
            declaration.

    Example:
        >>> nodes = parse_document_symbols("message Bar {\\n  int32 i32 = 1;\\n}\\n")
        >>> nodes[0].name, nodes[0].children[0].detail
        ('Bar', 'int32')
    """
    symbols = OutlineParser(text, strict=strict).parse()
    logger.debug("Parsed %d top-level declarations", len(symbols))
    return symbols
