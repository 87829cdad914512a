"""Document symbol provider for editor hosts.

Wraps the outline parser with a per-document cache keyed by document
version. A parse failure on an edited document serves the last outline that
parsed successfully, so breadcrumbs stay stable while the user types.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass

from protoutline.config.schema import Config
from protoutline.core.errors import (
    OutlineError,
    StructuralParseError,
    UnexpectedEndOfInputError,
)
from protoutline.ide.document import TextDocument
from protoutline.outline.parser import parse_document_symbols
from protoutline.outline.types import OutlineNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachedOutline:
    """Last successfully parsed outline of a document."""

    version: int
    symbols: list[OutlineNode]


class DocumentSymbolProvider:
    """Provide outlines for documents, reusing results per version.

    The cache is only updated by successful parses; a failed parse never
    overwrites the last good outline.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self._cache: OrderedDict[str, CachedOutline] = OrderedDict()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, uri: object) -> bool:
        return uri in self._cache

    def provide_document_symbols(self, document: TextDocument) -> list[OutlineNode]:
        """Get the outline of a document.

        Returns:
            The cached outline if the version is unchanged, a fresh outline if
            parsing succeeds, otherwise the last good outline for this
            document (empty list if there is none). The list is a fresh copy;
            the nodes in it are shared with the cache.
        """
        cached = self._cache.get(document.uri)
        if self.config.cache.enabled and cached is not None and cached.version == document.version:
            return list(cached.symbols)

        try:
            symbols = parse_document_symbols(
                document.text,
                strict=self.config.parser.strict_end_of_input,
            )
        except (StructuralParseError, UnexpectedEndOfInputError) as e:
            self._log_parse_error(document, e)
            return list(cached.symbols) if cached is not None else []

        if self.config.cache.enabled:
            self._store(document.uri, CachedOutline(document.version, symbols))
        return list(symbols)

    def _log_parse_error(self, document: TextDocument, error: OutlineError) -> None:
        if document.is_dirty and not self.config.logging.log_transient_errors:
            logger.debug(
                "Ignoring parse error in unsaved %s (version %d): %s",
                document.uri, document.version, error,
            )
        else:
            logger.warning("Error parsing document symbols for %s: %s", document.uri, error)

    def _store(self, uri: str, entry: CachedOutline) -> None:
        self._cache[uri] = entry
        self._cache.move_to_end(uri)
        while len(self._cache) > self.config.cache.max_documents:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug("Evicted cached outline for %s", evicted)

    def forget(self, uri: str) -> None:
        """Drop the cached outline of a closed document."""
        self._cache.pop(uri, None)

    def clear(self) -> None:
        """Drop all cached outlines."""
        self._cache.clear()
