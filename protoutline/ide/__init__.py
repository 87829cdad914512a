from protoutline.ide.document import TextDocument, read_source_file
from protoutline.ide.provider import CachedOutline, DocumentSymbolProvider

__all__ = [
    "CachedOutline",
    "DocumentSymbolProvider",
    "TextDocument",
    "read_source_file",
]
