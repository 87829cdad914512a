from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from protoutline.core.errors import LoadError


def read_source_file(path: Path) -> str:
    """Read a .proto file as UTF-8, dropping a leading byte order mark.

    Raises:
        LoadError: If the file can't be read or is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise LoadError(f"cannot read file: not valid UTF-8 (byte {e.start})") from e
    except OSError as e:
        raise LoadError(f"cannot read file: {e.strerror or e}") from e


@dataclass(frozen=True)
class TextDocument:
    """Snapshot of an editor document.

    Attributes:
        uri: Document identity used as the cache key
        version: Monotonic version, bumped by the host on every edit
        text: Full document text at this version
        is_dirty: True while the document has unsaved edits
    """

    uri: str
    version: int
    text: str
    is_dirty: bool = False

    @classmethod
    def from_path(cls, path: Path, version: int = 0) -> TextDocument:
        """Create a saved-document snapshot from a file on disk.

        Raises:
            LoadError: If the file can't be read or is not valid UTF-8.
        """
        resolved = path.resolve()
        return cls(
            uri=resolved.as_uri(),
            version=version,
            text=read_source_file(resolved),
        )
