"""Theme definitions for outline rendering."""

from dataclasses import dataclass, field

from protoutline.outline.types import SymbolKind


@dataclass
class Theme:
    """Visual theme configuration.

    All styling in one place for easy customization.
    """
    # Rich style per symbol kind, applied to the node name
    kind_styles: dict[SymbolKind, str] = field(default_factory=lambda: {
        SymbolKind.CLASS: "bold magenta",
        SymbolKind.METHOD: "bold cyan",
        SymbolKind.STRUCT: "bold green",
        SymbolKind.ENUM: "bold yellow",
        SymbolKind.ENUM_MEMBER: "yellow",
        SymbolKind.FIELD: "",
        SymbolKind.BOOLEAN: "",
        SymbolKind.ARRAY: "",
        SymbolKind.OBJECT: "",
    })

    # Text styles (Rich style strings)
    title: str = "bold"
    detail: str = "dim"
    line_number: str = "dim"

    def kind_style(self, kind: SymbolKind) -> str:
        """Get the name style for a symbol kind."""
        return self.kind_styles.get(kind, "")


DEFAULT_THEME = Theme()
