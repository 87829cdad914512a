"""protoutline display system.

Renders outlines to the terminal with Rich.
"""

from protoutline.display.console import get_console, set_console
from protoutline.display.theme import DEFAULT_THEME, Theme
from protoutline.display.tree import build_outline_tree, format_node_label

__all__ = [
    # Console
    "get_console",
    "set_console",
    # Tree
    "build_outline_tree",
    "format_node_label",
    # Theme
    "DEFAULT_THEME",
    "Theme",
]
