"""Render outlines as Rich trees."""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from rich.tree import Tree

from protoutline.display.theme import DEFAULT_THEME, Theme
from protoutline.outline.types import OutlineNode


def format_node_label(node: OutlineNode, theme: Theme = DEFAULT_THEME) -> Text:
    """Build the label for one node: line, kind, name and detail."""
    start, end = node.range.to_host()
    lines = f"L{start}" if start == end else f"L{start}-{end}"
    label = Text()
    label.append(f"{lines:>9} ", style=theme.line_number)
    label.append(f"{node.kind.name.lower()} ", style=theme.detail)
    label.append(node.name, style=theme.kind_style(node.kind))
    if node.detail and node.detail != node.name:
        label.append(f"  {node.detail}", style=theme.detail)
    return label


def _add_children(tree: Tree, nodes: Sequence[OutlineNode], theme: Theme) -> None:
    for node in nodes:
        branch = tree.add(format_node_label(node, theme))
        _add_children(branch, node.children, theme)


def build_outline_tree(
    nodes: Sequence[OutlineNode],
    title: str,
    theme: Theme = DEFAULT_THEME,
) -> Tree:
    """Build a Rich tree for an outline, one branch per declaration."""
    tree = Tree(Text(title, style=theme.title), guide_style="dim")
    _add_children(tree, nodes, theme)
    return tree
