from __future__ import annotations

"""
Tree Renderer.

Converts FolderNode trees into ASCII lines for terminal display.
"""

from typing import List

from photoindex.domain.tree_models import FolderNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_folder_tree(root: FolderNode, lines: List[str]) -> None:
    """
    Render a folder tree, root label first and children indented below it.

    Args:
        root: Tree to render.
        lines: Accumulator list for output strings.
    """
    lines.append(root.display_label())
    _render_children(root, lines, prefix="")


def _render_children(node: FolderNode, lines: List[str], prefix: str) -> None:
    """Recursively emit children using standard connectors (├──, └──)."""
    total = len(node.subfolders)

    for i, child in enumerate(node.subfolders):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{child.display_label()}")

        new_prefix = prefix + ("    " if is_last else "│   ")
        _render_children(child, lines, new_prefix)
