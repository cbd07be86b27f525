from __future__ import annotations

"""
Folder Tree Structure Data Models.

Presentation-only nodes rebuilt from the directory index for each display
request. They are never persisted.
"""

from dataclasses import dataclass, field
from typing import List

from photoindex.infra.fs import display_name

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class FolderNode:
    """
    A folder in the hierarchical view.

    Attributes:
        url: Absolute path of the folder.
        subfolders: Ordered child folders.
        image_count: Number of image files directly inside the folder.
    """
    url: str
    subfolders: List["FolderNode"] = field(default_factory=list)
    image_count: int = 0

    def add_child(self, node: "FolderNode") -> None:
        self.subfolders.append(node)

    @property
    def name(self) -> str:
        return display_name(self.url)

    def display_label(self) -> str:
        """
        Format the folder name with its direct image count.

        Folders without images of their own are shown with a '(+)' marker:
        they are listed only because they lead to folders that have some.
        """
        if self.image_count == 0:
            return f"{self.name} (+)"
        return f"{self.name} ({self.image_count})"

    def walk(self) -> List["FolderNode"]:
        """Return this node and all its descendants in pre-order."""
        nodes: List[FolderNode] = []
        stack = [self]
        while stack:
            node = stack.pop()
            nodes.append(node)
            stack.extend(reversed(node.subfolders))
        return nodes
