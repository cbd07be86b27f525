from __future__ import annotations

"""
Folder Tree Builder.

Converts a subtree of the directory index into FolderNode objects for
hierarchical display. The conversion trusts the index as it stands: no
folder is re-checked on disk.
"""

import logging
from typing import Callable, Optional

from photoindex.domain.constants import DEFAULT_MAX_DEPTH
from photoindex.domain.tree_models import FolderNode
from photoindex.domain.trie_models import TrieNode
from photoindex.infra.fs import join_child

logger = logging.getLogger(__name__)

ImageCounter = Callable[[str], int]


class FolderTreeBuilder:
    """
    Mirror TrieNode children into an ordered FolderNode tree.

    Args:
        max_depth: Levels below the starting node that are converted. Nodes
                   at the limit become leaves.
        image_counter: Optional callable returning the number of images in a
                       folder. Without it every count is 0.
    """

    def __init__(
            self,
            max_depth: int = DEFAULT_MAX_DEPTH,
            image_counter: Optional[ImageCounter] = None,
    ) -> None:
        self.max_depth = max_depth
        self.image_counter = image_counter

    def build(self, trie_node: TrieNode, base_path: str) -> FolderNode:
        """
        Convert trie_node and its descendants.

        Args:
            trie_node: Index node corresponding to base_path.
            base_path: Absolute path of trie_node; child paths are built by
                       appending component names to it.

        Returns:
            FolderNode: Root of the converted tree.
        """
        return self._convert(trie_node, base_path, 0)

    def _convert(self, trie_node: TrieNode, path: str, depth: int) -> FolderNode:
        folder = FolderNode(url=path, image_count=self._count(path))

        if depth >= self.max_depth:
            if trie_node.children:
                logger.debug(f"TreeBuilder: Depth limit reached at {path}")
            return folder

        for name in sorted(trie_node.children):
            child = trie_node.children[name]
            folder.add_child(self._convert(child, join_child(path, name), depth + 1))

        return folder

    def _count(self, path: str) -> int:
        if self.image_counter is None:
            return 0
        return self.image_counter(path)
