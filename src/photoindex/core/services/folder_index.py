from __future__ import annotations

"""
Folder Index Facade.

Owns the lifecycle of the persistent directory index and wires it to the
scanner and the tree builder. The index is loaded and validated once when
the facade is opened and written back at well-defined points:

- after startup invalidation removed stale entries;
- after a scan that added entries, when 'persist_after_scan' is enabled;
- whenever save() is called explicitly.
"""

import logging
from typing import Any, Dict, List, Optional

from photoindex.core.analysis.tree_builder import FolderTreeBuilder
from photoindex.core.services.scanner import DirectoryScanner, count_images
from photoindex.core.services.trie_cache import TrieCache
from photoindex.domain.config import get_default_scan_settings
from photoindex.domain.tree_models import FolderNode

logger = logging.getLogger(__name__)


class FolderIndex:
    """
    Query surface used by presentation layers.

    Not thread-safe. At most one scan may run against an instance at a time
    (see photoindex.interface.threads.ScanTaskRunner).
    """

    def __init__(self, cache: TrieCache, settings: Optional[Dict[str, Any]] = None) -> None:
        self.settings: Dict[str, Any] = get_default_scan_settings()
        if settings:
            self.settings.update(settings)

        self.cache = cache
        self.scanner = DirectoryScanner(
            cache,
            max_depth=self.settings["max_depth"],
            exclusion_list=self.settings["exclusion_list"],
        )

    @classmethod
    def open(
            cls,
            cache_file: Optional[str] = None,
            settings: Optional[Dict[str, Any]] = None,
            invalidate: bool = True,
    ) -> "FolderIndex":
        """
        Load the persisted index (or start empty) and validate it once.

        Args:
            cache_file: Index file. Defaults to the user data directory file.
            settings: Validated scan settings.
            invalidate: Check cached entries against the filesystem.

        Returns:
            FolderIndex: Ready-to-use facade.
        """
        cache = TrieCache.load_from_disk(cache_file)
        if cache is None:
            logger.info("FolderIndex: Starting with an empty index.")
            cache = TrieCache(cache_file)
        else:
            logger.debug(f"FolderIndex: Loaded {len(cache)} cached paths.")

        if invalidate:
            cache.invalidate_cache()

        return cls(cache, settings)

    def scan(self, root: str) -> List[str]:
        """Find image folders under root, persisting new findings if enabled."""
        folders = self.scanner.scan_for_image_folders(root)
        if self.settings.get("persist_after_scan") and self.cache.dirty:
            self.cache.save_to_disk()
        return folders

    def folder_tree(self, root: str, with_counts: bool = False) -> Optional[FolderNode]:
        """
        Build the hierarchical view of the indexed folders under root.

        Args:
            root: Folder whose subtree is displayed.
            with_counts: Count the images of every folder on disk. Without it
                         all counts are 0.

        Returns:
            Optional[FolderNode]: The tree, or None if root is not indexed.
        """
        trie_node = self.cache.retrieve_trie_node(root)
        if trie_node is None:
            return None

        builder = FolderTreeBuilder(
            max_depth=self.settings["max_depth"],
            image_counter=count_images if with_counts else None,
        )
        return builder.build(trie_node, root)

    def save(self) -> bool:
        return self.cache.save_to_disk()

    def clear(self) -> bool:
        """Forget every indexed folder and the in-process results."""
        self.cache.clear()
        self.scanner.clear_memo()
        return self.cache.save_to_disk()
