from __future__ import annotations

"""
Image Folder Discovery Service.

Walks a directory tree looking for folders that directly contain image
files. Results are answered, in order of preference, from a per-process
memo, from the persistent directory index, or from a bounded filesystem
walk whose findings are then written back to the index.

The walk never raises for filesystem problems: unreadable folders are
treated as empty and their subtrees are left out of the result.
"""

import logging
import os
from typing import AbstractSet, Dict, Iterable, List, Optional

from photoindex.core.services.trie_cache import TrieCache
from photoindex.domain.constants import (
    DEFAULT_EXCLUSION_LIST,
    DEFAULT_MAX_DEPTH,
    IMAGE_EXTENSIONS,
    PACKAGE_SUFFIXES,
    SCAN_BATCH_SIZE,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPERS
# ==============================================================================

def is_image_file(file_name: str, extensions: AbstractSet[str] = IMAGE_EXTENSIONS) -> bool:
    """Check a file name against a set of lowercase extensions (no dot)."""
    _, ext = os.path.splitext(file_name)
    return ext[1:].lower() in extensions


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_package(name: str) -> bool:
    """Detect bundle-like directories (e.g. 'Photos Library.photoslibrary')."""
    _, ext = os.path.splitext(name)
    return ext.lower() in PACKAGE_SUFFIXES


def count_images(folder: str, extensions: AbstractSet[str] = IMAGE_EXTENSIONS) -> int:
    """
    Count the image files directly inside a folder.

    Returns:
        int: Number of images, 0 if the folder cannot be listed.
    """
    try:
        with os.scandir(folder) as entries:
            return sum(1 for entry in entries if is_image_file(entry.name, extensions))
    except OSError as e:
        logger.debug(f"Scanner: Cannot list '{folder}': {e}")
        return 0


# ==============================================================================
# SCANNER
# ==============================================================================

class DirectoryScanner:
    """
    Bounded, exclusion-aware search for image folders.

    Args:
        trie_cache: Index consulted before walking and updated afterwards.
        max_depth: Maximum nesting level below the root that is visited.
        exclusion_list: Absolute paths that are never visited. Matching is
                        by exact string, so subfolders of an excluded path
                        are only pruned when the walk reaches the excluded
                        path itself.
    """

    def __init__(
            self,
            trie_cache: TrieCache,
            max_depth: int = DEFAULT_MAX_DEPTH,
            exclusion_list: Optional[Iterable[str]] = None,
    ) -> None:
        self.trie_cache = trie_cache
        self.max_depth = max_depth
        self.image_extensions = IMAGE_EXTENSIONS
        self.exclusion_list = frozenset(
            DEFAULT_EXCLUSION_LIST if exclusion_list is None else exclusion_list
        )
        self._memo: Dict[str, List[str]] = {}

    def clear_memo(self) -> None:
        self._memo.clear()

    def scan_for_image_folders(self, root: str, max_depth: Optional[int] = None) -> List[str]:
        """
        Find every folder under root that directly contains images.

        Lookup order:
        1. Results already computed for root in this process.
        2. The persistent index, when root itself was previously scanned.
        3. A filesystem walk, whose result is memoized and indexed.

        Args:
            root: Absolute path of the folder to scan.
            max_depth: Overrides the configured depth bound for this walk.

        Returns:
            List[str]: A fresh list of image folder paths. Root is included when it has
                       images of its own.
        """
        memoized = self._memo.get(root)
        if memoized is not None:
            logger.debug(f"Scanner: Memo hit for {root}")
            return list(memoized)

        if self.trie_cache.search(root):
            logger.debug(f"Scanner: Index hit for {root}")
            cached = list(self.trie_cache.retrieve_subpaths(root))
            self._memo[root] = list(cached)
            return cached

        depth_limit = self.max_depth if max_depth is None else max_depth
        logger.info(f"Scanner: Walking {root} (max depth {depth_limit})")
        folders = self._walk(root, depth_limit)

        self._memo[root] = list(folders)

        self.trie_cache.insert(root)
        for folder in folders:
            self.trie_cache.insert(folder)

        logger.info(f"Scanner: Found {len(folders)} image folders under {root}")
        return folders

    # --------------------------------------------------------------------------
    # FILESYSTEM WALK
    # --------------------------------------------------------------------------

    def _walk(self, root: str, depth_limit: int) -> List[str]:
        """
        Walk the tree below root, recording folders that hold images.

        A folder at nesting level depth_limit is still inspected, but its
        children are not. Excluded paths are neither inspected nor entered.
        """
        folders: List[str] = []
        batch: List[str] = []

        def record(path: str) -> None:
            batch.append(path)
            if len(batch) >= SCAN_BATCH_SIZE:
                folders.extend(batch)
                batch.clear()

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            depth = self._depth_of(root, dirpath)

            if any(is_image_file(name, self.image_extensions) for name in filenames):
                record(dirpath)

            # The root's own images count even when the root is excluded
            if depth == 0 and root in self.exclusion_list:
                logger.debug(f"Scanner: Root {root} is excluded, not descending")
                dirnames[:] = []
                continue

            kept: List[str] = []
            for name in dirnames:
                if is_hidden(name):
                    continue
                child = os.path.join(dirpath, name)
                if child in self.exclusion_list:
                    logger.debug(f"Scanner: Skipping excluded path {child}")
                    continue
                if depth + 1 > depth_limit:
                    continue
                if is_package(name):
                    if count_images(child, self.image_extensions) > 0:
                        record(child)
                    continue
                kept.append(name)

            if depth + 1 >= depth_limit:
                # Children at the limit are inspected here without entering them
                for name in kept:
                    child = os.path.join(dirpath, name)
                    if count_images(child, self.image_extensions) > 0:
                        record(child)
                kept = []

            dirnames[:] = kept

        folders.extend(batch)
        return folders

    @staticmethod
    def _depth_of(root: str, dirpath: str) -> int:
        rel = os.path.relpath(dirpath, root)
        if rel == os.curdir:
            return 0
        return rel.count(os.sep) + 1

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug(f"Scanner: Skipping unreadable path: {error}")
