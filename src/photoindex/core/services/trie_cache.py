from __future__ import annotations

"""
Persistent Directory Index.

A prefix tree over path components recording which directories were found
to contain images. Lookups are pure in-memory walks; the whole tree is
persisted as a single JSON document in the user data directory and can be
checked against the live filesystem to drop entries for deleted folders.

Persistence is fail-safe: a missing or corrupt file means "no cache", and a
failed write is logged rather than raised.
"""

import json
import logging
import os
from typing import List, Optional, Set, Tuple

from photoindex.domain.constants import TRIE_CACHE_FILENAME
from photoindex.domain.trie_models import TrieNode
from photoindex.infra.fs import (
    get_user_data_dir,
    join_child,
    join_components,
    path_exists,
    split_path,
    write_json_atomic,
)

logger = logging.getLogger(__name__)


def get_default_cache_file() -> str:
    """Resolve the per-user location of the persisted index."""
    return os.path.join(get_user_data_dir(), TRIE_CACHE_FILENAME)


class TrieCache:
    """
    Prefix tree of directory paths with disk persistence.

    Not safe for concurrent mutation; callers serialize access.
    """

    def __init__(self, cache_file: Optional[str] = None) -> None:
        """
        Create an empty index.

        Args:
            cache_file: Target file for save_to_disk. Defaults to the file in
                        the user data directory.
        """
        self.root = TrieNode(value="")
        self.cache_file = cache_file or get_default_cache_file()
        self.dirty = False

    # -------------------------------------------------------------------------
    # QUERIES AND MUTATIONS
    # -------------------------------------------------------------------------

    def insert(self, path: str) -> None:
        """Record a path, creating intermediate components as needed."""
        node = self.root
        for component in split_path(path):
            child = node.children.get(component)
            if child is None:
                child = TrieNode(value=component)
                node.children[component] = child
                self.dirty = True
            node = child

        if not node.is_end_of_path:
            node.is_end_of_path = True
            self.dirty = True

    def search(self, path: str) -> bool:
        """
        Check whether the exact path was inserted.

        A path that only exists as a prefix of inserted paths is not a hit.
        """
        node = self.retrieve_trie_node(path)
        return node is not None and node.is_end_of_path

    def retrieve_trie_node(self, path: str) -> Optional[TrieNode]:
        """Return the node at the end of the component chain, if present."""
        node = self.root
        for component in split_path(path):
            node = node.children.get(component)
            if node is None:
                return None
        return node

    def retrieve_subpaths(self, path: str) -> Set[str]:
        """
        Collect every inserted path at or below the given path.

        Result paths are rebuilt from the query path, so they use the same
        form (absolute or relative) as the caller supplied.

        Args:
            path: Path whose chain must exist in the index. Whether the path
                  itself was inserted does not matter.

        Returns:
            Set[str]: Inserted paths in the subtree, empty if the chain is missing.
        """
        start = self.retrieve_trie_node(path)
        if start is None:
            return set()

        prefix = path.rstrip("\\/") or path
        found: Set[str] = set()
        stack: List[Tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, current = stack.pop()
            if node.is_end_of_path:
                found.add(current)
            for name, child in node.children.items():
                stack.append((child, join_child(current, name)))
        return found

    def paths(self) -> Set[str]:
        """Return every inserted path as an absolute path."""
        return {join_components(components) for components in self._marked_components()}

    def clear(self) -> None:
        """Drop every entry."""
        if self.root.children or self.root.is_end_of_path:
            self.dirty = True
        self.root = TrieNode(value="")

    def __len__(self) -> int:
        return sum(1 for _ in self._marked_components())

    def _remove(self, path: str) -> None:
        """
        Unmark a path and prune the branch it leaves behind.

        Parents are tracked on an explicit stack during the descent. On the
        way back up a node is detached only when it has no children and is
        not itself an inserted path, so live entries are never touched.
        """
        node = self.root
        trail: List[Tuple[TrieNode, str]] = []
        for component in split_path(path):
            child = node.children.get(component)
            if child is None:
                return
            trail.append((node, component))
            node = child

        if node.is_end_of_path:
            node.is_end_of_path = False
            self.dirty = True

        while trail and not node.children and not node.is_end_of_path:
            parent, key = trail.pop()
            del parent.children[key]
            self.dirty = True
            node = parent

    def _marked_components(self) -> List[List[str]]:
        result: List[List[str]] = []
        stack: List[Tuple[TrieNode, List[str]]] = [(self.root, [])]
        while stack:
            node, components = stack.pop()
            if node.is_end_of_path:
                result.append(components)
            for name, child in node.children.items():
                stack.append((child, components + [name]))
        return result

    # -------------------------------------------------------------------------
    # INVALIDATION
    # -------------------------------------------------------------------------

    def invalidate_cache(self) -> List[str]:
        """
        Drop entries whose directories no longer exist on disk.

        Walks the whole tree once and checks every inserted path. If any
        entry was removed, the updated index is written back to disk.

        Returns:
            List[str]: The stale paths that were removed.
        """
        stale = [
            full_path
            for full_path in (join_components(c) for c in self._marked_components())
            if not path_exists(full_path)
        ]

        for full_path in stale:
            self._remove(full_path)

        if stale:
            logger.info(f"TrieCache: Invalidated {len(stale)} stale entries.")
            self.save_to_disk()
        else:
            logger.debug("TrieCache: All cached entries are still valid.")

        return stale

    # -------------------------------------------------------------------------
    # PERSISTENCE
    # -------------------------------------------------------------------------

    def save_to_disk(self) -> bool:
        """
        Write the whole tree to the cache file.

        Returns:
            bool: True on success. Failures are logged, never raised.
        """
        ok, err = write_json_atomic(self.cache_file, {"root": self.root.to_dict()})
        if not ok:
            logger.error(f"TrieCache: Failed to save cache to '{self.cache_file}': {err}")
            return False

        self.dirty = False
        logger.debug(f"TrieCache: Saved to {self.cache_file}")
        return True

    @classmethod
    def load_from_disk(cls, cache_file: Optional[str] = None) -> Optional["TrieCache"]:
        """
        Restore an index from its cache file.

        Args:
            cache_file: Source file. Defaults to the user data directory file.

        Returns:
            Optional[TrieCache]: The restored index, or None if the file is
                                 missing or unreadable.
        """
        cache = cls(cache_file)

        if not os.path.exists(cache.cache_file):
            logger.debug(f"TrieCache: No cache file at {cache.cache_file}")
            return None

        try:
            with open(cache.cache_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict) or "root" not in data:
                raise ValueError("missing 'root' entry")
            cache.root = TrieNode.from_dict(data["root"])
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"TrieCache: Ignoring unreadable cache file '{cache.cache_file}': {e}")
            return None

        return cache
