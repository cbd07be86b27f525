from __future__ import annotations

"""
Unit tests for the Folder Tree Builder.

Verifies the TrieNode to FolderNode conversion: path reconstruction,
sibling ordering, the depth guard, and optional image counting.
"""

from typing import Dict

from photoindex.core.analysis.tree_builder import FolderTreeBuilder
from photoindex.core.services.trie_cache import TrieCache


def _index(*paths: str) -> TrieCache:
    cache = TrieCache("/nonexistent/TrieCache.json")
    for p in paths:
        cache.insert(p)
    return cache


def test_build_mirrors_children_with_full_paths() -> None:
    cache = _index("/pics/2023/summer", "/pics/2023/winter", "/pics/misc")
    node = cache.retrieve_trie_node("/pics")

    tree = FolderTreeBuilder().build(node, "/pics")

    assert tree.url == "/pics"
    assert [c.url for c in tree.subfolders] == ["/pics/2023", "/pics/misc"]
    year = tree.subfolders[0]
    assert [c.url for c in year.subfolders] == ["/pics/2023/summer", "/pics/2023/winter"]
    assert all(not c.subfolders for c in year.subfolders)


def test_build_includes_intermediate_nodes() -> None:
    # Intermediate components appear even if they were never inserted
    cache = _index("/a/b/c")

    tree = FolderTreeBuilder().build(cache.retrieve_trie_node("/a"), "/a")

    assert [n.url for n in tree.walk()] == ["/a", "/a/b", "/a/b/c"]


def test_build_respects_depth_guard() -> None:
    cache = _index("/r/1/2/3/4")

    tree = FolderTreeBuilder(max_depth=2).build(cache.retrieve_trie_node("/r"), "/r")

    assert [n.url for n in tree.walk()] == ["/r", "/r/1", "/r/1/2"]


def test_build_without_counter_reports_zero() -> None:
    cache = _index("/r/x")

    tree = FolderTreeBuilder().build(cache.retrieve_trie_node("/r"), "/r")

    assert [n.image_count for n in tree.walk()] == [0, 0]


def test_build_uses_image_counter() -> None:
    counts: Dict[str, int] = {"/r": 0, "/r/x": 7}
    cache = _index("/r/x")

    builder = FolderTreeBuilder(image_counter=lambda p: counts[p])
    tree = builder.build(cache.retrieve_trie_node("/r"), "/r")

    assert tree.image_count == 0
    assert tree.subfolders[0].image_count == 7


def test_build_tolerates_trailing_separator_in_base_path() -> None:
    cache = _index("/r/x")

    tree = FolderTreeBuilder().build(cache.retrieve_trie_node("/r"), "/r/")

    assert tree.subfolders[0].url == "/r/x"
