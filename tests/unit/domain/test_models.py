from __future__ import annotations

"""
Unit tests for the domain data models.

Verifies TrieNode serialization and FolderNode presentation helpers.
"""

import pytest

from photoindex.domain.tree_models import FolderNode
from photoindex.domain.trie_models import TrieNode


def test_trie_node_round_trip() -> None:
    root = TrieNode(value="")
    child = TrieNode(value="a", is_end_of_path=True)
    child.children["b"] = TrieNode(value="b", is_end_of_path=True)
    root.children["a"] = child

    restored = TrieNode.from_dict(root.to_dict())

    assert restored == root


def test_trie_node_defaults() -> None:
    node = TrieNode(value="x")

    assert node.children == {}
    assert node.is_end_of_path is False
    assert TrieNode.from_dict({"value": "x"}) == node


@pytest.mark.parametrize("data", [
    None,
    "text",
    {"children": {}},
    {"value": "a", "children": {"b": 1}},
    {"value": "a", "isEndOfPath": "yes"},
])
def test_trie_node_rejects_malformed_data(data: object) -> None:
    with pytest.raises(ValueError):
        TrieNode.from_dict(data)


def test_folder_node_label_with_images() -> None:
    assert FolderNode(url="/Users/me/Vacation", image_count=12).display_label() == "Vacation (12)"


def test_folder_node_label_without_images() -> None:
    assert FolderNode(url="/Users/me/Vacation").display_label() == "Vacation (+)"


def test_folder_node_name_of_filesystem_root() -> None:
    assert FolderNode(url="/").name == "/"


def test_folder_node_walk_is_preorder() -> None:
    tree = FolderNode(url="/a", subfolders=[
        FolderNode(url="/a/b", subfolders=[FolderNode(url="/a/b/c")]),
        FolderNode(url="/a/d"),
    ])

    assert [n.url for n in tree.walk()] == ["/a", "/a/b", "/a/b/c", "/a/d"]
