from __future__ import annotations

"""
Path Trie Data Models.

Defines the node type of the persistent directory index. Each node holds a
single path component and owns its children outright; there are no parent
references, so the graph is a plain tree that serializes recursively.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class TrieNode:
    """
    A single path component in the directory index.

    Attributes:
        value: The path component (directory name). Empty for the root.
        children: Child nodes keyed by their component name.
        is_end_of_path: True when this exact path was explicitly inserted.
    """
    value: str
    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    is_end_of_path: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Encode the subtree rooted at this node as JSON-compatible data."""
        return {
            "value": self.value,
            "children": {name: child.to_dict() for name, child in self.children.items()},
            "isEndOfPath": self.is_end_of_path,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "TrieNode":
        """
        Decode a subtree produced by to_dict.

        Raises:
            ValueError: If the data does not have the expected shape.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Trie node must be an object, got {type(data).__name__}")

        value = data.get("value")
        children = data.get("children", {})
        is_end = data.get("isEndOfPath", False)

        if not isinstance(value, str):
            raise ValueError("Trie node 'value' must be a string")
        if not isinstance(children, dict):
            raise ValueError(f"Trie node '{value}' has malformed 'children'")
        if not isinstance(is_end, bool):
            raise ValueError(f"Trie node '{value}' has malformed 'isEndOfPath'")

        node = cls(value=value, is_end_of_path=is_end)
        for name, child_data in children.items():
            node.children[name] = cls.from_dict(child_data)
        return node
