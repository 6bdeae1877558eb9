# node.py
# Single vertex of the prefix trie: one character plus its children.

from __future__ import annotations
from typing import Collection, Dict, Optional, Set


class TrieNode:
    """
    A single node in the Trie.
    value: the character held by this node (fixed at construction)
    children: char -> TrieNode, each child owned exclusively by this node
    """

    __slots__ = ("_value", "_children")

    def __init__(self, value: str) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"node value must be a single character, got {value!r}")
        self._value = value
        self._children: Dict[str, TrieNode] = {}

    @property
    def value(self) -> str:
        """Character contained in this node."""
        return self._value

    def children(self) -> Collection[TrieNode]:
        """Read-only view of the child nodes. No ordering guarantee."""
        return self._children.values()

    def child_values(self) -> Set[str]:
        return set(self._children)

    def ensure_child(self, c: str) -> TrieNode:
        """
        Make sure a child exists for `c` and return it.
        Creates the child the first time `c` is seen, otherwise a no-op.
        """
        child = self._children.get(c)
        if child is None:
            child = TrieNode(c)
            self._children[c] = child
        return child

    def get_child(self, c: str) -> Optional[TrieNode]:
        return self._children.get(c)

    def has_child(self, c: str) -> bool:
        return c in self._children

    def __repr__(self) -> str:
        kids = ", ".join(repr(ch) for ch in sorted(self._children))
        return f"TrieNode(value={self._value!r}, children=[{kids}])"

    def dump(self) -> str:
        """
        Whole subtree as nested text, children sorted:
            'a'{'n'{'$', 'e'{'$'}}}
        Built with an explicit stack so deep words are fine.
        """
        parts = []
        stack: list = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            parts.append(repr(item._value))
            kids = sorted(item._children)
            if not kids:
                continue
            parts.append("{")
            stack.append("}")
            for i, ch in enumerate(reversed(kids)):
                if i:
                    stack.append(", ")
                stack.append(item._children[ch])
        return "".join(parts)
