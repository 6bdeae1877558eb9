# trie.py
# Prefix trie indexing catalog words for prefix checks and completions.
# Every loaded word ends in a terminator node so that a word which is also
# the prefix of a longer word ("ann" / "anne") keeps its own branch.
# Traversal is iterative, so long words never hit the recursion limit.

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from .errors import ReservedCharacterInInput
from .node import TrieNode
from ..utils.logger_utils import get_logger

DEFAULT_TERMINATOR = "$"
DEFAULT_ROOT_VALUE = " "

log = get_logger(__name__)


class Trie:
    """
    Trie to store catalog words, used by the CLI and any other collaborator for:
     - existence checks on a typed prefix (match_prefix)
     - listing every loaded word that starts with a prefix (find_completions)
    Loading must finish before queries run; there is no locking.
    """

    def __init__(
        self,
        terminator: str = DEFAULT_TERMINATOR,
        root_value: str = DEFAULT_ROOT_VALUE,
        sort_completions: bool = True,
    ) -> None:
        if not isinstance(terminator, str) or len(terminator) != 1:
            raise ValueError(f"terminator must be a single character, got {terminator!r}")
        self._terminator = terminator
        self._root = TrieNode(root_value)
        self._sort = sort_completions
        self._size = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def terminator(self) -> str:
        return self._terminator

    # insertion -----------------------------------------------------
    def load(self, word: str) -> bool:
        """
        Insert a word into the trie.
        Characters are stored as given (no case folding).
        Returns True when the word was new, False for an empty word or a repeat.
        Raises ReservedCharacterInInput if the word contains the terminator;
        the trie is left untouched in that case.
        """
        if not word:
            return False
        if self._terminator in word:
            raise ReservedCharacterInInput(word, self._terminator)

        node = self._root
        for ch in word:
            node = node.ensure_child(ch)

        if node.has_child(self._terminator):
            return False
        node.ensure_child(self._terminator)
        self._size += 1
        log.debug(f"loaded {word!r} ({self._size} words)")
        return True

    def load_many(self, words: Iterable[str]) -> int:
        """Load every word in order and return how many were new."""
        added = 0
        for w in words:
            if self.load(w):
                added += 1
        return added

    # search/traversal ---------------------------------------------------------
    def _walk(self, prefix: str) -> Optional[TrieNode]:
        """Node reached by following `prefix` from the root, or None."""
        if self._terminator in prefix:
            # only real word characters can name a prefix
            return None
        node = self._root
        for ch in prefix:
            node = node.get_child(ch)
            if node is None:
                return None
        return node

    def match_prefix(self, prefix: str) -> bool:
        """True if any loaded word starts with `prefix` (always True for "")."""
        return self._walk(prefix) is not None

    def find_completions(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """
        Return every loaded word starting with `prefix`, the prefix itself
        included when it was loaded as a word.
        Sorted ascending unless the trie was built with sort_completions=False.
        `limit` keeps only the first N results.
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        start = self._walk(prefix)
        if start is None:
            return []

        out: List[str] = []
        stack: List[Tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, acc = stack.pop()
            for child in node.children():
                if child.value == self._terminator:
                    # terminator nodes are leaves, emit without the symbol
                    out.append(acc)
                else:
                    stack.append((child, acc + child.value))

        if self._sort:
            out.sort()
        if limit is not None:
            del out[limit:]
        return out

    # convenience/debugging -----------------------------------------------------
    def words(self) -> List[str]:
        return self.find_completions("")

    def __contains__(self, word: object) -> bool:
        """True if `word` was loaded as a full word, not just a prefix."""
        if not isinstance(word, str) or not word:
            return False
        node = self._walk(word)
        return node is not None and node.has_child(self._terminator)

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "Trie:" + self._root.dump()

    def __repr__(self) -> str:
        return f"Trie(words={self._size}, terminator={self._terminator!r})"
