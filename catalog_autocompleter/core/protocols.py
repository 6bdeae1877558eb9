# catalog_autocompleter/core/protocols.py
"""
Protocol interface for the completion index the CLI and profiling harness
talk to. Collaborators depend on this rather than on Trie so a different
index can be dropped in during tests.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class CompletionIndex(Protocol):
    """Minimal interface for a word index answering prefix queries."""

    def load(self, word: str) -> bool:
        ...

    def load_many(self, words: Iterable[str]) -> int:
        ...

    def match_prefix(self, prefix: str) -> bool:
        ...

    def find_completions(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """
        Return the loaded words starting with `prefix`.
        """
        ...

    def __len__(self) -> int:
        ...
