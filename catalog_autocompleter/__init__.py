"""
catalog_autocompleter

Prefix trie for indexing catalog (product/inventory) names and answering
prefix-match and completion queries, with a small rich-based CLI on top.
"""

from .core import (
    CatalogAutocompleterError,
    CompletionIndex,
    ReservedCharacterInInput,
    Trie,
    TrieNode,
)

__all__ = [
    "CatalogAutocompleterError",
    "CompletionIndex",
    "ReservedCharacterInInput",
    "Trie",
    "TrieNode",
]

__version__ = "0.1.0"
