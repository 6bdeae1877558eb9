"""
catalog_autocompleter.core

The prefix index behind the catalog autocompleter.
Contains:
 - TrieNode, one character plus its children
 - Trie, load / match_prefix / find_completions over the nodes
 - CompletionIndex, the protocol collaborators program against
 - the package's error kinds
"""

from .errors import CatalogAutocompleterError, ReservedCharacterInInput
from .node import TrieNode
from .protocols import CompletionIndex
from .trie import DEFAULT_ROOT_VALUE, DEFAULT_TERMINATOR, Trie

__all__ = [
    "CatalogAutocompleterError",
    "ReservedCharacterInInput",
    "TrieNode",
    "CompletionIndex",
    "Trie",
    "DEFAULT_TERMINATOR",
    "DEFAULT_ROOT_VALUE",
]
