# errors.py
# Error kinds raised by the catalog autocompleter.
# Absence of a match is never an error: match_prefix returns False and
# find_completions returns an empty list.


class CatalogAutocompleterError(Exception):
    """Base class for every error raised by this package."""


class ReservedCharacterInInput(CatalogAutocompleterError, ValueError):
    """
    Raised when a word handed to Trie.load contains the terminator symbol.
    The terminator marks end-of-word inside the trie, so a word carrying it
    would corrupt the structure (e.g. "ca$t" would make "ca" look loaded).
    """

    def __init__(self, word: str, character: str) -> None:
        self.word = word
        self.character = character
        super().__init__(
            f"word {word!r} contains the reserved terminator {character!r}"
        )
