from .cli import CLI, load_words, main, read_word_file

__all__ = ["CLI", "load_words", "main", "read_word_file"]
