from .validator import validate_start_words, pretty_summary
from .io import read_lines, read_words
from .source import DEFAULT_WORDLIST, WordListError, WordSource, load_root_words, pick_root_word

__all__ = [
    "validate_start_words", "pretty_summary", "read_words", "DEFAULT_WORDLIST",
    "WordListError", "WordSource", "load_root_words", "pick_root_word",
]
