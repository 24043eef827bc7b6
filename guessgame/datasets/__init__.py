from .validator import validate_wordlist, pretty_summary
from .io import DEFAULT_WORDS_PATH, read_lines, load_words, normalize_words

__all__ = ["validate_wordlist", "pretty_summary", "DEFAULT_WORDS_PATH",
           "read_lines", "load_words", "normalize_words"]
