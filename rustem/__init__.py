"""
Porter-style stemmer for Russian words and a text normalizer built on it.
"""

from .errors import InvalidTextError, InvalidWordError
from .stemmer import RussianStemmer, get_word_base
from .tokenize import Tokenizer, normalize_text

__all__ = [
    "InvalidTextError",
    "InvalidWordError",
    "RussianStemmer",
    "Tokenizer",
    "get_word_base",
    "normalize_text",
]
