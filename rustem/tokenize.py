import re
import logging
from .stemmer import get_word_base
from .errors import InvalidTextError
from typing import Callable, Generator, Optional

logger = logging.getLogger(__name__)


class Tokenizer:

    # letters of any script, digits and underscore
    TOKEN_REGEX = re.compile(r"\w+")

    def __init__(self, stem: Optional[Callable[[str], str]] = None):
        self._stem = stem if stem is not None else get_word_base

    def tokens(self, doc: str) -> list[str]:
        """
        Split the text into word tokens, dropping punctuation and whitespace

        Raises:
            InvalidTextError: doc is not a string
        """
        if not isinstance(doc, str):
            raise InvalidTextError(f"text must be str, not {type(doc).__name__}")

        tokens = self.__class__.TOKEN_REGEX.findall(doc)
        logger.debug("found %d tokens", len(tokens))
        return tokens

    def tokenize(self, doc: str) -> Generator[str, None, None]:
        for token in self.tokens(doc):
            yield self._stem(token)

    def normalize(self, doc: str) -> str:
        """Stem every token and join the stems with a single space"""
        return " ".join(self.tokenize(doc))


_tokenizer = Tokenizer()


def normalize_text(text: str) -> str:
    """Normalize the text with the shared tokenizer."""
    return _tokenizer.normalize(text)
