import logging
from functools import lru_cache

from line_profiler import profile

from . import suffixes
from .errors import InvalidWordError

logger = logging.getLogger(__name__)


class RussianStemmer:
    """
    Porter stemmer adapted to Russian morphology.

    The word is split into regions (RV after the first vowel, R2 after the
    second vowel-consonant transition that follows it) and endings are
    removed in four steps. Each step looks endings up in the ordered tables
    from ``suffixes``; the first listed ending that matches is removed, not
    the longest one.

    The stemmer keeps no per-word state, so a single instance can be shared
    between threads.
    """

    VOWELS = frozenset("аеёиоуыэюя")

    def stem(self, word: str) -> str:
        """
        Return the stem of the word. A region boundary of 0 (no lowercase
        Cyrillic vowel after the first letter) leaves the whole word open to
        ending removal, so "я" and "abcь" are reduced too.

        Raises:
            InvalidWordError: word is not a string
        """
        if not isinstance(word, str):
            raise InvalidWordError(
                f"word must be str, not {type(word).__name__}"
            )

        return self._stem(word)

    @lru_cache(maxsize=1024)
    def _stem(self, word: str) -> str:
        rv, r2 = self.find_regions(word)
        logger.debug("regions of %r: rv=%d r2=%d", word, rv, r2)

        stem = self.step_1(word, rv)
        stem = self.step_2(stem, rv)
        stem = self.step_3(stem, r2)
        stem = self.step_4(stem, rv)

        logger.debug("stem of %r is %r", word, stem)
        return stem

    def is_vowel(self, char: str) -> bool:
        return char in self.__class__.VOWELS

    def find_regions(self, word: str) -> tuple[int, int]:
        rv, r2 = 0, 0
        state = 0

        for i in range(1, len(word)):
            prev, char = word[i - 1], word[i]

            if state == 0:
                if self.is_vowel(char):
                    rv = i + 1
                    state = 1
            elif self.is_vowel(prev) and not self.is_vowel(char):
                if state == 2:
                    r2 = i + 1
                    break

                state = 2

        return rv, r2

    @profile
    def remove_endings(
        self, word: str, region: int, groups: tuple[tuple[str, ...], ...]
    ) -> tuple[str, bool]:
        """
        Remove one ending of ``groups`` found in ``word[region:]``.

        With two suffix tuples the first one only matches after "а" or "я"
        (the vowel itself is kept), the second one is the fallback.
        Returns the new word and whether anything was removed.
        """
        region = min(region, len(word))
        prefix, tail = word[:region], word[region:]

        if len(groups) > 1:
            for suffix in groups[0]:
                if tail.endswith(
                    tuple(vowel + suffix for vowel in suffixes.PRECEDING_VOWELS)
                ):
                    return prefix + tail[: -len(suffix)], True

            groups = groups[1:]

        for suffix in groups[0]:
            if tail.endswith(suffix):
                return prefix + tail[: -len(suffix)], True

        return word, False

    def step_1(self, word: str, rv: int) -> str:
        word, removed = self.remove_endings(word, rv, suffixes.PERFECTIVE_GERUND)
        if removed:
            return word

        word, _ = self.remove_endings(word, rv, suffixes.REFLEXIVE)

        for groups in (suffixes.PARTICIPLE, suffixes.ADJECTIVAL):
            word, removed = self.remove_endings(word, rv, groups)
            if removed:
                return word

        word, removed = self.remove_endings(word, rv, suffixes.VERB)
        if not removed:
            word, _ = self.remove_endings(word, rv, suffixes.NOUN)

        return word

    def step_2(self, word: str, rv: int) -> str:
        word, _ = self.remove_endings(word, rv, suffixes.TRAILING_I)
        return word

    def step_3(self, word: str, r2: int) -> str:
        word, _ = self.remove_endings(word, r2, suffixes.DERIVATIONAL)
        return word

    def step_4(self, word: str, rv: int) -> str:
        word, removed = self.remove_endings(word, rv, suffixes.NN)
        if removed:
            word += "н"

        word, _ = self.remove_endings(word, rv, suffixes.SUPERLATIVE)
        word, _ = self.remove_endings(word, rv, suffixes.SOFT_SIGN)

        return word


_stemmer = RussianStemmer()


def get_word_base(word: str) -> str:
    """Stem a single word with the shared stemmer."""
    return _stemmer.stem(word)
