"""
Stem indexes over the familiar-word vocabularies.
"""

import logging
import threading
from typing import Callable, Dict, Iterable, Optional

from nltk.stem import PorterStemmer

logger = logging.getLogger(__name__)

_stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)


def stem_word(word: str) -> str:
    """Porter stem of a word. Words shorter than three letters are kept as is."""
    if len(word) < 3:
        return word
    return _stemmer.stem(word)


class WordListIndex:
    """
    Exact and stemmed lookup over one vocabulary.

    The stem index is built on first use and kept for the lifetime of the
    index. Entries containing an apostrophe are left out of it, so that
    contractions do not leave stray stems behind.
    """

    def __init__(self, name: str, vocabulary: Iterable[str],
                 stem: Optional[Callable[[str], str]] = None):
        self.name = name
        self.vocabulary = tuple(vocabulary)
        self._words = frozenset(self.vocabulary)
        self._stem = stem or stem_word
        self._stems: Optional[Dict[str, bool]] = None
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._stems is not None

    def ensure_built(self) -> None:
        """Build the stem index unless it already exists."""
        if self._stems is not None:
            return

        with self._lock:
            if self._stems is not None:
                return

            stems = {}
            for word in self.vocabulary:
                if "'" not in word:
                    stems[self._stem(word)] = True

            # Publish only the finished mapping
            self._stems = stems

        logger.debug(
            f"Built {self.name} stem index: {len(self.vocabulary)} words, {len(stems)} stems"
        )

    def has_stem(self, stem: str) -> bool:
        self.ensure_built()
        return self._stems.get(stem, False)

    def stem(self, word: str) -> str:
        return self._stem(word)

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self.vocabulary)
