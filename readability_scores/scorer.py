"""
Main readability scorer that ties tokenizing, classification and formulas together.
"""

import logging
import threading
from typing import Callable, Iterable, Optional

from .aggregator import aggregate
from .calculator import calculate_scores
from .classifier import WordClassifier, count_syllables
from .models import ReadabilityScoreResult
from .options import OptionsInput, resolve_config
from .settings import Settings, settings as default_settings
from .tokenizer import tokenize
from .vocabulary import DALE_CHALL, SPACHE, load_vocabulary
from .word_lists import WordListIndex

logger = logging.getLogger(__name__)


class ReadabilityScorer:
    """
    Readability scoring engine.

    A scorer owns the Spache and Dale-Chall word list indexes and reuses them
    across calls. Word lists are loaded, and their stems indexed, the first
    time a call needs them.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 spache_words: Optional[Iterable[str]] = None,
                 dale_chall_words: Optional[Iterable[str]] = None,
                 syllable_counter: Callable[[str], int] = count_syllables):
        self.settings = settings if settings is not None else default_settings
        self.syllable_counter = syllable_counter
        self.logger = logging.getLogger(__name__)

        self._spache_words = tuple(spache_words) if spache_words is not None else None
        self._dale_chall_words = tuple(dale_chall_words) if dale_chall_words is not None else None
        self._spache_index: Optional[WordListIndex] = None
        self._dale_chall_index: Optional[WordListIndex] = None
        self._lock = threading.Lock()

        if self.settings.preload_word_lists:
            self.spache_index.ensure_built()
            self.dale_chall_index.ensure_built()

    @property
    def spache_index(self) -> WordListIndex:
        if self._spache_index is None:
            with self._lock:
                if self._spache_index is None:
                    words = self._spache_words
                    if words is None:
                        words = load_vocabulary(SPACHE, self.settings.spache_word_list_path)
                    self._spache_index = WordListIndex(SPACHE, words)
        return self._spache_index

    @property
    def dale_chall_index(self) -> WordListIndex:
        if self._dale_chall_index is None:
            with self._lock:
                if self._dale_chall_index is None:
                    words = self._dale_chall_words
                    if words is None:
                        words = load_vocabulary(DALE_CHALL, self.settings.dale_chall_word_list_path)
                    self._dale_chall_index = WordListIndex(DALE_CHALL, words)
        return self._dale_chall_index

    def score(self, text: Optional[str] = None,
              options: OptionsInput = None) -> Optional[ReadabilityScoreResult]:
        """
        Compute readability counts and scores for a text.

        Args:
            text: Plain input text
            options: Sparse options selecting metrics and word lists

        Returns:
            ReadabilityScoreResult, or None when there is no text to score
        """
        if not text:
            self.logger.warning("Empty text provided for readability scoring")
            return None

        config = resolve_config(options)
        sentences = tokenize(text)

        spache_index = None
        if config.spache:
            spache_index = self.spache_index
            spache_index.ensure_built()

        dale_chall_index = None
        if config.dale_chall:
            dale_chall_index = self.dale_chall_index
            dale_chall_index.ensure_built()

        classifier = WordClassifier(
            config,
            spache_index=spache_index,
            dale_chall_index=dale_chall_index,
            syllable_counter=self.syllable_counter
        )
        aggregation = aggregate(sentences, config, classifier)
        result = calculate_scores(aggregation, config)

        self.logger.debug(
            f"Readability scoring completed: {result.word_count} words, "
            f"{result.sentence_count} sentences"
        )
        return result


# Global scorer instance
scorer = ReadabilityScorer()


def readability_scores(text: Optional[str] = None,
                       options: OptionsInput = None) -> Optional[ReadabilityScoreResult]:
    """Convenience function for scoring with the shared scorer."""
    return scorer.score(text, options)
