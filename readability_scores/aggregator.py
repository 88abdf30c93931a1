"""
Single-pass aggregation of word and sentence counts.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from .classifier import WordClassifier
from .options import InternalConfig
from .tokenizer import SentenceToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Counts:
    """Raw tallies fed to the readability formulas."""

    letter: int = 0
    syllable: int = 0
    word: int = 0
    sentence: int = 0
    polysyllabic_word: int = 0  # Every word with 3+ syllables
    complex_polysyllabic_word: int = 0  # Polysyllables that are not proper nouns
    unfamiliar_word: int = 0  # Unique Spache unfamiliar words
    difficult_word: int = 0  # Every Dale-Chall difficult word occurrence

    @property
    def character(self) -> int:
        return self.letter

    def as_formula_input(self) -> Dict[str, int]:
        """Counts keyed the way the formula functions expect them."""
        # "polysillabic" is the spelling the formulas use
        return {
            "complexPolysillabicWord": self.complex_polysyllabic_word,
            "polysillabicWord": self.polysyllabic_word,
            "unfamiliarWord": self.unfamiliar_word,
            "difficultWord": self.difficult_word,
            "syllable": self.syllable,
            "sentence": self.sentence,
            "word": self.word,
            "character": self.character,
            "letter": self.letter
        }


@dataclass(frozen=True)
class Aggregation:
    """Counts plus the flagged words collected along the way."""

    counts: Counts
    polysyllabic_words: Tuple[str, ...] = ()
    spache_unfamiliar_words: Tuple[str, ...] = ()
    dale_chall_difficult_words: Tuple[str, ...] = ()


def aggregate(sentences: Iterable[SentenceToken], config: InternalConfig,
              classifier: WordClassifier) -> Aggregation:
    """
    Walk every sentence and word once, accumulating counts.

    Args:
        sentences: Tokenized sentences in document order
        config: Resolved configuration for this call
        classifier: Word classifier built for the same configuration

    Returns:
        Aggregation with frozen counts and collected word lists
    """
    letters = syllable_count = word_count = sentence_count = 0
    polysyllabic_count = complex_polysyllabic_count = 0
    polysyllabic_words = []
    unfamiliar_words = []
    unfamiliar_seen = set()
    difficult_words = []

    for sentence in sentences:
        sentence_count += 1

        for token in sentence.words:
            word = classifier.classify(token.value)

            word_count += 1
            syllable_count += word.syllables
            letters += word.letters

            # Complex words for smog and gunning-fog are those with 3+ syllables
            if word.polysyllabic:
                polysyllabic_count += 1

                if word.complex_polysyllabic:
                    complex_polysyllabic_count += 1
                    if config.difficult_words:
                        polysyllabic_words.append(word.value)

            # Spache keeps each unfamiliar surface form once, in document order
            if word.spache_familiar is False and word.value not in unfamiliar_seen:
                unfamiliar_seen.add(word.value)
                unfamiliar_words.append(word.value)

            # Dale-Chall keeps every occurrence
            if word.dale_chall_familiar is False:
                difficult_words.append(word.value)

    counts = Counts(
        letter=letters,
        syllable=syllable_count,
        word=word_count,
        sentence=sentence_count,
        polysyllabic_word=polysyllabic_count,
        complex_polysyllabic_word=complex_polysyllabic_count,
        unfamiliar_word=len(unfamiliar_words),
        difficult_word=len(difficult_words)
    )
    logger.debug(f"Aggregated counts: {counts}")

    return Aggregation(
        counts=counts,
        polysyllabic_words=tuple(polysyllabic_words),
        spache_unfamiliar_words=tuple(unfamiliar_words),
        dale_chall_difficult_words=tuple(difficult_words)
    )
