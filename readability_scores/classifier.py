"""
Per-word classification: syllables, polysyllables and word familiarity.

Each decision is a small predicate over the word's surface text or its
normalized form, and ``WordClassifier`` composes them for one word at a time.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

import syllables

from .options import InternalConfig
from .word_lists import WordListIndex

POLYSYLLABLE_THRESHOLD = 3

INITIAL_CAPITAL = re.compile(r'^[A-Z]')
NUMBER_LITERAL = re.compile(r'^[1-9]\d{0,2}(,?\d{3})*$')

# Spache suffixes per https://readabilityformulas.com/spache-readability-formula.php
SPACHE_SUFFIXES = re.compile(r'(s|ing|ed)$')

# Dale-Chall suffixes per the Okapi Dale-Chall worksheet:
# s, ies, ing, n, ed, ied, ly, er, ier, est, iest
DALE_CHALL_SUFFIXES = re.compile(r'(s|ing|n|ed|ly|er|est)$')
DALE_CHALL_REMOVABLE_SUFFIXES = re.compile(r'(n|ly|(l?i)?er|(l?i)?est)$')
DALE_CHALL_LY_COMPARATIVES = re.compile(r'(lier|liest)$')


def normalize_word(value: str) -> str:
    """Lowercase a word, unify apostrophes and drop hyphens."""
    return value.lower().replace('’', "'").replace('‘', "'").replace('-', '')


def count_syllables(word: str) -> int:
    """Count syllables in a single word, at least one per word."""
    return max(syllables.estimate(word), 1)


def is_polysyllabic(syllable_count: int) -> bool:
    return syllable_count >= POLYSYLLABLE_THRESHOLD


def is_treated_as_proper_noun(value: str, caps_as_names: bool) -> bool:
    """A capitalized word counts as a proper noun when the rule is enabled."""
    return caps_as_names and INITIAL_CAPITAL.match(value) is not None


def is_number_literal(normalized: str) -> bool:
    return NUMBER_LITERAL.match(normalized) is not None


def is_spache_familiar(normalized: str, index: WordListIndex, proper_noun: bool = False) -> bool:
    """
    Check a word against the Spache list.

    A word is familiar when it is a proper noun, a listed word, a number, or
    a listed stem carrying one of the -s, -ing or -ed endings.
    """
    return (
        proper_noun
        or normalized in index
        or is_number_literal(normalized)
        or (SPACHE_SUFFIXES.search(normalized) is not None
            and index.has_stem(index.stem(normalized)))
    )


def passes_dale_chall_suffix_test(normalized: str, index: WordListIndex) -> bool:
    """
    Check whether a word is a listed Dale-Chall word plus an allowed ending.

    "lively" is on the list, so "livelier" and "liveliest" pass. "prick" is on
    the list but "prickly" is not, so "pricklier" and "prickliest" fail even
    though their stripped stem is known.
    """
    if DALE_CHALL_SUFFIXES.search(normalized) is None:
        return False

    base = DALE_CHALL_REMOVABLE_SUFFIXES.sub('', normalized, count=1)
    if not index.has_stem(index.stem(base)):
        return False

    # Unchanged means there was no -lier/-liest ending to begin with
    as_ly = DALE_CHALL_LY_COMPARATIVES.sub('ly', normalized, count=1)
    return as_ly == normalized or as_ly in index


def is_dale_chall_familiar(normalized: str, index: WordListIndex, proper_noun: bool = False) -> bool:
    # TODO: hyphenated words whose parts are all familiar, like battle-field, should be familiar too
    return (
        proper_noun
        or normalized in index
        or is_number_literal(normalized)
        or passes_dale_chall_suffix_test(normalized, index)
    )


@dataclass(frozen=True)
class WordClassification:
    """Everything the aggregator needs to know about one word."""

    value: str
    normalized: str
    syllables: int
    polysyllabic: bool
    proper_noun: bool
    # None when the metric is disabled and the check was skipped
    spache_familiar: Optional[bool] = None
    dale_chall_familiar: Optional[bool] = None

    @property
    def letters(self) -> int:
        return len(self.value)

    @property
    def complex_polysyllabic(self) -> bool:
        return self.polysyllabic and not self.proper_noun


class WordClassifier:
    """Classify words under one resolved configuration."""

    def __init__(self, config: InternalConfig,
                 spache_index: Optional[WordListIndex] = None,
                 dale_chall_index: Optional[WordListIndex] = None,
                 syllable_counter: Callable[[str], int] = count_syllables):
        if config.spache and spache_index is None:
            raise ValueError("Spache scoring needs a Spache word list index")
        if config.dale_chall and dale_chall_index is None:
            raise ValueError("Dale-Chall scoring needs a Dale-Chall word list index")

        self.config = config
        self.spache_index = spache_index
        self.dale_chall_index = dale_chall_index
        self.syllable_counter = syllable_counter

    def classify(self, value: str) -> WordClassification:
        normalized = normalize_word(value)
        syllable_count = self.syllable_counter(value)
        proper_noun = is_treated_as_proper_noun(value, self.config.caps_as_names)

        spache_familiar = None
        if self.config.spache:
            spache_familiar = is_spache_familiar(normalized, self.spache_index, proper_noun)

        dale_chall_familiar = None
        if self.config.dale_chall:
            dale_chall_familiar = is_dale_chall_familiar(normalized, self.dale_chall_index, proper_noun)

        return WordClassification(
            value=value,
            normalized=normalized,
            syllables=syllable_count,
            polysyllabic=is_polysyllabic(syllable_count),
            proper_noun=proper_noun,
            spache_familiar=spache_familiar,
            dale_chall_familiar=dale_chall_familiar
        )
