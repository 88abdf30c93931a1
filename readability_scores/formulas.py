"""
Readability formula implementations.

Every formula takes a mapping of counts and uses the published
coefficients. Missing counts are read as zero, and a formula returns 0.0
when a count it divides by is zero.
"""

import math
from typing import Mapping, Tuple

Counts = Mapping[str, float]

# Dale-Chall grade ranges keyed by the floored raw score
DALE_CHALL_GRADES = {
    4: (0, 4),
    5: (5, 6),
    6: (7, 8),
    7: (9, 10),
    8: (11, 12),
    9: (13, 15),
    10: (16, math.inf),
}


def _count(counts: Counts, key: str) -> float:
    return counts.get(key) or 0


def spache_formula(counts: Counts) -> float:
    """
    Calculate the revised Spache grade level.

    Formula: 0.121 × ASL + 0.082 × PUW + 0.659
    Where ASL = Average Sentence Length, PUW = Percentage of Unfamiliar Words

    Intended for texts up to 4th grade.
    """
    sentences = _count(counts, "sentence")
    words = _count(counts, "word")
    if not sentences or not words:
        return 0.0

    asl = words / sentences
    puw = 100 * _count(counts, "unfamiliarWord") / words

    return 0.659 + 0.121 * asl + 0.082 * puw


def dale_chall_formula(counts: Counts) -> float:
    """
    Calculate the new Dale-Chall raw score.

    Formula: 0.1579 × PDW + 0.0496 × ASL
    Where PDW = Percentage of Difficult Words, ASL = Average Sentence Length

    3.6365 is added when more than 5% of the words are difficult.
    """
    sentences = _count(counts, "sentence")
    words = _count(counts, "word")
    if not sentences or not words:
        return 0.0

    difficult_ratio = _count(counts, "difficultWord") / words
    score = 0.1579 * difficult_ratio * 100 + 0.0496 * words / sentences

    if difficult_ratio > 0.05:
        score += 3.6365

    return score


def dale_chall_grade_level(score: float) -> Tuple[float, float]:
    """Map a Dale-Chall raw score to its (lowest, highest) US grade range."""
    bucket = math.floor(score)
    if bucket < 5:
        bucket = 4
    elif bucket > 9:
        bucket = 10
    return DALE_CHALL_GRADES[bucket]


def automated_readability(counts: Counts) -> float:
    """
    Calculate Automated Readability Index (ARI).

    Formula: 4.71 × (characters / words) + 0.5 × (words / sentences) - 21.43
    """
    sentences = _count(counts, "sentence")
    words = _count(counts, "word")
    if not sentences or not words:
        return 0.0

    return 4.71 * (_count(counts, "character") / words) + 0.5 * (words / sentences) - 21.43


def coleman_liau(counts: Counts) -> float:
    """
    Calculate Coleman-Liau Index.

    Formula: 0.0588 × L - 0.296 × S - 15.8
    Where L = average letters per 100 words, S = average sentences per 100 words
    """
    words = _count(counts, "word")
    if not words:
        return 0.0

    letters_per_100 = _count(counts, "letter") / words * 100
    sentences_per_100 = _count(counts, "sentence") / words * 100

    return 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8


def flesch_kincaid(counts: Counts) -> float:
    """
    Calculate Flesch-Kincaid Grade Level.

    Formula: (0.39 × ASL) + (11.8 × ASW) - 15.59
    Where ASL = Average Sentence Length, ASW = Average Syllables per Word
    """
    sentences = _count(counts, "sentence")
    words = _count(counts, "word")
    if not sentences or not words:
        return 0.0

    asl = words / sentences
    asw = _count(counts, "syllable") / words

    return 0.39 * asl + 11.8 * asw - 15.59


def smog_formula(counts: Counts) -> float:
    """
    Calculate SMOG (Simple Measure of Gobbledygook) grade.

    Formula: 1.0430 × sqrt(polysyllables × (30 / sentences)) + 3.1291
    """
    sentences = _count(counts, "sentence")
    if not sentences:
        return 0.0

    polysyllables = _count(counts, "polysillabicWord")
    return 1.043 * math.sqrt(polysyllables * (30 / sentences)) + 3.1291


def gunning_fog(counts: Counts) -> float:
    """
    Calculate Gunning Fog Index.

    Formula: 0.4 × (ASL + PHW)
    Where ASL = Average Sentence Length, PHW = Percentage of Hard Words (3+ syllables)
    """
    sentences = _count(counts, "sentence")
    words = _count(counts, "word")
    if not sentences or not words:
        return 0.0

    asl = words / sentences
    phw = 100 * _count(counts, "complexPolysillabicWord") / words

    return 0.4 * (asl + phw)
