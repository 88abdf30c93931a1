"""
Score calculation from aggregated counts.
"""

import sys
from decimal import Decimal, ROUND_HALF_UP

from .aggregator import Aggregation
from .formulas import (
    automated_readability,
    coleman_liau,
    dale_chall_formula,
    dale_chall_grade_level,
    flesch_kincaid,
    gunning_fog,
    smog_formula,
    spache_formula
)
from .models import ReadabilityScoreResult
from .options import InternalConfig

DALE_CHALL_MAX_GRADE = 17

_HUNDREDTH = Decimal("0.01")


def round_to_2_decimals(value: float) -> float:
    """Round half away from zero, nudged by epsilon so .xx5 values round up."""
    nudged = Decimal(repr(value + sys.float_info.epsilon))
    return float(nudged.quantize(_HUNDREDTH, rounding=ROUND_HALF_UP))


def dale_chall_grade(counts: dict) -> int:
    """Highest grade of the Dale-Chall range, capped at 17."""
    if not counts["word"]:
        return 0
    highest = dale_chall_grade_level(dale_chall_formula(counts))[1]
    return int(min(DALE_CHALL_MAX_GRADE, highest))


def calculate_scores(aggregation: Aggregation, config: InternalConfig) -> ReadabilityScoreResult:
    """
    Apply each enabled formula to the aggregated counts.

    Args:
        aggregation: Counts and word lists from the aggregator
        config: Resolved configuration for this call

    Returns:
        ReadabilityScoreResult with base counts and the enabled metrics
    """
    counts = aggregation.counts
    formula_counts = counts.as_formula_input()

    fields = {
        "letter_count": counts.letter,
        "syllable_count": counts.syllable,
        "word_count": counts.word,
        "sentence_count": counts.sentence,
        "polysyllabic_word_count": counts.complex_polysyllabic_word
    }
    if config.difficult_words:
        fields["polysyllabic_words"] = list(aggregation.polysyllabic_words)

    if config.spache:
        fields["spache_unique_unfamiliar_word_count"] = counts.unfamiliar_word
        if config.difficult_words:
            fields["spache_unique_unfamiliar_words"] = list(aggregation.spache_unfamiliar_words)

        spache_counts = {
            "sentence": counts.sentence,
            "word": counts.word,
            "unfamiliarWord": counts.unfamiliar_word
        }
        fields["spache"] = round_to_2_decimals(spache_formula(spache_counts))

    if config.dale_chall:
        fields["dale_chall_difficult_word_count"] = counts.difficult_word
        if config.difficult_words:
            fields["dale_chall_difficult_words"] = list(aggregation.dale_chall_difficult_words)

        fields["dale_chall"] = dale_chall_grade(formula_counts)

    if config.ari:
        fields["ari"] = round_to_2_decimals(automated_readability(formula_counts))

    if config.coleman_liau:
        fields["coleman_liau"] = round_to_2_decimals(coleman_liau(formula_counts))

    if config.flesch_kincaid:
        fields["flesch_kincaid"] = round_to_2_decimals(flesch_kincaid(formula_counts))

    if config.smog:
        smog_counts = {
            "sentence": counts.sentence,
            "polysillabicWord": counts.polysyllabic_word
        }
        fields["smog"] = round_to_2_decimals(smog_formula(smog_counts))

    if config.gunning_fog:
        fields["gunning_fog"] = round_to_2_decimals(gunning_fog(formula_counts))

    return ReadabilityScoreResult(**fields)
