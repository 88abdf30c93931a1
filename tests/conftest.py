import pytest

from readability_scores.scorer import ReadabilityScorer
from readability_scores.settings import Settings
from readability_scores.word_lists import WordListIndex

SPACHE_WORDS = ("the", "a", "dog", "jump", "run", "over", "cat", "big", "can't")
DALE_CHALL_WORDS = (
    "the", "a", "dog", "jump", "play", "live", "lively", "prick",
    "fast", "sad", "over", "cat", "big", "can't",
)

# Words the tests treat as polysyllabic; everything else has one syllable
SYLLABLES = {
    "elephant": 3,
    "Elephant": 3,
    "banana": 3,
    "information": 4,
    "Information": 4,
}


def count_test_syllables(word: str) -> int:
    return SYLLABLES.get(word, 1)


@pytest.fixture
def spache_index():
    return WordListIndex("spache", SPACHE_WORDS)


@pytest.fixture
def dale_chall_index():
    return WordListIndex("dale_chall", DALE_CHALL_WORDS)


@pytest.fixture
def syllable_counter():
    return count_test_syllables


@pytest.fixture
def small_scorer():
    """Scorer over the small test vocabularies with fixed syllable counts."""
    return ReadabilityScorer(
        settings=Settings(),
        spache_words=SPACHE_WORDS,
        dale_chall_words=DALE_CHALL_WORDS,
        syllable_counter=count_test_syllables
    )
