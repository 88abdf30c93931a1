import pytest

from readability_scores.aggregator import Counts, aggregate
from readability_scores.classifier import WordClassifier
from readability_scores.options import InternalConfig
from readability_scores.tokenizer import tokenize

TEXT = (
    "The elephant ate a banana. The Elephant ate information. "
    "Zebras and zebras and Zebras ran."
)


@pytest.fixture
def full_config():
    return InternalConfig(
        difficult_words=True, caps_as_names=True, spache=True, dale_chall=True, smog=True
    )


@pytest.fixture
def classifier(full_config, spache_index, dale_chall_index, syllable_counter):
    return WordClassifier(full_config, spache_index, dale_chall_index, syllable_counter)


def test_aggregate_counts(full_config, classifier):
    sentences = tokenize(TEXT)
    result = aggregate(sentences, full_config, classifier)

    assert result.counts == Counts(
        letter=73,
        syllable=24,
        word=15,
        sentence=3,
        polysyllabic_word=4,
        complex_polysyllabic_word=3,
        unfamiliar_word=7,
        difficult_word=9
    )
    assert result.counts.word == sum(len(s.words) for s in sentences)
    assert result.counts.sentence == len(sentences)


def test_capitalized_polysyllable_is_left_out_of_complex_list(full_config, classifier):
    result = aggregate(tokenize(TEXT), full_config, classifier)
    assert result.polysyllabic_words == ("elephant", "banana", "information")


def test_spache_list_is_unique_in_document_order(full_config, classifier):
    result = aggregate(tokenize(TEXT), full_config, classifier)
    assert result.spache_unfamiliar_words == (
        "elephant", "ate", "banana", "information", "and", "zebras", "ran"
    )


def test_dale_chall_list_keeps_every_occurrence(full_config, classifier):
    result = aggregate(tokenize(TEXT), full_config, classifier)
    assert result.dale_chall_difficult_words == (
        "elephant", "ate", "banana", "ate", "information", "and", "zebras", "and", "ran"
    )


def test_spache_uniqueness_is_case_sensitive(spache_index, syllable_counter):
    config = InternalConfig(spache=True)
    classifier = WordClassifier(config, spache_index=spache_index, syllable_counter=syllable_counter)
    result = aggregate(tokenize("Zebra zebra Zebra."), config, classifier)
    assert result.spache_unfamiliar_words == ("Zebra", "zebra")


def test_word_lists_are_not_collected_by_default(spache_index, dale_chall_index, syllable_counter):
    config = InternalConfig(spache=True, dale_chall=True)
    classifier = WordClassifier(config, spache_index, dale_chall_index, syllable_counter)
    result = aggregate(tokenize(TEXT), config, classifier)

    assert result.polysyllabic_words == ()
    # Familiarity lists feed the formula counts either way
    assert result.counts.unfamiliar_word == 9
    assert result.counts.difficult_word == 12


def test_sentence_order_does_not_change_counts(full_config, classifier):
    sentences = tokenize(TEXT)
    forward = aggregate(sentences, full_config, classifier)
    backward = aggregate(list(reversed(sentences)), full_config, classifier)
    assert forward.counts == backward.counts


def test_empty_stream_gives_zero_counts(full_config, classifier):
    assert aggregate([], full_config, classifier).counts == Counts()


def test_formula_input_keys():
    counts = Counts(letter=5, syllable=2, word=1, sentence=1, polysyllabic_word=0)
    assert counts.as_formula_input() == {
        "complexPolysillabicWord": 0,
        "polysillabicWord": 0,
        "unfamiliarWord": 0,
        "difficultWord": 0,
        "syllable": 2,
        "sentence": 1,
        "word": 1,
        "character": 5,
        "letter": 5
    }
