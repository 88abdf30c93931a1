import pytest

from readability_scores.exceptions import WordListError
from readability_scores.models import ReadabilityScoreResult
from readability_scores.scorer import ReadabilityScorer, readability_scores
from readability_scores.settings import Settings

PLAIN_TEXT = "the dog can run fast. the big cat can jump."

SCORE_FIELDS = ("spache", "ari", "coleman_liau", "flesch_kincaid", "smog", "gunning_fog")


def one_syllable(word):
    return 1


@pytest.fixture
def plain_scorer():
    """Scorer over the packaged word lists, counting one syllable per word."""
    return ReadabilityScorer(settings=Settings(), syllable_counter=one_syllable)


@pytest.mark.parametrize("text", [None, ""])
def test_no_text_gives_no_result(plain_scorer, text):
    assert plain_scorer.score(text) is None
    assert readability_scores(text) is None


def test_plain_text_defaults(plain_scorer):
    result = plain_scorer.score(PLAIN_TEXT)

    assert isinstance(result, ReadabilityScoreResult)
    assert result.word_count == 10
    assert result.sentence_count == 2
    assert result.letter_count == 32
    assert result.syllable_count == 10
    assert result.polysyllabic_word_count == 0

    assert result.smog == 3.13
    assert result.gunning_fog == 2.0
    assert result.flesch_kincaid == -1.84
    assert result.ari == -3.86
    assert result.coleman_liau == -2.9
    assert result.dale_chall == 4
    assert result.dale_chall_difficult_word_count == 0

    assert not result.has("spache")
    assert not result.has("polysyllabic_words")
    assert not result.has("dale_chall_difficult_words")


def test_word_lists_load_only_when_needed(plain_scorer):
    plain_scorer.score(PLAIN_TEXT, {"onlySMOG": True})
    assert plain_scorer._spache_index is None
    assert plain_scorer._dale_chall_index is None

    plain_scorer.score(PLAIN_TEXT)
    assert plain_scorer._spache_index is None
    assert plain_scorer.dale_chall_index.is_built


def test_only_smog(plain_scorer):
    result = plain_scorer.score(PLAIN_TEXT, {"onlySMOG": True})
    assert set(result.to_dict()) == {
        "letterCount", "syllableCount", "wordCount", "sentenceCount",
        "polysyllabicWordCount", "smog"
    }


def test_skip_ari_keeps_spache_opt_in(plain_scorer):
    result = plain_scorer.score(PLAIN_TEXT, {"skipARI": True})
    data = result.to_dict()

    assert "ari" not in data
    assert "spache" not in data
    for key in ("daleChall", "colemanLiau", "fleschKincaid", "smog", "gunningFog"):
        assert key in data


def test_only_spache(small_scorer):
    result = small_scorer.score("The dog jumps over the big cat. A zebra ran.", {"onlySpache": True})

    assert result.spache_unique_unfamiliar_word_count == 2
    assert result.spache == 2.9
    assert not result.has("dale_chall")
    assert small_scorer.spache_index.is_built
    assert small_scorer._dale_chall_index is None


def test_caps_as_names_and_difficult_words(small_scorer):
    text = "An Elephant ate information. An elephant ate a banana."
    result = small_scorer.score(text, {
        "capsAsNames": True,
        "difficultWords": True,
        "onlyDaleChall": True,
    })

    assert result.polysyllabic_word_count == 3
    assert result.polysyllabic_words == ["information", "elephant", "banana"]
    assert result.syllable_count == 1 + 3 + 1 + 4 + 1 + 3 + 1 + 1 + 3
    assert result.letter_count == len("AnElephantateinformationAnelephantateabanana")
    assert result.dale_chall_difficult_words == ["ate", "information", "elephant", "ate", "banana"]


def test_scores_are_rounded():
    text = "Information about elephants is everywhere. Dangerous animals roam freely."
    scorer = ReadabilityScorer(settings=Settings(), syllable_counter=len)
    result = scorer.score(text)

    for field in SCORE_FIELDS:
        if result.has(field):
            value = getattr(result, field)
            assert round(value, 2) == value
    assert 0 <= result.dale_chall <= 17
    assert result.polysyllabic_word_count <= result.word_count


def test_override_word_list_from_settings(tmp_path):
    path = tmp_path / "spache.txt"
    path.write_text("zebra\n", encoding="utf-8")
    scorer = ReadabilityScorer(settings=Settings(spache_word_list_path=path), syllable_counter=one_syllable)

    result = scorer.score("zebra zebras dog.", {"onlySpache": True})
    assert result.spache_unique_unfamiliar_word_count == 1


def test_broken_word_list_override_raises(tmp_path):
    settings = Settings(dale_chall_word_list_path=tmp_path / "missing.txt")
    scorer = ReadabilityScorer(settings=settings)

    with pytest.raises(WordListError):
        scorer.score("Some words here.")


def test_preload_builds_indexes_up_front():
    scorer = ReadabilityScorer(
        settings=Settings(preload_word_lists=True),
        spache_words=["dog"],
        dale_chall_words=["cat"]
    )
    assert scorer.spache_index.is_built
    assert scorer.dale_chall_index.is_built
