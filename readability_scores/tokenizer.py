"""
Sentence and word segmentation for readability analysis.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple

# Sentence-ending punctuation followed by whitespace or end of string
SENTENCE_BOUNDARY = re.compile(r'[.!?]+(?:\s+|$)')

# Grouped numbers such as 1,000 stay whole; otherwise runs of letters and
# digits, joined across inner apostrophes and hyphens
WORD_PATTERN = re.compile(r"\d{1,3}(?:,\d{3})+(?!\d|,\d)|[^\W_]+(?:['’\-][^\W_]+)*")


@dataclass(frozen=True)
class WordToken:
    """A single word and its literal surface text."""

    value: str


@dataclass(frozen=True)
class SentenceToken:
    """A sentence and the words it contains."""

    text: str
    words: Tuple[WordToken, ...]


def split_sentences(text: str) -> List[str]:
    """Split text on sentence-ending punctuation, dropping empty segments."""
    text = re.sub(r'\s+', ' ', text.strip())
    sentences = SENTENCE_BOUNDARY.split(text)
    return [s.strip() for s in sentences if s.strip()]


def split_words(text: str) -> List[str]:
    return WORD_PATTERN.findall(text)


def tokenize(text: str) -> List[SentenceToken]:
    """
    Tokenize text into sentences of words.

    Args:
        text: Plain input text

    Returns:
        Sentence tokens in document order
    """
    return [
        SentenceToken(text=sentence, words=tuple(WordToken(w) for w in split_words(sentence)))
        for sentence in split_sentences(text)
    ]
