"""
Familiar-word vocabularies for the Spache and Dale-Chall formulas.

Both lists ship as package data, one lowercase word per line. A deployment
may point either list at its own file through settings.
"""

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .exceptions import WordListError

logger = logging.getLogger(__name__)

SPACHE = "spache"
DALE_CHALL = "dale_chall"

Vocabulary = Tuple[str, ...]


def parse_word_list(lines: Iterable[str]) -> Vocabulary:
    """Parse word list lines, skipping blanks, comments and repeats."""
    words = []
    seen = set()

    for line in lines:
        word = line.strip().lower()
        if not word or word.startswith("#") or word in seen:
            continue
        seen.add(word)
        words.append(word)

    return tuple(words)


@lru_cache(maxsize=None)
def load_packaged_vocabulary(name: str) -> Vocabulary:
    """Load one of the word lists bundled with the package."""
    data = resources.files("readability_scores") / "data" / f"{name}.txt"
    words = parse_word_list(data.read_text(encoding="utf-8").splitlines())
    logger.debug(f"Loaded packaged {name} word list: {len(words)} words")
    return words


def load_vocabulary_file(path: Path) -> Vocabulary:
    """
    Load a word list from a file on disk.

    Raises:
        WordListError: The file cannot be read or contains no words
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise WordListError(f"Cannot read word list {path}: {e}") from e

    words = parse_word_list(text.splitlines())
    if not words:
        raise WordListError(f"Word list {path} contains no words")

    logger.debug(f"Loaded word list from {path}: {len(words)} words")
    return words


def load_vocabulary(name: str, path: Optional[Path] = None) -> Vocabulary:
    """Load the named vocabulary, preferring an override file when given."""
    if path is not None:
        return load_vocabulary_file(path)
    return load_packaged_vocabulary(name)
