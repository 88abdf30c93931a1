"""
Exceptions raised by the readability scorer.
"""


class WordListError(RuntimeError):
    """A configured word list could not be read or holds no words."""
