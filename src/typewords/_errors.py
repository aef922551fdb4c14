r"""
\file _errors.py
\brief Exception types raised by the word selectors.

I/O failures are not wrapped: they surface as the OSError raised by the
underlying stream.
"""


class WordSelectorError(Exception):
    """Base class for errors raised while selecting words."""


class NoMoreWordsError(WordSelectorError):
    """The selector reached the end of the words it can provide."""


class WordListError(WordSelectorError):
    """A word list could not be resolved by name."""
