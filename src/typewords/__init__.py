r"""
\file __init__.py
\brief Package metadata and public API for typewords.

Exposes the version used by the CLI banner and re-exports the word
selectors so callers can depend on a single import.
"""

from ._book import BookSelector
from ._errors import NoMoreWordsError, WordListError, WordSelectorError
from ._index import LetterIndex, build_letter_index
from ._textgen import RawWordSelector, SequentialWordSelector, WordSelector, is_eligible

__all__ = [
    "__version__",
    "BookSelector",
    "LetterIndex",
    "NoMoreWordsError",
    "RawWordSelector",
    "SequentialWordSelector",
    "WordListError",
    "WordSelector",
    "WordSelectorError",
    "build_letter_index",
    "is_eligible",
]
__version__ = "0.1.0"
