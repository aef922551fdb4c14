r"""
\file _wordlists.py
\brief Built-in word lists, the system word list, and selector resolution.
"""

from importlib.resources import files
from pathlib import Path

from ._book import BookSelector
from ._errors import WordListError
from ._textgen import RawWordSelector, SequentialWordSelector, WordSelector

# Top 250 English words by frequency (wordfrequency.info, top 60K lemmas sample).
BUILTIN_WORDLISTS = ("top250",)

# Varies a lot between systems and usually has 100,000+ words, many esoteric.
OS_WORDLIST_PATH = Path("/usr/share/dict/words")

WORDLIST_CHOICES = (*BUILTIN_WORDLISTS, "os")
MODES = ("random", "sequential", "book")


def get_word_list(name: str) -> str | None:
    r"""Return the contents of a built-in word list.

    \param name Word list name, e.g. "top250".
    \return File contents, or None if no built-in list has that name.
    """
    if name not in BUILTIN_WORDLISTS:
        return None
    return (files("typewords") / "word_lists" / name).read_text(encoding="ascii")


def text_name(wordlist: str, wordlist_file: str | None = None) -> str:
    """Human-readable name of the word source."""
    if wordlist_file:
        return Path(wordlist_file).name
    if wordlist == "os":
        return "os word list"
    return wordlist


def make_selector(wordlist: str = "top250", wordlist_file: str | None = None, mode: str = "random") -> WordSelector:
    r"""Resolve a word source and mode into a selector.

    A file path takes precedence over the word list name.

    \param wordlist Built-in list name or "os".
    \param wordlist_file Optional path to a word list or text file.
    \param mode One of random, sequential, book.
    \return An open WordSelector; the caller should close it.
    \throws WordListError for an unknown list name or missing OS list.
    \throws OSError if the file cannot be read.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown selection mode: {mode}")
    by_mode = {
        "random": RawWordSelector,
        "sequential": SequentialWordSelector,
        "book": BookSelector,
    }
    cls = by_mode[mode]
    if wordlist_file:
        return cls.from_path(wordlist_file)
    if wordlist == "os":
        if not OS_WORDLIST_PATH.is_file():
            raise WordListError(f"OS word list not found at {OS_WORDLIST_PATH}")
        return cls.from_path(OS_WORDLIST_PATH)
    contents = get_word_list(wordlist)
    if contents is None:
        raise WordListError(f"Unknown word list: {wordlist}")
    return cls.from_string(contents)
