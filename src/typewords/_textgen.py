r"""
\file _textgen.py
\brief Word selectors: the indexed random sampler and the sequential queue.

RawWordSelector picks uniformly random lines from a sorted word list
without loading it into memory. The word list must:

- have one word per line, ASCII only;
- be sorted by first letter, case-insensitively ("Apple" and "apple"
  both come before any word starting with "b");
- not be modified while the selector is open;
- have no empty lines except at the end.

Only words of length 2 to 8 made of ASCII letters are returned. A list
with no such word makes new_word loop forever.
"""

import logging
import random
from abc import ABC, abstractmethod
from collections import deque
from pathlib import Path

from ._errors import NoMoreWordsError
from ._index import LetterIndex, build_letter_index
from ._source import CorpusSource, corpus_from_string, open_corpus

MIN_WORD_LEN = 2
MAX_WORD_LEN = 8

_log = logging.getLogger("typewords")


def is_eligible(word: str) -> bool:
    """Return True if the word can be served by the random selector."""
    return MIN_WORD_LEN <= len(word) <= MAX_WORD_LEN and word.isascii() and word.isalpha()


class WordSelector(ABC):
    """Something that provides new words, one at a time."""

    _source: CorpusSource | None = None

    @abstractmethod
    def new_word(self) -> str:
        r"""Return the next word.

        \throws NoMoreWordsError when the selector is exhausted.
        \throws OSError on read failure.
        """

    def new_words(self, num_words: int) -> list[str]:
        r"""Return a list of num_words words.

        Stops at the first error; words produced before it are discarded.

        \param num_words Number of words to produce.
        \return List of words in selection order.
        """
        if num_words < 0:
            raise ValueError(f"num_words must be non-negative, got {num_words}")
        return [self.new_word() for _ in range(num_words)]

    def _open_source(self) -> CorpusSource:
        if self._source is None:
            raise ValueError("selector is closed")
        return self._source

    def close(self) -> None:
        if self._source is not None:
            self._source.close()
            self._source = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


class RawWordSelector(WordSelector):
    r"""Uniform random selector over a sorted word list.

    Construction reads the whole source once to build a LetterIndex.
    Each draw picks a global line index, finds its letter block by binary
    search, seeks to the block start and scans forward to the line.
    """

    def __init__(self, source: CorpusSource, rng: random.Random | None = None):
        self._source = source
        self._rng = rng if rng is not None else random
        self.index: LetterIndex = build_letter_index(source)
        self.rejected = 0

    @classmethod
    def from_path(cls, path: Path | str, rng: random.Random | None = None) -> "RawWordSelector":
        source = open_corpus(path)
        try:
            return cls(source, rng)
        except Exception:
            source.close()
            raise

    @classmethod
    def from_string(cls, text: str, rng: random.Random | None = None) -> "RawWordSelector":
        return cls(corpus_from_string(text), rng)

    def word_at(self, index: int) -> str:
        r"""Return the line at a global line index, without its line ending.

        \param index Global line index in [0, index.total).
        \return The line as read from the corpus.
        \throws IndexError if index is out of range.
        \throws ValueError if the selector is closed.
        """
        source = self._open_source()
        ordinal, offset = self.index.resolve(index)
        source.seek(self.index.letter_pos[ordinal])
        for _ in range(offset + 1):
            line = source.readline()
        return line.rstrip(b"\r\n").decode("ascii", errors="replace")

    def sample_raw(self) -> str:
        """Return a uniformly random line, unfiltered."""
        return self.word_at(self._rng.randrange(self.index.total))

    def new_word(self) -> str:
        word = self.sample_raw()
        retries = 0
        while not is_eligible(word):
            retries += 1
            word = self.sample_raw()
        if retries:
            self.rejected += retries
            _log.debug("rejected %d draws before %r", retries, word)
        return word.lower()


def _keep_token(token: str) -> bool:
    return all(c.isascii() and c.isalnum() for c in token)


class SequentialWordSelector(WordSelector):
    r"""Serve the words of a file strictly in order, then run out.

    Tokens are split on whitespace; any token containing a character that
    is not an ASCII letter or digit is dropped.
    """

    def __init__(self, text: str):
        self.words: deque[str] = deque(t for t in text.split() if _keep_token(t))

    @classmethod
    def from_path(cls, path: Path | str, encoding: str = "utf-8") -> "SequentialWordSelector":
        with open(path, encoding=encoding, errors="replace") as f:
            return cls(f.read())

    @classmethod
    def from_string(cls, text: str) -> "SequentialWordSelector":
        return cls(text)

    @property
    def remaining(self) -> int:
        return len(self.words)

    def new_word(self) -> str:
        if not self.words:
            raise NoMoreWordsError("No more words available")
        return self.words.popleft()
