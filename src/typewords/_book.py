r"""
\file _book.py
\brief Streaming tokenizer that serves prose text word by word.

The text does not need to be sorted or one word per line. Tokens are
read lazily: every call seeks to the saved byte offset and reads up to
the next whitespace byte, so the whole text is never held in memory.
"""

from pathlib import Path

from ._errors import NoMoreWordsError
from ._source import CorpusSource, corpus_from_string, open_corpus
from ._textgen import WordSelector


class BookSelector(WordSelector):
    r"""Serve whitespace-delimited tokens of a text in reading order.

    Blank tokens and tokens with non-ASCII bytes are skipped. Punctuation
    is kept as part of the token.
    """

    def __init__(self, source: CorpusSource):
        self._source = source
        self.offset = 0

    @classmethod
    def from_path(cls, path: Path | str) -> "BookSelector":
        return cls(open_corpus(path))

    @classmethod
    def from_string(cls, text: str) -> "BookSelector":
        return cls(corpus_from_string(text))

    def _read_token(self) -> bytes:
        r"""Read raw bytes from the offset up to and including a whitespace byte.

        \return Raw token bytes; empty at end of stream.
        \throws ValueError if the selector is closed.
        """
        source = self._open_source()
        source.seek(self.offset)
        buf = bytearray()
        while True:
            ch = source.read(1)
            if not ch:
                break
            buf += ch
            if ch.isspace():
                break
        self.offset += len(buf)
        return bytes(buf)

    def new_word(self) -> str:
        while True:
            raw = self._read_token()
            if not raw:
                raise NoMoreWordsError(f"End of text reached at byte {self.offset}")
            token = raw.strip()
            if token and token.isascii():
                return token.decode("ascii")

    def __iter__(self):
        return self

    def __next__(self) -> str:
        try:
            return self.new_word()
        except NoMoreWordsError:
            raise StopIteration from None
