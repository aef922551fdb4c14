r"""
\file _source.py
\brief Corpus source adapters: file-backed and in-memory binary streams.

The index builder and the selectors only need seek, tell and readline, so
any seekable binary stream works as a corpus source.
"""

import io
from pathlib import Path
from typing import Protocol


class CorpusSource(Protocol):
    def seek(self, offset: int, whence: int = 0) -> int: ...

    def tell(self) -> int: ...

    def readline(self, size: int = -1) -> bytes: ...

    def read(self, size: int = -1) -> bytes: ...

    def close(self) -> None: ...


def open_corpus(path: Path | str) -> io.BufferedReader:
    r"""Open a corpus file for buffered binary reading.

    \param path Path to the word list or text file.
    \return Open binary handle; the caller owns it.
    \throws OSError if the file cannot be opened.
    """
    return open(path, "rb")


def corpus_from_string(text: str) -> io.BytesIO:
    r"""Wrap in-memory text as a seekable corpus source.

    The text is stored UTF-8 encoded; offsets are byte offsets, and lines
    or tokens with non-ASCII bytes are rejected by the selectors.

    \param text Corpus contents.
    \return BytesIO positioned at the start.
    """
    return io.BytesIO(text.encode("utf-8"))
