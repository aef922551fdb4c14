r"""
\file _index.py
\brief Per-letter index over a sorted word list.

The index records, for each letter a-z, the byte offset where the
letter's block of lines starts and a cumulative line count. A global line
index in [0, total) is mapped to its letter by binary search over the
cumulative counts, then to a line inside the block by subtraction.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass
from itertools import accumulate

from ._source import CorpusSource

ALPHABET_SIZE = 26

_log = logging.getLogger("typewords")


def letter_ordinal(line: bytes) -> int | None:
    r"""Classify a line by its first byte, case-insensitively.

    \param line Raw line bytes.
    \return 0-25 for a-z, or None if the line does not start with a letter.
    """
    first = line[:1].lower()
    if b"a" <= first <= b"z":
        return first[0] - ord("a")
    return None


@dataclass(frozen=True)
class LetterIndex:
    r"""Byte offsets and cumulative line counts for each letter block.

    ``letter_cum[k]`` to ``letter_cum[k + 1]`` is the half-open range of
    global line indexes owned by letter ``k``; empty letters own an empty
    range and their ``letter_pos`` entry is unused.
    """

    letter_pos: tuple[int, ...]
    letter_cum: tuple[int, ...]

    def __post_init__(self):
        if len(self.letter_pos) != ALPHABET_SIZE or len(self.letter_cum) != ALPHABET_SIZE + 1:
            raise ValueError("letter index needs 26 offsets and 27 cumulative counts")

    @property
    def total(self) -> int:
        return self.letter_cum[-1]

    def block_sizes(self) -> list[int]:
        """Return the number of lines in each letter block."""
        cum = self.letter_cum
        return [cum[k + 1] - cum[k] for k in range(ALPHABET_SIZE)]

    def resolve(self, index: int) -> tuple[int, int]:
        r"""Map a global line index to (letter ordinal, line within block).

        \param index Global line index in [0, total).
        \return Tuple of letter ordinal (0-25) and zero-based line offset.
        \throws IndexError if index is out of range.
        """
        if not 0 <= index < self.total:
            raise IndexError(f"line index {index} out of range [0, {self.total})")
        # first boundary strictly greater than index closes the owning block
        slot = bisect_right(self.letter_cum, index)
        ordinal = slot - 1
        return ordinal, index - self.letter_cum[ordinal]


def build_letter_index(source: CorpusSource) -> LetterIndex:
    r"""Build the letter index in one pass over the corpus.

    Reads line by line from the current position of the source. A block
    starts at the first line whose first letter differs from the current
    block's letter. Lines that do not start with a letter are counted in
    the block they sit in, so scanning a block by line count stays aligned.
    Lines before the first letter block are not indexed.

    \param source Seekable binary stream positioned at the corpus start.
    \return Populated LetterIndex.
    \throws OSError on read failure.
    """
    letter_pos = [0] * ALPHABET_SIZE
    counts = [0] * ALPHABET_SIZE
    current = None
    pos = source.tell()
    while True:
        line = source.readline()
        if not line:
            break
        ordinal = letter_ordinal(line)
        if ordinal is not None and ordinal != current:
            letter_pos[ordinal] = pos
            current = ordinal
        if current is not None:
            counts[current] += 1
        pos += len(line)

    index = LetterIndex(tuple(letter_pos), tuple(accumulate(counts, initial=0)))
    _log.debug(
        "letter index: %d lines in %d blocks, %d bytes",
        index.total,
        sum(1 for n in counts if n),
        pos,
    )
    return index
