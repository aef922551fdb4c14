r"""
\file _checkutil.py
\brief Validation of word list files against the random selector's assumptions.

A valid list has one alphabetic word per line, sorted case-insensitively,
and no blank lines except at the end.
"""

from collections.abc import Iterable
from pathlib import Path


def check_wordlist(lines: Iterable[str]) -> list[str]:
    r"""Report problems in a word list.

    \param lines Lines of the list, with or without line endings.
    \return Human-readable problems, empty if the list is valid.
    """
    problems: list[str] = []
    prev: str | None = None
    blank_at: int | None = None
    for line_no, raw in enumerate(lines, start=1):
        word = raw.rstrip("\r\n")
        if not word:
            if blank_at is None:
                blank_at = line_no
            continue
        if blank_at is not None:
            problems.append(f"line {blank_at}: blank line before end of list")
            blank_at = None
        if not (word.isascii() and word.isalpha()):
            problems.append(f"line {line_no}: non-alphabetic characters in {word!r}")
        key = word.lower()
        if prev is not None and key < prev:
            problems.append(f"line {line_no}: {word!r} is out of order")
        prev = key
    return problems


def check_wordlist_file(path: Path | str, encoding: str = "utf-8") -> list[str]:
    """Run check_wordlist over a file."""
    with open(path, encoding=encoding, errors="replace") as f:
        return check_wordlist(f)
