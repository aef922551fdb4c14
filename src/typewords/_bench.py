r"""
\file _bench.py
\brief Local benchmark of index build time and word throughput per selector.

This module writes a synthetic sorted word list to a temporary directory
(or uses a given one), then measures how fast each selection mode serves
words, along with CPU and resident memory. The random selector is expected
to keep RSS flat regardless of corpus size since it never loads the list.
"""

import multiprocessing
import random
import string
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path

import psutil

from ._errors import NoMoreWordsError
from ._wordlists import MODES, make_selector


def write_synthetic_wordlist(path: Path, num_words: int, seed: int = 0) -> Path:
    r"""Write a sorted list of random lowercase words, one per line.

    \param path Destination file.
    \param num_words Number of lines to write.
    \param seed Seed for the word generator.
    \return The path written.
    """
    rng = random.Random(seed)
    words = sorted(
        "".join(rng.choices(string.ascii_lowercase, k=rng.randint(1, 11))) for _ in range(num_words)
    )
    with open(path, "w", encoding="ascii", newline="\n") as f:
        for w in words:
            f.write(w + "\n")
    return path


def _cpu_percent(elapsed: float, t_start: float, t_end: float) -> float:
    r"""Compute an approximate CPU utilization percent for the process.

    \param elapsed Wall time in seconds.
    \param t_start Process time at start.
    \param t_end Process time at end.
    \return Approximate percent normalized by CPU count (0-100).
    """
    if elapsed <= 0:
        return 0.0
    proctime = t_end - t_start
    cpus = max(1, multiprocessing.cpu_count())
    return min(100.0, max(0.0, (proctime / elapsed) * (100.0 / cpus)))


def _rss_bytes() -> int:
    """Return current process RSS in bytes."""
    return psutil.Process().memory_info().rss


def _draw(selector, draws: int) -> int:
    r"""Request up to draws words, stopping when the selector runs out.

    \param selector Open WordSelector.
    \param draws Maximum number of words to request.
    \return Number of words served.
    """
    for served in range(draws):
        try:
            selector.new_word()
        except NoMoreWordsError:
            return served
    return draws


@dataclass
class BenchResult:
    mode: str
    draws: int
    build_seconds: float
    words_per_sec: float
    cpu_percent: float
    rss_bytes: int
    rejected: int


def run_benchmark(
    draws: int,
    logger,
    *,
    wordlist_file: Path | str | None = None,
    corpus_words: int = 50_000,
    modes: tuple[str, ...] = MODES,
) -> tuple[list[BenchResult], BenchResult]:
    r"""Run the benchmark for each mode and return all results and the fastest.

    \param draws Words to request per mode; the sequential modes stop early
           when the word list runs out and record the words actually served.
    \param logger Logger for summary output.
    \param wordlist_file Existing word list to use instead of a synthetic one.
    \param corpus_words Size of the synthetic word list.
    \param modes Selection modes to measure.
    \return Tuple of (all results, best result).
    """
    results: list[BenchResult] = []
    with tempfile.TemporaryDirectory() as td:
        if wordlist_file is None:
            wordlist_file = write_synthetic_wordlist(Path(td) / "words.txt", corpus_words)
        for mode in modes:
            rss0 = _rss_bytes()
            b0 = time.monotonic()
            selector = make_selector(wordlist_file=str(wordlist_file), mode=mode)
            build = time.monotonic() - b0
            with selector:
                pt0 = time.process_time()
                t0 = time.monotonic()
                n = _draw(selector, draws)
                t1 = time.monotonic()
                pt1 = time.process_time()
                rss1 = _rss_bytes()
            elapsed = max(1e-6, t1 - t0)
            results.append(
                BenchResult(
                    mode=mode,
                    draws=n,
                    build_seconds=build,
                    words_per_sec=n / elapsed,
                    cpu_percent=_cpu_percent(elapsed, pt0, pt1),
                    rss_bytes=max(0, rss1 - rss0),
                    rejected=getattr(selector, "rejected", 0),
                )
            )

    best = max(results, key=lambda br: (br.words_per_sec, -br.rss_bytes))
    logger.info(
        "benchmark best: mode=%s words/s=%.0f build=%.3fs rss=%.1f MiB",
        best.mode,
        best.words_per_sec,
        best.build_seconds,
        best.rss_bytes / (1024 * 1024),
    )
    return results, best
