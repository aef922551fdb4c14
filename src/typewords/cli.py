r"""
\file cli.py
\brief CLI entrypoint: resolve the word source, then print words or run a tool.

This module wires together config loading, argument parsing, logging and
the word selectors. Besides printing words it can check a word list and
benchmark the selection modes.
"""

import logging
import os
import random
import sys
from collections.abc import Iterable

from ._args import build_argparser
from ._bench import run_benchmark
from ._checkutil import check_wordlist_file
from ._config import find_config_path, load_config
from ._errors import NoMoreWordsError, WordSelectorError
from ._wordlists import make_selector, text_name

EXIT_CHECK_FAILED = 1
EXIT_WORDS = 2
EXIT_IO = 3


def _has_file_handler(logger: logging.Logger, log_file: str) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target for h in logger.handlers
    )


def _setup_logging(level: str, log_file: str | None) -> logging.Logger:
    logging.basicConfig(level=getattr(logging, level), format="%(asctime)s %(levelname)s %(message)s")
    logger = logging.getLogger("typewords")
    logger.setLevel(getattr(logging, level))
    # one handler per log file, however many times main() runs in a process
    if log_file and not _has_file_handler(logger, log_file):
        fh = logging.FileHandler(log_file)
        fh.setLevel(getattr(logging, level))
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(fh)
    return logger


def main(argv: Iterable[str] | None = None) -> int:
    r"""Run the typewords CLI.

    \param argv Optional list of arguments (defaults to sys.argv[1:]).
    \return Process exit code (0 on success).
    """
    from typewords import __version__

    raw_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = build_argparser()
    config_path = find_config_path(raw_argv)
    if config_path:
        cfg = load_config(config_path)
        known = {a.dest for a in parser._actions}
        unknown = sorted(set(cfg) - known)
        if unknown:
            print(f"[warn] Ignoring unknown config keys: {', '.join(unknown)}", file=sys.stderr)
        parser.set_defaults(**{k: v for k, v in cfg.items() if k in known})
    args = parser.parse_args(raw_argv)

    logger = _setup_logging(args.log_level, args.log_file)

    if args.version:
        print(__version__)
        return 0

    if args.check:
        try:
            problems = check_wordlist_file(args.check)
        except OSError as e:
            print(f"[error] Cannot read {args.check}: {e}", file=sys.stderr)
            return EXIT_IO
        for problem in problems:
            print(f"{args.check}: {problem}")
        if problems:
            logger.info("check %s: %d problem(s)", args.check, len(problems))
            return EXIT_CHECK_FAILED
        print(f"{args.check}: ok")
        return 0

    if args.seed is not None:
        random.seed(args.seed)

    if args.benchmark:
        if args.wordlist_file:
            print(f"[info] Running local benchmark on {args.wordlist_file}.", file=sys.stderr)
        else:
            print(
                "[info] Running local benchmark; this writes a temporary word list and deletes it.",
                file=sys.stderr,
            )
        try:
            results, best = run_benchmark(
                args.bench_draws,
                logger,
                wordlist_file=args.wordlist_file,
                corpus_words=args.bench_corpus,
            )
        except WordSelectorError as e:
            print(f"[error] Benchmark failed: {e}", file=sys.stderr)
            return EXIT_WORDS
        except OSError as e:
            print(f"[error] Benchmark failed: {e}", file=sys.stderr)
            return EXIT_IO
        print("mode,draws,build_s,words_per_sec,cpu_pct,rss_mib,rejected")
        for r in results:
            print(
                f"{r.mode},{r.draws},{r.build_seconds:.3f},{r.words_per_sec:.0f},"
                f"{r.cpu_percent:.1f},{r.rss_bytes/(1024*1024):.1f},{r.rejected}"
            )
        print(f"\nFastest: --mode {best.mode}")
        return 0

    name = text_name(args.wordlist, args.wordlist_file)
    logger.info("selecting %d words from %s (mode=%s)", args.num_words, name, args.mode)
    try:
        with make_selector(args.wordlist, args.wordlist_file, args.mode) as selector:
            words = selector.new_words(args.num_words)
    except NoMoreWordsError as e:
        print(f"[error] {name} ran out of words: {e}", file=sys.stderr)
        return EXIT_WORDS
    except WordSelectorError as e:
        print(f"[error] {e}", file=sys.stderr)
        return EXIT_WORDS
    except OSError as e:
        print(f"[error] Cannot read {name}: {e}", file=sys.stderr)
        return EXIT_IO

    print(("\n" if args.newline else " ").join(words))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
