r"""
\file _args.py
\brief Argument parsing and count parsing utilities.
"""

import argparse

from ._wordlists import MODES, WORDLIST_CHOICES


def parse_count(expr) -> int:
    r"""Parse a non-negative integer count.

    Accepts plain integers, underscores, scientific notation (1e3) and
    power notation (2^10).

    \param expr String or int to parse.
    \return The integer value.
    \throws argparse.ArgumentTypeError on invalid or negative input.
    """
    s = str(expr).strip().lower().replace("_", "")
    try:
        if "^" in s:
            base, exp = s.split("^", 1)
            n = int(float(base)) ** int(float(exp))
        elif "e" in s:
            n = int(float(s))
        else:
            n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid count: {expr}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"Count must be non-negative: {expr}")
    return n


def build_argparser() -> argparse.ArgumentParser:
    r"""Build the CLI argument parser.

    \return Configured ArgumentParser instance.
    """
    epilog = (
        "\nSelection modes:\n"
        "  random      Uniform random words of 2-8 ASCII letters from a sorted word list.\n"
        "  sequential  Words of the list in file order; fails when the list runs out.\n"
        "  book        Whitespace-separated tokens of any text, in reading order.\n\n"
        "Word list assumptions (random mode):\n"
        "  one word per line, ASCII, sorted case-insensitively, no blank lines\n"
        "  except at the end, not modified while running. Use --check to verify.\n"
    )
    p = argparse.ArgumentParser(
        prog="typewords",
        description="Pick words for a typing test from a word list or a text.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=epilog,
    )

    source = p.add_argument_group("Source")
    source.add_argument("-w", "--wordlist", choices=list(WORDLIST_CHOICES), default="top250", help="Built-in word list name, or os for the system list")
    source.add_argument("-f", "--wordlist-file", help="Path to a word list or text file (overrides --wordlist)")
    source.add_argument("-m", "--mode", choices=list(MODES), default="random", help="Selection mode (default: random)")

    out = p.add_argument_group("Output")
    out.add_argument("-n", "--num-words", type=parse_count, default=30, help="Number of words to print (default 30)")
    out.add_argument("--newline", action="store_true", help="Print one word per line instead of space-separated")
    out.add_argument("--seed", type=int, help="Random seed for reproducibility")

    tools = p.add_argument_group("Tools")
    tools.add_argument("--check", metavar="PATH", help="Check that a word list is sorted and alphabetic, then exit")
    tools.add_argument("--benchmark", action="store_true", help="Measure index build time and words/sec for each mode")
    tools.add_argument("--bench-draws", type=parse_count, default=10_000, help="Words to request per mode when benchmarking")
    tools.add_argument("--bench-corpus", type=parse_count, default=50_000, help="Size of the synthetic word list when no --wordlist-file is given")

    info = p.add_argument_group("Info")
    info.add_argument("-V", "--version", action="store_true", help="Show version and exit")

    cfg = p.add_argument_group("Config")
    cfg.add_argument("--config", help="Path to a TOML/JSON/YAML config file with CLI defaults")

    logs = p.add_argument_group("Logging")
    logs.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")
    logs.add_argument("--log-file", help="Path to log file (append)")

    return p
