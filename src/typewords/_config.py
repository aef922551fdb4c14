r"""
\file _config.py
\brief Loading CLI defaults from JSON, TOML or YAML config files.
"""

import json
import sys
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib

import yaml


def find_config_path(argv: list[str] | None) -> str | None:
    """Pre-scan raw arguments for --config before full parsing."""
    if not argv:
        return None
    for i, tok in enumerate(argv):
        if tok == "--config" and i + 1 < len(argv):
            return argv[i + 1]
        if tok.startswith("--config="):
            return tok.split("=", 1)[1]
    return None


def load_config(path: Path | str) -> dict:
    r"""Read a config file into a dict of argparse defaults.

    The format is chosen by suffix. Keys use argparse destination names
    (e.g. num_words, wordlist_file). A file that cannot be read or parsed
    is reported on stderr and yields an empty dict.

    \param path Config file path (.json, .toml, .yaml or .yml).
    \return Top-level mapping, or {} on failure.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    try:
        text = p.read_text(encoding="utf-8")
        if suffix == ".json":
            cfg = json.loads(text)
        elif suffix == ".toml":
            cfg = tomllib.loads(text)
        elif suffix in (".yaml", ".yml"):
            cfg = yaml.safe_load(text) or {}
        else:
            print(f"[warn] Unsupported config format: {p.name}", file=sys.stderr)
            return {}
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"[warn] Failed to load config {path}: {e}", file=sys.stderr)
        return {}
    if not isinstance(cfg, dict):
        print(f"[warn] Config {path} is not a mapping; ignoring", file=sys.stderr)
        return {}
    return {k.replace("-", "_"): v for k, v in cfg.items()}
