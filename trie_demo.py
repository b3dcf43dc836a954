"""Command line demonstration for the ``lexitrie`` prefix trie.

Running the script without arguments populates a trie with a handful of
English words (one of them carrying a stray apostrophe), prints the shallow
diagnostic summary of the root node and lists the words stored under the
``ap`` prefix.

Additional words, word-list files and prefixes can be supplied on the command
line or through a YAML configuration document such as::

    words: [apple, ape, ball]
    words_files: [/usr/share/dict/words]
    prefixes: [ap, b]
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
import argparse
import json
import logging
import sys

import yaml

from lexitrie import Trie, WordListError, load_trie

logger = logging.getLogger(__name__)

DEFAULT_WORDS: Tuple[str, ...] = ("apple", "ape'", "ball")
DEFAULT_PREFIXES: Tuple[str, ...] = ("ap",)


class DemoConfigError(ValueError):
    """Raised when the demonstration configuration document is invalid."""


@dataclass(frozen=True)
class DemoConfig:
    """Inputs gathered from the configuration file and command line flags."""

    words: Tuple[str, ...] = ()
    words_files: Tuple[Path, ...] = ()
    prefixes: Tuple[str, ...] = ()
    checks: Tuple[str, ...] = ()

    def merged_with(self, other: "DemoConfig") -> "DemoConfig":
        """Return a config holding the entries of both, ``self`` first."""

        return DemoConfig(
            words=self.words + other.words,
            words_files=self.words_files + other.words_files,
            prefixes=self.prefixes + other.prefixes,
            checks=self.checks + other.checks,
        )


def _string_tuple(payload: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    value = payload.get(key, [])
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DemoConfigError(f"'{key}' must be a list of strings")
    return tuple(value)


def load_config(path: Optional[Path]) -> DemoConfig:
    """Read the YAML (or JSON) document at *path* into a :class:`DemoConfig`.

    ``None`` yields an empty configuration.  Relative ``words_files`` entries
    are resolved against the directory holding the configuration file.
    """

    if path is None:
        return DemoConfig()

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DemoConfigError(f"Unable to read configuration {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise DemoConfigError(f"Configuration {path} is not valid YAML: {exc}") from exc

    if document is None:
        return DemoConfig()
    if not isinstance(document, dict):
        raise DemoConfigError("Configuration root must be a mapping")

    unknown = sorted(set(document) - {"words", "words_files", "prefixes", "checks"})
    if unknown:
        raise DemoConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    base_dir = path.parent
    return DemoConfig(
        words=_string_tuple(document, "words"),
        words_files=tuple(
            base_dir / entry for entry in _string_tuple(document, "words_files")
        ),
        prefixes=_string_tuple(document, "prefixes"),
        checks=_string_tuple(document, "checks"),
    )


def build_trie(config: DemoConfig) -> Trie:
    """Populate a trie from *config*, falling back to :data:`DEFAULT_WORDS`."""

    trie = Trie()
    if not config.words and not config.words_files:
        logger.debug("No words configured, using the built-in sample")
        trie.bulk_insert(DEFAULT_WORDS)
        return trie

    trie.bulk_insert(config.words)
    load_trie(config.words_files, trie=trie)
    logger.info("Trie holds %d words across %d nodes", len(trie), trie.node_count)
    return trie


def run(config: DemoConfig) -> Dict[str, Any]:
    """Execute the demonstration and return the collected results."""

    trie = build_trie(config)
    prefixes = config.prefixes or DEFAULT_PREFIXES
    return {
        "root": repr(trie.root),
        "prefixes": {prefix: trie.words(prefix) for prefix in prefixes},
        "checks": {word: trie.contains(word) for word in config.checks},
    }


def _format_text(results: Mapping[str, Any]) -> List[str]:
    lines = [results["root"]]
    for prefix, words in results["prefixes"].items():
        lines.append(f"Words with prefix {prefix!r}: {words!r}")
    for word, present in results["checks"].items():
        lines.append(f"Contains {word!r}? {'Yes' if present else 'No'}")
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Populate a prefix trie and list the words under a prefix.",
    )
    parser.add_argument(
        "--word",
        dest="words",
        action="append",
        default=[],
        help="Word to insert. May be given multiple times.",
    )
    parser.add_argument(
        "--words-file",
        dest="words_files",
        action="append",
        type=Path,
        default=[],
        help="Plain-text word list (one word per line) to insert.",
    )
    parser.add_argument(
        "--prefix",
        dest="prefixes",
        action="append",
        default=[],
        help="Prefix to enumerate. Defaults to 'ap' when none is configured.",
    )
    parser.add_argument(
        "--check",
        dest="checks",
        action="append",
        default=[],
        help="Word whose exact membership should be reported.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML document with 'words', 'words_files', 'prefixes' and 'checks' lists.",
    )
    parser.add_argument(
        "--output-format",
        choices=["text", "json"],
        default="text",
        help="Print results as human-readable text or JSON.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for the trie demonstration."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    cli_config = DemoConfig(
        words=tuple(args.words),
        words_files=tuple(args.words_files),
        prefixes=tuple(args.prefixes),
        checks=tuple(args.checks),
    )
    try:
        config = load_config(args.config).merged_with(cli_config)
        results = run(config)
    except (DemoConfigError, WordListError) as exc:
        logger.error("%s", exc)
        return 2

    if args.output_format == "json":
        print(json.dumps(results, sort_keys=True))
    else:
        for line in _format_text(results):
            print(line)
    return 0


__all__ = [
    "DEFAULT_PREFIXES",
    "DEFAULT_WORDS",
    "DemoConfig",
    "DemoConfigError",
    "build_trie",
    "load_config",
    "main",
    "run",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
