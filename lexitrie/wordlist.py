"""Plain-text word lists used to populate a :class:`~lexitrie.trie.Trie`.

Word lists hold one entry per line.  Surrounding whitespace is stripped, blank
lines are ignored and lines starting with ``#`` are treated as comments.
Entries are passed to ``Trie.insert`` untouched, so normalisation (lowercasing
and dropping non-letters) happens in exactly one place.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .trie import Trie

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
COMMENT_PREFIX = "#"


class WordListError(ValueError):
    """Raised when a word list cannot be read."""


def read_words(path: PathLike) -> List[str]:
    """Return the entries of the word list stored at *path*."""

    source = Path(path)
    try:
        with source.open("r", encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(f"Unable to read word list {source}: {exc}") from exc

    words: List[str] = []
    skipped = 0
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith(COMMENT_PREFIX):
            skipped += 1
            continue
        words.append(entry)

    logger.debug("Skipped %d blank or comment lines in %s", skipped, source)
    return words


def load_trie(paths: Iterable[PathLike], *, trie: Optional[Trie] = None) -> Trie:
    """Insert the words from every file in *paths* into *trie*.

    A fresh trie is created when *trie* is omitted.  Files are processed in the
    given order and the first unreadable file aborts the load with
    :class:`WordListError`.
    """

    target = trie if trie is not None else Trie()
    for path in paths:
        words = read_words(path)
        before = len(target)
        target.bulk_insert(words)
        logger.info(
            "Loaded %d words from %s (%d new keys)",
            len(words),
            path,
            len(target) - before,
        )
    return target


__all__ = [
    "WordListError",
    "load_trie",
    "read_words",
]
