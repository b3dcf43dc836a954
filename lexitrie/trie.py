"""Prefix trie over lowercase ASCII letters.

The ``Trie`` stores dictionary keys in a tree of ``TrieNode`` objects, each of
which owns a dense 26-slot child table indexed by letter offset (``'a'`` -> 0
... ``'z'`` -> 25).  Three operations make up the public contract:

* ``insert`` – lowercases the input, skips anything that is not an ASCII letter
  and marks the resulting path as a complete word.
* ``contains`` – lowercases the input and answers exact membership.  Unlike
  ``insert`` it returns ``False`` as soon as it meets a non-letter character.
* ``words`` – lowercases the prefix, skips non-letters like ``insert`` and
  returns every stored key below the prefix in lexicographic order.

The elide/reject split between ``insert`` and ``contains`` is observable
behaviour that callers rely on: ``insert("ap'ple")`` stores ``apple`` and
``contains("apple")`` is ``True`` while ``contains("ap'ple")`` is ``False``.

The structure is append-only.  Reads never mutate nodes so a populated trie may
be shared between reader threads; concurrent ``insert`` calls need external
locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

__all__ = [
    "ALPHABET_SIZE",
    "Trie",
    "TrieNode",
    "iter_words",
    "letter_index",
]

ALPHABET_SIZE = 26
_FIRST_LETTER = ord("a")


def letter_index(char: str) -> Optional[int]:
    """Return the child slot for an already lowercased *char*.

    ``None`` is returned for anything outside ``a``-``z`` including digits,
    punctuation, whitespace, control characters and non-ASCII letters.
    """

    if "a" <= char <= "z" and len(char) == 1:
        return ord(char) - _FIRST_LETTER
    return None


def _empty_children() -> List[Optional["TrieNode"]]:
    return [None] * ALPHABET_SIZE


@dataclass(slots=True, repr=False)
class TrieNode:
    """A node inside the trie data structure."""

    children: List[Optional["TrieNode"]] = field(default_factory=_empty_children)
    is_end_of_word: bool = False

    def __post_init__(self) -> None:
        if len(self.children) != ALPHABET_SIZE:
            raise ValueError(
                f"TrieNode requires exactly {ALPHABET_SIZE} child slots"
            )
        for child in self.children:
            if child is not None and not isinstance(child, TrieNode):
                raise TypeError("TrieNode children must be TrieNode instances or None")
        if not isinstance(self.is_end_of_word, bool):
            raise TypeError("TrieNode.is_end_of_word must be a boolean")
        self.children = list(self.children)

    def present_letters(self) -> List[str]:
        """Return the letters with an occupied child slot, in ascending order."""

        return [
            chr(_FIRST_LETTER + index)
            for index, child in enumerate(self.children)
            if child is not None
        ]

    def __repr__(self) -> str:
        # Descendants are summarised, never expanded.
        entries = ", ".join(
            f"{letter!r}: TrieNode(...)" for letter in self.present_letters()
        )
        return f"TrieNode({{{entries}}}, is_end_of_word={self.is_end_of_word})"


class Trie:
    """Case-insensitive trie supporting insertion, lookup and prefix listing."""

    __slots__ = ("root", "_size", "_node_count")

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self.root = TrieNode()
        self._size = 0
        self._node_count = 1
        if words is not None:
            self.bulk_insert(words)

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def insert(self, word: str) -> None:
        """Insert *word* into the trie.

        Non-letter characters are dropped from the key, so ``"ape'"`` is stored
        as ``ape``.  A word without any letters marks the root itself, making
        the empty key a member.  Re-inserting a key allocates nothing.
        """

        node = self.root
        for char in self._normalize_word(word):
            index = letter_index(char)
            if index is None:
                continue
            child = node.children[index]
            if child is None:
                child = TrieNode()
                node.children[index] = child
                self._node_count += 1
            node = child
        if not node.is_end_of_word:
            node.is_end_of_word = True
            self._size += 1

    def bulk_insert(self, words: Iterable[str]) -> None:
        """Insert multiple *words*.

        The iterable is consumed up front so a ``TypeError`` raised for a bad
        element leaves no partially applied generator behind.
        """

        for word in list(words):
            self.insert(word)

    def contains(self, word: str) -> bool:
        """Return ``True`` if *word* was stored as a complete key.

        Any character that is not an ASCII letter makes the lookup fail
        immediately, even though ``insert`` would have skipped it.
        """

        node = self.root
        for char in self._normalize_word(word):
            index = letter_index(char)
            if index is None:
                return False
            child = node.children[index]
            if child is None:
                return False
            node = child
        return node.is_end_of_word

    def words(self, prefix: str) -> List[str]:
        """Return every stored key starting with *prefix*, sorted ascending.

        The prefix is normalised the same way ``insert`` normalises keys, so
        results are always lowercase letter-only strings.  When the prefix is
        itself a key it is the first result.  An unreachable prefix yields an
        empty list.
        """

        located = self._descend(self._normalize_word(prefix))
        if located is None:
            return []
        node, path = located
        return list(self._collect(node, path))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._size

    @property
    def node_count(self) -> int:
        """Total number of nodes currently allocated, the root included."""

        return self._node_count

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _normalize_word(word: str) -> str:
        if not isinstance(word, str):
            raise TypeError("word must be a string")
        return word.lower()

    def _descend(self, fragment: str) -> Optional[Tuple[TrieNode, str]]:
        node = self.root
        letters: List[str] = []
        for char in fragment:
            index = letter_index(char)
            if index is None:
                continue
            child = node.children[index]
            if child is None:
                return None
            letters.append(char)
            node = child
        return node, "".join(letters)

    @staticmethod
    def _collect(start: TrieNode, path: str) -> Iterator[str]:
        # Pre-order walk; children are pushed z..a so they pop a..z.
        stack: List[Tuple[TrieNode, str]] = [(start, path)]
        while stack:
            node, current = stack.pop()
            if node.is_end_of_word:
                yield current
            for index in range(ALPHABET_SIZE - 1, -1, -1):
                child = node.children[index]
                if child is not None:
                    stack.append((child, current + chr(_FIRST_LETTER + index)))


def iter_words(trie: Trie) -> Iterator[str]:
    """Yield all words stored in *trie* in lexicographical order."""

    yield from Trie._collect(trie.root, "")

