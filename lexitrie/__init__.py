"""Case-insensitive prefix trie for in-memory dictionary lookups."""

from .trie import ALPHABET_SIZE, Trie, TrieNode, iter_words, letter_index
from .wordlist import WordListError, load_trie, read_words

__all__ = [
    "ALPHABET_SIZE",
    "Trie",
    "TrieNode",
    "WordListError",
    "iter_words",
    "letter_index",
    "load_trie",
    "read_words",
]
