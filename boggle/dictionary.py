from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger("boggle")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class PrefixDictionary:
    """Word set answering exact-word and has-prefix queries.

    Words are stored as given; callers normalize to uppercase before inserting
    or querying.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> PrefixDictionary:
        dictionary = cls()
        for word in words:
            dictionary.insert(word)
        return dictionary

    def insert(self, word: str):
        if not word:
            raise ValueError("Cannot insert an empty word")
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def find_node(self, s: str, start: TrieNode | None = None) -> TrieNode | None:
        """Node reached by following s from start (the root by default), or None."""
        node = self.root if start is None else start
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_word

    def contains_prefix(self, prefix: str) -> bool:
        if not prefix:
            return self._size > 0
        return self.find_node(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._size


def load_dictionary(path: str, min_length: int = 1) -> PrefixDictionary:
    dictionary = PrefixDictionary()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if len(word) >= min_length and word.isascii() and word.isalpha():
                dictionary.insert(word)
    logger.info("Loaded %d words from %s", len(dictionary), path)
    return dictionary
