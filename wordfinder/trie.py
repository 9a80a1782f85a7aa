from __future__ import annotations

from typing import Iterable


class TrieNode:
    __slots__ = ("children", "is_word", "word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False
        # Set on terminal nodes so a grid walk knows which word ended here.
        self.word: str | None = None


class Trie:
    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            self._size += 1
        node.is_word = True
        node.word = word

    def find(self, prefix: str) -> TrieNode | None:
        """Return the node reached by following ``prefix``, or None."""
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_word

    def __len__(self) -> int:
        return self._size

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        """Build a trie from the distinct non-empty words, in first-seen order."""
        trie = cls()
        for word in dict.fromkeys(words):
            if word:
                trie.insert(word)
        return trie
