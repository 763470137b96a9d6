from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger("wordhunt")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False

    def to_dict(self) -> dict:
        return {
            "isEndOfWord": self.is_word,
            "children": {ch: child.to_dict() for ch, child in self.children.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> TrieNode:
        node = cls()
        node.is_word = bool(data.get("isEndOfWord", False))
        for ch, child in data.get("children", {}).items():
            node.children[ch] = cls.from_dict(child)
        return node


class Trie:
    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True

    def node_for(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        node = self.node_for(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        return self.node_for(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def words(self) -> list[str]:
        """All stored words in depth-first order."""
        out: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                out.append(prefix)
            for ch, child in node.children.items():
                stack.append((child, prefix + ch))
        return out

    def to_dict(self) -> dict:
        return {"root": self.root.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> Trie:
        trie = cls()
        trie.root = TrieNode.from_dict(data["root"])
        return trie

    def save(self, path: str | Path):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, separators=(",", ":"))

    @classmethod
    def load(cls, path: str | Path) -> Trie:
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


def load_trie(path: str | Path, min_length: int = 3, max_length: int = 16) -> Trie:
    """Build a trie from a newline-delimited word list.

    Lines are trimmed and lower-cased; words outside the inclusive
    [min_length, max_length] range are skipped.
    """
    trie = Trie()
    inserted = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if min_length <= len(word) <= max_length:
                trie.insert(word)
                inserted += 1
    logger.info("Built trie from %s (%d words)", path, inserted)
    return trie
