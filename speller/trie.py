"""Prefix trie over the 27-symbol dictionary alphabet."""

from __future__ import annotations

import string

from speller.constants import ALPHABET_SIZE, APOSTROPHE_INDEX

_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(string.ascii_lowercase)}
_INDEX.update({ch.upper(): i for ch, i in list(_INDEX.items())})
_INDEX["'"] = APOSTROPHE_INDEX


def char_index(ch: str) -> int | None:
    """Alphabet slot for ``ch`` (either case), or None if it has none."""
    return _INDEX.get(ch)


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.is_terminal: bool = False


class Trie:
    """Prefix trie for word membership checks.

    Every node exclusively owns its children, so the structure is a plain
    tree and ``clear`` can release it with a single post-order pass.
    """

    def __init__(self):
        self.root = TrieNode()
        self.node_count = 1

    def insert(self, word: str) -> None:
        indices = [char_index(ch) for ch in word]
        if None in indices:
            raise ValueError(f"{word!r} contains characters outside the alphabet")

        node = self.root
        for i in indices:
            child = node.children[i]
            if child is None:
                child = TrieNode()
                node.children[i] = child
                self.node_count += 1
            node = child
        node.is_terminal = True

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            i = _INDEX.get(ch)
            if i is None:
                return None
            node = node.children[i]
            if node is None:
                return None
        return node

    def clear(self) -> int:
        """Release every node, children before parents.

        Uses an explicit stack so very long words cannot exhaust the
        interpreter's recursion limit. Returns the number of nodes released
        and leaves the trie with a fresh, empty root.
        """
        released = 0
        stack: list[tuple[TrieNode, bool]] = [(self.root, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                for i in range(ALPHABET_SIZE):
                    node.children[i] = None
                node.is_terminal = False
                released += 1
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in node.children if child is not None)

        self.root = TrieNode()
        self.node_count = 1
        return released
