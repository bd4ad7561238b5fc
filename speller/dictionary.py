"""Dictionary index: load / check / size / unload over a prefix trie."""

from __future__ import annotations

import logging

from speller.constants import LENGTH
from speller.trie import Trie, char_index

log = logging.getLogger("speller")


class DictionaryMemoryError(RuntimeError):
    """Node allocation failed while loading; the partial trie was released."""


def _acceptable(token: str) -> bool:
    return len(token) <= LENGTH and all(char_index(ch) is not None for ch in token)


class Dictionary:
    """Case-insensitive word membership backed by a trie.

    The index starts unloaded. ``load`` builds (or extends) the trie from a
    whitespace-separated word list, ``check`` answers membership queries,
    ``size`` reports how many words were loaded and ``unload`` releases the
    whole tree and returns the index to its unloaded state.
    """

    def __init__(self):
        self.trie: Trie | None = None
        self.word_count = 0

    @property
    def is_loaded(self) -> bool:
        return self.trie is not None

    def load(self, dict_path: str) -> bool:
        """Insert every token of ``dict_path``. False if it can't be read.

        Tokens longer than ``LENGTH`` or holding characters outside the
        alphabet are skipped and not counted. A failed load leaves the
        index unloaded.
        """
        added = 0
        skipped = 0
        try:
            with open(dict_path, "r", encoding="utf-8") as f:
                if self.trie is None:
                    self.trie = Trie()
                for line in f:
                    for token in line.split():
                        if not _acceptable(token):
                            if not skipped:
                                log.debug("First rejected token in %s: %r", dict_path, token)
                            skipped += 1
                            continue
                        self.trie.insert(token)
                        self.word_count += 1
                        added += 1
        except (OSError, UnicodeDecodeError) as exc:
            log.error("Could not load %s: %s", dict_path, exc)
            self.unload()
            return False
        except MemoryError as exc:
            self.unload()
            raise DictionaryMemoryError(f"Out of memory while loading {dict_path}") from exc

        if skipped:
            log.warning("Skipped %s malformed or overlong tokens in %s", f"{skipped:,}", dict_path)
        log.info("Loaded %s words from %s", f"{added:,}", dict_path)
        return True

    def check(self, word: str) -> bool:
        """True if ``word`` (any letter case) was loaded."""
        return self.trie is not None and self.trie.contains(word)

    def size(self) -> int:
        return self.word_count

    def unload(self) -> bool:
        """Release every trie node. False if some node was not reached."""
        if self.trie is None:
            return True

        expected = self.trie.node_count
        released = self.trie.clear()
        self.trie = None
        self.word_count = 0

        log.debug("Released %d of %d trie nodes", released, expected)
        if released != expected:
            log.error("Teardown released %d nodes but %d were allocated", released, expected)
            return False
        return True

    def __contains__(self, word: str) -> bool:
        return self.check(word)

    def __len__(self) -> int:
        return self.size()
