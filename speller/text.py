"""Word extraction from running text."""

from __future__ import annotations

import string
from typing import Iterable, Iterator

from speller.constants import LENGTH

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


def iter_words(stream: Iterable[str]) -> Iterator[str]:
    """Yield candidate words from ``stream`` (an open text file or lines).

    A word is a run of ASCII letters and apostrophes that does not start
    with an apostrophe. Runs longer than ``LENGTH`` and runs touching a
    digit are dropped whole, as they can't be dictionary words.
    """
    word: list[str] = []
    # "long" or "digit" while skipping the remainder of a rejected run
    skipping: str | None = None

    for line in stream:
        for ch in line:
            if skipping == "long":
                if ch in _LETTERS:
                    continue
                skipping = None
            elif skipping == "digit":
                if ch in _LETTERS or ch in _DIGITS:
                    continue
                skipping = None

            if ch in _LETTERS or (ch == "'" and word):
                word.append(ch)
                if len(word) > LENGTH:
                    word = []
                    skipping = "long"
            elif ch in _DIGITS:
                word = []
                skipping = "digit"
            elif word:
                yield "".join(word)
                word = []

    if word:
        yield "".join(word)
