"""Alphabet and dictionary constants."""

from __future__ import annotations

import os

# a-z plus the apostrophe
ALPHABET_SIZE = 27
APOSTROPHE_INDEX = 26

# Longest word the dictionary and the text scanner accept.
LENGTH = 45

DEFAULT_DICTIONARY = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "..", "dictionaries", "large"
)

DICTIONARY_SEARCH_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    DEFAULT_DICTIONARY,
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]
