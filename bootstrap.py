#!/usr/bin/env python3
"""
Setup script for Speller.
Builds the plain-text word list the spell checker loads.
"""

from __future__ import annotations

import os
import urllib.request
from typing import Iterable

from speller.constants import LENGTH
from speller.trie import char_index

SYSTEM_DICT = '/usr/share/dict/words'

URLS = [
    "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt",
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]


def normalize_words(lines: Iterable[str]) -> list[str]:
    """Lowercase, keep only indexable words of 1..LENGTH chars, dedupe and sort."""
    words = set()
    for line in lines:
        word = line.strip().lower()
        if 1 <= len(word) <= LENGTH and all(char_index(ch) is not None for ch in word):
            words.add(word)
    return sorted(words)


def write_dictionary(words: list[str], dict_path: str) -> None:
    with open(dict_path, 'w', encoding='utf-8') as f:
        for word in words:
            f.write(word + '\n')


def build_dictionary(dict_path: str | None = None) -> bool:
    """Create ``dictionary.txt`` unless it already exists. False if no source worked."""
    dict_path = dict_path or os.path.join(os.path.dirname(os.path.abspath(__file__)), 'dictionary.txt')

    if os.path.exists(dict_path):
        with open(dict_path, encoding='utf-8') as f:
            count = sum(1 for _ in f)
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return True

    if os.path.exists(SYSTEM_DICT):
        print(f"  Using system dictionary: {SYSTEM_DICT}")
        with open(SYSTEM_DICT, encoding='utf-8', errors='replace') as f:
            words = normalize_words(f)
        write_dictionary(words, dict_path)
        print(f"✓ Dictionary created: {len(words):,} words → {dict_path}")
        return True

    for url in URLS:
        try:
            print(f"  Trying {url}...")
            with urllib.request.urlopen(url, timeout=30) as resp:
                text = resp.read().decode('utf-8', errors='replace')
        except OSError as e:
            print(f"  Failed: {e}")
            continue
        words = normalize_words(text.splitlines())
        write_dictionary(words, dict_path)
        print(f"✓ Dictionary downloaded: {len(words):,} words")
        return True

    print("\n⚠ Could not build a dictionary automatically.")
    print("  Save a word list (one word per line) as:")
    print(f"  {dict_path}")
    return False


def main():
    print("=" * 50)
    print("  Speller — Setup")
    print("=" * 50)
    print()

    build_dictionary()

    print()
    print("=" * 50)
    print("  Setup complete! Check a text:")
    print()
    print("    python spellcheck.py essay.txt")
    print("    python spellcheck.py --dict words.txt essay.txt")
    print("=" * 50)


if __name__ == '__main__':
    main()
