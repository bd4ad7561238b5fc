"""Speller — trie-backed dictionary index and spell checker."""

from speller.constants import ALPHABET_SIZE, APOSTROPHE_INDEX, LENGTH
from speller.trie import Trie, TrieNode, char_index
from speller.dictionary import Dictionary, DictionaryMemoryError
from speller.text import iter_words
from speller.cli import SpellReport, check_document, run_cli

__all__ = [
    "ALPHABET_SIZE",
    "APOSTROPHE_INDEX",
    "LENGTH",
    "Dictionary",
    "DictionaryMemoryError",
    "SpellReport",
    "Trie",
    "TrieNode",
    "char_index",
    "check_document",
    "iter_words",
    "run_cli",
]
