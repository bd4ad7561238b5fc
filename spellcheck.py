#!/usr/bin/env python3
"""
Speller

Loads a word list into a prefix trie and reports every word of a text
that is not in it, along with the time spent loading, checking, sizing
and unloading the dictionary.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from speller.cli import run_cli
from speller.constants import DICTIONARY_SEARCH_PATHS


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("speller")


def find_dictionary(dict_path: str | None = None) -> str | None:
    """Explicit path if given, else the first word list that exists."""
    if dict_path:
        return dict_path
    for path in DICTIONARY_SEARCH_PATHS:
        if os.path.exists(path):
            return path
    return None


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Speller -- reports words of a text missing from a dictionary",
    )
    parser.add_argument("text", help="Path to the text to spell-check")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dict_path = find_dictionary(args.dict)
    if dict_path is None:
        log.error("No dictionary file found -- pass --dict or run bootstrap.py.")
        return 1

    return run_cli(dict_path, args.text)


if __name__ == "__main__":
    sys.exit(main())
