"""Spell-check a document and report per-phase timings."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, TextIO

from speller.dictionary import Dictionary
from speller.text import iter_words

log = logging.getLogger("speller.cli")


class SpellReport:
    """Result of a spell-check run over one document."""

    __slots__ = (
        "misspelled", "words_in_dictionary", "words_in_text",
        "time_load", "time_check", "time_size", "time_unload",
    )

    def __init__(self):
        self.misspelled: list[str] = []
        self.words_in_dictionary = 0
        self.words_in_text = 0
        self.time_load = 0.0
        self.time_check = 0.0
        self.time_size = 0.0
        self.time_unload = 0.0

    @property
    def time_total(self) -> float:
        return self.time_load + self.time_check + self.time_size + self.time_unload

    def summary(self) -> str:
        rows = [
            ("WORDS MISSPELLED:", str(len(self.misspelled))),
            ("WORDS IN DICTIONARY:", str(self.words_in_dictionary)),
            ("WORDS IN TEXT:", str(self.words_in_text)),
            ("TIME IN load:", f"{self.time_load:.2f}"),
            ("TIME IN check:", f"{self.time_check:.2f}"),
            ("TIME IN size:", f"{self.time_size:.2f}"),
            ("TIME IN unload:", f"{self.time_unload:.2f}"),
            ("TIME IN TOTAL:", f"{self.time_total:.2f}"),
        ]
        return "\n".join(f"{label:<21} {value}" for label, value in rows)


def check_document(
    dictionary: Dictionary,
    text: TextIO,
    on_misspelled: Callable[[str], None] | None = None,
) -> SpellReport:
    """Check every word of ``text`` against an already loaded dictionary."""
    report = SpellReport()
    for word in iter_words(text):
        report.words_in_text += 1
        t0 = time.perf_counter()
        ok = dictionary.check(word)
        report.time_check += time.perf_counter() - t0
        if not ok:
            report.misspelled.append(word)
            if on_misspelled is not None:
                on_misspelled(word)
    return report


def run_cli(dict_path: str, text_path: str, out: TextIO | None = None) -> int:
    """Load ``dict_path``, check ``text_path`` and print the report.

    Returns the process exit status.
    """
    out = out or sys.stdout
    dictionary = Dictionary()

    t0 = time.perf_counter()
    loaded = dictionary.load(dict_path)
    time_load = time.perf_counter() - t0
    if not loaded:
        print(f"Could not load {dict_path}.", file=sys.stderr)
        return 1

    try:
        text = open(text_path, "r", encoding="utf-8", errors="replace")
    except OSError as exc:
        log.debug("open(%s) failed: %s", text_path, exc)
        print(f"Could not open {text_path}.", file=sys.stderr)
        dictionary.unload()
        return 1

    print("\nMISSPELLED WORDS\n", file=out)
    with text:
        report = check_document(dictionary, text, lambda w: print(w, file=out))
    report.time_load = time_load

    t0 = time.perf_counter()
    report.words_in_dictionary = dictionary.size()
    report.time_size = time.perf_counter() - t0

    t0 = time.perf_counter()
    unloaded = dictionary.unload()
    report.time_unload = time.perf_counter() - t0
    if not unloaded:
        print(f"Could not unload {dict_path}.", file=sys.stderr)
        return 1

    print(file=out)
    print(report.summary(), file=out)
    print(file=out)
    return 0
