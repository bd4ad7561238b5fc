import io

from speller.constants import LENGTH
from speller.text import iter_words


def words(text):
    return list(iter_words(io.StringIO(text)))


def test_splits_on_punctuation_and_whitespace():
    assert words("The cat, the hat.\nA dog!") == ["The", "cat", "the", "hat", "A", "dog"]


def test_apostrophes_inside_words():
    assert words("cat's 'quoted' rock'n'roll") == ["cat's", "quoted'", "rock'n'roll"]


def test_digit_runs_are_dropped():
    assert words("MS2 is 2nd; x86 ok") == ["is", "ok"]


def test_overlong_runs_are_dropped():
    long_run = "a" * (LENGTH + 5)
    assert words(f"short {long_run} tail") == ["short", "tail"]


def test_word_of_max_length_is_kept():
    word = "b" * LENGTH
    assert words(f"{word}.") == [word]


def test_trailing_word_without_terminator():
    assert words("last") == ["last"]


def test_words_span_iterated_lines():
    assert list(iter_words(["one\n", "two three\n"])) == ["one", "two", "three"]


def test_non_ascii_letters_break_words():
    assert words("café naïve") == ["caf", "na", "ve"]


def test_empty_input():
    assert words("") == []
