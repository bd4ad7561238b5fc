import pytest

from speller.dictionary import Dictionary


@pytest.fixture
def write_words(tmp_path):
    """Write ``text`` to a fresh file under tmp_path and return its path."""
    counter = iter(range(1000))

    def _write(text: str, name: str | None = None) -> str:
        path = tmp_path / (name or f"words{next(counter)}.txt")
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def small_dict_path(write_words):
    return write_words("cat\ncats\ncat's\ndog\n", "small")


@pytest.fixture
def loaded(small_dict_path):
    d = Dictionary()
    assert d.load(small_dict_path)
    yield d
    d.unload()
