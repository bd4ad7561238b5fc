import bootstrap
from speller.constants import LENGTH
from speller.dictionary import Dictionary


def test_normalize_words():
    lines = ["Zebra\n", "apple\n", "apple\n", "O'Neil\n", "co-op\n", "naïve\n", "\n", "x" * (LENGTH + 1)]
    assert bootstrap.normalize_words(lines) == ["apple", "o'neil", "zebra"]


def test_build_from_system_dictionary(tmp_path, monkeypatch, capsys):
    system = tmp_path / "system_words"
    system.write_text("Cat\ndog\ncat\nre-do\n", encoding="utf-8")
    monkeypatch.setattr(bootstrap, "SYSTEM_DICT", str(system))
    out_path = tmp_path / "dictionary.txt"

    assert bootstrap.build_dictionary(str(out_path))
    assert out_path.read_text(encoding="utf-8") == "cat\ndog\n"

    d = Dictionary()
    assert d.load(str(out_path))
    assert d.size() == 2
    assert d.check("CAT")


def test_existing_dictionary_is_kept(tmp_path, capsys):
    out_path = tmp_path / "dictionary.txt"
    out_path.write_text("keep\n", encoding="utf-8")
    assert bootstrap.build_dictionary(str(out_path))
    assert out_path.read_text(encoding="utf-8") == "keep\n"
    assert "already exists" in capsys.readouterr().out


def test_no_source_available(tmp_path, monkeypatch):
    monkeypatch.setattr(bootstrap, "SYSTEM_DICT", str(tmp_path / "absent"))
    monkeypatch.setattr(bootstrap, "URLS", [])
    assert bootstrap.build_dictionary(str(tmp_path / "dictionary.txt")) is False
