import pytest

from passforge.core.wordlist import DEFAULT_WORDLIST, WORDLIST_SIZE, load_wordlist


def test_default_wordlist_shape():
    assert WORDLIST_SIZE == 256
    assert len(set(DEFAULT_WORDLIST)) == 256
    assert all(word.isalpha() and word.islower() for word in DEFAULT_WORDLIST)


def test_load_plain_wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# comment\nApple\n\nbanana\napple\ncherry\n", encoding="utf-8")
    assert load_wordlist(path) == ("apple", "banana", "cherry")


def test_load_eff_wordlist(tmp_path):
    path = tmp_path / "eff.txt"
    path.write_text("11111\tabacus\n11112\tabdomen\n11113\tabdominal\n", encoding="utf-8")
    assert load_wordlist(str(path)) == ("abacus", "abdomen", "abdominal")


def test_malformed_lines_are_skipped(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("one\ntwo words here\nthree\n", encoding="utf-8")
    assert load_wordlist(path) == ("one", "three")


def test_empty_file_gives_empty_wordlist(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert load_wordlist(path) == ()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_wordlist(tmp_path / "missing.txt")


def test_undecodable_file(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("caf\xe9\n".encode("latin-1"))
    with pytest.raises(ValueError, match="not valid UTF-8"):
        load_wordlist(path)


def test_directory(tmp_path):
    with pytest.raises(IsADirectoryError):
        load_wordlist(tmp_path)
