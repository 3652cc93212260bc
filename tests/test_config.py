import json

import pytest

from passforge.config import DEFAULTS, Config
from passforge.core.random_source import ContractViolation
from passforge.core.settings import Mode, PasswordSettings
from passforge.core.wordlist import DEFAULT_WORDLIST


def test_missing_file_gives_defaults(tmp_path):
    config = Config(tmp_path / "config.json")
    assert config.settings() == PasswordSettings()
    assert config.get("output", "count") == 5


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = Config(path)
    config.update_settings(PasswordSettings(mode=Mode.PASSPHRASE, word_count=7))
    config.set("output", "count", 2)
    config.save()

    reloaded = Config(path)
    assert reloaded.settings().mode is Mode.PASSPHRASE
    assert reloaded.settings().word_count == 7
    assert reloaded.get("output", "count") == 2


def test_partial_file_is_merged_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"generator": {"length": 32, "unknown": 1}}))
    config = Config(path)
    assert config.settings().length == 32
    assert config.settings().include_symbols is True
    assert config.get("output", "show_report") is True


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert Config(path).settings() == PasswordSettings()


def test_defaults_are_not_mutated(tmp_path):
    config = Config(tmp_path / "config.json")
    config.set("generator", "length", 99)
    assert DEFAULTS["generator"]["length"] == 16


def test_unknown_mode_is_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"generator": {"mode": "pin"}}))
    with pytest.raises(ContractViolation):
        Config(path).settings()


def test_wordlist_default_and_file(tmp_path):
    config = Config(tmp_path / "config.json")
    assert config.wordlist() == DEFAULT_WORDLIST

    words = tmp_path / "words.txt"
    words.write_text("red\ngreen\nblue\n")
    config.set("wordlist", "path", str(words))
    assert config.wordlist() == ("red", "green", "blue")


@pytest.mark.parametrize("generator", [
    {"length": "20"},
    {"word_count": None},
    {"exclude_similar": 1},
    {"separator": 0},
])
def test_mistyped_settings_fail_validation(tmp_path, generator):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"generator": generator}))
    settings = Config(path).settings()
    with pytest.raises(ContractViolation, match="must be"):
        settings.validate()
