import pytest

from passforge.core.random_source import SeededRandomSource
from passforge.core.settings import Mode, PasswordSettings


@pytest.fixture
def seeded():
    return SeededRandomSource(1234)


@pytest.fixture
def lowercase_only():
    return PasswordSettings(
        length=12,
        include_uppercase=False,
        include_lowercase=True,
        include_numbers=False,
        include_symbols=False,
        min_digits=0,
        min_symbols=0,
    )


@pytest.fixture
def passphrase_settings():
    return PasswordSettings(
        mode=Mode.PASSPHRASE,
        word_count=4,
        separator="-",
        capitalize_words=False,
        add_numbers=False,
    )
