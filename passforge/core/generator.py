# -*- coding: utf-8 -*-
"""
passforge Generator - Password and passphrase generation.
"""

from typing import List, Optional, Sequence, Tuple

from passforge.core.charsets import CharacterPool, build_pool
from passforge.core.log import get_logger
from passforge.core.random_source import (
    ContractViolation,
    RandomSource,
    default_source,
)
from passforge.core.security import secure_zero
from passforge.core.strength import EntropyReport, build_report
from passforge.core.settings import (
    NO_CHARACTERS,
    WORDLIST_UNAVAILABLE,
    GeneratedSecret,
    Mode,
    PasswordSettings,
)

logger = get_logger('generator')

# Upper bound (exclusive) of the number appended by add_numbers
PASSPHRASE_NUMBER_BOUND = 1000


def generate_password(
    settings: PasswordSettings,
    pool: Optional[CharacterPool] = None,
    source: Optional[RandomSource] = None,
) -> GeneratedSecret:
    """
    Generate a random-character password.

    The guaranteed digits and symbols are drawn first, the remaining
    positions are filled from the whole pool, then the buffer is shuffled
    so the guaranteed characters can sit anywhere.

    Args:
        settings: Generation settings (Random mode fields are used)
        pool: Prebuilt pool; built from settings when omitted
        source: Random source (default: system CSPRNG)

    Returns:
        GeneratedSecret; its error is NO_CHARACTERS when the pool is empty

    Raises:
        ContractViolation: If the settings break the length/minimum contract
        RandomSourceError: If the system CSPRNG fails
    """
    source = source or default_source()
    if pool is None:
        pool = build_pool(settings)
    if pool is None or len(pool) == 0:
        return GeneratedSecret(secret="", settings=settings, error=NO_CHARACTERS,
                               source=source.name)

    settings.validate()
    if settings.required_digits and not pool.digits:
        raise ContractViolation("min_digits requested but every digit is excluded")
    if settings.required_symbols and not pool.symbols:
        raise ContractViolation("min_symbols requested but every symbol is excluded")

    buffer: List[str] = []
    for _ in range(settings.required_digits):
        buffer.append(source.choice(pool.digits))
    for _ in range(settings.required_symbols):
        buffer.append(source.choice(pool.symbols))

    characters = pool.characters
    while len(buffer) < settings.length:
        buffer.append(source.choice(characters))

    source.shuffle(buffer)
    password = ''.join(buffer)
    secure_zero(buffer)

    logger.debug("Generated %d-char password from a pool of %d", len(password), len(pool))
    return GeneratedSecret(secret=password, settings=settings, source=source.name)


def generate_passphrase(
    settings: PasswordSettings,
    wordlist: Sequence[str],
    source: Optional[RandomSource] = None,
) -> GeneratedSecret:
    """
    Generate a passphrase from a wordlist.

    Words are drawn independently and with replacement, so a word can
    repeat. With add_numbers a number in [0, 1000) is appended after the
    last word, unpadded and without separator.

    Args:
        settings: Generation settings (Passphrase mode fields are used)
        wordlist: Read-only sequence of words
        source: Random source (default: system CSPRNG)

    Returns:
        GeneratedSecret; its error is WORDLIST_UNAVAILABLE for an empty list

    Raises:
        ContractViolation: If word_count < 1
        RandomSourceError: If the system CSPRNG fails
    """
    source = source or default_source()
    if not wordlist:
        return GeneratedSecret(secret="", settings=settings, error=WORDLIST_UNAVAILABLE,
                               source=source.name)

    if settings.word_count < 1:
        raise ContractViolation(f"word_count must be >= 1, got {settings.word_count}")

    words = []
    for _ in range(settings.word_count):
        word = source.choice(wordlist)
        if settings.capitalize_words:
            word = word[:1].upper() + word[1:]
        words.append(word)

    passphrase = settings.separator.join(words)
    if settings.add_numbers:
        passphrase += str(source.next_int(PASSPHRASE_NUMBER_BOUND))
    secure_zero(words)

    logger.debug("Generated %d-word passphrase from %d words", settings.word_count, len(wordlist))
    return GeneratedSecret(secret=passphrase, settings=settings, source=source.name)


def generate_secret(
    settings: PasswordSettings,
    wordlist: Optional[Sequence[str]] = None,
    source: Optional[RandomSource] = None,
) -> GeneratedSecret:
    """Dispatch to the generator for settings.mode."""
    if settings.mode is Mode.PASSPHRASE:
        return generate_passphrase(settings, wordlist or (), source=source)
    return generate_password(settings, source=source)


def generate(
    settings: PasswordSettings,
    wordlist: Optional[Sequence[str]] = None,
    source: Optional[RandomSource] = None,
) -> Tuple[GeneratedSecret, EntropyReport]:
    """
    Generate a secret and its strength report.

    The report is computed from the settings (and the wordlist size in
    Passphrase mode), not from the generated string.
    """
    secret = generate_secret(settings, wordlist, source=source)
    wordlist_size = len(wordlist) if wordlist else 0
    return secret, build_report(settings, wordlist_size)
