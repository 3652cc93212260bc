# -*- coding: utf-8 -*-
"""
passforge Charsets - Character classes and pool construction.
"""

import string
from dataclasses import dataclass
from typing import Optional

from passforge.core.log import get_logger

logger = get_logger('charsets')

# Character classes, in pool order
UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SYMBOLS = string.punctuation  # 32 characters

CHARSETS = {
    "uppercase": UPPERCASE,
    "lowercase": LOWERCASE,
    "digits": DIGITS,
    "symbols": SYMBOLS,
}

# Visually similar glyphs
SIMILAR = frozenset("il1Lo0O")
# Brackets, slashes, quotes and separators that are easy to misread or mistype
AMBIGUOUS = frozenset("{}[]()/\\'\"`~,;:.<>")


def _filter(chars: str, exclude_similar: bool, exclude_ambiguous: bool) -> str:
    """Drop excluded characters and duplicates, keeping first-seen order."""
    seen = set()
    kept = []
    for ch in chars:
        if ch in seen:
            continue
        if exclude_similar and ch in SIMILAR:
            continue
        if exclude_ambiguous and ch in AMBIGUOUS:
            continue
        seen.add(ch)
        kept.append(ch)
    return ''.join(kept)


@dataclass(frozen=True)
class CharacterPool:
    """
    Characters eligible for random selection.

    `characters` is the full pool. `digits` and `symbols` are the filtered
    class sets used for guaranteed minimums; they are empty when the class
    is disabled.
    """

    characters: str
    digits: str = ""
    symbols: str = ""

    def __len__(self) -> int:
        return len(self.characters)

    def __contains__(self, ch) -> bool:
        return ch in self.characters

    def __iter__(self):
        return iter(self.characters)


def build_pool(settings) -> Optional[CharacterPool]:
    """
    Build the character pool for Random mode.

    Enabled classes are concatenated as uppercase, lowercase, digits,
    symbols, then the exclusion filters are applied to the whole string.

    Args:
        settings: PasswordSettings

    Returns:
        CharacterPool, or None when no class is enabled or the exclusions
        remove every character
    """
    raw = ""
    if settings.include_uppercase:
        raw += UPPERCASE
    if settings.include_lowercase:
        raw += LOWERCASE
    if settings.include_numbers:
        raw += DIGITS
    if settings.include_symbols:
        raw += SYMBOLS

    characters = _filter(raw, settings.exclude_similar, settings.exclude_ambiguous)
    if not characters:
        logger.debug("Empty character pool (classes disabled or fully excluded)")
        return None

    digits = ""
    if settings.include_numbers:
        digits = _filter(DIGITS, settings.exclude_similar, settings.exclude_ambiguous)
    symbols = ""
    if settings.include_symbols:
        symbols = _filter(SYMBOLS, settings.exclude_similar, settings.exclude_ambiguous)

    logger.debug("Character pool: %d characters (%d digits, %d symbols)",
                 len(characters), len(digits), len(symbols))
    return CharacterPool(characters=characters, digits=digits, symbols=symbols)
