# -*- coding: utf-8 -*-
"""
passforge Strength - Entropy of the generation process, strength labels
and crack time estimates.

Entropy here is a property of the settings, never of a generated sample:
identical settings always give identical bits.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from passforge.core.charsets import build_pool
from passforge.core.settings import Mode, PasswordSettings

# Attacker model for crack time estimates
GUESSES_PER_SECOND = 1e12

VERY_WEAK = "Very Weak"
WEAK = "Weak"
FAIR = "Fair"
GOOD = "Good"
STRONG = "Strong"

# (exclusive upper bound in bits, label)
STRENGTH_THRESHOLDS = (
    (40.0, VERY_WEAK),
    (60.0, WEAK),
    (80.0, FAIR),
    (100.0, GOOD),
)

STRENGTH_COLORS = {
    VERY_WEAK: "bg-red-500",
    WEAK: "bg-orange-500",
    FAIR: "bg-yellow-500",
    GOOD: "bg-blue-500",
    STRONG: "bg-green-500",
}

MINUTE = 60
HOUR = 3600
DAY = 86400
YEAR = 31536000
CENTURY = YEAR * 100  # 3.1536e9 s
CRACK_TIME_CEILING = YEAR * 100000  # 3.1536e12 s

# (exclusive upper bound in seconds, unit size in seconds, unit name)
_UNIT_BUCKETS = (
    (MINUTE, 1, "second"),
    (HOUR, MINUTE, "minute"),
    (DAY, HOUR, "hour"),
    (YEAR, DAY, "day"),
    (CENTURY, YEAR, "year"),
)

INSTANTLY = "Instantly"
THOUSANDS_OF_YEARS = "Thousands of years"
CENTURIES = "Centuries"
NOT_AVAILABLE = "N/A"


def calculate_password_entropy(length: int, pool_size: int) -> float:
    """
    Entropy of a random-character password.

    Args:
        length: Password length
        pool_size: Number of characters in the live pool

    Returns:
        Entropy in bits (0 for an empty pool)
    """
    if pool_size <= 0 or length <= 0:
        return 0.0
    return float(length * np.log2(pool_size))


def calculate_passphrase_entropy(
    word_count: int,
    wordlist_size: int,
    capitalize_words: bool = False,
    add_numbers: bool = False,
) -> float:
    """
    Entropy of a passphrase.

    Capitalization counts one bit per word and the trailing number
    log2(1000) bits. Both are approximations.

    Args:
        word_count: Number of words
        wordlist_size: Number of words in the list
        capitalize_words: Words are capitalized
        add_numbers: A number in [0, 1000) is appended

    Returns:
        Entropy in bits (0 for an empty wordlist)
    """
    if wordlist_size <= 0 or word_count <= 0:
        return 0.0
    bits = word_count * np.log2(wordlist_size)
    if capitalize_words:
        bits += word_count
    if add_numbers:
        bits += np.log2(1000)
    return float(bits)


def estimate_entropy(settings: PasswordSettings, wordlist_size: int = 0) -> float:
    """
    Entropy in bits for the given settings.

    Random mode uses the size of the pool after exclusions, Passphrase
    mode uses wordlist_size.
    """
    if settings.mode is Mode.PASSPHRASE:
        return calculate_passphrase_entropy(
            settings.word_count,
            wordlist_size,
            capitalize_words=settings.capitalize_words,
            add_numbers=settings.add_numbers,
        )

    pool = build_pool(settings)
    pool_size = len(pool) if pool is not None else 0
    return calculate_password_entropy(settings.length, pool_size)


def classify_strength(bits: float) -> str:
    """Map entropy bits to a strength label (lower bounds inclusive)."""
    for upper, label in STRENGTH_THRESHOLDS:
        if bits < upper:
            return label
    return STRONG


def strength_color(label: str) -> str:
    """UI color token for a strength label."""
    return STRENGTH_COLORS.get(label, "bg-gray-500")


def _round(value: float) -> int:
    """Round half up to a whole unit."""
    return int(math.floor(value + 0.5))


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def estimate_crack_time(bits: float) -> str:
    """
    Human-readable time to exhaust the search space at 10^12 guesses/s.

    Args:
        bits: Entropy in bits

    Returns:
        "N/A" for 0 bits, "Instantly", a whole number of seconds, minutes,
        hours, days or years (below a century), "Thousands of years", or
        "Centuries"
    """
    if bits <= 0:
        return NOT_AVAILABLE

    # Compare in log space first: 2.0 ** bits overflows above ~1024 bits
    if bits - math.log2(GUESSES_PER_SECOND) >= math.log2(CRACK_TIME_CEILING):
        return CENTURIES

    seconds = 2.0 ** bits / GUESSES_PER_SECOND
    if seconds < 1:
        return INSTANTLY

    # A value that rounds up to the bucket limit moves to the next unit
    for limit, size, unit in _UNIT_BUCKETS:
        if seconds < limit:
            count = _round(seconds / size)
            if count * size < limit:
                return _plural(count, unit)
    if seconds < CRACK_TIME_CEILING:
        return THOUSANDS_OF_YEARS
    return CENTURIES


@dataclass(frozen=True)
class EntropyReport:
    """Strength report for a set of settings."""

    bits: float
    label: str
    estimated_crack_time: str

    @property
    def color(self) -> str:
        return strength_color(self.label)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'bits': round(self.bits, 2),
            'label': self.label,
            'estimated_crack_time': self.estimated_crack_time,
            'color': self.color,
        }


def report_for_bits(bits: float) -> EntropyReport:
    return EntropyReport(
        bits=bits,
        label=classify_strength(bits),
        estimated_crack_time=estimate_crack_time(bits),
    )


def build_report(settings: PasswordSettings, wordlist_size: int = 0) -> EntropyReport:
    """Entropy, label and crack time for the given settings."""
    return report_for_bits(estimate_entropy(settings, wordlist_size))
