import math

import pytest

from passforge.core.settings import Mode, PasswordSettings
from passforge.core.strength import (
    DAY,
    YEAR,
    EntropyReport,
    build_report,
    calculate_passphrase_entropy,
    calculate_password_entropy,
    classify_strength,
    estimate_crack_time,
    estimate_entropy,
    strength_color,
)


def _bits_for_seconds(seconds):
    return math.log2(seconds * 1e12)


# --- Entropy ---

def test_random_entropy_uses_full_pool():
    assert estimate_entropy(PasswordSettings(length=16)) == pytest.approx(16 * math.log2(94))


def test_random_entropy_uses_live_pool_after_exclusions():
    settings = PasswordSettings(length=16, exclude_similar=True, exclude_ambiguous=True)
    assert estimate_entropy(settings) == pytest.approx(16 * math.log2(69))


def test_random_entropy_of_empty_pool_is_zero():
    settings = PasswordSettings(
        include_uppercase=False,
        include_lowercase=False,
        include_numbers=False,
        include_symbols=False,
    )
    assert estimate_entropy(settings) == 0.0


def test_passphrase_entropy_terms():
    base = PasswordSettings(mode=Mode.PASSPHRASE, word_count=4,
                            capitalize_words=False, add_numbers=False)
    assert estimate_entropy(base, 256) == pytest.approx(32.0)

    capitalized = PasswordSettings(mode=Mode.PASSPHRASE, word_count=4,
                                   capitalize_words=True, add_numbers=False)
    assert estimate_entropy(capitalized, 256) == pytest.approx(36.0)

    numbered = PasswordSettings(mode=Mode.PASSPHRASE, word_count=4,
                                capitalize_words=True, add_numbers=True)
    assert estimate_entropy(numbered, 256) == pytest.approx(36.0 + math.log2(1000))


def test_passphrase_entropy_without_wordlist_is_zero():
    settings = PasswordSettings(mode=Mode.PASSPHRASE, add_numbers=True)
    assert estimate_entropy(settings, 0) == 0.0


def test_entropy_is_stable_across_calls():
    settings = PasswordSettings(length=21, exclude_ambiguous=True)
    assert len({estimate_entropy(settings) for _ in range(10)}) == 1


def test_entropy_grows_with_length():
    values = [estimate_entropy(PasswordSettings(length=n, min_digits=0, min_symbols=0))
              for n in range(1, 65)]
    assert values == sorted(values)


def test_entropy_grows_with_word_count():
    values = [estimate_entropy(PasswordSettings(mode=Mode.PASSPHRASE, word_count=n), 7776)
              for n in range(1, 13)]
    assert values == sorted(values)


def test_helpers_return_python_floats():
    assert type(calculate_password_entropy(10, 26)) is float
    assert type(calculate_passphrase_entropy(3, 2)) is float
    assert calculate_password_entropy(10, 0) == 0.0


# --- Labels ---

@pytest.mark.parametrize("bits,label", [
    (0.0, "Very Weak"),
    (39.999, "Very Weak"),
    (40.0, "Weak"),
    (59.99, "Weak"),
    (60.0, "Fair"),
    (79.9, "Fair"),
    (80.0, "Good"),
    (99.999, "Good"),
    (100.0, "Strong"),
    (512.0, "Strong"),
])
def test_classify_boundaries(bits, label):
    assert classify_strength(bits) == label


def test_strength_colors():
    assert strength_color("Very Weak") == "bg-red-500"
    assert strength_color("Strong") == "bg-green-500"
    assert strength_color("unknown") == "bg-gray-500"


# --- Crack time ---

@pytest.mark.parametrize("bits,expected", [
    (0, "N/A"),
    (10, "Instantly"),
    (_bits_for_seconds(0.5), "Instantly"),
    (_bits_for_seconds(30), "30 seconds"),
    (_bits_for_seconds(1.6), "2 seconds"),
    (_bits_for_seconds(170), "3 minutes"),
    (_bits_for_seconds(7200), "2 hours"),
    (_bits_for_seconds(3 * DAY), "3 days"),
    (_bits_for_seconds(1.4 * DAY), "1 day"),
    (_bits_for_seconds(5 * YEAR), "5 years"),
    (_bits_for_seconds(50 * YEAR), "50 years"),
    (_bits_for_seconds(1000 * YEAR), "Thousands of years"),
    (_bits_for_seconds(10 ** 6 * YEAR), "Centuries"),
    (128, "Centuries"),
    (4096, "Centuries"),
])
def test_crack_time_buckets(bits, expected):
    assert estimate_crack_time(bits) == expected


def test_crack_time_rounds_to_nearest_unit():
    assert estimate_crack_time(_bits_for_seconds(2.6 * 3600)) == "3 hours"
    assert estimate_crack_time(_bits_for_seconds(2.4 * 3600)) == "2 hours"


@pytest.mark.parametrize("seconds,expected", [
    (59.4, "59 seconds"),
    (59.7, "1 minute"),
    (3599, "1 hour"),
    (86399, "1 day"),
    (364.7 * DAY, "1 year"),
    (99.7 * YEAR, "Thousands of years"),
])
def test_crack_time_rounding_promotes_to_next_unit(seconds, expected):
    assert estimate_crack_time(_bits_for_seconds(seconds)) == expected


def test_128_bit_settings_report_centuries():
    settings = PasswordSettings(length=20)  # 20 * log2(94) ~ 131 bits
    report = build_report(settings)
    assert report.bits > 128
    assert report.label == "Strong"
    assert report.estimated_crack_time == "Centuries"


# --- Report ---

def test_report_to_dict():
    report = EntropyReport(bits=45.1234, label="Weak", estimated_crack_time="10 hours")
    assert report.to_dict() == {
        'bits': 45.12,
        'label': 'Weak',
        'estimated_crack_time': '10 hours',
        'color': 'bg-orange-500',
    }


def test_build_report_for_passphrase():
    settings = PasswordSettings(mode=Mode.PASSPHRASE, word_count=6,
                                capitalize_words=False, add_numbers=False)
    report = build_report(settings, 7776)
    assert report.bits == pytest.approx(6 * math.log2(7776))
    assert report.label == "Fair"
