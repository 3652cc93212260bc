from collections import Counter

import numpy as np
import pytest
from scipy import stats

from passforge.core.random_source import (
    ContractViolation,
    RandomSource,
    RandomSourceError,
    SecureRandomSource,
    SeededRandomSource,
    default_source,
)


class ScriptedSource(RandomSource):
    """Returns pre-set 32-bit values, big-endian."""

    name = "scripted"

    def __init__(self, values):
        self._data = b''.join(v.to_bytes(4, 'big') for v in values)

    def _read(self, n):
        out, self._data = self._data[:n], self._data[n:]
        assert len(out) == n, "script exhausted"
        return out


@pytest.mark.parametrize("bound", [0, -1, -1000])
def test_next_int_rejects_non_positive_bound(bound):
    with pytest.raises(ContractViolation):
        SecureRandomSource().next_int(bound)


@pytest.mark.parametrize("bound", [1.5, "10", None, True])
def test_next_int_rejects_non_integer_bound(bound):
    with pytest.raises(ContractViolation):
        SecureRandomSource().next_int(bound)


def test_next_int_rejects_bound_above_draw_range():
    with pytest.raises(ContractViolation):
        SecureRandomSource().next_int(2 ** 32 + 1)


def test_next_int_bound_one_is_always_zero():
    source = SecureRandomSource()
    assert all(source.next_int(1) == 0 for _ in range(20))


@pytest.mark.parametrize("bound", [2, 10, 32, 94, 1000, 7776])
def test_next_int_stays_in_range(bound):
    source = SecureRandomSource()
    draws = [source.next_int(bound) for _ in range(500)]
    assert min(draws) >= 0
    assert max(draws) < bound


def test_next_int_rejects_draws_in_the_incomplete_block():
    # For bound 3 the accepted range is [0, 2**32 - 1); 2**32 - 1 is rejected
    source = ScriptedSource([2 ** 32 - 1, 7])
    assert source.next_int(3) == 1


def test_next_int_accepts_last_value_of_complete_block():
    source = ScriptedSource([2 ** 32 - 2])
    assert source.next_int(3) == (2 ** 32 - 2) % 3


def test_seeded_source_is_reproducible():
    a = SeededRandomSource(42)
    b = SeededRandomSource(42)
    assert [a.next_int(1000) for _ in range(50)] == [b.next_int(1000) for _ in range(50)]


def test_seeded_sources_with_different_seeds_differ():
    a = SeededRandomSource("alpha")
    b = SeededRandomSource("beta")
    assert [a.next_int(2 ** 32) for _ in range(8)] != [b.next_int(2 ** 32) for _ in range(8)]


def test_seeded_source_is_uniform():
    source = SeededRandomSource(99)
    bound = 94
    counts = np.bincount([source.next_int(bound) for _ in range(bound * 200)], minlength=bound)
    _, p_value = stats.chisquare(counts)
    assert p_value > 0.001


def test_random_bytes_returns_uint8_array():
    data = SecureRandomSource().random_bytes(64)
    assert isinstance(data, np.ndarray)
    assert data.dtype == np.uint8
    assert len(data) == 64


def test_random_bytes_rejects_negative_count():
    with pytest.raises(ContractViolation):
        SecureRandomSource().random_bytes(-1)


def test_csprng_failure_is_fatal(monkeypatch):
    def broken(n):
        raise NotImplementedError("no entropy source")

    monkeypatch.setattr("passforge.core.random_source.os.urandom", broken)
    with pytest.raises(RandomSourceError):
        SecureRandomSource().next_int(10)


def test_shuffle_is_a_permutation(seeded):
    items = list(range(50))
    seeded.shuffle(items)
    assert sorted(items) == list(range(50))
    assert items != list(range(50))


def test_shuffle_permutations_are_uniform():
    source = SeededRandomSource(2024)
    counts = Counter()
    for _ in range(6000):
        items = ['a', 'b', 'c']
        source.shuffle(items)
        counts[''.join(items)] += 1
    assert len(counts) == 6
    _, p_value = stats.chisquare(list(counts.values()))
    assert p_value > 0.001


def test_shuffle_positions_are_uniform():
    source = SeededRandomSource(77)
    positions = np.zeros(8, dtype=np.int64)
    for _ in range(4000):
        items = list(range(8))
        source.shuffle(items)
        positions[items.index(0)] += 1
    _, p_value = stats.chisquare(positions)
    assert p_value > 0.001


def test_choice_rejects_empty_sequence(seeded):
    with pytest.raises(ContractViolation):
        seeded.choice("")


def test_default_source_is_shared_csprng():
    assert default_source() is default_source()
    assert isinstance(default_source(), SecureRandomSource)
