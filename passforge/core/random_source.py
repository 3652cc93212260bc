"""
passforge Random Source - Uniform integers from a cryptographic RNG.

Every draw made by the generators goes through a RandomSource so the
production CSPRNG can be swapped for a reproducible test double.
"""

import hashlib
import os
from typing import Union

import numpy as np

from passforge.core.log import get_logger
from passforge.core.security import secure_zero

logger = get_logger('random')

# next_int() draws 32 bits per attempt
_DRAW_BYTES = 4
_DRAW_RANGE = 1 << (8 * _DRAW_BYTES)


class RandomSourceError(RuntimeError):
    """The operating system CSPRNG is unavailable. Not recoverable."""
    pass


class ContractViolation(ValueError):
    """A caller passed arguments that violate a documented precondition."""
    pass


class RandomSource:
    """
    Base class: turns a byte stream into unbiased integers.

    Subclasses only implement _read(). next_int() uses rejection sampling
    over 32-bit draws, so there is no modulo bias for any bound.
    """

    name = "abstract"

    def _read(self, n: int) -> bytes:
        raise NotImplementedError

    def random_bytes(self, n: int) -> np.ndarray:
        """
        Return n random bytes as a numpy uint8 array.

        Args:
            n: Number of bytes (must be >= 0)

        Returns:
            Random bytes as numpy uint8 array
        """
        if n < 0:
            raise ContractViolation(f"Byte count must be >= 0, got {n}")
        raw = bytearray(self._read(n))
        arr = np.frombuffer(bytes(raw), dtype=np.uint8).copy()
        secure_zero(raw)
        return arr

    def next_int(self, bound: int) -> int:
        """
        Return an integer uniformly distributed over [0, bound).

        Draws are rejected when they fall in the incomplete last block of
        the 32-bit range; the acceptance rate is always above 50%.

        Args:
            bound: Exclusive upper bound, 1 <= bound <= 2**32

        Raises:
            ContractViolation: If bound is not in the supported range
            RandomSourceError: If the underlying RNG fails
        """
        if isinstance(bound, bool) or not isinstance(bound, (int, np.integer)):
            raise ContractViolation(f"Bound must be an integer, got {bound!r}")
        bound = int(bound)
        if bound <= 0:
            raise ContractViolation(f"Bound must be positive, got {bound}")
        if bound > _DRAW_RANGE:
            raise ContractViolation(f"Bound must be <= 2**32, got {bound}")
        if bound == 1:
            return 0

        limit = (_DRAW_RANGE // bound) * bound
        while True:
            value = int.from_bytes(self._read(_DRAW_BYTES), 'big')
            if value < limit:
                return value % bound

    def choice(self, items):
        """Return one element of a non-empty sequence, chosen uniformly."""
        if len(items) == 0:
            raise ContractViolation("Cannot choose from an empty sequence")
        return items[self.next_int(len(items))]

    def shuffle(self, items: list) -> None:
        """Fisher-Yates shuffle of items in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(i + 1)
            items[i], items[j] = items[j], items[i]


class SecureRandomSource(RandomSource):
    """Operating system CSPRNG (os.urandom / getrandom)."""

    name = "CSPRNG"

    def _read(self, n: int) -> bytes:
        try:
            return os.urandom(n)
        except (NotImplementedError, OSError) as e:
            logger.error("System CSPRNG unavailable: %s", e)
            raise RandomSourceError(f"System CSPRNG unavailable: {e}") from e


class SeededRandomSource(RandomSource):
    """
    Deterministic source for tests: SHA-512 in counter mode over a seed.

    Output is uniform and reproducible for a given seed. It must never be
    used to generate real secrets.
    """

    name = "seeded"

    def __init__(self, seed: Union[int, str, bytes] = 0):
        if isinstance(seed, int):
            seed = seed.to_bytes(16, 'big', signed=True)
        elif isinstance(seed, str):
            seed = seed.encode('utf-8')
        self._seed = bytes(seed)
        self._counter = 0
        self._buffer = bytearray()

    def _read(self, n: int) -> bytes:
        while len(self._buffer) < n:
            ctx = hashlib.sha512()
            ctx.update(self._counter.to_bytes(8, 'big'))
            ctx.update(self._seed)
            self._buffer.extend(ctx.digest())
            self._counter += 1
        out = bytes(self._buffer[:n])
        del self._buffer[:n]
        return out


_default_source = None


def default_source() -> RandomSource:
    """Return the shared production source (stateless, safe to share)."""
    global _default_source
    if _default_source is None:
        _default_source = SecureRandomSource()
    return _default_source
