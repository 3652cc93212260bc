"""
passforge Self-test - Statistical checks of a random source.

A subset of NIST SP 800-22 on the raw byte stream, plus chi-square
uniformity checks of next_int() for the bounds the generators use.
These catch a broken or badly wired source; passing them does not prove
cryptographic quality.
"""

from typing import Any, Dict, Optional

import numpy as np
from scipy import special, stats

from passforge.core.log import get_logger
from passforge.core.random_source import RandomSource, default_source

logger = get_logger('selftest')

ALPHA = 0.01

# Bounds exercised by the uniformity checks: digits, symbols, full pool,
# bundled wordlist, passphrase number
UNIFORMITY_BOUNDS = (10, 32, 94, 256, 1000)


def _result(name: str, p_value, statistic, **extra) -> Dict[str, Any]:
    result = {
        'name': name,
        'p_value': float(p_value),
        'passed': bool(p_value >= ALPHA),
        'statistic': statistic,
    }
    result.update(extra)
    return result


class RandomSourceTests:
    """Statistical tests run against a RandomSource."""

    @staticmethod
    def bytes_to_bits(data: np.ndarray) -> np.ndarray:
        return np.unpackbits(data)

    @staticmethod
    def frequency_monobit_test(bits):
        """Balance of ones and zeros over the whole stream."""
        steps = 2 * bits.astype(np.int64) - 1
        s_obs = abs(int(steps.sum())) / np.sqrt(len(bits))
        return _result('Frequency (Monobit)', special.erfc(s_obs / np.sqrt(2)), float(s_obs))

    @staticmethod
    def frequency_block_test(bits, block_size=128):
        n_blocks = len(bits) // block_size
        if not n_blocks:
            return None

        ones = bits[:n_blocks * block_size].reshape(n_blocks, block_size).sum(axis=1)
        deviation = ones / block_size - 0.5
        chi_squared = float(4 * block_size * np.dot(deviation, deviation))
        p_value = special.gammaincc(n_blocks / 2, chi_squared / 2)
        return _result('Block Frequency', p_value, chi_squared)

    @staticmethod
    def runs_test(bits):
        """Number of uninterrupted runs of identical bits."""
        n = len(bits)
        pi = float(np.mean(bits))

        # Frequency prerequisite
        if abs(pi - 0.5) >= 2 / np.sqrt(n):
            return _result('Runs', 0.0, None,
                           note='Pre-test failed: proportion too far from 0.5')

        runs = 1 + int(np.count_nonzero(np.diff(bits)))
        pq = pi * (1 - pi)
        v_obs = abs(runs - 2 * n * pq) / (2 * np.sqrt(2 * n) * pq)
        return _result('Runs', special.erfc(v_obs), float(v_obs))

    @staticmethod
    def cumulative_sums_test(bits):
        """Largest excursion of the +/-1 random walk, forward mode."""
        n = len(bits)
        walk = np.cumsum(2 * bits.astype(np.int64) - 1)
        z = int(np.abs(walk).max())
        if z == 0:
            return None

        scale = z / np.sqrt(n)
        cdf = stats.norm.cdf
        k1 = np.arange(int((-n / z + 1) / 4), int((n / z - 1) / 4) + 1)
        k2 = np.arange(int((-n / z - 3) / 4), int((n / z - 1) / 4) + 1)
        p_value = (1
                   - np.sum(cdf((4 * k1 + 1) * scale) - cdf((4 * k1 - 1) * scale))
                   + np.sum(cdf((4 * k2 + 3) * scale) - cdf((4 * k2 + 1) * scale)))
        return _result('Cumulative Sums', p_value, z)

    @staticmethod
    def uniformity_test(source: RandomSource, bound: int, draws_per_bin: int = 50):
        """Chi-square goodness of fit of next_int(bound) against uniform."""
        draws = bound * draws_per_bin
        counts = np.bincount(
            np.fromiter((source.next_int(bound) for _ in range(draws)),
                        dtype=np.int64, count=draws),
            minlength=bound,
        )
        statistic, p_value = stats.chisquare(counts)
        return _result(f'Uniformity [0, {bound})', p_value, float(statistic))

    @classmethod
    def run_all_tests(
        cls,
        source: Optional[RandomSource] = None,
        samples: int = 12500,
        verbose: bool = True,
    ) -> Dict[str, Any]:
        """
        Run all self-tests against a source.

        Args:
            source: Random source (default: system CSPRNG)
            samples: Number of bytes for the bit-level tests
            verbose: Log every result

        Returns:
            Dictionary with test results
        """
        source = source or default_source()
        data = source.random_bytes(samples)
        bits = cls.bytes_to_bits(data)

        tests = [
            cls.frequency_monobit_test(bits),
            cls.frequency_block_test(bits),
            cls.runs_test(bits),
            cls.cumulative_sums_test(bits),
        ]
        tests.extend(cls.uniformity_test(source, bound) for bound in UNIFORMITY_BOUNDS)
        tests = [t for t in tests if t is not None]

        passed = sum(1 for t in tests if t['passed'])
        total = len(tests)

        if verbose:
            logger.info("SELF-TEST - source: %s", source.name)
            logger.info("Data: %s bytes (%s bits)", f"{len(data):,}", f"{len(bits):,}")
            for test in tests:
                status = "PASS" if test['passed'] else "FAIL"
                logger.info("%s  %-30s p-value: %.6f", status, test['name'], test['p_value'])
            logger.info("Result: %d/%d tests passed", passed, total)
            if passed < total:
                logger.warning("Random source failed %d self-test(s)", total - passed)

        return {
            'source': source.name,
            'tests': tests,
            'passed': passed,
            'total': total,
            'pass_rate': passed / total if total else 0
        }
