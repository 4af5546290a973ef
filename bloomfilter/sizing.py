"""Closed-form sizing for Bloom filters.

Formulae: https://en.wikipedia.org/wiki/Bloom_filter#Optimal_number_of_hash_functions

* n: expected number of elements
* p: target false positive probability
* m: number of bits in the array
* k: number of hash functions
"""
from __future__ import annotations

import math

_LN2 = math.log(2)


def optimal_bit_array_size(n: int, p: float) -> int:
    """Return ``m = ceil(-n * ln(p) / ln(2)^2)``.

    No validation is done here; the caller guarantees ``n > 0`` and
    ``0 < p < 1``.
    """
    return max(1, math.ceil(-n * math.log(p) / (_LN2 * _LN2)))


def optimal_hash_count(n: int, m: int) -> int:
    """Return ``k = ceil(m * ln(2) / n)``, never less than one."""
    return max(1, math.ceil(m * _LN2 / n))


def expected_false_positive_rate(n: int, m: int, k: int) -> float:
    """Estimate the false positive rate after ``n`` insertions."""
    if n <= 0:
        return 0.0
    return (1.0 - math.exp(-k * n / m)) ** k
