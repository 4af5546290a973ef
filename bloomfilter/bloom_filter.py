"""Bloom filter sized from a capacity and a target false positive probability.

The filter derives the bit array size ``m`` and the number of hash functions
``k`` from ``n`` (expected element count) and ``p`` (false positive
probability). Each of the ``k`` hash positions is a seed value fed to one
stateless 64-bit hash function; the digest modulo ``m`` is the bit to touch.

Seeds are drawn at construction time so two filters built with the same
parameters hash differently. Pass ``rng`` or ``seeds`` for reproducible
filters.

The filter is not thread safe. Callers sharing one instance across threads
must serialise access themselves.
"""
from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .bit_array import BitArray
from .errors import BitArrayError, BloomFilterError, InvalidArgumentError
from .hashing import DEFAULT_HASH_FUNCTION, get_hash_function
from .sizing import (
    expected_false_positive_rate,
    optimal_bit_array_size,
    optimal_hash_count,
)

logger = logging.getLogger(__name__)

Value = Union[bytes, bytearray, memoryview, str]

_MAX_CAPACITY = (1 << 64) - 1


class BloomFilter:
    """Bloom filter over byte sequences with ``k`` independently seeded hashes."""

    def __init__(
        self,
        n: int,
        p: float,
        *,
        rng: Optional[random.Random] = None,
        seeds: Optional[Sequence[int]] = None,
        hash_function: str = DEFAULT_HASH_FUNCTION,
    ) -> None:
        """Create a filter for ``n`` elements at false positive rate ``p``.

        Args:
            n: Expected number of elements. Informational only, not a hard cap.
            p: Target false positive probability, ``0 < p < 1``.
            rng: Source for the hash seeds. Defaults to the ``random`` module.
            seeds: Explicit seeds, one per hash function. Overrides ``rng``.
            hash_function: Name of the hash primitive, ``"xxh64"`` or ``"murmur3"``.

        Raises:
            InvalidArgumentError: If ``n`` or ``p`` is out of range, or
                ``seeds`` does not hold exactly ``k`` integers.
            BloomFilterError: If the bit array cannot be allocated.
        """
        if not _is_int(n) or n <= 0:
            raise InvalidArgumentError("Parameter [n] should be greater than zero.", "n", n)
        if n > _MAX_CAPACITY:
            raise InvalidArgumentError("Parameter [n] should fit in 64 bits.", "n", n)
        if not p > 0:
            raise InvalidArgumentError("Parameter [p] should be greater than zero.", "p", p)
        if p >= 1:
            raise InvalidArgumentError("Parameter [p] should be less than one.", "p", p)

        self._hash = get_hash_function(hash_function)
        self._hash_name = hash_function
        self._n = n
        self._m = optimal_bit_array_size(n, p)
        self._k = optimal_hash_count(n, self._m)

        try:
            self._bits = BitArray(self._m)
        except BitArrayError as err:
            raise BloomFilterError(f"could not allocate {self._m} bits") from err

        if seeds is None:
            source = rng if rng is not None else random
            self._seeds = tuple(source.getrandbits(64) for _ in range(self._k))
        else:
            if not all(_is_int(seed) for seed in seeds):
                raise InvalidArgumentError("Parameter [seeds] should hold integers.", "seeds", seeds)
            if len(seeds) != self._k:
                raise InvalidArgumentError(
                    f"Parameter [seeds] should hold exactly {self._k} values.", "seeds", seeds
                )
            self._seeds = tuple(seeds)

        logger.debug(
            "BloomFilter created: n=%d p=%g m=%d k=%d hash=%s",
            n, p, self._m, self._k, hash_function,
        )

    @classmethod
    def create(cls, n: int, p: float, **kwargs) -> "BloomFilter":
        """Alias for the constructor."""
        return cls(n, p, **kwargs)

    def add(self, value: Value) -> None:
        """Insert ``value`` into the filter."""
        for index in self.bit_indexes(value):
            try:
                self._bits.turn_on(index)
            except BitArrayError as err:
                raise BloomFilterError(f"failed to set bit {index}") from err

    def update(self, values: Iterable[Value]) -> None:
        """Insert all ``values`` into the filter."""
        for value in values:
            self.add(value)

    def contains(self, value: Value) -> bool:
        """Return True if ``value`` may be present, False if definitely absent."""
        for index in self.bit_indexes(value):
            try:
                is_set = self._bits.index_value(index)
            except BitArrayError as err:
                raise BloomFilterError(f"failed to read bit {index}") from err
            if not is_set:
                return False
        return True

    __contains__ = contains

    def bit_indexes(self, value: Value) -> List[int]:
        """Return the ``k`` bit positions for ``value``, duplicates included."""
        data = _as_bytes(value)
        return [self._hash(seed, data) % self._m for seed in self._seeds]

    def copy(self) -> "BloomFilter":
        """Return an independent copy sharing no mutable state."""
        clone = BloomFilter.__new__(BloomFilter)
        clone.__dict__.update(self.__dict__)
        clone._bits = self._bits.copy()
        return clone

    __copy__ = copy

    def estimated_false_positive_rate(self, inserted: Optional[int] = None) -> float:
        """Closed-form false positive estimate after ``inserted`` elements (default ``n``)."""
        return expected_false_positive_rate(
            self._n if inserted is None else inserted, self._m, self._k
        )

    @property
    def fill_ratio(self) -> float:
        """Fraction of bits currently set."""
        return self._bits.count() / self._m

    @property
    def capacity(self) -> int:
        """Expected element count ``n``."""
        return self._n

    @property
    def size(self) -> int:
        """Bit array size ``m``."""
        return self._m

    @property
    def num_hashes(self) -> int:
        """Number of hash functions ``k``."""
        return self._k

    @property
    def seeds(self) -> Tuple[int, ...]:
        """Per-position hash seeds, in index order."""
        return self._seeds

    @property
    def hash_function(self) -> str:
        """Name of the hash primitive in use."""
        return self._hash_name

    @property
    def bit_array(self) -> BitArray:
        """Expose the underlying bit array for inspection."""
        return self._bits

    def __repr__(self) -> str:
        return (
            f"BloomFilter(n={self._n}, m={self._m}, k={self._k}, "
            f"hash_function={self._hash_name!r})"
        )


def _as_bytes(value: Value) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"expected a byte sequence or str, got {type(value).__name__}")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
