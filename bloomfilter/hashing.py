"""Seeded 64-bit hash primitives.

Each function takes ``(seed, data)`` and returns an unsigned 64-bit integer.
The filter keeps one seed per hash position and calls the same stateless
function with each seed.
"""
from __future__ import annotations

from typing import Callable, Dict

import mmh3
import xxhash

from .errors import InvalidArgumentError

HashFunction = Callable[[int, bytes], int]

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


def xxh64_hash(seed: int, data: bytes) -> int:
    """xxHash64 of ``data``."""
    return xxhash.xxh64(data, seed=seed & _MASK64).intdigest()


def murmur3_hash(seed: int, data: bytes) -> int:
    """Low 64 bits of MurmurHash3 x64-128; mmh3 only takes 32-bit seeds."""
    return mmh3.hash64(data, seed & _MASK32, signed=False)[0]


HASH_FUNCTIONS: Dict[str, HashFunction] = {
    "xxh64": xxh64_hash,
    "murmur3": murmur3_hash,
}

DEFAULT_HASH_FUNCTION = "xxh64"


def get_hash_function(name: str) -> HashFunction:
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Parameter [hash_function] should be one of {sorted(HASH_FUNCTIONS)}.",
            "hash_function",
            name,
        ) from None
