"""Seeded Bloom filter sized from capacity and false positive probability."""
from .bit_array import BitArray
from .bloom_filter import BloomFilter
from .errors import BitArrayError, BitIndexError, BloomFilterError, InvalidArgumentError
from .hashing import HASH_FUNCTIONS, murmur3_hash, xxh64_hash
from .sizing import expected_false_positive_rate, optimal_bit_array_size, optimal_hash_count

__all__ = [
    "BitArray",
    "BitArrayError",
    "BitIndexError",
    "BloomFilter",
    "BloomFilterError",
    "HASH_FUNCTIONS",
    "InvalidArgumentError",
    "expected_false_positive_rate",
    "murmur3_hash",
    "optimal_bit_array_size",
    "optimal_hash_count",
    "xxh64_hash",
]
