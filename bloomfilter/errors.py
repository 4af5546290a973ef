"""Exception types raised by the Bloom filter and its bit-array storage."""
from __future__ import annotations

from typing import Any


class BloomFilterError(Exception):
    """Base error; also wraps storage failures surfaced by the filter."""


class InvalidArgumentError(BloomFilterError, ValueError):
    """A constructor argument is outside its accepted range."""

    def __init__(self, message: str, name: str, value: Any) -> None:
        super().__init__(message)
        self.name = name
        self.value = value


class BitArrayError(BloomFilterError):
    """The bit array could not be allocated."""


class BitIndexError(BitArrayError, IndexError):
    """A bit index is outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"bit index {index} out of range for size {size}")
        self.index = index
        self.size = size
