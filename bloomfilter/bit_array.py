"""Fixed-size bit array backed by a bytearray."""
from __future__ import annotations

from .errors import BitArrayError, BitIndexError


class BitArray:
    """Zero-initialised bitset of ``size`` bits; bits can only be turned on."""

    __slots__ = ("size", "_bytes")

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise BitArrayError(f"bit array size must be positive, got {size}")
        self.size = size
        try:
            self._bytes = bytearray((size + 7) // 8)
        except (MemoryError, OverflowError) as err:
            raise BitArrayError(f"could not allocate {size} bits") from err

    def turn_on(self, index: int) -> None:
        """Set the bit at ``index``."""
        self._check(index)
        self._bytes[index >> 3] |= 1 << (index & 7)

    def index_value(self, index: int) -> bool:
        """Return whether the bit at ``index`` is set."""
        self._check(index)
        return bool(self._bytes[index >> 3] & (1 << (index & 7)))

    def count(self) -> int:
        """Number of bits currently set."""
        return sum(bin(byte).count("1") for byte in self._bytes)

    def copy(self) -> "BitArray":
        """Return an independent copy."""
        clone = BitArray.__new__(BitArray)
        clone.size = self.size
        clone._bytes = bytearray(self._bytes)
        return clone

    def to_bytes(self) -> bytes:
        """Return the raw storage, bit ``i`` at byte ``i // 8``, mask ``1 << (i % 8)``."""
        return bytes(self._bytes)

    def _check(self, index: int) -> None:
        if index < 0 or index >= self.size:
            raise BitIndexError(index, self.size)

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented
        return self.size == other.size and self._bytes == other._bytes

    def __repr__(self) -> str:
        return f"BitArray(size={self.size}, set={self.count()})"
