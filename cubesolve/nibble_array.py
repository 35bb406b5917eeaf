"""A compact array of 4-bit values, two per byte."""

from __future__ import annotations


class NibbleArray:
    """Fixed-length array of 4-bit values; even positions use the high nibble."""

    def __init__(self, size: int, val: int = 0xFF) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        self._size = size
        self._bytes = bytearray([val & 0xFF]) * (size // 2 + 1)

    def __len__(self) -> int:
        return self._size

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self._size:
            raise IndexError(f"nibble position {pos} out of range")

    def __getitem__(self, pos: int) -> int:
        self._check(pos)
        byte = self._bytes[pos // 2]
        return byte & 0x0F if pos % 2 else byte >> 4

    def __setitem__(self, pos: int, val: int) -> None:
        self._check(pos)
        i = pos // 2
        current = self._bytes[i]
        if pos % 2:
            self._bytes[i] = (current & 0xF0) | (val & 0x0F)
        else:
            self._bytes[i] = (current & 0x0F) | ((val & 0x0F) << 4)

    def data(self) -> bytes:
        """Return a copy of the packed storage."""
        return bytes(self._bytes)

    def load(self, raw: bytes) -> None:
        """Replace the packed storage with ``raw``, which must match its size."""
        if len(raw) != len(self._bytes):
            raise ValueError(
                f"expected {len(self._bytes)} bytes of storage, got {len(raw)}"
            )
        self._bytes[:] = raw

    def storage_size(self) -> int:
        """Number of bytes used for storage."""
        return len(self._bytes)

    def inflate(self) -> list[int]:
        """Return every value unpacked into a list, one per position."""
        return [self[pos] for pos in range(self._size)]

    def reset(self, val: int = 0xFF) -> None:
        """Fill every storage byte with ``val``."""
        self._bytes[:] = bytes([val & 0xFF]) * len(self._bytes)