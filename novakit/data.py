"""Bounds-checked binary views with a fixed byte order."""

from __future__ import annotations

from enum import Enum
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

_NUMBER_LENGTHS = (1, 2, 4)


class Endian(Enum):
    BIG = "big"
    LITTLE = "little"


class OutOfDataBounds(IndexError):
    """Raised when a read reaches past the end of the data."""

    def __init__(self, pos: int, length: int, size: int) -> None:
        super().__init__(
            f"Pos: {pos}, Len: {length}, Size: {size} (End: {pos + length})"
        )
        self.pos = pos
        self.length = length
        self.size = size


class DataView:
    """A read-only view interpreting binary data in a given byte order.

    Strings are taken as their UTF-8 bytes. The view does not copy the data.
    """

    def __init__(self, data: BytesLike, endian: Endian = Endian.BIG) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data = memoryview(data).cast("B")
        self.endian = Endian(endian)

    def subview(self, offset: int) -> DataView:
        """Return a view starting ``offset`` bytes in, with the same byte order."""
        if offset < 0 or offset > len(self):
            raise OutOfDataBounds(offset, 0, len(self))
        return DataView(self._data[offset:], self.endian)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data.tobytes()

    def _check(self, pos: int, length: int) -> None:
        if pos < 0 or length < 0 or len(self) < pos + length:
            raise OutOfDataBounds(pos, length, len(self))

    def as_number(self, pos: int, length: int) -> int:
        """Read an unsigned integer of 1, 2 or 4 bytes at ``pos``."""
        if length not in _NUMBER_LENGTHS:
            raise ValueError("Invalid integer length")
        self._check(pos, length)
        return int.from_bytes(self._data[pos:pos + length], self.endian.value)

    def as_string(self, pos: int, length: int) -> str:
        """Read ``length`` bytes at ``pos`` as text."""
        self._check(pos, length)
        return self._data[pos:pos + length].tobytes().decode(
            "utf-8", errors="surrogateescape"
        )

    def as_dyn_string(self, pos: int, length_bytes: int = 1) -> str:
        """Read a string whose byte length is stored in its first ``length_bytes`` bytes."""
        str_length = self.as_number(pos, length_bytes)
        self._check(pos, str_length)
        return self.as_string(pos + length_bytes, str_length)

    def to_hex(self) -> str:
        """Return the data as space-separated hex bytes."""
        return self._data.tobytes().hex(" ")

    def __repr__(self) -> str:
        return f"DataView({self._data.tobytes()!r}, {self.endian})"