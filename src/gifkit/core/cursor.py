"""Read-only, offset-addressed access to a GIF byte buffer."""

from typing import Union

from gifkit.constants import BitField
from gifkit.exceptions import OutOfBoundsError

BytesLike = Union[bytes, bytearray, memoryview]


def extract_bits(byte: int, mask: int, shift: int) -> int:
    """Return ``(byte & mask) >> shift``."""
    return (byte & mask) >> shift


class ByteCursor:
    """Stateless view over the raw bytes of one file.

    Every accessor takes an absolute offset; callers own the offset
    arithmetic. Slices are memoryviews into the caller's buffer.
    """

    def __init__(self, data: BytesLike) -> None:
        self._view = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._view)

    @property
    def size(self) -> int:
        return len(self._view)

    def _check(self, offset: int, length: int) -> None:
        if offset < 0 or length < 0 or offset + length > len(self._view):
            raise OutOfBoundsError(offset, length, len(self._view))

    def read_fixed(self, offset: int, length: int) -> memoryview:
        """Return ``length`` bytes starting at ``offset``.

        Raises:
            OutOfBoundsError: If the range does not fit in the buffer.
        """
        self._check(offset, length)
        return self._view[offset : offset + length]

    def read_u8(self, offset: int) -> int:
        self._check(offset, 1)
        return self._view[offset]

    def read_u16_le(self, offset: int) -> int:
        self._check(offset, 2)
        return self._view[offset] | (self._view[offset + 1] << 8)

    @staticmethod
    def read_bit_field(byte: int, field: BitField) -> int:
        return extract_bits(byte, field.mask, field.shift)

    @staticmethod
    def read_flag(byte: int, field: BitField) -> bool:
        return bool(ByteCursor.read_bit_field(byte, field))
