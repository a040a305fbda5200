"""Decoder for untagged, bit packed replay fields.

Bits inside each byte are consumed from the least significant end first.
Every function takes a cursor and returns ``(new_cursor, value)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import BitPackedError


@dataclass(frozen=True)
class BitCursor:
    """An immutable position inside a byte buffer, counted in bits."""

    data: bytes
    position: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if not 0 <= self.position <= len(self.data) * 8:
            raise ValueError(f"bit position {self.position} outside of buffer")

    @property
    def offset(self) -> int:
        """Bits already consumed from the current byte."""
        return self.position % 8

    @property
    def byte_index(self) -> int:
        return self.position // 8

    @property
    def remaining_bits(self) -> int:
        return len(self.data) * 8 - self.position

    @property
    def remaining(self) -> bytes:
        """The bytes from the current byte onwards."""
        return self.data[self.byte_index :]

    @property
    def current_byte(self) -> int:
        return self._byte(0)

    def _byte(self, relative: int) -> int:
        index = self.byte_index + relative
        if index >= len(self.data):
            raise BitPackedError("Eof")
        return self.data[index]

    def advance(self, count: int) -> BitCursor:
        """Return a cursor moved forward by ``count`` bits."""
        if count < 0:
            raise ValueError("cannot move a cursor backwards")
        if count > self.remaining_bits:
            raise BitPackedError("Eof")
        return BitCursor(self.data, self.position + count)


def _mask(count: int) -> int:
    return (1 << count) - 1


def rtake_n_bits(cursor: BitCursor, count: int) -> tuple[BitCursor, int]:
    """Take up to 8 bits, reading each byte from right to left."""
    if not 0 <= count <= 8:
        raise ValueError(f"can take between 0 and 8 bits, not {count}")
    if count == 0:
        return cursor, 0
    offset = cursor.offset
    if offset + count > 8:
        head = cursor._byte(0) >> offset
        left_over = count - (8 - offset)
        tail = cursor._byte(1) & _mask(left_over)
        value = ((head << left_over) + tail) & 0xFF
    else:
        value = (cursor._byte(0) >> offset) & _mask(count)
    return cursor.advance(count), value


def take_n_bits_into_int(cursor: BitCursor, total_bits: int) -> tuple[BitCursor, int]:
    """Read ``total_bits`` (at most 64) as a big endian signed 64-bit integer."""
    if not 0 <= total_bits <= 64:
        raise ValueError(f"cannot read {total_bits} bits into a 64-bit integer")
    result = 0
    remaining = total_bits
    while True:
        if remaining > 8:
            count = 8 - cursor.offset if cursor.offset else 8
        else:
            count = remaining
        cursor, bits = rtake_n_bits(cursor, count)
        result |= bits << (remaining - count)
        remaining -= count
        if remaining == 0:
            break
    if result >= 1 << 63:
        result -= 1 << 64
    return cursor, result


def take_bit_array(cursor: BitCursor, total_bits: int) -> tuple[BitCursor, bytes]:
    """Read ``total_bits`` as a sequence of bytes of 8 bits each (the last may be shorter)."""
    if total_bits < 0:
        raise ValueError("bit count cannot be negative")
    chunks = bytearray()
    remaining = total_bits
    while True:
        count = min(remaining, 8)
        cursor, bits = rtake_n_bits(cursor, count)
        chunks.append(bits)
        remaining -= count
        if remaining == 0:
            break
    return cursor, bytes(chunks)


def byte_align(cursor: BitCursor) -> tuple[BitCursor, None]:
    """Skip the rest of the current byte, if any of it was consumed."""
    if cursor.offset:
        return cursor.advance(8 - cursor.offset), None
    return cursor, None


def take_unaligned_byte(cursor: BitCursor) -> tuple[BitCursor, int]:
    cursor, data = take_bit_array(cursor, 8)
    return cursor, data[0]


def take_fourcc(cursor: BitCursor) -> tuple[BitCursor, bytes]:
    """Read four unaligned bytes."""
    return take_bit_array(cursor, 32)


def take_null(cursor: BitCursor) -> tuple[BitCursor, None]:
    """Consume nothing; stands in where a null value is expected."""
    return cursor, None


def parse_packed_int(cursor: BitCursor, offset: int, num_bits: int) -> tuple[BitCursor, int]:
    """Read an integer stored in offset binary (excess-K) form."""
    cursor, value = take_n_bits_into_int(cursor, num_bits)
    return cursor, offset + value


def parse_bool(cursor: BitCursor) -> tuple[BitCursor, bool]:
    cursor, value = rtake_n_bits(cursor, 1)
    return cursor, value != 0