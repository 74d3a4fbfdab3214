# -*- coding: utf-8 -*-
"""Location: ./transmute/encode/decoded.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Canonical Decoded Value.
``Decoded`` is the encoding-agnostic tree every conversion passes through:
either ``DecodedBytes`` (bytes stored least-significant first) or
``DecodedArray`` (an ordered sequence of further decoded values). Values are
immutable; every transform returns a new value.

Examples:
    >>> from transmute.encode.decoded import Decoded
    >>> value = Decoded.from_be_bytes(bytes([0x12, 0x34]))
    >>> value
    DecodedBytes(data=b'4\\x12')
    >>> str(value), value.to_be_bytes().hex()
    ('[34, 12]', '1234')
    >>> str(Decoded.Array([Decoded.Bytes(b"\\x01"), Decoded.Bytes(b"\\x02")]).rotate(1))
    '[[02], [01]]'
"""

# Standard
from dataclasses import dataclass
from typing import Iterable, List, Tuple

ZERO = b"\x00"


class Decoded:
    """Base class of the decoded value tree."""

    def __len__(self) -> int:
        """Number of top-level units: bytes or elements."""
        raise NotImplementedError

    @staticmethod
    def from_le_bytes(data: Iterable[int]) -> "DecodedBytes":
        """Build from little-endian bytes; empty input becomes a single zero byte.

        Args:
            data: Bytes, least significant first.

        Returns:
            DecodedBytes: The value.

        Examples:
            >>> Decoded.from_le_bytes(b"")
            DecodedBytes(data=b'\\x00')
        """
        data = bytes(data)
        return DecodedBytes(data or ZERO)

    @staticmethod
    def from_be_bytes(data: Iterable[int]) -> "DecodedBytes":
        """Build from big-endian bytes; empty input becomes a single zero byte.

        Args:
            data: Bytes, most significant first.

        Returns:
            DecodedBytes: The value.
        """
        return Decoded.from_le_bytes(bytes(data)[::-1])

    @staticmethod
    def zeros(length: int) -> "DecodedBytes":
        """``length`` zero bytes.

        Args:
            length: Byte count.

        Returns:
            DecodedBytes: The value.
        """
        return Decoded.from_le_bytes(bytes(length))

    def to_le_bytes(self) -> bytes:
        """Flattened little-endian bytes."""
        raise NotImplementedError

    def to_be_bytes(self) -> bytes:
        """Flattened big-endian bytes."""
        raise NotImplementedError

    def to_vec(self) -> List["Decoded"]:
        """Top-level elements; bytes split into one single-byte value each."""
        raise NotImplementedError

    def is_array(self) -> bool:
        """Whether this is a ``DecodedArray``.

        Returns:
            bool: Array or not.
        """
        return isinstance(self, DecodedArray)

    def left_pad(self, length: int) -> "Decoded":
        """Grow to ``length`` units by inserting zeros at the front."""
        raise NotImplementedError

    def right_pad(self, length: int) -> "Decoded":
        """Grow to ``length`` units by appending zeros at the back."""
        raise NotImplementedError

    def left_truncate(self, length: int) -> "Decoded":
        """Keep the first ``length`` units."""
        raise NotImplementedError

    def right_truncate(self, length: int) -> "Decoded":
        """Keep the last ``length`` units."""
        raise NotImplementedError

    def flatten(self) -> "Decoded":
        """Inline nested arrays at any depth."""
        return self

    def chunk(self, count: int) -> "DecodedArray":
        """Split into ``count`` equal groups."""
        raise NotImplementedError

    def reverse(self, depth: int = 1) -> "Decoded":
        """Reverse unit order down to ``depth`` levels."""
        raise NotImplementedError

    def rotate(self, amount: int) -> "Decoded":
        """Rotate units right by ``amount``."""
        raise NotImplementedError

    def leading_zero_bytes(self) -> int:
        """Zero bytes at the low end of a byte value; 0 for arrays.

        Returns:
            int: Count.
        """
        return 0

    def trailing_zero_bytes(self) -> int:
        """Zero bytes at the high end of a byte value; 0 for arrays.

        Returns:
            int: Count.
        """
        return 0


def _chunk_bounds(length: int, count: int) -> List[Tuple[int, int]]:
    """Slice bounds of ``count`` groups of ``length // count`` units.

    ``count`` is clamped to ``[1, length]``; the remainder past the last full
    group is left out.

    Args:
        length: Number of units.
        count: Requested group count.

    Returns:
        List[Tuple[int, int]]: ``(start, stop)`` per group.

    Examples:
        >>> _chunk_bounds(9, 3)
        [(0, 3), (3, 6), (6, 9)]
        >>> _chunk_bounds(10, 3)
        [(0, 3), (3, 6), (6, 9)]
        >>> _chunk_bounds(2, 0), _chunk_bounds(2, 5), _chunk_bounds(0, 2)
        ([(0, 2)], [(0, 1), (1, 2)], [])
    """
    if length == 0:
        return []
    count = max(1, min(count, length))
    size = length // count
    return [(index * size, (index + 1) * size) for index in range(count)]


def rotation_offset(length: int, amount: int) -> int:
    """Normalized right-rotation offset.

    Args:
        length: Number of units.
        amount: Positive rotates right, negative left.

    Returns:
        int: Offset in ``[0, length)``.

    Examples:
        >>> rotation_offset(5, -2), rotation_offset(5, 3), rotation_offset(5, 12), rotation_offset(0, 4)
        (3, 3, 2, 0)
    """
    if length == 0:
        return 0
    return amount % length


@dataclass(frozen=True)
class DecodedBytes(Decoded):
    """A byte string stored least-significant byte first."""

    data: bytes = ZERO

    def __post_init__(self):
        """Accept any iterable of ints."""
        object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        """Byte count.

        Returns:
            int: Length of ``data``.
        """
        return len(self.data)

    def __str__(self) -> str:
        """Hex byte listing in stored order.

        Returns:
            str: e.g. ``[90, 78]``.
        """
        return "[" + ", ".join(f"{byte:02x}" for byte in self.data) + "]"

    def to_le_bytes(self) -> bytes:
        """Stored bytes.

        Returns:
            bytes: Little-endian bytes.
        """
        return self.data

    def to_be_bytes(self) -> bytes:
        """Stored bytes reversed.

        Returns:
            bytes: Big-endian bytes.
        """
        return self.data[::-1]

    def to_vec(self) -> List[Decoded]:
        """One single-byte value per stored byte.

        Returns:
            List[Decoded]: Elements in stored order.

        Examples:
            >>> [str(x) for x in DecodedBytes(b"\\x01\\x02").to_vec()]
            ['[01]', '[02]']
        """
        return [DecodedBytes(bytes([byte])) for byte in self.data]

    def left_pad(self, length: int) -> "DecodedBytes":
        """Insert zero bytes at the low end.

        Args:
            length: Target byte count.

        Returns:
            DecodedBytes: Padded value, unchanged if already long enough.

        Examples:
            >>> DecodedBytes(b"\\x12").left_pad(3).data
            b'\\x00\\x00\\x12'
        """
        if length <= len(self.data):
            return self
        return DecodedBytes(bytes(length - len(self.data)) + self.data)

    def right_pad(self, length: int) -> "DecodedBytes":
        """Append zero bytes at the high end.

        Args:
            length: Target byte count.

        Returns:
            DecodedBytes: Padded value, unchanged if already long enough.

        Examples:
            >>> DecodedBytes(b"\\x12").right_pad(3).data
            b'\\x12\\x00\\x00'
        """
        if length <= len(self.data):
            return self
        return DecodedBytes(self.data + bytes(length - len(self.data)))

    def left_truncate(self, length: int) -> "DecodedBytes":
        """Keep the first ``length`` bytes.

        Args:
            length: Bytes to keep.

        Returns:
            DecodedBytes: Truncated value.
        """
        return DecodedBytes(self.data[: max(length, 0)])

    def right_truncate(self, length: int) -> "DecodedBytes":
        """Keep the last ``length`` bytes.

        Args:
            length: Bytes to keep.

        Returns:
            DecodedBytes: Truncated value.

        Examples:
            >>> DecodedBytes(b"\\x01\\x02\\x03").right_truncate(2).data
            b'\\x02\\x03'
        """
        if length <= 0:
            return DecodedBytes(b"")
        return DecodedBytes(self.data[-length:])

    def chunk(self, count: int) -> "DecodedArray":
        """Regroup bytes into ``count`` values of ``len // count`` bytes each.

        Args:
            count: Number of groups.

        Returns:
            DecodedArray: One little-endian value per group.
        """
        return DecodedArray(tuple(Decoded.from_le_bytes(self.data[start:stop]) for start, stop in _chunk_bounds(len(self.data), count)))

    def reverse(self, depth: int = 1) -> "DecodedBytes":
        """Reverse byte order unless ``depth`` is 0.

        Args:
            depth: Remaining depth.

        Returns:
            DecodedBytes: Reversed value.
        """
        if depth <= 0:
            return self
        return DecodedBytes(self.data[::-1])

    def rotate(self, amount: int) -> "DecodedBytes":
        """Rotate bytes right by ``amount``.

        Args:
            amount: Positive rotates right, negative left.

        Returns:
            DecodedBytes: Rotated value.

        Examples:
            >>> DecodedBytes(b"\\x01\\x02\\x03").rotate(1).data
            b'\\x03\\x01\\x02'
        """
        offset = rotation_offset(len(self.data), amount)
        if offset == 0:
            return self
        return DecodedBytes(self.data[-offset:] + self.data[:-offset])

    def leading_zero_bytes(self) -> int:
        """Zero bytes at the start of the stored (low) end.

        Returns:
            int: Count.
        """
        return len(self.data) - len(self.data.lstrip(ZERO))

    def trailing_zero_bytes(self) -> int:
        """Zero bytes at the end of the stored (high) end.

        Returns:
            int: Count.
        """
        return len(self.data) - len(self.data.rstrip(ZERO))


@dataclass(frozen=True)
class DecodedArray(Decoded):
    """An ordered sequence of decoded values."""

    items: Tuple[Decoded, ...] = ()

    def __post_init__(self):
        """Accept any sequence of values."""
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        """Element count.

        Returns:
            int: Number of top-level elements.
        """
        return len(self.items)

    def __str__(self) -> str:
        """Nested listing.

        Returns:
            str: e.g. ``[[01], [02]]``.
        """
        return "[" + ", ".join(str(item) for item in self.items) + "]"

    def to_le_bytes(self) -> bytes:
        """Elements' little-endian bytes concatenated in order.

        Returns:
            bytes: Flattened bytes.
        """
        return b"".join(item.to_le_bytes() for item in self.items)

    def to_be_bytes(self) -> bytes:
        """Elements' big-endian bytes concatenated, last element first.

        Returns:
            bytes: Flattened bytes.

        Examples:
            >>> DecodedArray([DecodedBytes(b"\\x01\\x02"), DecodedBytes(b"\\x03")]).to_be_bytes()
            b'\\x03\\x02\\x01'
        """
        return b"".join(item.to_be_bytes() for item in reversed(self.items))

    def to_vec(self) -> List[Decoded]:
        """Top-level elements.

        Returns:
            List[Decoded]: Elements in order.
        """
        return list(self.items)

    def left_pad(self, length: int) -> "DecodedArray":
        """Insert zero-valued elements at the front.

        Args:
            length: Target element count.

        Returns:
            DecodedArray: Padded value.
        """
        if length <= len(self.items):
            return self
        return DecodedArray((DecodedBytes(ZERO),) * (length - len(self.items)) + self.items)

    def right_pad(self, length: int) -> "DecodedArray":
        """Append zero-valued elements at the back.

        Args:
            length: Target element count.

        Returns:
            DecodedArray: Padded value.
        """
        if length <= len(self.items):
            return self
        return DecodedArray(self.items + (DecodedBytes(ZERO),) * (length - len(self.items)))

    def left_truncate(self, length: int) -> "DecodedArray":
        """Keep the first ``length`` elements.

        Args:
            length: Elements to keep.

        Returns:
            DecodedArray: Truncated value.
        """
        return DecodedArray(self.items[: max(length, 0)])

    def right_truncate(self, length: int) -> "DecodedArray":
        """Keep the last ``length`` elements.

        Args:
            length: Elements to keep.

        Returns:
            DecodedArray: Truncated value.
        """
        if length <= 0:
            return DecodedArray(())
        return DecodedArray(self.items[-length:])

    def flatten(self) -> "DecodedArray":
        """Inline nested arrays at any depth.

        Returns:
            DecodedArray: Array whose elements are all byte values.

        Examples:
            >>> one, two = DecodedBytes(b"\\x01"), DecodedBytes(b"\\x02")
            >>> str(DecodedArray([one, DecodedArray([two, DecodedArray([one])])]).flatten())
            '[[01], [02], [01]]'
        """
        flat: List[Decoded] = []
        for item in self.items:
            if isinstance(item, DecodedArray):
                flat.extend(item.flatten().items)
            else:
                flat.append(item)
        return DecodedArray(tuple(flat))

    def chunk(self, count: int) -> "DecodedArray":
        """Regroup elements into ``count`` sub-arrays of ``len // count`` each.

        Args:
            count: Number of groups.

        Returns:
            DecodedArray: Array of sub-arrays.
        """
        return DecodedArray(tuple(DecodedArray(self.items[start:stop]) for start, stop in _chunk_bounds(len(self.items), count)))

    def reverse(self, depth: int = 1) -> "DecodedArray":
        """Reverse element order, then each element with ``depth - 1``.

        Args:
            depth: Levels to reverse; 0 leaves the value unchanged.

        Returns:
            DecodedArray: Reversed value.

        Examples:
            >>> value = DecodedArray([DecodedBytes(b"\\x01\\x02"), DecodedBytes(b"\\x03")])
            >>> str(value.reverse(1)), str(value.reverse(2))
            ('[[03], [01, 02]]', '[[03], [02, 01]]')
        """
        if depth <= 0:
            return self
        return DecodedArray(tuple(item.reverse(depth - 1) for item in reversed(self.items)))

    def rotate(self, amount: int) -> "DecodedArray":
        """Rotate elements right by ``amount``.

        Args:
            amount: Positive rotates right, negative left.

        Returns:
            DecodedArray: Rotated value.
        """
        offset = rotation_offset(len(self.items), amount)
        if offset == 0:
            return self
        return DecodedArray(self.items[-offset:] + self.items[:-offset])


Decoded.Bytes = DecodedBytes
Decoded.Array = DecodedArray
