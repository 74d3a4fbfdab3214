# -*- coding: utf-8 -*-
"""Location: ./tests/unit/transmute/encode/test_decoded.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tests for the decoded value tree and its transforms.
"""

# First-Party
from transmute.encode.decoded import Decoded, DecodedArray, DecodedBytes


def _array(*values):
    """Array of single-byte values."""
    return DecodedArray(tuple(DecodedBytes(bytes([value])) for value in values))


def _values(array):
    """Integer value of each element."""
    return [int.from_bytes(item.to_le_bytes(), "little") for item in array.to_vec()]


class TestConstruction:
    """Building values from bytes."""

    def test_from_be_bytes(self):
        """Big-endian input is stored least significant first."""
        value = Decoded.from_be_bytes(b"\x12\x34")
        assert value.data == b"\x34\x12"
        assert value.to_be_bytes() == b"\x12\x34"

    def test_empty_becomes_zero(self):
        """An empty byte string is the value zero."""
        assert Decoded.from_le_bytes(b"") == DecodedBytes(b"\x00")
        assert Decoded.from_be_bytes(b"") == DecodedBytes(b"\x00")

    def test_zeros(self):
        """Zero-filled values have the requested length."""
        assert len(Decoded.zeros(4)) == 4

    def test_aliases(self):
        """Variant aliases point at the concrete classes."""
        assert Decoded.Bytes is DecodedBytes
        assert Decoded.Array is DecodedArray


class TestBytes:
    """Byte value operations."""

    def test_display(self):
        """Bytes list as two-digit hex in stored order."""
        assert str(DecodedBytes(b"\x34\x12")) == "[34, 12]"

    def test_pad(self):
        """Left pad grows the low end, right pad the high end."""
        assert DecodedBytes(b"\x12").left_pad(3).data == b"\x00\x00\x12"
        assert DecodedBytes(b"\x12").right_pad(3).data == b"\x12\x00\x00"
        assert DecodedBytes(b"\x01\x02").left_pad(1).data == b"\x01\x02"

    def test_truncate(self):
        """Truncation keeps the first or last bytes."""
        value = DecodedBytes(b"\x01\x02\x03")
        assert value.left_truncate(2).data == b"\x01\x02"
        assert value.right_truncate(2).data == b"\x02\x03"
        assert value.right_truncate(0).data == b""

    def test_chunk(self):
        """Bytes regroup into multi-byte values."""
        chunks = DecodedBytes(bytes(range(1, 7))).chunk(3)
        assert [item.data for item in chunks.items] == [b"\x01\x02", b"\x03\x04", b"\x05\x06"]

    def test_reverse(self):
        """Depth 0 leaves bytes unchanged."""
        value = DecodedBytes(b"\x01\x02")
        assert value.reverse().data == b"\x02\x01"
        assert value.reverse(0) is value

    def test_rotate(self):
        """Positive amounts rotate right."""
        assert DecodedBytes(b"\x01\x02\x03").rotate(1).data == b"\x03\x01\x02"
        assert DecodedBytes(b"\x01\x02\x03").rotate(-1).data == b"\x02\x03\x01"

    def test_zero_byte_counts(self):
        """Zero runs at either end of the stored bytes."""
        value = DecodedBytes(b"\x00\x00\x05\x00")
        assert value.leading_zero_bytes() == 2
        assert value.trailing_zero_bytes() == 1

    def test_to_vec(self):
        """Bytes split into single-byte values."""
        assert [item.data for item in DecodedBytes(b"\x01\x02").to_vec()] == [b"\x01", b"\x02"]


class TestArray:
    """Array value operations."""

    def test_flatten(self):
        """Nested arrays inline at any depth."""
        nested = DecodedArray((DecodedBytes(b"\x01"), DecodedArray((DecodedBytes(b"\x02"), _array(3)))))
        assert _values(nested.flatten()) == [1, 2, 3]

    def test_chunk_even(self):
        """Nine elements in three chunks of three."""
        chunks = _array(*range(1, 10)).chunk(3)
        assert [_values(chunk) for chunk in chunks.items] == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_chunk_drops_remainder(self):
        """Elements past the last full chunk are dropped."""
        chunks = _array(*range(1, 11)).chunk(3)
        assert [_values(chunk) for chunk in chunks.items] == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_chunk_clamps_count(self):
        """Counts clamp into 1..len."""
        assert len(_array(1, 2).chunk(0)) == 1
        assert len(_array(1, 2).chunk(5)) == 2
        assert len(DecodedArray(()).chunk(2)) == 0

    def test_reverse_depth(self):
        """Depth 1 reverses elements, depth 2 also reverses their bytes."""
        value = DecodedArray((DecodedBytes(b"\x01\x02"), DecodedBytes(b"\x03")))
        assert str(value.reverse(1)) == "[[03], [01, 02]]"
        assert str(value.reverse(2)) == "[[03], [02, 01]]"
        assert value.reverse(0) is value

    def test_rotate(self):
        """Right rotation by two, and the equivalent left rotation."""
        value = _array(1, 2, 3, 4, 5)
        assert _values(value.rotate(2)) == [4, 5, 1, 2, 3]
        assert _values(value.rotate(-3)) == [4, 5, 1, 2, 3]
        assert value.rotate(5) is value

    def test_pad_with_zero_elements(self):
        """Array padding adds zero-valued elements."""
        assert _values(_array(7).left_pad(3)) == [0, 0, 7]
        assert _values(_array(7).right_pad(3)) == [7, 0, 0]

    def test_be_bytes_reverse_element_order(self):
        """Big-endian bytes start from the last element."""
        value = DecodedArray((DecodedBytes(b"\x01\x02"), DecodedBytes(b"\x03")))
        assert value.to_le_bytes() == b"\x01\x02\x03"
        assert value.to_be_bytes() == b"\x03\x02\x01"

    def test_array_zero_counts(self):
        """Arrays report no zero bytes."""
        assert _array(0, 0).leading_zero_bytes() == 0
