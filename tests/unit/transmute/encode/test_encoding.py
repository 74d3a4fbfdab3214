# -*- coding: utf-8 -*-
"""Location: ./tests/unit/transmute/encode/test_encoding.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tests for encoding descriptors: parsing, rendering, generation.
"""

# Standard
import random

# Third-Party
import pytest

# First-Party
from transmute.encode.decoded import Decoded
from transmute.encode.decoding import decode
from transmute.encode.encoding import ArrayEncoding, BaseEncoding, EmptyEncoding, Encoding, HashEncoding, TextEncoding
from transmute.encode.hashing import Hasher
from transmute.encode.radix import le_bytes_to_int
from transmute.encode.types import Bracket, Brackets, Separator
from transmute.errors import UnsupportedBaseError, UnsupportedEncodingError

VALUE = Decoded.Bytes([0x90, 0x78, 0x56, 0x34, 0x12])

_RNG = random.Random(2804)
# Little-endian byte strings; the fixed ones put zero bytes at either end.
SAMPLES = [b"\x00", b"\x01", b"\xff", b"\x00\x00\x01", b"\x01\x00\x00", b"\x88\x00", b"\xff" * 33] + [
    bytes(_RNG.randrange(256) for _ in range(_RNG.randrange(1, 48))) for _ in range(40)
]


class TestFromSpec:
    """Short names to descriptors."""

    @pytest.mark.parametrize(
        "spec,expected",
        [
            ("hex", BaseEncoding(16)),
            (" HEX ", BaseEncoding(16)),
            ("bin", BaseEncoding(2)),
            ("int", BaseEncoding(10)),
            ("base58", BaseEncoding(58)),
            ("base64", BaseEncoding(64)),
            ("base36", BaseEncoding(36)),
            ("base", BaseEncoding(10)),
            ("ascii", TextEncoding("ascii")),
            ("utf16", TextEncoding("utf16")),
            ("utf", TextEncoding("utf8")),
            ("bytes", ArrayEncoding((BaseEncoding(16),))),
            ("keccak256", HashEncoding(Hasher("keccak", 256))),
            ("nonsense", BaseEncoding(10)),
        ],
    )
    def test_names(self, spec, expected):
        """Each short name maps to its descriptor; unknown names mean decimal."""
        assert Encoding.from_spec(spec) == expected

    def test_array_list(self):
        """Bracketed lists parse element-wise, recursively."""
        assert str(Encoding.from_spec("[bin, [int, hex]]")) == "[bin, [int, hex]]"

    def test_array_repeat(self):
        """``[spec; n]`` repeats the element list to n entries."""
        assert str(Encoding.from_spec("[hex; 3]")) == "[hex, hex, hex]"
        assert str(Encoding.from_spec("[int, hex; 4]")) == "[int, hex, int, hex]"

    def test_variant_aliases(self):
        """Variant aliases point at the concrete classes."""
        assert Encoding.Base is BaseEncoding
        assert Encoding.Hash is HashEncoding


class TestBaseEncoding:
    """Numeric rendering."""

    def test_render_all_bases(self):
        """The same value in each supported base."""
        rendered = [Encoding.from_spec(name).encode(VALUE) for name in ("hex", "int", "bin", "base58", "base64")]
        assert rendered == ["0x1234567890", "78187493520", "0b1001000110100010101100111100010010000", "348ALp7", "EjRWeJA"]

    def test_padding_keeps_leading_zero_bytes(self):
        """Padded output covers the full byte length."""
        assert BaseEncoding(16).encode(Decoded.Bytes([0x34, 0x12, 0]), pad=True) == "0x001234"
        assert BaseEncoding(16).encode(Decoded.Bytes([0x34, 0x12, 0])) == "0x1234"

    def test_generate(self):
        """Generated zeros are padded."""
        assert Encoding.from_spec("hex").generate(32) == "0x" + "0" * 64
        assert Encoding.from_spec("bin").generate(1) == "0b00000000"

    def test_random_length(self):
        """Random values render padded to the byte length."""
        assert len(Encoding.from_spec("hex").random(16)) == 34

    def test_unsupported_base(self):
        """Bases without an alphabet cannot render."""
        with pytest.raises(UnsupportedBaseError):
            BaseEncoding(40).encode(VALUE)


class TestTextEncoding:
    """Text rendering of stored bytes."""

    def test_ascii(self):
        """Stored bytes render in order."""
        assert TextEncoding("ascii").encode(Decoded.Bytes(b"Hello")) == "Hello"

    def test_utf16_odd_length(self):
        """An odd trailing byte is its own code unit."""
        assert TextEncoding("utf16").encode(Decoded.Bytes(b"H\x00i\x00!")) == "Hi!"

    def test_invalid_utf8_replaced(self):
        """Invalid sequences become replacement characters."""
        assert TextEncoding("utf8").encode(Decoded.Bytes(b"\xff")) == "\ufffd"

    def test_unknown_kind(self):
        """Unknown text kinds raise."""
        with pytest.raises(UnsupportedEncodingError):
            TextEncoding("utf32").encode(Decoded.Bytes(b"H"))


class TestArrayEncoding:
    """Element-wise rendering."""

    def test_cycled_elements(self):
        """Element encodings cycle over the elements."""
        value = Decoded.Array([Decoded.Bytes([1]), Decoded.Bytes([2]), Decoded.Bytes([3])])
        assert Encoding.from_spec("[hex, int]").encode(value) == "[0x1, 2, 0x3]"

    def test_bytes_render_per_byte(self):
        """A byte value renders one element per stored byte."""
        assert ArrayEncoding((BaseEncoding(10),), Brackets.of(Bracket.ROUND)).encode(Decoded.Bytes([1, 2, 3])) == "(1, 2, 3)"

    def test_lines(self):
        """Line encodings render one value per line without brackets."""
        value = Decoded.Array([Decoded.Bytes([123]), Decoded.Bytes([0xC8, 0x01])])
        assert Encoding.from_spec("hex").to_lines().encode(value) == "0x7b\n0x1c8"

    def test_flatten(self):
        """Nested element encodings inline."""
        assert str(Encoding.from_spec("[int, [hex, [bin]]]").flatten()) == "[int, hex, bin]"

    def test_empty_values(self):
        """No element encodings render only the brackets."""
        assert ArrayEncoding((), Brackets.square(), Separator.comma()).encode(VALUE) == "[]"


class TestHashAndEmpty:
    """Hash rendering and the empty encoding."""

    def test_hash_renders_padded_hex(self):
        """Digests render as 0x-prefixed hex of the full width."""
        rendered = HashEncoding(Hasher("sha2", 256)).encode(Decoded.from_be_bytes(b"abc"))
        assert rendered.startswith("0xba7816bf8f01cfea")
        assert len(rendered) == 66

    def test_empty_renders_nothing(self):
        """The empty encoding renders an empty string."""
        assert EmptyEncoding().encode(VALUE) == ""
        assert EmptyEncoding().encode(VALUE, pad=True) == ""


class TestArrayEncodingReorder:
    """Array encodings reorder along with the values they render."""

    def test_reverse(self):
        """Reversal mirrors ``DecodedArray.reverse`` down to the depth."""
        encoding = Encoding.from_spec("[hex, [int, bin]]")
        assert str(encoding.reverse(1)) == "[[int, bin], hex]"
        assert str(encoding.reverse(2)) == "[[bin, int], hex]"
        assert encoding.reverse(0) is encoding

    def test_rotate(self):
        """Positive amounts rotate right, negative left."""
        encoding = Encoding.from_spec("[hex, int, bin]")
        assert str(encoding.rotate(1)) == "[bin, hex, int]"
        assert str(encoding.rotate(-1)) == "[int, bin, hex]"
        assert encoding.rotate(3) is encoding

    def test_pad(self):
        """Padding repeats the element encoding next to the new elements."""
        encoding = Encoding.from_spec("[hex, int]")
        assert str(encoding.left_pad(3)) == "[hex, hex, int]"
        assert str(encoding.right_pad(3)) == "[hex, int, int]"
        assert encoding.left_pad(1) is encoding

    def test_scalars_unchanged(self):
        """Non-array encodings have no elements to reorder."""
        hex_encoding = BaseEncoding(16)
        assert hex_encoding.reverse(2) is hex_encoding
        assert hex_encoding.rotate(1) is hex_encoding
        assert hex_encoding.left_pad(4) is hex_encoding


class TestBaseRoundTrip:
    """Rendering a byte value and decoding it under the same base."""

    @staticmethod
    def _round_trip(base, data, pad):
        encoding = BaseEncoding(base)
        return decode(encoding, encoding.encode(Decoded.from_le_bytes(data), pad=pad)).to_le_bytes()

    @pytest.mark.parametrize("pad", [False, True])
    @pytest.mark.parametrize("base", [2, 10, 16, 58, 64])
    @pytest.mark.parametrize("data", SAMPLES)
    def test_value_survives(self, base, data, pad):
        """The numeric value always survives, padded or not."""
        assert le_bytes_to_int(self._round_trip(base, data, pad)) == le_bytes_to_int(data)

    @pytest.mark.parametrize("base", [58, 64])
    @pytest.mark.parametrize("data", SAMPLES)
    def test_byte_oriented_bases_keep_every_byte(self, base, data):
        """Base58 and base64 encode the bytes themselves, zero bytes included."""
        assert self._round_trip(base, data, False) == data

    @pytest.mark.parametrize("pad", [False, True])
    @pytest.mark.parametrize("base", [2, 10, 16])
    @pytest.mark.parametrize("data", SAMPLES)
    def test_numeric_bases_keep_bytes_up_to_the_highest_nonzero(self, base, data, pad):
        """Numeric bases decode through an integer, so high zero bytes are dropped."""
        assert self._round_trip(base, data, pad) == (data.rstrip(b"\x00") or b"\x00")

    def test_numeric_base_drops_high_zero_byte(self):
        """A zero most significant byte does not come back from decimal text."""
        assert BaseEncoding(10).encode(Decoded.from_le_bytes(b"\x88\x00")) == "136"
        assert self._round_trip(10, b"\x88\x00", False) == b"\x88"
