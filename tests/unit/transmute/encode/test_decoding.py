# -*- coding: utf-8 -*-
"""Location: ./tests/unit/transmute/encode/test_decoding.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tests for decoding classifications and explicitly encoded text.
"""

# Third-Party
import pytest

# First-Party
from transmute.classify.classifier import Classifier
from transmute.classify.types import EmptyClassification, IntegerClassification, TextClassification
from transmute.encode.decoded import DecodedArray, DecodedBytes
from transmute.encode.decoding import decode, decode_digits, decode_text, decoded_from
from transmute.encode.encoding import Encoding, TextEncoding
from transmute.errors import DecodeError, UnsupportedBaseError, UnsupportedEncodingError


class TestDecodeDigits:
    """Digit text per base."""

    @pytest.mark.parametrize("base,digits", [(10, "4660"), (16, "1234"), (2, "1001000110100"), (64, "EjQ"), (58, "2PM")])
    def test_same_value(self, base, digits):
        """Every base decodes 0x1234 to the same bytes."""
        assert decode_digits(base, digits).to_be_bytes() == b"\x12\x34"

    def test_base58_leading_ones(self):
        """Leading ones are leading zero bytes."""
        assert decode_digits(58, "112").to_be_bytes() == b"\x00\x00\x01"

    def test_no_digits(self):
        """Empty digit text cannot be decoded."""
        with pytest.raises(DecodeError, match="no digits"):
            decode_digits(16, "")

    def test_unsupported_base(self):
        """Bases without an alphabet raise."""
        with pytest.raises(UnsupportedBaseError):
            decode_digits(40, "1")


class TestDecodedFrom:
    """Classification to decoded value."""

    def test_integer(self):
        """Integer candidates decode their digits."""
        assert decoded_from(IntegerClassification(16, "1234", 0)).to_be_bytes() == b"\x12\x34"

    def test_text(self):
        """Text candidates store their UTF-8 bytes with the first character least significant."""
        value = decoded_from(TextClassification("utf8", "Hi", 0))
        assert value.to_le_bytes() == b"Hi"
        assert value.to_be_bytes() == b"iH"

    def test_array(self):
        """Arrays decode their collapsed elements."""
        array = Classifier().classify_array("[1, 0x0203]")
        value = decoded_from(array)
        assert isinstance(value, DecodedArray)
        assert [item.to_be_bytes() for item in value.items] == [b"\x01", b"\x02\x03"]

    def test_empty(self):
        """The empty sentinel decodes to zero."""
        assert decoded_from(EmptyClassification()) == DecodedBytes(b"\x00")


class TestDecode:
    """Explicit input encodings."""

    def test_hex(self):
        """Prefixes are skipped."""
        assert decode(Encoding.from_spec("hex"), "0x1234").to_be_bytes() == b"\x12\x34"

    def test_other_radix(self):
        """Bases without a pattern use the stripped text as digits."""
        assert decode(Encoding.from_spec("base36"), " zz ").to_be_bytes() == (1295).to_bytes(2, "big")

    def test_text(self):
        """Text kinds decode their encoded bytes."""
        assert decode_text("utf16", "Hi").to_le_bytes() == "Hi".encode("utf-16-le")
        assert decode(Encoding.from_spec("utf8"), "Hi").to_le_bytes() == b"Hi"

    @pytest.mark.parametrize("kind", ["utf8", "ascii", "utf16"])
    @pytest.mark.parametrize("text", ["Hi", "hello world", "x"])
    def test_text_round_trip(self, kind, text):
        """Text decoded under a kind renders back unchanged in that kind."""
        assert TextEncoding(kind).encode(decode(TextEncoding(kind), text)) == text

    @pytest.mark.parametrize("kind", ["utf8", "utf16"])
    def test_multibyte_text_round_trip(self, kind):
        """Characters beyond ASCII survive a round trip."""
        for text in ("éé", "naïve café", "日本語"):
            assert TextEncoding(kind).encode(decode(TextEncoding(kind), text)) == text

    def test_array_cycles_element_encodings(self):
        """Element encodings cycle over the elements."""
        value = decode(Encoding.from_spec("[hex, int]"), "[10, 10, 10]")
        assert [item.to_be_bytes() for item in value.items] == [b"\x10", b"\x0a", b"\x10"]

    def test_hash_cannot_be_decoded(self):
        """Digests are one-way."""
        with pytest.raises(UnsupportedEncodingError, match="cannot be decoded"):
            decode(Encoding.from_spec("keccak"), "0x12")

    def test_no_digits(self):
        """Input without digits for the base raises."""
        with pytest.raises(DecodeError):
            decode(Encoding.from_spec("bin"), "xyz")
