# -*- coding: utf-8 -*-
"""Location: ./transmute/encode/decoding.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Decoding.
Turns a classification, or text under an explicitly named encoding, into the
canonical ``Decoded`` value.

Examples:
    >>> from transmute.classify.types import IntegerClassification
    >>> from transmute.encode.decoding import decode, decoded_from
    >>> from transmute.encode.encoding import Encoding
    >>> decoded_from(IntegerClassification(16, "1234", 0)).to_be_bytes().hex()
    '1234'
    >>> str(decode(Encoding.from_spec("bytes"), "[0x01, 0x0203]"))
    '[[01], [03, 02]]'
"""

# Standard
from itertools import cycle
import logging

# First-Party
from transmute.classify.extractor import extract_array
from transmute.classify.patterns import extract_base, SUPPORTED_BASES
from transmute.classify.types import ArrayClassification, Classification, IntegerClassification, TextClassification
from transmute.encode.decoded import Decoded, DecodedArray
from transmute.encode.encoding import ArrayEncoding, BaseEncoding, Encoding, TextEncoding
from transmute.encode.radix import b58decode, b64decode, int_to_le_bytes, is_radix, radix_to_int
from transmute.errors import DecodeError, UnsupportedBaseError, UnsupportedEncodingError

logger = logging.getLogger(__name__)


def decode_digits(base: int, digits: str) -> Decoded:
    """Decode digit text of a base.

    Args:
        base: 2 to 36, 58 or 64.
        digits: Digit text without prefix.

    Returns:
        Decoded: Bytes, least significant first.

    Raises:
        DecodeError: If the digits are empty or malformed.
        UnsupportedBaseError: For bases without an alphabet.

    Examples:
        >>> decode_digits(10, "4660").to_be_bytes().hex()
        '1234'
        >>> decode_digits(58, "112").to_be_bytes()
        b'\\x00\\x00\\x01'
        >>> decode_digits(16, "")
        Traceback (most recent call last):
        ...
        transmute.errors.DecodeError: Cannot decode '' as base16: no digits
    """
    if not digits:
        raise DecodeError(base, digits, "no digits")
    if base == 58:
        return Decoded.from_be_bytes(b58decode(digits))
    if base == 64:
        return Decoded.from_be_bytes(b64decode(digits))
    if is_radix(base):
        return Decoded.from_le_bytes(int_to_le_bytes(radix_to_int(digits, base)))
    raise UnsupportedBaseError(base)


def decode_text(kind: str, text: str) -> Decoded:
    """Decode literal text.

    Args:
        kind: Text kind; ``utf16`` stores UTF-16LE code units, others UTF-8.
        text: The text.

    Returns:
        Decoded: Text bytes, first character least significant.

    Examples:
        >>> decode_text("utf8", "Hi").to_le_bytes()
        b'Hi'
        >>> decode_text("utf8", "Hi").to_be_bytes()
        b'iH'
    """
    data = text.encode("utf-16-le" if kind == "utf16" else "utf-8")
    return Decoded.from_le_bytes(data)


def decoded_from(classification: Classification) -> Decoded:
    """Canonical value of a classification.

    Args:
        classification: Candidate to decode.

    Returns:
        Decoded: The value; the empty sentinel decodes to a zero byte.

    Raises:
        DecodeError: If integer digit text is malformed.

    Examples:
        >>> from transmute.classify.types import EmptyClassification
        >>> decoded_from(EmptyClassification())
        DecodedBytes(data=b'\\x00')
    """
    if isinstance(classification, IntegerClassification):
        return decode_digits(classification.base, classification.text)
    if isinstance(classification, TextClassification):
        return Decoded.from_le_bytes(classification.text.encode("utf-8"))
    if isinstance(classification, ArrayClassification):
        return DecodedArray(tuple(decoded_from(child) for child in classification.collapse()))
    return Decoded.from_le_bytes(b"")


def decode(encoding: Encoding, text: str) -> Decoded:
    """Decode ``text`` under an explicitly chosen encoding.

    Args:
        encoding: Encoding the text is known to be in.
        text: Input text.

    Returns:
        Decoded: The value.

    Raises:
        DecodeError: If the digits are missing or malformed.
        UnsupportedBaseError: For bases without an alphabet.
        UnsupportedEncodingError: For hash and empty encodings, or arrays without element encodings.

    Examples:
        >>> decode(Encoding.from_spec("hex"), "0x1234").to_be_bytes().hex()
        '1234'
        >>> decode(Encoding.from_spec("keccak"), "0x12")
        Traceback (most recent call last):
        ...
        transmute.errors.UnsupportedEncodingError: Unsupported encoding: keccak-256 (cannot be decoded)
    """
    if isinstance(encoding, BaseEncoding):
        if encoding.base in SUPPORTED_BASES:
            digits = extract_base(encoding.base, text.strip())
        else:
            digits = text.strip()
        return decode_digits(encoding.base, digits or "")
    if isinstance(encoding, TextEncoding):
        return decode_text(encoding.kind, text)
    if isinstance(encoding, ArrayEncoding) and encoding.values:
        elements = extract_array(text, encoding.separator.char, encoding.brackets.open_char, encoding.brackets.close_char)
        logger.debug(f"Decoding {len(elements)} element(s) as {encoding}")
        return DecodedArray(tuple(decode(value, element) for element, value in zip(elements, cycle(encoding.values))))
    raise UnsupportedEncodingError(str(encoding), "cannot be decoded")
