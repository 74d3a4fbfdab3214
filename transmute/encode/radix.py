# -*- coding: utf-8 -*-
"""Location: ./transmute/encode/radix.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Radix Codecs.
Arbitrary-precision conversions between byte strings and digit text:

- bases 2 to 36 go through an unsigned integer read from little-endian bytes
- base58 (Bitcoin alphabet) and base64 (standard alphabet, unpadded) work
  directly on big-endian bytes, keeping leading zero bytes

Examples:
    >>> from transmute.encode.radix import int_to_radix, radix_to_int, b58encode, b58decode
    >>> int_to_radix(255, 16), radix_to_int("ff", 16)
    ('ff', 255)
    >>> b58encode(bytes([0x12, 0x34, 0x56, 0x78, 0x90]))
    '348ALp7'
    >>> b58decode("348ALp7").hex()
    '1234567890'
"""

# Standard
import base64
import binascii
import math
import string

# First-Party
from transmute.classify.patterns import BASE58_ALPHABET
from transmute.errors import DecodeError, UnsupportedBaseError

DIGITS = string.digits + string.ascii_lowercase
MIN_RADIX = 2
MAX_RADIX = len(DIGITS)

_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}


def is_radix(base: int) -> bool:
    """Whether ``base`` is rendered through integer radix conversion.

    Args:
        base: Candidate base.

    Returns:
        bool: True for 2 to 36.

    Examples:
        >>> is_radix(36), is_radix(58)
        (True, False)
    """
    return MIN_RADIX <= base <= MAX_RADIX


def zero_digit(base: int) -> str:
    """Digit representing zero in a base.

    Args:
        base: The base.

    Returns:
        str: ``A`` for base64, ``1`` for base58, ``0`` otherwise.
    """
    if base == 64:
        return "A"
    if base == 58:
        return "1"
    return "0"


def digits_for_bytes(base: int, byte_length: int) -> int:
    """Digits needed to represent ``byte_length`` bytes in a base.

    Computes ``ceil(8 / log2(base) * byte_length)``, exactly for powers of two.

    Args:
        base: The base.
        byte_length: Number of bytes.

    Returns:
        int: Minimum digit count.

    Examples:
        >>> digits_for_bytes(16, 32), digits_for_bytes(10, 32), digits_for_bytes(64, 32)
        (64, 78, 43)
        >>> digits_for_bytes(2, 5)
        40
    """
    if base & (base - 1) == 0:
        bits = base.bit_length() - 1
        return -(-8 * byte_length // bits)
    return math.ceil(8 / math.log2(base) * byte_length)


# =============================================================================
# Bases 2..36
# =============================================================================


def int_to_radix(value: int, base: int) -> str:
    """Render a non-negative integer in radix ``base`` with lowercase digits.

    Args:
        value: Non-negative integer.
        base: Radix from 2 to 36.

    Returns:
        str: Digit text without prefix.

    Raises:
        UnsupportedBaseError: If ``base`` is outside 2 to 36.

    Examples:
        >>> int_to_radix(0, 7)
        '0'
        >>> int_to_radix(1295, 36)
        'zz'
    """
    if not is_radix(base):
        raise UnsupportedBaseError(base)
    if base == 10:
        return str(value)
    if base == 16:
        return format(value, "x")
    if base == 2:
        return format(value, "b")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))


def radix_to_int(text: str, base: int) -> int:
    """Parse digit text in radix ``base``.

    Args:
        text: Digits only, no prefix or sign.
        base: Radix from 2 to 36.

    Returns:
        int: The value.

    Raises:
        UnsupportedBaseError: If ``base`` is outside 2 to 36.
        DecodeError: If ``text`` is empty or holds invalid digits.

    Examples:
        >>> radix_to_int("zz", 36)
        1295
        >>> radix_to_int("12", 2)
        Traceback (most recent call last):
        ...
        transmute.errors.DecodeError: Cannot decode '12' as base2: invalid digits
    """
    if not is_radix(base):
        raise UnsupportedBaseError(base)
    if not text or not text.isascii() or not text.isalnum():
        raise DecodeError(base, text)
    try:
        return int(text, base)
    except ValueError as e:
        raise DecodeError(base, text) from e


def int_to_le_bytes(value: int) -> bytes:
    """Little-endian bytes of a non-negative integer, empty for zero.

    Args:
        value: Non-negative integer.

    Returns:
        bytes: Minimal little-endian representation.

    Examples:
        >>> int_to_le_bytes(0x1234).hex()
        '3412'
        >>> int_to_le_bytes(0)
        b''
    """
    return value.to_bytes((value.bit_length() + 7) // 8, "little")


def le_bytes_to_int(data: bytes) -> int:
    """Integer from little-endian bytes.

    Args:
        data: Little-endian bytes.

    Returns:
        int: The value.
    """
    return int.from_bytes(data, "little")


# =============================================================================
# Base58
# =============================================================================


def b58encode(data: bytes) -> str:
    """Encode big-endian bytes with the Bitcoin alphabet.

    Args:
        data: Big-endian bytes.

    Returns:
        str: Base58 text; every leading zero byte becomes ``1``.

    Examples:
        >>> b58encode(b"\\x00\\x00\\x01")
        '112'
        >>> b58encode(b"")
        ''
    """
    zeros = len(data) - len(data.lstrip(b"\x00"))
    value = int.from_bytes(data, "big")
    digits = []
    while value:
        value, remainder = divmod(value, 58)
        digits.append(BASE58_ALPHABET[remainder])
    return BASE58_ALPHABET[0] * zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode Bitcoin-alphabet base58 text to big-endian bytes.

    Args:
        text: Base58 digits.

    Returns:
        bytes: Decoded bytes; every leading ``1`` becomes a zero byte.

    Raises:
        DecodeError: On characters outside the alphabet.

    Examples:
        >>> b58decode("112")
        b'\\x00\\x00\\x01'
        >>> b58decode("0OIl")
        Traceback (most recent call last):
        ...
        transmute.errors.DecodeError: Cannot decode '0OIl' as base58: invalid character '0'
    """
    value = 0
    for char in text:
        index = _BASE58_INDEX.get(char)
        if index is None:
            raise DecodeError(58, text, f"invalid character {char!r}")
        value = value * 58 + index
    zeros = len(text) - len(text.lstrip(BASE58_ALPHABET[0]))
    body = value.to_bytes((value.bit_length() + 7) // 8, "big")
    return b"\x00" * zeros + body


# =============================================================================
# Base64
# =============================================================================


def b64encode(data: bytes) -> str:
    """Standard-alphabet base64 without padding.

    Args:
        data: Big-endian bytes.

    Returns:
        str: Unpadded base64 text.

    Examples:
        >>> b64encode(bytes([0x12, 0x34, 0x56, 0x78, 0x90]))
        'EjRWeJA'
    """
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(text: str) -> bytes:
    """Decode standard-alphabet base64, with or without padding.

    Args:
        text: Base64 text.

    Returns:
        bytes: Decoded bytes.

    Raises:
        DecodeError: On invalid characters or length.

    Examples:
        >>> b64decode("aGVsbG8")
        b'hello'
        >>> b64decode("aGVsbG8=")
        b'hello'
        >>> b64decode("a")
        Traceback (most recent call last):
        ...
        transmute.errors.DecodeError: Cannot decode 'a' as base64: invalid length
    """
    body = text.rstrip("=")
    if len(body) % 4 == 1:
        raise DecodeError(64, text, "invalid length")
    padded = body + "=" * (-len(body) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as e:
        raise DecodeError(64, text, str(e)) from e
