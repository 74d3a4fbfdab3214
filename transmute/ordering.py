# -*- coding: utf-8 -*-
"""Location: ./transmute/ordering.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Candidate Ordering.
One total order shared by classifications and encodings. Classifications
sort by score first and fall back to the shape of their encoding; encodings
sort by shape only:

- ``Base(10)`` before every other encoding
- other bases by ascending value, except ``Base(64)`` ahead of ``Base(58)``
- any ``Base`` before any ``Array``; arrays compare element-wise
- ``Array`` before ``Text`` and ``Hash``
- ``Empty`` last

Examples:
    >>> from transmute.ordering import base_key, array_key, EMPTY_KEY
    >>> sorted([16, 58, 10, 64, 2], key=base_key)
    [10, 2, 16, 64, 58]
    >>> base_key(36) < array_key(()) < EMPTY_KEY
    True
"""

# Standard
from enum import IntEnum
from typing import Iterable, Tuple

# Decimal wins every tie among bases
PREFERRED_BASE = 10

# Base64 sorts immediately ahead of base58
_BASE64_POSITION = 57.5

TEXT_KIND_ORDER: Tuple[str, ...] = ("utf8", "ascii", "utf16")
HASH_ALGORITHM_ORDER: Tuple[str, ...] = ("sha2", "sha3", "keccak", "blake2")


class Rank(IntEnum):
    """Coarse encoding families in preference order."""

    BASE = 0
    ARRAY = 1
    TEXT = 2
    HASH = 3
    EMPTY = 4


EMPTY_KEY: Tuple = (Rank.EMPTY,)


def base_key(base: int) -> Tuple:
    """Sort key of a ``Base(n)`` encoding.

    Args:
        base: The radix.

    Returns:
        Tuple: Comparable key.

    Examples:
        >>> base_key(10) < base_key(2) < base_key(16) < base_key(64) < base_key(58)
        True
    """
    if base == PREFERRED_BASE:
        return (Rank.BASE, 0, 0.0)
    if base == 64:
        return (Rank.BASE, 1, _BASE64_POSITION)
    return (Rank.BASE, 1, float(base))


def text_key(kind: str) -> Tuple:
    """Sort key of a ``Text`` encoding.

    Args:
        kind: Text kind name (``utf8``, ``ascii``, ``utf16``, ...).

    Returns:
        Tuple: Comparable key; unknown kinds sort after the known ones.

    Examples:
        >>> text_key("utf8") < text_key("ascii") < text_key("utf16") < text_key("utf32")
        True
    """
    position = TEXT_KIND_ORDER.index(kind) if kind in TEXT_KIND_ORDER else len(TEXT_KIND_ORDER)
    return (Rank.TEXT, position, kind)


def hash_key(algorithm: str, bits: int) -> Tuple:
    """Sort key of a ``Hash`` encoding.

    Args:
        algorithm: Algorithm family name.
        bits: Digest width.

    Returns:
        Tuple: Comparable key.

    Examples:
        >>> hash_key("sha2", 512) < hash_key("keccak", 256)
        True
        >>> text_key("utf16") < hash_key("sha2", 224)
        True
    """
    position = HASH_ALGORITHM_ORDER.index(algorithm) if algorithm in HASH_ALGORITHM_ORDER else len(HASH_ALGORITHM_ORDER)
    return (Rank.HASH, position, bits)


def array_key(element_keys: Iterable[Tuple]) -> Tuple:
    """Sort key of an ``Array`` encoding from its element keys.

    Args:
        element_keys: Keys of the element encodings in order.

    Returns:
        Tuple: Comparable key; arrays compare lexicographically by element.

    Examples:
        >>> array_key([base_key(10)]) < array_key([base_key(16)])
        True
        >>> base_key(58) < array_key([base_key(10)]) < text_key("utf8")
        True
    """
    return (Rank.ARRAY, tuple(element_keys))
