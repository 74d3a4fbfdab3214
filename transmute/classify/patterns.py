# -*- coding: utf-8 -*-
"""Location: ./transmute/classify/patterns.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Pattern Matchers.
Character-class patterns for every supported digit alphabet plus bracket and
separator detection. Two questions are answered per base:

- *match*: how many characters of the input sit inside valid runs (scoring)
- *extract*: which run holds the digits to decode (prefixes and junk dropped)

The compiled patterns live in one immutable ``PatternSet`` built on first
use and shared for the life of the process.

Examples:
    >>> from transmute.classify.patterns import match_base, extract_base
    >>> match_base(16, "0x1010"), extract_base(16, "0x1010")
    (6, '1010')
    >>> match_base(64, "aGVsbG8="), extract_base(64, "aGVsbG8=")
    (8, 'aGVsbG8')
    >>> extract_separator("1, 2,3, 4")
    ', '
"""

# Standard
from collections import Counter
from dataclasses import dataclass, field
from functools import lru_cache
import re
import string
from typing import Dict, Optional, Pattern

# =============================================================================
# Alphabets
# =============================================================================

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE64_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"

SUPPORTED_BASES = (2, 10, 16, 58, 64)
_PRINTABLE = frozenset(string.printable)


@dataclass(frozen=True)
class PatternSet:
    """Compiled patterns, keyed by base where applicable."""

    match: Dict[int, Pattern[str]] = field(default_factory=dict)
    extract: Dict[int, Pattern[str]] = field(default_factory=dict)
    brackets: Pattern[str] = re.compile(r"[()\[\]{}<>]")
    separators: Pattern[str] = re.compile(r"\s*,\s*|\s+")


@lru_cache(maxsize=None)
def get_patterns() -> PatternSet:
    """Build the shared pattern set once.

    Returns:
        PatternSet: Process-wide compiled patterns.

    Examples:
        >>> get_patterns() is get_patterns()
        True
        >>> sorted(get_patterns().match)
        [2, 10, 16, 58, 64]
    """
    return PatternSet(
        match={
            2: re.compile(r"(?:0[bB])?[01]+"),
            10: re.compile(r"[0-9]+"),
            16: re.compile(r"(?:0[xX])?[0-9a-fA-F]+"),
            58: re.compile(r"[1-9A-HJ-NP-Za-km-z]+"),
            64: re.compile(r"[A-Za-z0-9+/]+={0,2}"),
        },
        extract={
            2: re.compile(r"[01]+"),
            10: re.compile(r"[0-9]+"),
            16: re.compile(r"[0-9a-fA-F]+"),
            58: re.compile(r"[1-9A-HJ-NP-Za-km-z]+"),
            64: re.compile(r"[A-Za-z0-9+/]+"),
        },
    )


# =============================================================================
# Base digit runs
# =============================================================================


def _canonical_base64_length(run: str) -> int:
    """Characters of a base64 run that form a well-formed encoding.

    A run counts in full when its final group is a legal tail: never a lone
    symbol, padding only as long as the group is short, and the unused low
    bits of the last symbol zero. Otherwise only its complete four-symbol
    groups count.

    Args:
        run: A match of the base64 scoring pattern.

    Returns:
        int: Number of characters credited.

    Examples:
        >>> _canonical_base64_length("aGVsbG8=")
        8
        >>> _canonical_base64_length("aGVsbG9")
        4
        >>> _canonical_base64_length("3J98t")
        4
    """
    body = run.rstrip("=")
    padding = len(run) - len(body)
    tail = len(body) % 4
    if tail == 0:
        canonical = padding == 0
    elif tail == 1:
        canonical = False
    else:
        last = BASE64_ALPHABET.index(body[-1])
        unused = 0x0F if tail == 2 else 0x03
        canonical = not last & unused and padding <= 4 - tail
    if canonical:
        return len(run)
    return 4 * (len(body) // 4)


def match_base(base: int, text: str) -> int:
    """Count characters of ``text`` covered by valid runs of a base.

    Args:
        base: One of the supported bases.
        text: Candidate input.

    Returns:
        int: Covered character count; 0 for an unknown base.

    Examples:
        >>> match_base(2, "0b1010")
        6
        >>> match_base(10, "1010")
        4
        >>> match_base(58, "1A")
        2
        >>> match_base(16, "0xfgh")
        3
    """
    pattern = get_patterns().match.get(base)
    if pattern is None:
        return 0
    if base == 64:
        return sum(_canonical_base64_length(m.group()) for m in pattern.finditer(text))
    return sum(len(m.group()) for m in pattern.finditer(text))


def extract_longest(pattern: Pattern[str], text: str) -> Optional[str]:
    """Longest run matching ``pattern``; the later run wins a tie.

    Args:
        pattern: Compiled run pattern.
        text: Input.

    Returns:
        Optional[str]: The run, or None without any match.

    Examples:
        >>> extract_longest(re.compile(r"[0-9]+"), "12 ab 34")
        '34'
        >>> extract_longest(re.compile(r"[0-9]+"), "ab") is None
        True
    """
    longest: Optional[str] = None
    for m in pattern.finditer(text):
        if longest is None or len(m.group()) >= len(longest):
            longest = m.group()
    return longest


def extract_common(pattern: Pattern[str], text: str) -> Optional[str]:
    """Most frequent match of ``pattern``; the first seen wins a tie.

    Args:
        pattern: Compiled pattern.
        text: Input.

    Returns:
        Optional[str]: The mode, or None without any match.

    Examples:
        >>> extract_common(re.compile(r"[ab]"), "babba")
        'b'
        >>> extract_common(re.compile(r"[ab]"), "abab")
        'a'
    """
    counts = Counter(m.group() for m in pattern.finditer(text))
    if not counts:
        return None
    return max(counts.items(), key=lambda item: item[1])[0]


def extract_base(base: int, text: str) -> Optional[str]:
    """Digit text to decode for a base.

    Base58 has no prefix or delimiter conventions, so it only extracts when
    the whole input is in its alphabet.

    Args:
        base: One of the supported bases.
        text: Candidate input.

    Returns:
        Optional[str]: Digits without prefix, or None.

    Examples:
        >>> extract_base(2, "0b1010")
        '1010'
        >>> extract_base(16, "0x1")
        '1'
        >>> extract_base(58, "3J98t1W") , extract_base(58, "0x12")
        ('3J98t1W', None)
    """
    pattern = get_patterns().extract.get(base)
    if pattern is None:
        return None
    if base == 58:
        return text if pattern.fullmatch(text) else None
    return extract_longest(pattern, text)


# =============================================================================
# Text
# =============================================================================


def match_text(kind: str, text: str) -> int:
    """Count characters of ``text`` valid for a text kind.

    Args:
        kind: ``ascii``, ``utf8`` or ``utf16``.
        text: Candidate input.

    Returns:
        int: Valid character count. UTF-16 accepts every character.

    Examples:
        >>> match_text("ascii", "hi\\x00")
        2
        >>> match_text("utf16", "hi\\x00")
        3
    """
    if kind == "utf16":
        return len(text)
    return sum(1 for char in text if char in _PRINTABLE)


# =============================================================================
# Delimiters
# =============================================================================


def extract_brackets(text: str) -> Optional[str]:
    """Most frequent bracket character.

    Args:
        text: Input.

    Returns:
        Optional[str]: The character or None.

    Examples:
        >>> extract_brackets("[[1], [2]]")
        '['
        >>> extract_brackets("1 2") is None
        True
    """
    return extract_common(get_patterns().brackets, text)


def extract_separator(text: str) -> Optional[str]:
    """Most frequent separator run (a comma with optional whitespace, or whitespace).

    Args:
        text: Input.

    Returns:
        Optional[str]: The separator text or None.

    Examples:
        >>> extract_separator("123\\n456\\n789")
        '\\n'
        >>> extract_separator("0x1234") is None
        True
    """
    return extract_common(get_patterns().separators, text)
