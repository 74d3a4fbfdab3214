# -*- coding: utf-8 -*-
"""Location: ./transmute/classify/extractor.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Structural Array Extractor.
Splits a bracketed, separator-joined string into its top-level element
substrings. Separators only split at bracket depth zero, and every bracket
kind counts towards the same depth, so ``[1, (2, 3)]`` yields two elements.

Examples:
    >>> from transmute.classify.extractor import extract_array
    >>> extract_array("[1, 2, 3, [4, 5, 6, [7, 8, 9]]]", ",", "[", "]")
    ['1', '2', '3', '[4, 5, 6, [7, 8, 9]]']
    >>> extract_array("1,\\n2,\\n3", ",") == extract_array("1, 2, 3", ",")
    True
"""

# Standard
from typing import List, Optional, Tuple

# First-Party
from transmute.encode.types import is_close_bracket, is_open_bracket


def array_span(text: str, open_bracket: Optional[str] = None, close_bracket: Optional[str] = None) -> Tuple[int, int]:
    """Locate the outer bracket span.

    Args:
        text: Input string.
        open_bracket: Opening character, if any.
        close_bracket: Closing character, if any.

    Returns:
        Tuple[int, int]: ``(start, end)`` indices of the inner text; start
        falls just after the first opening bracket and end on the last
        closing bracket. Missing brackets extend the span to the string edge.

    Examples:
        >>> array_span("[1, 2]", "[", "]")
        (1, 5)
        >>> array_span("1, 2]", "[", "]")
        (0, 4)
        >>> array_span("1, 2")
        (0, 4)
    """
    start = 0
    if open_bracket:
        index = text.find(open_bracket)
        if index >= 0:
            start = index + 1
    end = len(text)
    if close_bracket:
        index = text.rfind(close_bracket)
        if index >= 0:
            end = index
    return start, end


def extract_array(text: str, separator: str, open_bracket: Optional[str] = None, close_bracket: Optional[str] = None) -> List[str]:
    """Split ``text`` into trimmed, non-empty top-level elements.

    Args:
        text: Input string.
        separator: Separator character.
        open_bracket: Opening character of the outer span, if any.
        close_bracket: Closing character of the outer span, if any.

    Returns:
        List[str]: Element substrings in input order.

    Examples:
        >>> extract_array("[[1, 2, 3], [4, 5, 6], [7, 8, 9]]", ",", "[", "]")
        ['[1, 2, 3]', '[4, 5, 6]', '[7, 8, 9]']
        >>> extract_array("(1, 4, 5", ",", "(", ")")
        ['1', '4', '5']
        >>> extract_array("a  b\\tc", " ")
        ['a', 'b\\tc']
        >>> extract_array("[]", ",", "[", "]")
        []
    """
    start, end = array_span(text, open_bracket, close_bracket)
    inner = text[start:end]

    tokens: List[str] = []
    depth = 0
    last = 0
    for index, char in enumerate(inner):
        if is_open_bracket(char):
            depth += 1
        elif is_close_bracket(char):
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            tokens.append(inner[last:index])
            last = index + 1
    tokens.append(inner[last:])

    return [token.strip() for token in tokens if token.strip()]
