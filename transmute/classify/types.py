# -*- coding: utf-8 -*-
"""Location: ./transmute/classify/types.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Classification Types.
A ``Classification`` is one scored hypothesis about how a string is encoded.
Scores run from 0 (perfect match) to 1000 (no match); candidates order by
score and then by the shape of their encoding, so ``min`` picks the best.

Examples:
    >>> from transmute.classify.types import IntegerClassification, EmptyClassification
    >>> hex_match = IntegerClassification(16, "1234", 0)
    >>> dec_match = IntegerClassification(10, "1234", 167)
    >>> min([dec_match, EmptyClassification(), hex_match]) is hex_match
    True
    >>> str(hex_match)
    'hex 1234'
"""

# Standard
from dataclasses import dataclass, field
from functools import total_ordering
import sys
from typing import List, Tuple

# First-Party
from transmute.encode.encoding import ArrayEncoding, BaseEncoding, EmptyEncoding, Encoding, TextEncoding
from transmute.encode.types import Brackets, Separator

PRECISION = 1000
MAX_SCORE = sys.maxsize


def score(matched: int, length: int) -> int:
    """Error score for ``matched`` valid characters out of ``length``.

    Args:
        matched: Characters matching the hypothesis.
        length: Input length.

    Returns:
        int: ``1000 - 1000 * matched // length``; 1000 for empty input.

    Examples:
        >>> score(4, 6), score(6, 6), score(0, 0)
        (334, 0, 1000)
    """
    if length == 0:
        return PRECISION
    return PRECISION - PRECISION * min(matched, length) // length


@total_ordering
class Classification:
    """Base class of all classification candidates."""

    score: int = MAX_SCORE

    def encoding(self) -> Encoding:
        """Encoding describing this candidate's shape."""
        raise NotImplementedError

    def sort_key(self) -> Tuple:
        """Score first, encoding shape second.

        Returns:
            Tuple: Key.
        """
        return (self.score, self.encoding().sort_key())

    def __lt__(self, other: object) -> bool:
        """Compare candidates.

        Args:
            other: Another classification.

        Returns:
            bool: Whether this candidate is better than ``other``.
        """
        if not isinstance(other, Classification):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def is_empty(self) -> bool:
        """Whether this is the empty sentinel.

        Returns:
            bool: False except for ``EmptyClassification``.
        """
        return False

    def is_lines(self) -> bool:
        """Whether this is a line-separated list.

        Returns:
            bool: False except for some arrays.
        """
        return False


@dataclass(frozen=True)
class IntegerClassification(Classification):
    """The input read as digits of a base."""

    base: int
    text: str
    score: int

    def encoding(self) -> Encoding:
        """``BaseEncoding`` of the base.

        Returns:
            Encoding: Base encoding.
        """
        return BaseEncoding(self.base)

    def __str__(self) -> str:
        """Display such as ``hex 1234``.

        Returns:
            str: Encoding name and digit text.
        """
        return f"{self.encoding()} {self.text}"


@dataclass(frozen=True)
class TextClassification(Classification):
    """The input read as literal text."""

    kind: str
    text: str
    score: int

    def encoding(self) -> Encoding:
        """``TextEncoding`` of the kind.

        Returns:
            Encoding: Text encoding.
        """
        return TextEncoding(self.kind)

    def __str__(self) -> str:
        """Display such as ``utf8 hello``.

        Returns:
            str: Encoding name and text.
        """
        return f"{self.kind} {self.text}"


@dataclass(frozen=True)
class ArrayClassification(Classification):
    """The input read as a delimited list of separately classified elements."""

    elements: Tuple[Tuple[Classification, ...], ...]
    brackets: Brackets = field(default_factory=Brackets.none)
    separator: Separator = field(default_factory=Separator.comma)
    score: int = 0

    def __post_init__(self):
        """Accept any nested sequences."""
        object.__setattr__(self, "elements", tuple(tuple(candidates) for candidates in self.elements))

    def collapse(self) -> List[Classification]:
        """Best candidate of every element.

        Returns:
            List[Classification]: One classification per element.

        Examples:
            >>> worse, better = IntegerClassification(10, "1", 500), IntegerClassification(16, "1", 0)
            >>> ArrayClassification(((worse, better),)).collapse() == [better]
            True
        """
        return [min(candidates) for candidates in self.elements if candidates]

    def is_lines(self) -> bool:
        """Unbracketed list split on line breaks.

        Returns:
            bool: Whether the separator carries a newline and no brackets were found.

        Examples:
            >>> ArrayClassification((), Brackets.none(), Separator.lines()).is_lines()
            True
            >>> ArrayClassification((), Brackets.square(), Separator.lines()).is_lines()
            False
        """
        return self.separator.newline and self.brackets.is_none()

    def encoding(self) -> Encoding:
        """``ArrayEncoding`` of the collapsed elements' encodings.

        Returns:
            Encoding: Array encoding with the detected delimiters.
        """
        return ArrayEncoding(tuple(child.encoding() for child in self.collapse()), self.brackets, self.separator)

    def __str__(self) -> str:
        """Display of the collapsed elements.

        Returns:
            str: e.g. ``[int 1, hex 2]``.
        """
        opening, closing = self.brackets.pair()
        return opening + str(self.separator).join(str(child) for child in self.collapse()) + closing


@dataclass(frozen=True)
class EmptyClassification(Classification):
    """Sentinel for a hypothesis that does not apply; always ranked last."""

    score: int = MAX_SCORE

    def encoding(self) -> Encoding:
        """``EmptyEncoding``.

        Returns:
            Encoding: Empty encoding.
        """
        return EmptyEncoding()

    def is_empty(self) -> bool:
        """Always True.

        Returns:
            bool: True.
        """
        return True

    def __str__(self) -> str:
        """Display name.

        Returns:
            str: ``Empty``.
        """
        return "Empty"
