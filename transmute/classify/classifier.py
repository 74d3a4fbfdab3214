# -*- coding: utf-8 -*-
"""Location: ./transmute/classify/classifier.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Classifier.
Produces one candidate per supported base, one per text kind and one array
candidate for an input string, recursing into array elements.

Examples:
    >>> from transmute.classify.classifier import Classifier
    >>> classifier = Classifier()
    >>> str(classifier.classify_best_match("0x1234").encoding())
    'hex'
    >>> str(classifier.classify_best_match("3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy").encoding())
    'base58'
    >>> str(classifier.classify_best_match("[0x1, 2, 3,4,5]").encoding())
    '[hex, int, int, int, int]'
"""

# Standard
import logging
from typing import List, Optional

# First-Party
from transmute.classify.extractor import extract_array
from transmute.classify.patterns import extract_base, extract_brackets, extract_separator, match_base, match_text, SUPPORTED_BASES
from transmute.classify.types import ArrayClassification, Classification, EmptyClassification, IntegerClassification, score, TextClassification
from transmute.encode.encoding import TEXT_KINDS
from transmute.encode.types import Brackets, Separator

logger = logging.getLogger(__name__)


class Classifier:
    """Scores candidate encodings for input strings."""

    def classify(self, text: str) -> List[Classification]:
        """Rank every candidate for ``text``, best first.

        Args:
            text: Input string.

        Returns:
            List[Classification]: Candidates in ranked order; may end in ``Empty``.

        Examples:
            >>> ranked = Classifier().classify("1010")
            >>> [str(c.encoding()) for c in ranked[:3]]
            ['int', 'bin', 'hex']
            >>> ranked[-1].is_empty()
            True
        """
        candidates: List[Classification] = [self.classify_integer(base, text) for base in SUPPORTED_BASES]
        candidates.extend(self.classify_text(kind, text) for kind in TEXT_KINDS)
        candidates.append(self.classify_array(text))
        candidates.sort()
        logger.debug(f"Classified {len(text)} character(s): best {candidates[0].encoding()} with score {candidates[0].score}")
        return candidates

    def classify_best_match(self, text: str) -> Classification:
        """Best candidate for ``text``.

        Args:
            text: Input string.

        Returns:
            Classification: The minimum candidate.
        """
        return min(self.classify(text))

    def classify_integer(self, base: int, text: str) -> IntegerClassification:
        """Score ``text`` as digits of ``base``.

        Args:
            base: A supported base.
            text: Input string.

        Returns:
            IntegerClassification: Candidate with the extracted digits.

        Examples:
            >>> Classifier().classify_integer(2, "0b1010")
            IntegerClassification(base=2, text='1010', score=0)
            >>> Classifier().classify_integer(2, "0b1112").score
            167
        """
        return IntegerClassification(base, extract_base(base, text) or "", score(match_base(base, text), len(text)))

    def classify_text(self, kind: str, text: str) -> TextClassification:
        """Score ``text`` as literal text of a kind.

        Args:
            kind: ``utf8``, ``ascii`` or ``utf16``.
            text: Input string.

        Returns:
            TextClassification: Candidate.
        """
        return TextClassification(kind, text, score(match_text(kind, text), len(text)))

    def classify_array(self, text: str) -> Classification:
        """Score ``text`` as a delimited list and classify its elements.

        Args:
            text: Input string.

        Returns:
            Classification: ``ArrayClassification``, or ``Empty`` when the input
            has neither brackets nor separators.

        Examples:
            >>> Classifier().classify_array("0x1234").is_empty()
            True
            >>> array = Classifier().classify_array("(1, 4, 5")
            >>> len(array.collapse()), array.score, array.brackets.pair()
            (3, 0, ('(', ')'))
        """
        separator_text = extract_separator(text)
        bracket_text = extract_brackets(text)
        if separator_text is None and bracket_text is None:
            return EmptyClassification()

        separator = Separator.from_match(separator_text) if separator_text else Separator.comma()
        brackets = Brackets.from_match(bracket_text) if bracket_text else Brackets.none()
        open_char, close_char = brackets.open_char, brackets.close_char

        elements = tuple(tuple(self.classify(element)) for element in extract_array(text, separator.char, open_char, close_char))
        return ArrayClassification(
            elements=elements,
            brackets=brackets,
            separator=separator,
            score=score(self._span(text, open_char, close_char), len(text)),
        )

    @staticmethod
    def _span(text: str, open_char: Optional[str], close_char: Optional[str]) -> int:
        """Characters covered by the outer brackets, brackets included.

        Args:
            text: Input string.
            open_char: Opening bracket, if any.
            close_char: Closing bracket, if any.

        Returns:
            int: Span length; the whole string when no brackets are present.

        Examples:
            >>> Classifier._span("x [1] y", "[", "]")
            3
            >>> Classifier._span("1, 2", None, None)
            4
        """
        start = text.find(open_char) if open_char else -1
        end = text.rfind(close_char) if close_char else -1
        start = start if start >= 0 else 0
        end = end + 1 if end >= 0 else len(text)
        return max(end - start, 0)


def classify(text: str) -> List[Classification]:
    """Rank every candidate for ``text`` with a default classifier.

    Args:
        text: Input string.

    Returns:
        List[Classification]: Candidates, best first.
    """
    return Classifier().classify(text)
