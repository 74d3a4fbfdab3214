# -*- coding: utf-8 -*-
"""Location: ./transmute/encode/types.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Array Delimiters.
Bracket kinds, bracket pairs and element separators shared by the
classifier (which detects them) and the array encoder (which emits them).

Examples:
    >>> from transmute.encode.types import Brackets, Separator
    >>> Brackets.from_match("(").pair()
    ('(', ')')
    >>> str(Separator.from_match(" ,  "))
    ', '
    >>> Separator.from_match(",\\n  ").newline
    True
"""

# Standard
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Bracket(Enum):
    """Supported bracket kinds as (open, close) characters."""

    SQUARE = ("[", "]")
    ROUND = ("(", ")")
    CURLY = ("{", "}")
    ANGLE = ("<", ">")

    @property
    def open(self) -> str:
        """Opening character.

        Returns:
            str: e.g. ``[``.
        """
        return self.value[0]

    @property
    def close(self) -> str:
        """Closing character.

        Returns:
            str: e.g. ``]``.
        """
        return self.value[1]

    @classmethod
    def from_char(cls, char: str) -> Optional["Bracket"]:
        """Find the bracket kind a character belongs to.

        Args:
            char: A single character.

        Returns:
            Optional[Bracket]: The kind, or None if not a bracket.

        Examples:
            >>> Bracket.from_char("}")
            <Bracket.CURLY: ('{', '}')>
            >>> Bracket.from_char("x") is None
            True
        """
        for bracket in cls:
            if char in bracket.value:
                return bracket
        return None


def is_open_bracket(char: str) -> bool:
    """Return True for any opening bracket character.

    Args:
        char: A single character.

    Returns:
        bool: Whether ``char`` opens a bracket.

    Examples:
        >>> is_open_bracket("<"), is_open_bracket(">")
        (True, False)
    """
    return any(char == bracket.open for bracket in Bracket)


def is_close_bracket(char: str) -> bool:
    """Return True for any closing bracket character.

    Args:
        char: A single character.

    Returns:
        bool: Whether ``char`` closes a bracket.
    """
    return any(char == bracket.close for bracket in Bracket)


@dataclass(frozen=True)
class Brackets:
    """An independently optional opening and closing bracket."""

    open: Optional[Bracket] = None
    close: Optional[Bracket] = None

    @classmethod
    def none(cls) -> "Brackets":
        """No brackets on either side.

        Returns:
            Brackets: Empty pair.
        """
        return cls()

    @classmethod
    def square(cls) -> "Brackets":
        """The default ``[`` ``]`` pair.

        Returns:
            Brackets: Square pair.
        """
        return cls.of(Bracket.SQUARE)

    @classmethod
    def of(cls, bracket: Bracket) -> "Brackets":
        """A matching pair of one kind.

        Args:
            bracket: Bracket kind for both sides.

        Returns:
            Brackets: The pair.
        """
        return cls(bracket, bracket)

    @classmethod
    def from_match(cls, text: str) -> "Brackets":
        """Build a pair from detected bracket text.

        The first character picks the opening kind and the last one the
        closing kind; a single character yields a matching pair.

        Args:
            text: Bracket characters found in the input.

        Returns:
            Brackets: The pair, or no brackets for empty text.

        Examples:
            >>> Brackets.from_match("]").pair()
            ('[', ']')
            >>> Brackets.from_match("") == Brackets.none()
            True
        """
        if not text:
            return cls.none()
        return cls(Bracket.from_char(text[0]), Bracket.from_char(text[-1]))

    @property
    def open_char(self) -> Optional[str]:
        """Opening character, if any.

        Returns:
            Optional[str]: Character or None.
        """
        return self.open.open if self.open else None

    @property
    def close_char(self) -> Optional[str]:
        """Closing character, if any.

        Returns:
            Optional[str]: Character or None.
        """
        return self.close.close if self.close else None

    def is_none(self) -> bool:
        """Whether neither side emits a bracket.

        Returns:
            bool: True for an empty pair.
        """
        return self.open is None and self.close is None

    def pair(self) -> Tuple[str, str]:
        """Opening and closing text, empty where absent.

        Returns:
            Tuple[str, str]: ``(open, close)``.

        Examples:
            >>> Brackets.none().pair()
            ('', '')
        """
        return (self.open_char or "", self.close_char or "")


@dataclass(frozen=True)
class Separator:
    """Element separator character and whether a line break follows it."""

    char: str = ","
    newline: bool = False

    @classmethod
    def comma(cls) -> "Separator":
        """The default ``,`` separator.

        Returns:
            Separator: Comma separator.
        """
        return cls(",")

    @classmethod
    def lines(cls) -> "Separator":
        """A bare line break.

        Returns:
            Separator: Newline separator.
        """
        return cls("\n", True)

    @classmethod
    def from_match(cls, text: str) -> "Separator":
        """Build a separator from detected separator text.

        A comma anywhere in the match makes it a comma separator; otherwise a
        line break makes it a newline separator; otherwise the first
        whitespace character is used.

        Args:
            text: A separator match such as ``", "`` or ``"\\n"``.

        Returns:
            Separator: The separator.

        Examples:
            >>> Separator.from_match("\\t")
            Separator(char='\\t', newline=False)
            >>> Separator.from_match("\\r\\n") == Separator.lines()
            True
            >>> Separator.from_match("") == Separator.comma()
            True
        """
        if not text or "," in text:
            return cls(",", "\n" in text)
        if "\n" in text:
            return cls.lines()
        return cls(text[0])

    def __str__(self) -> str:
        """Literal text placed between rendered elements.

        Returns:
            str: Joiner text.

        Examples:
            >>> str(Separator(",", True))
            ',\\n'
            >>> str(Separator.lines())
            '\\n'
        """
        if self.char == ",":
            return ",\n" if self.newline else ", "
        return self.char
