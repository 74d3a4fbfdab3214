# -*- coding: utf-8 -*-
"""Location: ./transmute/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Transmute Errors.
Exception hierarchy shared by the decoding, encoding and hashing layers.
Classification never raises; only turning a candidate into a decoded value,
rendering a decoded value, or resolving a hash name can fail.

Examples:
    >>> from transmute.errors import UnsupportedBaseError, EncodingError, TransmuteError
    >>> err = UnsupportedBaseError(40)
    >>> str(err)
    'Unsupported base: 40'
    >>> isinstance(err, EncodingError) and isinstance(err, TransmuteError)
    True
"""

# Standard
from typing import Optional


class TransmuteError(Exception):
    """Base class for all transmute errors.

    Examples:
        >>> err = TransmuteError("Something went wrong")
        >>> str(err)
        'Something went wrong'
    """


class EncodingError(TransmuteError):
    """Base class for failures while rendering or selecting an encoding.

    Examples:
        >>> isinstance(EncodingError("bad"), TransmuteError)
        True
    """


class UnsupportedBaseError(EncodingError):
    """Raised when a numeric base has no digit alphabet."""

    def __init__(self, base: int):
        """Initialize the error with the offending base.

        Args:
            base: The requested radix.

        Examples:
            >>> err = UnsupportedBaseError(1)
            >>> err.base
            1
        """
        self.base = base
        super().__init__(f"Unsupported base: {base}")


class UnsupportedEncodingError(EncodingError):
    """Raised when an encoding cannot be used for the requested direction."""

    def __init__(self, encoding: str, reason: Optional[str] = None):
        """Initialize the error.

        Args:
            encoding: Display name of the encoding.
            reason: Optional detail appended to the message.

        Examples:
            >>> str(UnsupportedEncodingError("utf32"))
            'Unsupported encoding: utf32'
            >>> str(UnsupportedEncodingError("Empty", "nothing to decode"))
            'Unsupported encoding: Empty (nothing to decode)'
        """
        self.encoding = encoding
        self.reason = reason
        message = f"Unsupported encoding: {encoding}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnsupportedHashError(EncodingError):
    """Raised when a hash name does not resolve to a digest."""

    def __init__(self, name: str):
        """Initialize the error.

        Args:
            name: The hash name as given.

        Examples:
            >>> UnsupportedHashError("md4").name
            'md4'
        """
        self.name = name
        super().__init__(f"Unsupported hash: {name}")


class DecodeError(TransmuteError):
    """Raised when digit text is malformed for its base."""

    def __init__(self, base: int, text: str, reason: str = "invalid digits"):
        """Initialize the error.

        Args:
            base: Radix the text was parsed in.
            text: The digit text.
            reason: Short description of the failure.

        Examples:
            >>> err = DecodeError(58, "0OIl")
            >>> str(err)
            "Cannot decode '0OIl' as base58: invalid digits"
            >>> err.base, err.text
            (58, '0OIl')
        """
        self.base = base
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot decode {text!r} as base{base}: {reason}")
