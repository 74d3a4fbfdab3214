# -*- coding: utf-8 -*-
"""Location: ./transmute/encode/encoding.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Encoding Descriptors.
An ``Encoding`` describes how a ``Decoded`` value is rendered as text:

- ``BaseEncoding(n)``: radix 2 to 36 through an unsigned integer, or the
  byte-oriented base58 and base64 alphabets; ``0x``/``0b`` prefixes for 16/2
- ``TextEncoding(kind)``: ``utf8``/``ascii``/``utf16`` rendering of the bytes
- ``ArrayEncoding(values, brackets, separator)``: element-wise rendering with
  the element encodings cycled over the elements
- ``HashEncoding(hasher)``: digest of the value, rendered as padded hex
- ``EmptyEncoding``: the shape of an empty classification; renders as ""

Encodings are built from short names with ``Encoding.from_spec``:
``hex``, ``bin``, ``int``, ``bytes``, ``base<N>``, ``utf<N>``, ``ascii``,
hash names such as ``keccak256``, ``[spec, spec, ...]`` and ``[spec; count]``.
Anything else means decimal.

Examples:
    >>> from transmute.encode.decoded import Decoded
    >>> from transmute.encode.encoding import Encoding
    >>> value = Decoded.Bytes([0x90, 0x78, 0x56, 0x34, 0x12])
    >>> [Encoding.from_spec(name).encode(value) for name in ("hex", "int", "base58", "base64")]
    ['0x1234567890', '78187493520', '348ALp7', 'EjRWeJA']
    >>> Encoding.from_spec("[hex, int]").encode(Decoded.Array([value, value]))
    '[0x1234567890, 78187493520]'
    >>> [str(e) for e in sorted(Encoding.from_spec(name) for name in ("hex", "bin", "base64", "bytes", "int"))]
    ['int', 'bin', 'hex', 'base64', '[hex]']
"""

# Standard
from dataclasses import dataclass, field
from functools import total_ordering
from itertools import cycle, islice
import logging
import secrets
from typing import List, Optional, Tuple

# First-Party
from transmute.classify.extractor import extract_array
from transmute.encode.decoded import Decoded, rotation_offset
from transmute.encode.hashing import Hasher
from transmute.encode.radix import b58encode, b64encode, digits_for_bytes, int_to_radix, is_radix, le_bytes_to_int, zero_digit
from transmute.encode.types import Brackets, Separator
from transmute.errors import UnsupportedBaseError, UnsupportedEncodingError
from transmute.ordering import array_key, base_key, EMPTY_KEY, hash_key, text_key

logger = logging.getLogger(__name__)

BASE_NAMES = {2: "bin", 10: "int", 16: "hex", 58: "base58", 64: "base64"}
BASE_PREFIXES = {2: "0b", 16: "0x"}
TEXT_KINDS = ("utf8", "ascii", "utf16")


@total_ordering
class Encoding:
    """Base class of all encoding descriptors."""

    def sort_key(self) -> Tuple:
        """Key placing this encoding in the shared candidate order."""
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        """Compare by shape.

        Args:
            other: Another encoding.

        Returns:
            bool: Whether this encoding is preferred over ``other``.
        """
        if not isinstance(other, Encoding):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def encode(self, decoded: Decoded, pad: bool = False) -> str:
        """Render ``decoded`` in this encoding."""
        raise NotImplementedError

    def generate(self, length: int) -> str:
        """Render ``length`` zero bytes with padding on.

        Args:
            length: Byte count.

        Returns:
            str: Rendered zero value.

        Examples:
            >>> Encoding.from_spec("hex").generate(4)
            '0x00000000'
        """
        return self.encode(Decoded.zeros(length), pad=True)

    def random(self, length: int) -> str:
        """Render ``length`` random bytes with padding on.

        Args:
            length: Byte count.

        Returns:
            str: Rendered random value.

        Examples:
            >>> len(Encoding.from_spec("hex").random(4))
            10
        """
        return self.encode(Decoded.from_le_bytes(secrets.token_bytes(length)), pad=True)

    def flatten(self) -> "Encoding":
        """Inline nested array element encodings.

        Returns:
            Encoding: This encoding for non-arrays.
        """
        return self

    def left_pad(self, length: int) -> "Encoding":
        """Element encodings of a value left-padded to ``length`` elements.

        Args:
            length: Target element count.

        Returns:
            Encoding: This encoding for non-arrays.
        """
        return self

    def right_pad(self, length: int) -> "Encoding":
        """Element encodings of a value right-padded to ``length`` elements.

        Args:
            length: Target element count.

        Returns:
            Encoding: This encoding for non-arrays.
        """
        return self

    def reverse(self, depth: int = 1) -> "Encoding":
        """Element encodings in the order of a value reversed down to ``depth`` levels.

        Args:
            depth: Levels reversed.

        Returns:
            Encoding: This encoding for non-arrays.
        """
        return self

    def rotate(self, amount: int) -> "Encoding":
        """Element encodings in the order of a value rotated right by ``amount``.

        Args:
            amount: Positions.

        Returns:
            Encoding: This encoding for non-arrays.
        """
        return self

    def to_lines(self, separator: Optional[Separator] = None) -> "ArrayEncoding":
        """Apply this encoding to every line of an unbracketed list.

        Args:
            separator: Line separator; a bare newline by default.

        Returns:
            ArrayEncoding: Wrapping encoding.

        Examples:
            >>> from transmute.encode.decoded import Decoded
            >>> lines = Encoding.from_spec("hex").to_lines()
            >>> lines.encode(Decoded.Array([Decoded.Bytes([123]), Decoded.Bytes([0xc8, 0x01])]))
            '0x7b\\n0x1c8'
        """
        return ArrayEncoding((self,), Brackets.none(), separator or Separator.lines())

    @staticmethod
    def from_spec(spec: str) -> "Encoding":
        """Build an encoding from its short name.

        Args:
            spec: Encoding name, case-insensitive.

        Returns:
            Encoding: The descriptor; decimal for unrecognized names.

        Examples:
            >>> str(Encoding.from_spec(" HEX "))
            'hex'
            >>> Encoding.from_spec("base58"), Encoding.from_spec("base")
            (BaseEncoding(base=58), BaseEncoding(base=10))
            >>> Encoding.from_spec("utf16"), Encoding.from_spec("utf")
            (TextEncoding(kind='utf16'), TextEncoding(kind='utf8'))
            >>> str(Encoding.from_spec("[hex; 3]")), str(Encoding.from_spec("[bin, [int, hex]]"))
            ('[hex, hex, hex]', '[bin, [int, hex]]')
            >>> Encoding.from_spec("sha3-512")
            HashEncoding(hasher=Hasher(algorithm='sha3', bits=512))
            >>> Encoding.from_spec("nonsense")
            BaseEncoding(base=10)
        """
        text = spec.strip().lower()
        if text.startswith("[") and text.endswith("]"):
            return ArrayEncoding.from_spec_list(text[1:-1])
        if text == "hex":
            return BaseEncoding(16)
        if text == "bin":
            return BaseEncoding(2)
        if text == "int":
            return BaseEncoding(10)
        if text == "bytes":
            return ArrayEncoding((BaseEncoding(16),))
        if text == "ascii":
            return TextEncoding("ascii")
        if text.startswith("base"):
            digits = "".join(char for char in text[4:] if char.isdigit())
            return BaseEncoding(int(digits) if digits else 10)
        if text.startswith("utf"):
            digits = "".join(char for char in text[3:] if char.isdigit())
            return TextEncoding(f"utf{int(digits) if digits else 8}")
        hasher = Hasher.lookup(text)
        if hasher is not None:
            return HashEncoding(hasher)
        logger.debug(f"Unrecognized encoding {spec!r}, using int")
        return BaseEncoding(10)


@dataclass(frozen=True)
class BaseEncoding(Encoding):
    """Numeric rendering in a base."""

    base: int = 10

    def __str__(self) -> str:
        """Display name such as ``hex`` or ``base36``.

        Returns:
            str: Name.
        """
        return BASE_NAMES.get(self.base, f"base{self.base}")

    def sort_key(self) -> Tuple:
        """Shared-order key.

        Returns:
            Tuple: Key.
        """
        return base_key(self.base)

    @property
    def prefix(self) -> str:
        """Literal prefix: ``0x`` for hex, ``0b`` for binary.

        Returns:
            str: Prefix or empty string.
        """
        return BASE_PREFIXES.get(self.base, "")

    def pad_digits(self, digits: str, byte_length: int) -> str:
        """Left-pad digit text to cover ``byte_length`` bytes.

        Args:
            digits: Digit text without prefix.
            byte_length: Bytes the digits must be able to represent.

        Returns:
            str: Padded digits.

        Examples:
            >>> BaseEncoding(16).pad_digits("1234567890", 10)
            '00000000001234567890'
            >>> len(BaseEncoding(2).pad_digits("1001101001", 5))
            40
            >>> BaseEncoding(64).pad_digits("1234567890", 5)
            '1234567890'
        """
        return digits.rjust(digits_for_bytes(self.base, byte_length), zero_digit(self.base))

    def encode(self, decoded: Decoded, pad: bool = False) -> str:
        """Render the value's bytes in this base.

        Args:
            decoded: Value to render.
            pad: Keep leading zero bytes by padding to the byte length.

        Returns:
            str: Prefixed digit text.

        Raises:
            UnsupportedBaseError: For bases without an alphabet.

        Examples:
            >>> from transmute.encode.decoded import Decoded
            >>> BaseEncoding(2).encode(Decoded.Bytes([5]))
            '0b101'
            >>> BaseEncoding(16).encode(Decoded.Bytes([0x34, 0x12, 0]), pad=True)
            '0x001234'
            >>> BaseEncoding(40).encode(Decoded.Bytes([1]))
            Traceback (most recent call last):
            ...
            transmute.errors.UnsupportedBaseError: Unsupported base: 40
        """
        if is_radix(self.base):
            digits = int_to_radix(le_bytes_to_int(decoded.to_le_bytes()), self.base)
        elif self.base == 58:
            digits = b58encode(decoded.to_be_bytes())
        elif self.base == 64:
            digits = b64encode(decoded.to_be_bytes())
        else:
            raise UnsupportedBaseError(self.base)
        if pad:
            digits = self.pad_digits(digits, len(decoded.to_le_bytes()))
        return self.prefix + digits


@dataclass(frozen=True)
class TextEncoding(Encoding):
    """Text rendering of the stored bytes."""

    kind: str = "utf8"

    def __str__(self) -> str:
        """Display name.

        Returns:
            str: ``utf8``, ``ascii``, ``utf16``...
        """
        return self.kind

    def sort_key(self) -> Tuple:
        """Shared-order key.

        Returns:
            Tuple: Key.
        """
        return text_key(self.kind)

    def encode(self, decoded: Decoded, pad: bool = False) -> str:
        """Render the little-endian bytes as text, replacing invalid sequences.

        UTF-16 pairs consecutive bytes low byte first; an odd final byte is
        a code unit of its own.

        Args:
            decoded: Value to render.
            pad: Ignored for text.

        Returns:
            str: Text.

        Raises:
            UnsupportedEncodingError: For text kinds other than utf8, ascii and utf16.

        Examples:
            >>> from transmute.encode.decoded import Decoded
            >>> TextEncoding("ascii").encode(Decoded.Bytes(b"Hello"))
            'Hello'
            >>> TextEncoding("utf16").encode(Decoded.Bytes(b"H\\x00i\\x00!"))
            'Hi!'
            >>> TextEncoding("utf32").encode(Decoded.Bytes(b"H"))
            Traceback (most recent call last):
            ...
            transmute.errors.UnsupportedEncodingError: Unsupported encoding: utf32
        """
        data = decoded.to_le_bytes()
        if self.kind == "utf8":
            return data.decode("utf-8", errors="replace")
        if self.kind == "ascii":
            return data.decode("ascii", errors="replace")
        if self.kind == "utf16":
            if len(data) % 2:
                data += b"\x00"
            return data.decode("utf-16-le", errors="replace")
        raise UnsupportedEncodingError(self.kind)


@dataclass(frozen=True)
class ArrayEncoding(Encoding):
    """Element-wise rendering with cycled element encodings."""

    values: Tuple[Encoding, ...] = ()
    brackets: Brackets = field(default_factory=Brackets.square)
    separator: Separator = field(default_factory=Separator.comma)

    def __post_init__(self):
        """Accept any sequence of element encodings."""
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def from_spec_list(cls, inner: str) -> "ArrayEncoding":
        """Build from the text between ``[`` and ``]`` of an array spec.

        Args:
            inner: ``spec, spec, ...`` or ``spec; count``.

        Returns:
            ArrayEncoding: Square-bracketed, comma-separated encoding.

        Examples:
            >>> str(ArrayEncoding.from_spec_list("int, hex; 4"))
            '[int, hex, int, hex]'
            >>> ArrayEncoding.from_spec_list("").values
            ()
        """
        parts = extract_array(inner, ";")
        if len(parts) == 2:
            count = int(parts[1]) if parts[1].isdigit() else 1
            values = [Encoding.from_spec(part) for part in extract_array(parts[0], ",")]
            return cls(tuple(islice(cycle(values), count)) if values else ())
        return cls(tuple(Encoding.from_spec(part) for part in extract_array(inner, ",")))

    def __str__(self) -> str:
        """Display such as ``[hex, int]``.

        Returns:
            str: Name.
        """
        opening, closing = self.brackets.pair()
        return opening + str(self.separator).join(str(value) for value in self.values) + closing

    def sort_key(self) -> Tuple:
        """Shared-order key built from the element encodings.

        Returns:
            Tuple: Key.
        """
        return array_key(value.sort_key() for value in self.values)

    def flatten(self) -> "ArrayEncoding":
        """Inline nested array element encodings.

        Returns:
            ArrayEncoding: Encoding with only non-array elements.

        Examples:
            >>> str(Encoding.from_spec("[int, [hex, [bin]]]").flatten())
            '[int, hex, bin]'
        """
        flat: List[Encoding] = []
        for value in self.values:
            if isinstance(value, ArrayEncoding):
                flat.extend(value.flatten().values)
            else:
                flat.append(value)
        return ArrayEncoding(tuple(flat), self.brackets, self.separator)

    def left_pad(self, length: int) -> "ArrayEncoding":
        """Repeat the first element encoding for zeros inserted at the front.

        Args:
            length: Target element count.

        Returns:
            ArrayEncoding: Padded encoding, unchanged if already long enough.

        Examples:
            >>> str(Encoding.from_spec("[hex, int]").left_pad(4))
            '[hex, hex, hex, int]'
        """
        if not self.values or length <= len(self.values):
            return self
        return ArrayEncoding(self.values[:1] * (length - len(self.values)) + self.values, self.brackets, self.separator)

    def right_pad(self, length: int) -> "ArrayEncoding":
        """Repeat the last element encoding for zeros appended at the back.

        Args:
            length: Target element count.

        Returns:
            ArrayEncoding: Padded encoding, unchanged if already long enough.

        Examples:
            >>> str(Encoding.from_spec("[hex, int]").right_pad(3))
            '[hex, int, int]'
        """
        if not self.values or length <= len(self.values):
            return self
        return ArrayEncoding(self.values + self.values[-1:] * (length - len(self.values)), self.brackets, self.separator)

    def reverse(self, depth: int = 1) -> "ArrayEncoding":
        """Reverse the element encodings the way ``DecodedArray.reverse`` reverses elements.

        Args:
            depth: Levels to reverse; 0 leaves the encoding unchanged.

        Returns:
            ArrayEncoding: Reordered encoding.

        Examples:
            >>> str(Encoding.from_spec("[hex, [int, bin]]").reverse(2))
            '[[bin, int], hex]'
        """
        if depth <= 0:
            return self
        return ArrayEncoding(tuple(value.reverse(depth - 1) for value in reversed(self.values)), self.brackets, self.separator)

    def rotate(self, amount: int) -> "ArrayEncoding":
        """Rotate the element encodings right by ``amount``.

        Args:
            amount: Positive rotates right, negative left.

        Returns:
            ArrayEncoding: Reordered encoding.

        Examples:
            >>> str(Encoding.from_spec("[hex, int, bin]").rotate(1))
            '[bin, hex, int]'
        """
        offset = rotation_offset(len(self.values), amount)
        if offset == 0:
            return self
        return ArrayEncoding(self.values[-offset:] + self.values[:-offset], self.brackets, self.separator)

    def encode(self, decoded: Decoded, pad: bool = False) -> str:
        """Render each element with the cycled element encodings.

        Args:
            decoded: Value to render; bytes render one element per byte.
            pad: Passed to the element encodings.

        Returns:
            str: Bracketed, separated text.

        Examples:
            >>> from transmute.encode.decoded import Decoded
            >>> from transmute.encode.types import Bracket
            >>> round_int = ArrayEncoding((BaseEncoding(10),), Brackets.of(Bracket.ROUND))
            >>> round_int.encode(Decoded.Bytes([1, 2, 3]))
            '(1, 2, 3)'
        """
        opening, closing = self.brackets.pair()
        if not self.values:
            return opening + closing
        rendered = [encoding.encode(item, pad) for item, encoding in zip(decoded.to_vec(), cycle(self.values))]
        return opening + str(self.separator).join(rendered) + closing


@dataclass(frozen=True)
class HashEncoding(Encoding):
    """Digest of the value, rendered as padded hex."""

    hasher: Hasher = field(default_factory=lambda: Hasher("keccak"))

    def __str__(self) -> str:
        """Display such as ``keccak-256``.

        Returns:
            str: Name.
        """
        return str(self.hasher)

    def sort_key(self) -> Tuple:
        """Shared-order key.

        Returns:
            Tuple: Key.
        """
        return hash_key(self.hasher.algorithm, self.hasher.bits)

    def encode(self, decoded: Decoded, pad: bool = False) -> str:
        """Hash the value and render the digest in hex.

        Args:
            decoded: Value to hash.
            pad: Ignored; digests always render padded.

        Returns:
            str: ``0x``-prefixed digest.

        Examples:
            >>> from transmute.encode.decoded import Decoded
            >>> HashEncoding(Hasher("sha2", 256)).encode(Decoded.from_be_bytes(b"abc"))[:18]
            '0xba7816bf8f01cfea'
        """
        return BaseEncoding(16).encode(self.hasher.hash(decoded), pad=True)


@dataclass(frozen=True)
class EmptyEncoding(Encoding):
    """Shape of a candidate that matched nothing."""

    def __str__(self) -> str:
        """Display name.

        Returns:
            str: ``Empty``.
        """
        return "Empty"

    def sort_key(self) -> Tuple:
        """Shared-order key; always last.

        Returns:
            Tuple: Key.
        """
        return EMPTY_KEY

    def encode(self, decoded: Decoded, pad: bool = False) -> str:
        """Empty encodings render nothing.

        Args:
            decoded: Ignored.
            pad: Ignored.

        Returns:
            str: Empty string.
        """
        return ""


Encoding.Base = BaseEncoding
Encoding.Text = TextEncoding
Encoding.Array = ArrayEncoding
Encoding.Hash = HashEncoding
Encoding.Empty = EmptyEncoding
