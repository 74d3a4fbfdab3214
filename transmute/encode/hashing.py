# -*- coding: utf-8 -*-
"""Location: ./transmute/encode/hashing.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Hash Lookup.
Resolves names such as ``sha2-256``, ``sha256``, ``sha3-512``, ``keccak256``
or ``blake2-512`` to a digest and hashes decoded values. SHA-2, SHA-3 and
BLAKE2 come from ``hashlib``; the pre-standard Keccak padding used
by Ethereum comes from pycryptodome.

Examples:
    >>> from transmute.encode.hashing import Hasher
    >>> str(Hasher.parse("sha256")), str(Hasher.parse("Keccak-512")), str(Hasher.parse("blake2"))
    ('sha2-256', 'keccak-512', 'blake2-256')
    >>> Hasher.parse("sha384").bits
    384
"""

# Standard
from dataclasses import dataclass
import hashlib
import logging
import re
from typing import Dict, FrozenSet, Optional, Tuple

# Third-Party
from Crypto.Hash import keccak

# First-Party
from transmute.encode.decoded import Decoded, DecodedArray
from transmute.errors import UnsupportedHashError

logger = logging.getLogger(__name__)

DEFAULT_BITS = 256
BLOCK_SIZE = 32

ALGORITHM_BITS: Dict[str, FrozenSet[int]] = {
    "sha2": frozenset({224, 256, 384, 512}),
    "sha3": frozenset({224, 256, 384, 512}),
    "keccak": frozenset({224, 256, 384, 512}),
    "blake2": frozenset({256, 512}),
}

# Prefix spellings tried in order; a bare "sha" means SHA-2
_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("blake2", "blake2"),
    ("keccak", "keccak"),
    ("sha3", "sha3"),
    ("sha2", "sha2"),
    ("sha", "sha2"),
)

_BITS_RE = re.compile(r"[-_]?(\d*)")


@dataclass(frozen=True)
class Hasher:
    """A digest algorithm and output width."""

    algorithm: str
    bits: int = DEFAULT_BITS

    @classmethod
    def lookup(cls, name: str) -> Optional["Hasher"]:
        """Resolve a hash name without raising.

        Args:
            name: Algorithm name with optional width, case-insensitive.

        Returns:
            Optional[Hasher]: The hasher, or None if the name is not a supported hash.

        Examples:
            >>> Hasher.lookup("keccak")
            Hasher(algorithm='keccak', bits=256)
            >>> Hasher.lookup("hex") is None
            True
        """
        normalized = name.strip().lower()
        for prefix, algorithm in _PREFIXES:
            if not normalized.startswith(prefix):
                continue
            match = _BITS_RE.fullmatch(normalized[len(prefix) :])
            if match is None:
                continue
            bits = int(match.group(1)) if match.group(1) else DEFAULT_BITS
            if bits in ALGORITHM_BITS[algorithm]:
                return cls(algorithm, bits)
        return None

    @classmethod
    def parse(cls, name: str) -> "Hasher":
        """Resolve a hash name.

        Args:
            name: Algorithm name with optional width, case-insensitive.

        Returns:
            Hasher: The resolved hasher; width defaults to 256.

        Raises:
            UnsupportedHashError: For unknown algorithms or widths.

        Examples:
            >>> Hasher.parse("sha3_224")
            Hasher(algorithm='sha3', bits=224)
            >>> Hasher.parse("md5")
            Traceback (most recent call last):
            ...
            transmute.errors.UnsupportedHashError: Unsupported hash: md5
            >>> Hasher.parse("blake2-384")
            Traceback (most recent call last):
            ...
            transmute.errors.UnsupportedHashError: Unsupported hash: blake2-384
        """
        hasher = cls.lookup(name)
        if hasher is None:
            raise UnsupportedHashError(name)
        return hasher

    def __str__(self) -> str:
        """Display name.

        Returns:
            str: ``<algorithm>-<bits>``.
        """
        return f"{self.algorithm}-{self.bits}"

    def _new(self):
        """Fresh digest object for this algorithm and width.

        Returns:
            A hashlib-compatible object with ``update`` and ``digest``.

        Raises:
            UnsupportedHashError: If the width is not valid for the algorithm.
        """
        if self.bits not in ALGORITHM_BITS.get(self.algorithm, frozenset()):
            raise UnsupportedHashError(str(self))
        if self.algorithm == "sha2":
            return hashlib.new(f"sha{self.bits}")
        if self.algorithm == "sha3":
            return hashlib.new(f"sha3_{self.bits}")
        if self.algorithm == "keccak":
            return keccak.new(digest_bits=self.bits)
        if self.bits == 512:
            return hashlib.blake2b(digest_size=64)
        return hashlib.blake2s(digest_size=32)

    def digest(self, decoded: Decoded) -> bytes:
        """Digest of a decoded value.

        Byte values are fed in 32-byte blocks of their big-endian form; arrays
        feed each element's big-endian bytes as one block.

        Args:
            decoded: Value to hash.

        Returns:
            bytes: Digest, big-endian.

        Examples:
            >>> Hasher("sha2", 256).digest(Decoded.from_be_bytes(b"abc")).hex()[:16]
            'ba7816bf8f01cfea'
        """
        state = self._new()
        if isinstance(decoded, DecodedArray):
            for item in decoded.items:
                state.update(item.to_be_bytes())
        else:
            data = decoded.to_be_bytes()
            for offset in range(0, len(data), BLOCK_SIZE):
                state.update(data[offset : offset + BLOCK_SIZE])
        logger.debug(f"Hashed {len(decoded)} unit(s) with {self}")
        return state.digest()

    def hash(self, decoded: Decoded) -> Decoded:
        """Digest of a decoded value as a decoded value.

        Args:
            decoded: Value to hash.

        Returns:
            Decoded: Digest bytes in canonical order.
        """
        return Decoded.from_be_bytes(self.digest(decoded))
