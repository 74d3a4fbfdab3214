# -*- coding: utf-8 -*-
"""Location: ./tests/unit/transmute/encode/test_hashing.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tests for hash name lookup and digests.
"""

# Standard
import hashlib

# Third-Party
import pytest

# First-Party
from transmute.encode.decoded import Decoded
from transmute.encode.hashing import Hasher
from transmute.errors import UnsupportedHashError


class TestLookup:
    """Hash names to hashers."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("sha256", Hasher("sha2", 256)),
            ("sha224", Hasher("sha2", 224)),
            ("sha384", Hasher("sha2", 384)),
            ("SHA2-512", Hasher("sha2", 512)),
            ("sha3_224", Hasher("sha3", 224)),
            ("sha3-512", Hasher("sha3", 512)),
            ("keccak", Hasher("keccak", 256)),
            ("keccak256", Hasher("keccak", 256)),
            ("Keccak-512", Hasher("keccak", 512)),
            ("blake2", Hasher("blake2", 256)),
            ("blake2-512", Hasher("blake2", 512)),
        ],
    )
    def test_parse(self, name, expected):
        """Spellings resolve to algorithm and width; width defaults to 256."""
        assert Hasher.parse(name) == expected

    @pytest.mark.parametrize("name", ["md5", "blake2-384", "keccak-100", "hex"])
    def test_unsupported(self, name):
        """Unknown algorithms and widths raise."""
        assert Hasher.lookup(name) is None
        with pytest.raises(UnsupportedHashError, match=name):
            Hasher.parse(name)

    def test_display(self):
        """Hashers display as algorithm-bits."""
        assert str(Hasher.parse("sha3_384")) == "sha3-384"


class TestDigest:
    """Known digests."""

    def test_sha256(self):
        """SHA-256 of abc."""
        digest = Hasher("sha2", 256).digest(Decoded.from_be_bytes(b"abc"))
        assert digest.hex() == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_sha3_256(self):
        """SHA3-256 of abc."""
        digest = Hasher("sha3", 256).digest(Decoded.from_be_bytes(b"abc"))
        assert digest.hex() == "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"

    def test_keccak256(self):
        """Keccak-256 uses the pre-standard padding, not SHA3's."""
        digest = Hasher("keccak", 256).digest(Decoded.from_be_bytes(b"test_key"))
        assert digest.hex() == "ad62e20f6955fd04f45eef123e61f3c74ce24e1ce4f6ab270b886cd860fd65ac"

    def test_blake2_widths(self):
        """256 bits is BLAKE2s, 512 bits is BLAKE2b."""
        value = Decoded.from_be_bytes(b"abc")
        assert Hasher("blake2", 256).digest(value) == hashlib.blake2s(b"abc").digest()
        assert Hasher("blake2", 512).digest(value) == hashlib.blake2b(b"abc").digest()

    def test_long_values_match_single_update(self):
        """Block-wise feeding does not change the digest."""
        data = bytes(range(100))
        assert Hasher("sha2", 512).digest(Decoded.from_be_bytes(data)) == hashlib.sha512(data).digest()

    def test_array_elements_feed_in_order(self):
        """Array elements are fed as their big-endian bytes."""
        value = Decoded.Array([Decoded.from_be_bytes(b"a"), Decoded.from_be_bytes(b"bc")])
        assert Hasher("sha2", 256).digest(value) == hashlib.sha256(b"abc").digest()

    def test_hash_returns_decoded(self):
        """The digest comes back as a big-endian decoded value."""
        digest = Hasher("sha2", 256).hash(Decoded.from_be_bytes(b"abc"))
        assert digest.to_be_bytes() == hashlib.sha256(b"abc").digest()

    def test_invalid_width_on_direct_construction(self):
        """Widths are checked again when hashing."""
        with pytest.raises(UnsupportedHashError):
            Hasher("blake2", 384).digest(Decoded.from_be_bytes(b"abc"))
