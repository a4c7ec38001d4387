# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Tests for content hashing."""

import hashlib

from sigv4.signing.algorithm import SigningAlgorithm
from sigv4.signing.hashing import (
    EMPTY_PAYLOAD_SHA256,
    hash_canonical_request,
    hash_payload,
)
from tests.signing.vectors import (
    CANONICAL_REQUEST,
    CANONICAL_REQUEST_HASH,
    EMPTY_SHA256,
)


class TestHashPayload:
    """Tests for hash_payload."""

    def test_empty_payload_constant(self) -> None:
        """Empty payload hashes to the well-known SHA-256 constant."""
        assert hash_payload(b"") == EMPTY_SHA256
        assert EMPTY_PAYLOAD_SHA256 == EMPTY_SHA256

    def test_matches_hashlib(self) -> None:
        """Payload digest equals hashlib's SHA-256 hex digest."""
        assert hash_payload(b"hello") == hashlib.sha256(b"hello").hexdigest()

    def test_lowercase_hex(self) -> None:
        """Digest is 64 lowercase hex characters."""
        digest = hash_payload(b"\x00\xff")
        assert len(digest) == 64
        assert digest == digest.lower()

    def test_alternate_algorithm(self) -> None:
        """A substituted digest name changes the hash width."""
        sha512 = SigningAlgorithm(tag="TEST-SHA512", hash_name="sha512")
        assert len(hash_payload(b"", algorithm=sha512)) == 128


class TestHashCanonicalRequest:
    """Tests for hash_canonical_request."""

    def test_reference_vector(self) -> None:
        """Reference canonical request hashes to the documented value."""
        assert hash_canonical_request(CANONICAL_REQUEST) == (
            CANONICAL_REQUEST_HASH
        )

    def test_utf8_encoding(self) -> None:
        """Non-ASCII text is hashed as UTF-8."""
        assert hash_canonical_request("ü") == (
            hashlib.sha256("ü".encode()).hexdigest()
        )
