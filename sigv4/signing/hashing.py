# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Unkeyed content hashing for payloads and canonical requests."""

import hashlib

from sigv4.signing.algorithm import SIGV4_HMAC_SHA256, SigningAlgorithm


EMPTY_PAYLOAD_SHA256 = hashlib.sha256(b"").hexdigest()


def hash_payload(
    payload: bytes, *, algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256
) -> str:
    """Hex digest of a request payload.

    Args:
        payload: Raw body bytes (may be empty).
        algorithm: Supplies the digest name.

    Returns:
        Lowercase hex digest.
    """
    return hashlib.new(algorithm.hash_name, payload).hexdigest()


def hash_canonical_request(
    canonical_request: str, *, algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256
) -> str:
    """Hex digest of a canonical request string (UTF-8 encoded)."""
    return hash_payload(canonical_request.encode("utf-8"), algorithm=algorithm)
