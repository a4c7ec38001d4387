# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Signing key derivation and signature computation."""

import hmac

from sigv4.signing.algorithm import SIGV4_HMAC_SHA256, SigningAlgorithm


def keyed_hash(
    key: bytes,
    msg: str | bytes,
    *,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> bytes:
    """Raw HMAC digest of ``msg`` under ``key``."""
    if isinstance(msg, str):
        msg = msg.encode("utf-8")
    return hmac.new(key, msg, algorithm.hash_name).digest()


def derive_signing_key(
    secret_key: str,
    date: str,
    region: str,
    service: str,
    *,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> bytes:
    """Derive the request-scoped signing key.

    Each stage is keyed by the raw output of the previous one.

    Args:
        secret_key: Secret access key.
        date: Request date (``YYYYMMDD``).
        region: Region name.
        service: Service name.
        algorithm: Supplies the digest, key prefix and scope terminator.

    Returns:
        Raw signing key bytes.  Hex-encode explicitly if a printable form
        is needed.
    """
    k_date = keyed_hash(
        (algorithm.key_prefix + secret_key).encode("utf-8"),
        date,
        algorithm=algorithm,
    )
    k_region = keyed_hash(k_date, region, algorithm=algorithm)
    k_service = keyed_hash(k_region, service, algorithm=algorithm)
    return keyed_hash(
        k_service, algorithm.scope_terminator, algorithm=algorithm
    )


def compute_signature(
    signing_key: bytes,
    signable_string: str,
    *,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> str:
    """Sign the string to sign with the derived key.

    Returns:
        Lowercase hex signature (64 characters for SHA-256).
    """
    return keyed_hash(signing_key, signable_string, algorithm=algorithm).hex()
