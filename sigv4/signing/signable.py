# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Credential scope and string-to-sign construction."""

from dataclasses import dataclass

from sigv4.signing.algorithm import SIGV4_HMAC_SHA256, SigningAlgorithm
from sigv4.signing.hashing import hash_canonical_request


@dataclass(frozen=True)
class CredentialScope:
    """Binds a signature to a date, region and service.

    Attributes:
        date: Request date, ``YYYYMMDD``.
        region: Region name, e.g. ``us-east-1``.
        service: Service name, e.g. ``iam`` or ``logs``.
        terminator: Scope terminator literal.
    """

    date: str
    region: str
    service: str
    terminator: str = SIGV4_HMAC_SHA256.scope_terminator

    def __str__(self) -> str:
        return f"{self.date}/{self.region}/{self.service}/{self.terminator}"


def extract_request_date(request_datetime: str) -> str:
    """Return the ``YYYYMMDD`` prefix of an ISO 8601 basic timestamp.

    The input is expected as ``YYYYMMDDTHHMMSSZ`` and is not validated; a
    malformed value yields a malformed date.
    """
    return request_datetime[:8]


def credential_scope(
    request_datetime: str,
    region: str,
    service: str,
    *,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> CredentialScope:
    """Build the credential scope for a request timestamp."""
    return CredentialScope(
        date=extract_request_date(request_datetime),
        region=region,
        service=service,
        terminator=algorithm.scope_terminator,
    )


def build_signable_string(
    canonical_request: str,
    request_datetime: str,
    region: str,
    service: str,
    *,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> str:
    """Build the string to sign.

    Args:
        canonical_request: Output of ``build_canonical_request``.
        request_datetime: ISO 8601 basic timestamp (``x-amz-date``).
        region: Region name.
        service: Service name.
        algorithm: Supplies the algorithm tag and digest.

    Returns:
        Algorithm tag, timestamp, credential scope and canonical request
        hash, joined with newlines.
    """
    scope = credential_scope(
        request_datetime, region, service, algorithm=algorithm
    )
    return "\n".join(
        [
            algorithm.tag,
            request_datetime,
            str(scope),
            hash_canonical_request(canonical_request, algorithm=algorithm),
        ]
    )
