# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Credential-bound signer for transport code.

``Signer`` validates preconditions at the boundary, signs, and hands back
the exact header set the transport must send.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from sigv4.logging import CredentialFilter, get_logger
from sigv4.signing.algorithm import SIGV4_HMAC_SHA256, SigningAlgorithm
from sigv4.signing.authorization import format_authorization_header
from sigv4.signing.canonical import (
    RequestDescriptor,
    build_canonical_request,
    signed_headers_list,
)
from sigv4.signing.formatting import HeaderValue, MultiValue, SingleValue
from sigv4.signing.keys import compute_signature, derive_signing_key
from sigv4.signing.signable import (
    CredentialScope,
    build_signable_string,
    credential_scope,
)
from sigv4.signing.timestamps import check_clock_skew
from sigv4.signing.validation import check_preconditions


logger = get_logger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Long-term access key pair.

    Both values are registered for log redaction on construction.
    """

    access_key_id: str
    secret_access_key: str

    def __post_init__(self) -> None:
        CredentialFilter.register_credentials(
            self.access_key_id, self.secret_access_key
        )

    def __repr__(self) -> str:
        return "Credentials(access_key_id=..., secret_access_key=...)"


@dataclass(frozen=True)
class SignedRequest:
    """Result of signing a request.

    Attributes:
        headers: The signed headers plus ``Authorization``.
        authorization: Authorization header value.
        signed_headers: Semicolon-separated signed header names.
        canonical_request: Canonical request that was signed.
        scope: Credential scope the signature is bound to.
        signature: Lowercase hex signature.
    """

    headers: dict[str, HeaderValue]
    authorization: str
    signed_headers: str
    canonical_request: str
    scope: CredentialScope
    signature: str


class Signer:
    """Signs requests for one region and service."""

    def __init__(
        self,
        credentials: Credentials,
        region: str,
        service: str,
        *,
        algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
    ) -> None:
        self.credentials = credentials
        self.region = region
        self.service = service
        self.algorithm = algorithm

    def sign(
        self, request: RequestDescriptor, request_datetime: str
    ) -> SignedRequest:
        """Sign a request.

        Each pipeline stage runs once and its output is kept on the
        result.

        Args:
            request: Request attributes.  Headers must include ``host``
                and should include ``x-amz-date`` equal to
                ``request_datetime``.
            request_datetime: ISO 8601 basic timestamp.

        Returns:
            SignedRequest carrying the headers to send.

        Raises:
            SigningError: If the request violates signing preconditions.
        """
        check_preconditions(request, request_datetime)

        is_skewed, drift = check_clock_skew(request_datetime)
        if is_skewed:
            logger.warning(
                "Request time %s is %d minutes off local clock; "
                "the service may reject the signature",
                request_datetime,
                drift,
            )

        alg = self.algorithm
        canonical_request = build_canonical_request(request, algorithm=alg)
        scope = credential_scope(
            request_datetime, self.region, self.service, algorithm=alg
        )
        signable = build_signable_string(
            canonical_request,
            request_datetime,
            self.region,
            self.service,
            algorithm=alg,
        )
        signing_key = derive_signing_key(
            self.credentials.secret_access_key,
            scope.date,
            self.region,
            self.service,
            algorithm=alg,
        )
        signature = compute_signature(signing_key, signable, algorithm=alg)
        signed_headers = signed_headers_list(request.headers)
        authorization = format_authorization_header(
            self.credentials.access_key_id,
            scope,
            signed_headers,
            signature,
            algorithm=alg,
        )
        # Last line of the string to sign is the canonical request hash.
        logger.debug(
            "Signed %s %s for %s: canonical_request_hash=%s "
            "signed_headers=%s",
            request.method,
            request.uri,
            scope,
            signable.rsplit("\n", 1)[-1],
            signed_headers,
        )

        headers: dict[str, HeaderValue] = dict(request.headers)
        headers["Authorization"] = SingleValue(authorization)
        return SignedRequest(
            headers=headers,
            authorization=authorization,
            signed_headers=signed_headers,
            canonical_request=canonical_request,
            scope=scope,
            signature=signature,
        )


def flatten_headers(headers: Mapping[str, HeaderValue]) -> dict[str, str]:
    """Render headers for transports that take one string per name.

    Multi-valued headers are joined with ``,``.
    """
    flat: dict[str, str] = {}
    for key, value in headers.items():
        match value:
            case SingleValue(value=single):
                flat[key] = single
            case MultiValue(values=values):
                flat[key] = ",".join(values)
    return flat
