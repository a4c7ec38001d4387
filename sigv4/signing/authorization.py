# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Authorization header assembly.

``build_authorization_header`` re-derives every intermediate value on each
call: canonical request, string to sign, signing key and signature.
Nothing is cached between calls.
"""

from sigv4.signing.algorithm import SIGV4_HMAC_SHA256, SigningAlgorithm
from sigv4.signing.canonical import (
    RequestDescriptor,
    build_canonical_request,
    signed_headers_list,
)
from sigv4.signing.keys import compute_signature, derive_signing_key
from sigv4.signing.signable import (
    CredentialScope,
    build_signable_string,
    credential_scope,
    extract_request_date,
)


def compute_request_signature(
    request: RequestDescriptor,
    *,
    request_datetime: str,
    region: str,
    service: str,
    secret_key: str,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> str:
    """Compute the hex signature for a request.

    Args:
        request: Request attributes.
        request_datetime: ISO 8601 basic timestamp, ``YYYYMMDDTHHMMSSZ``.
        region: Region name.
        service: Service name.
        secret_key: Secret access key.
        algorithm: Signing algorithm constants.

    Returns:
        Lowercase hex signature.
    """
    canonical_request = build_canonical_request(request, algorithm=algorithm)
    signing_key = derive_signing_key(
        secret_key,
        extract_request_date(request_datetime),
        region,
        service,
        algorithm=algorithm,
    )
    signable = build_signable_string(
        canonical_request,
        request_datetime,
        region,
        service,
        algorithm=algorithm,
    )
    return compute_signature(signing_key, signable, algorithm=algorithm)


def build_authorization_header(
    request: RequestDescriptor,
    *,
    request_datetime: str,
    region: str,
    service: str,
    access_key_id: str,
    secret_key: str,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> str:
    """Build the ``Authorization`` header value for a request.

    Format::

        AWS4-HMAC-SHA256 Credential=<id>/<date>/<region>/<service>/aws4_request,
        SignedHeaders=<h1;h2;...>, Signature=<hex>

    (on a single line).  ``request.headers`` must contain ``host`` and the
    same ``x-amz-date`` the transport will send; neither is checked here.

    Returns:
        Authorization header value.
    """
    scope = credential_scope(
        request_datetime, region, service, algorithm=algorithm
    )
    signature = compute_request_signature(
        request,
        request_datetime=request_datetime,
        region=region,
        service=service,
        secret_key=secret_key,
        algorithm=algorithm,
    )
    return format_authorization_header(
        access_key_id,
        scope,
        signed_headers_list(request.headers),
        signature,
        algorithm=algorithm,
    )


def format_authorization_header(
    access_key_id: str,
    scope: CredentialScope,
    signed_headers: str,
    signature: str,
    *,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> str:
    """Join already computed parts into an ``Authorization`` value."""
    return (
        f"{algorithm.tag} "
        f"Credential={access_key_id}/{scope}, "
        f"SignedHeaders={signed_headers}, "
        f"Signature={signature}"
    )
