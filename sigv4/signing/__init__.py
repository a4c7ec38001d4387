# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Signature Version 4 signing pipeline.

Pure functions, leaf first:
- Header formatting (formatting)
- Canonical request (canonical)
- Content hashing (hashing)
- String to sign (signable)
- Key derivation and signature (keys)
- Authorization header (authorization)

Plus boundary helpers: precondition checks, timestamps and ``Signer``.
"""

from sigv4.signing.algorithm import SIGV4_HMAC_SHA256, SigningAlgorithm
from sigv4.signing.authorization import (
    build_authorization_header,
    compute_request_signature,
    format_authorization_header,
)
from sigv4.signing.canonical import (
    RequestDescriptor,
    build_canonical_request,
    canonical_headers_block,
    canonical_query_string,
    signed_headers_list,
)
from sigv4.signing.formatting import (
    HeaderValue,
    MultiValue,
    SingleValue,
    format_header_value,
    header_value,
    normalize_header_key,
    normalize_header_value,
)
from sigv4.signing.hashing import (
    EMPTY_PAYLOAD_SHA256,
    hash_canonical_request,
    hash_payload,
)
from sigv4.signing.keys import compute_signature, derive_signing_key
from sigv4.signing.signable import (
    CredentialScope,
    build_signable_string,
    credential_scope,
    extract_request_date,
)
from sigv4.signing.signer import (
    Credentials,
    SignedRequest,
    Signer,
    flatten_headers,
)
from sigv4.signing.timestamps import check_clock_skew, format_request_datetime
from sigv4.signing.validation import SigningError, check_preconditions


__all__ = [
    # algorithm
    "SIGV4_HMAC_SHA256",
    "SigningAlgorithm",
    # formatting
    "HeaderValue",
    "MultiValue",
    "SingleValue",
    "format_header_value",
    "header_value",
    "normalize_header_key",
    "normalize_header_value",
    # canonical
    "RequestDescriptor",
    "build_canonical_request",
    "canonical_headers_block",
    "canonical_query_string",
    "signed_headers_list",
    # hashing
    "EMPTY_PAYLOAD_SHA256",
    "hash_canonical_request",
    "hash_payload",
    # signable
    "CredentialScope",
    "build_signable_string",
    "credential_scope",
    "extract_request_date",
    # keys
    "compute_signature",
    "derive_signing_key",
    # authorization
    "build_authorization_header",
    "compute_request_signature",
    "format_authorization_header",
    # boundary
    "Credentials",
    "SignedRequest",
    "Signer",
    "SigningError",
    "check_clock_skew",
    "check_preconditions",
    "flatten_headers",
    "format_request_datetime",
]
