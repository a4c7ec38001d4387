# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Signature Version 4 request signing.

- ``sigv4.signing``: the signing pipeline
- ``sigv4.logs``: CloudWatch Logs client built on it
- ``sigv4.config``: YAML client configuration
"""

from sigv4.signing import (
    RequestDescriptor,
    build_authorization_header,
    build_canonical_request,
    build_signable_string,
    compute_request_signature,
    compute_signature,
    derive_signing_key,
    hash_canonical_request,
)


__all__ = [
    "RequestDescriptor",
    "build_authorization_header",
    "build_canonical_request",
    "build_signable_string",
    "compute_request_signature",
    "compute_signature",
    "derive_signing_key",
    "hash_canonical_request",
]
