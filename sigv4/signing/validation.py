# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Boundary checks for signing preconditions.

The pipeline functions trust their inputs: a missing ``host`` header or a
malformed timestamp silently produces a signature the service rejects.
Callers that accept untrusted input run ``check_preconditions`` first.
"""

import re

from sigv4.signing.canonical import RequestDescriptor
from sigv4.signing.formatting import normalize_header_key


_REQUEST_DATETIME_RE = re.compile(r"\d{8}T\d{6}Z")


class SigningError(ValueError):
    """Raised when a request cannot be signed as given."""


def check_request_datetime(request_datetime: str) -> None:
    """Require an ISO 8601 basic timestamp (``YYYYMMDDTHHMMSSZ``).

    Raises:
        SigningError: If the timestamp is malformed.
    """
    if not _REQUEST_DATETIME_RE.fullmatch(request_datetime):
        raise SigningError(
            f"Request datetime must be YYYYMMDDTHHMMSSZ, "
            f"got {request_datetime!r}"
        )


def check_preconditions(
    request: RequestDescriptor, request_datetime: str
) -> None:
    """Validate what the signing pipeline assumes about its inputs.

    Args:
        request: Request attributes to be signed.
        request_datetime: Timestamp to sign with.

    Raises:
        SigningError: If ``host`` is missing, the method or URI is empty,
            or the timestamp is malformed.
    """
    if not any(normalize_header_key(k) == "host" for k in request.headers):
        raise SigningError("Request headers must include 'host'")
    if not request.method:
        raise SigningError("Request method cannot be empty")
    if not request.uri.startswith("/"):
        raise SigningError(
            f"Request URI must be an absolute path, got {request.uri!r}"
        )
    check_request_datetime(request_datetime)
