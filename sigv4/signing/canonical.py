# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Canonical request construction.

The canonical request is six newline-joined fields::

    METHOD
    /uri
    canonical query string
    canonical headers block (trailing newline included)
    signed header list
    payload hash

Path and query components are used verbatim.  Callers must pass values
that are already normalized and percent-encoded.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from sigv4.signing.algorithm import SIGV4_HMAC_SHA256, SigningAlgorithm
from sigv4.signing.formatting import (
    HeaderValue,
    format_header_value,
    header_value,
    normalize_header_key,
)
from sigv4.signing.hashing import hash_payload


@dataclass(frozen=True)
class RequestDescriptor:
    """Attributes of a request that take part in signing.

    Attributes:
        method: Uppercase HTTP method (e.g. ``GET``, ``POST``).
        uri: Normalized, percent-encoded absolute path.
        query: Percent-encoded query parameters, in any order.
        headers: Headers to sign.  Must include ``host``.  Plain strings
            and sequences of strings are wrapped into ``HeaderValue``.
        payload: Request body bytes.
    """

    method: str
    uri: str
    query: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, HeaderValue] = field(default_factory=dict)
    payload: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "headers",
            {k: header_value(v) for k, v in self.headers.items()},
        )

    @classmethod
    def from_raw(
        cls,
        *,
        method: str,
        uri: str,
        query: Mapping[str, str] | None = None,
        headers: Mapping[str, str | Sequence[str]] | None = None,
        payload: str | bytes = b"",
    ) -> "RequestDescriptor":
        """Build a descriptor from plain Python values.

        String payloads are encoded as UTF-8.
        """
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        return cls(
            method=method,
            uri=uri,
            query=dict(query or {}),
            headers=dict(headers or {}),  # type: ignore[arg-type]
            payload=payload,
        )


def canonical_query_string(query: Mapping[str, str]) -> str:
    """Join query parameters sorted by exact code-point order of the key.

    Unlike header names, keys are not case-folded: ``B`` sorts before ``a``.
    """
    return "&".join(f"{key}={query[key]}" for key in sorted(query))


def canonical_headers_block(headers: Mapping[str, HeaderValue]) -> str:
    """Build the canonical headers block.

    Header names are sorted case-insensitively and lowercased; every entry
    ends with a newline, including the last one.  The block is never
    empty: no headers at all still yields a single newline.
    """
    lines: list[str] = []
    for key in sorted(headers, key=normalize_header_key):
        value = format_header_value(headers[key])
        lines.append(f"{normalize_header_key(key)}:{value}\n")
    return "".join(lines) or "\n"


def signed_headers_list(headers: Mapping[str, object]) -> str:
    """Lowercased header names, sorted, joined with ``;``."""
    return ";".join(sorted(normalize_header_key(k) for k in headers))


def build_canonical_request(
    request: RequestDescriptor,
    *,
    algorithm: SigningAlgorithm = SIGV4_HMAC_SHA256,
) -> str:
    """Build the canonical request string for a request.

    Args:
        request: Request attributes.
        algorithm: Supplies the payload digest.

    Returns:
        Canonical request string.
    """
    return "\n".join(
        [
            request.method,
            request.uri,
            canonical_query_string(request.query),
            canonical_headers_block(request.headers),
            signed_headers_list(request.headers),
            hash_payload(request.payload, algorithm=algorithm),
        ]
    )
