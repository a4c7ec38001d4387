# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Signing algorithm constants.

The algorithm tag, digest and scope literals are grouped in a frozen
dataclass instead of module globals, so tests can substitute another
digest width without touching the pipeline functions.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SigningAlgorithm:
    """Constants that parameterize the SigV4 pipeline.

    Attributes:
        tag: Algorithm identifier written into the string to sign and the
            Authorization header.
        hash_name: ``hashlib`` digest name used for content hashes and HMAC.
        key_prefix: Prefix prepended to the secret key for the first HMAC
            stage of key derivation.
        scope_terminator: Final element of the credential scope.
    """

    tag: str
    hash_name: str
    key_prefix: str = "AWS4"
    scope_terminator: str = "aws4_request"


SIGV4_HMAC_SHA256 = SigningAlgorithm(
    tag="AWS4-HMAC-SHA256",
    hash_name="sha256",
)
