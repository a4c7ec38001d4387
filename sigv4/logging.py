# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Credential redaction for the package's own log records.

Every ``sigv4`` module gets its logger from ``get_logger``, which attaches
``CredentialFilter`` to that logger.  Records are scrubbed before they
reach any handler, so redaction does not depend on how the host
application configures logging.

What gets rewritten:

- secret access keys: replaced with ``[REDACTED]``
- access key IDs: masked to their last four characters (``****MPLE``)
- ``Signature=<hex>`` fragments: the hex is replaced with ``[REDACTED]``

Usage:
    from sigv4.logging import get_logger
    logger = get_logger(__name__)
    logger.debug("Signed %s %s", method, uri)
"""

import logging
import re
from typing import ClassVar


_REDACTED = "[REDACTED]"

_SIGNATURE_RE = re.compile(r"(Signature=)[0-9a-f]{16,}")


def mask_access_key_id(access_key_id: str) -> str:
    """Mask an access key ID down to its last four characters."""
    return "****" + access_key_id[-4:]


class CredentialFilter(logging.Filter):
    """Rewrites registered credentials and request signatures in records.

    Credentials are registered process-wide through
    ``register_credentials``; ``Credentials`` does so on construction.
    """

    _replacements: ClassVar[dict[str, str]] = {}
    _pattern: ClassVar[re.Pattern[str] | None] = None

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self.redact(str(record.msg))
        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                self.redact(a) if isinstance(a, str) else a
                for a in record.args
            )
        return True

    @classmethod
    def redact(cls, text: str) -> str:
        """Apply every rewrite to ``text``."""
        if cls._pattern is not None:
            text = cls._pattern.sub(
                lambda m: cls._replacements[m.group(0)], text
            )
        return _SIGNATURE_RE.sub(rf"\g<1>{_REDACTED}", text)

    @classmethod
    def register_credentials(
        cls, access_key_id: str, secret_access_key: str
    ) -> None:
        """Register a key pair.  Empty values are ignored."""
        if access_key_id:
            cls._replacements[access_key_id] = mask_access_key_id(
                access_key_id
            )
        if secret_access_key:
            cls._replacements[secret_access_key] = _REDACTED
        # Longest first so a credential containing another is fully replaced.
        ordered = sorted(cls._replacements, key=len, reverse=True)
        cls._pattern = (
            re.compile("|".join(re.escape(c) for c in ordered))
            if ordered
            else None
        )

    @classmethod
    def clear_credentials(cls) -> None:
        """Forget all registered credentials. For testing."""
        cls._replacements.clear()
        cls._pattern = None


_FILTER = CredentialFilter()


def get_logger(name: str) -> logging.Logger:
    """Return the named logger with ``CredentialFilter`` attached once."""
    logger = logging.getLogger(name)
    if _FILTER not in logger.filters:
        logger.addFilter(_FILTER)
    return logger
