# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Tests for sigv4/logging.py."""

import logging

import pytest

from sigv4.logging import CredentialFilter, get_logger, mask_access_key_id


SECRET = "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY"
SIGNATURE = "5d672d79c15b13162d9279b0855cfba6789a8edb4c82c400e06b5924a6f2b5d7"


def _record(msg: str, args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestMaskAccessKeyId:
    """Tests for mask_access_key_id."""

    def test_keeps_last_four(self) -> None:
        """Only the last four characters survive."""
        assert mask_access_key_id("AKIDEXAMPLE") == "****MPLE"


class TestCredentialFilter:
    """Tests for CredentialFilter."""

    def test_filter_returns_true(self) -> None:
        """Records are rewritten, never dropped."""
        assert CredentialFilter().filter(_record("message")) is True

    def test_nothing_registered(self) -> None:
        """Without credentials, plain messages pass through unchanged."""
        record = _record("key AKIDEXAMPLE")
        CredentialFilter().filter(record)
        assert record.msg == "key AKIDEXAMPLE"

    def test_secret_redacted(self) -> None:
        """Secret access keys are fully redacted."""
        CredentialFilter.register_credentials("AKIDEXAMPLE", SECRET)
        record = _record(f"secret {SECRET} used")
        CredentialFilter().filter(record)
        assert record.msg == "secret [REDACTED] used"

    def test_access_key_masked(self) -> None:
        """Access key IDs keep their last four characters."""
        CredentialFilter.register_credentials("AKIDEXAMPLE", SECRET)
        record = _record("key %s", ("AKIDEXAMPLE",))
        CredentialFilter().filter(record)
        assert record.getMessage() == "key ****MPLE"

    def test_non_string_args_kept(self) -> None:
        """Non-string arguments pass through."""
        CredentialFilter.register_credentials("AKIDEXAMPLE", SECRET)
        record = _record("%s %d", (SECRET, 5))
        CredentialFilter().filter(record)
        assert record.args == ("[REDACTED]", 5)

    def test_signature_redacted(self) -> None:
        """Signature values are redacted even when nothing is registered."""
        record = _record(f"SignedHeaders=host, Signature={SIGNATURE}")
        CredentialFilter().filter(record)
        assert record.msg == "SignedHeaders=host, Signature=[REDACTED]"

    def test_regex_characters_escaped(self) -> None:
        """Credentials with regex metacharacters match literally."""
        CredentialFilter.register_credentials("", "wJal+bP/x.KEY")
        record = _record("wJal+bP/x.KEY and wJalbbP/xxKEY")
        CredentialFilter().filter(record)
        assert record.msg == "[REDACTED] and wJalbbP/xxKEY"

    def test_longest_first(self) -> None:
        """A secret containing the access key ID is redacted whole."""
        CredentialFilter.register_credentials("AKID", "AKIDsecret")
        record = _record("AKIDsecret")
        CredentialFilter().filter(record)
        assert record.msg == "[REDACTED]"

    def test_empty_values_ignored(self) -> None:
        """Empty credentials are not registered."""
        CredentialFilter.register_credentials("", "")
        assert CredentialFilter._replacements == {}
        assert CredentialFilter._pattern is None

    def test_clear_credentials(self) -> None:
        """Cleared credentials are no longer redacted."""
        CredentialFilter.register_credentials("AKIDGONE", "gone")
        CredentialFilter.clear_credentials()
        record = _record("AKIDGONE gone")
        CredentialFilter().filter(record)
        assert record.msg == "AKIDGONE gone"


class TestGetLogger:
    """Tests for get_logger."""

    def test_filter_attached_once(self) -> None:
        """Repeated calls do not stack filters."""
        logger = get_logger("sigv4.tests.once")
        get_logger("sigv4.tests.once")
        filters = [
            f for f in logger.filters if isinstance(f, CredentialFilter)
        ]
        assert len(filters) == 1

    def test_redacts_without_handler_setup(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Records are scrubbed before reaching any handler."""
        CredentialFilter.register_credentials("AKIDEXAMPLE", SECRET)
        logger = get_logger("sigv4.tests.redact")
        with caplog.at_level(logging.INFO, logger="sigv4.tests.redact"):
            logger.info("using %s with %s", "AKIDEXAMPLE", SECRET)
        assert "using ****MPLE with [REDACTED]" in caplog.text
        assert SECRET not in caplog.text
