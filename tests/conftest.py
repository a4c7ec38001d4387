# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest

from sigv4.dotenv_loader import reset_dotenv_state
from sigv4.logging import CredentialFilter


@pytest.fixture(autouse=True)
def _clean_global_state() -> Iterator[None]:
    """Reset the credential registry and dotenv state around every test."""
    CredentialFilter.clear_credentials()
    reset_dotenv_state()
    yield
    CredentialFilter.clear_credentials()
    reset_dotenv_state()
