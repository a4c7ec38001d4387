# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Header key and value normalization.

A header value is either a single string or an ordered sequence of
strings (a header that appears several times).  Both shapes are modelled
as an explicit variant so normalization never has to guess at types.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class SingleValue:
    """A header with exactly one value."""

    value: str


@dataclass(frozen=True)
class MultiValue:
    """A header carrying several values, in send order."""

    values: tuple[str, ...]


HeaderValue: TypeAlias = SingleValue | MultiValue


def header_value(raw: str | Sequence[str] | HeaderValue) -> HeaderValue:
    """Wrap a plain header value in the matching variant.

    Args:
        raw: A string, a sequence of strings, or an already wrapped value.

    Returns:
        ``SingleValue`` for strings, ``MultiValue`` for sequences.
    """
    if isinstance(raw, SingleValue | MultiValue):
        return raw
    if isinstance(raw, str):
        return SingleValue(raw)
    return MultiValue(tuple(raw))


def normalize_header_key(key: str) -> str:
    """Lowercase a header name."""
    return key.lower()


def normalize_header_value(value: str) -> str:
    """Trim a header value and collapse inner whitespace runs to one space.

    Args:
        value: Raw header value.

    Returns:
        Normalized value.
    """
    return " ".join(value.split())


def format_header_value(value: HeaderValue) -> str:
    """Render a header value for the canonical headers block.

    Multi-valued headers are normalized element-wise and joined with ``,``.
    """
    match value:
        case SingleValue(value=single):
            return normalize_header_value(single)
        case MultiValue(values=values):
            return ",".join(normalize_header_value(v) for v in values)
        case _:
            raise TypeError(
                f"Expected SingleValue or MultiValue, got "
                f"{type(value).__name__}"
            )
