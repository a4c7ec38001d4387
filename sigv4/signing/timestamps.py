# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Request timestamp helpers."""

from datetime import UTC, datetime


_REQUEST_DATETIME_FORMAT = "%Y%m%dT%H%M%SZ"


def format_request_datetime(dt: datetime | None = None) -> str:
    """Format a datetime as ISO 8601 basic (``20150830T123600Z``).

    Args:
        dt: Time to format.  Naive datetimes are taken as UTC; aware ones
            are converted to UTC.  Defaults to now.

    Returns:
        Timestamp suitable for ``x-amz-date``.
    """
    if dt is None:
        dt = datetime.now(UTC)
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    else:
        dt = dt.astimezone(UTC)
    return dt.strftime(_REQUEST_DATETIME_FORMAT)


def check_clock_skew(
    request_datetime: str,
    *,
    now: datetime | None = None,
    max_minutes: int = 5,
) -> tuple[bool, int]:
    """Check if a request timestamp differs significantly from system time.

    Args:
        request_datetime: ISO 8601 basic timestamp.
        now: Reference time (defaults to current UTC time).
        max_minutes: Drift tolerated before reporting skew.

    Returns:
        Tuple of (is_skewed, drift_minutes).  Unparsable timestamps
        report ``(False, 0)``.
    """
    try:
        request_time = datetime.strptime(
            request_datetime, _REQUEST_DATETIME_FORMAT
        ).replace(tzinfo=UTC)
    except (ValueError, TypeError):
        return False, 0
    if now is None:
        now = datetime.now(UTC)
    drift = abs((now - request_time).total_seconds())
    drift_minutes = int(drift / 60)
    return drift_minutes > max_minutes, drift_minutes
