# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Request payloads for the CloudWatch Logs JSON API.

Field names follow the API's camelCase wire format in ``to_dict()``.
Service-side constraints (name patterns, batch sizes) are left to the
service to enforce.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CreateLogGroupPayload:
    """CreateLogGroup request.

    Attributes:
        log_group_name: Name of the log group.
        tags: Optional tags as key-value pairs.
    """

    log_group_name: str
    tags: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"logGroupName": self.log_group_name}
        if self.tags is not None:
            d["tags"] = dict(self.tags)
        return d


@dataclass(frozen=True)
class CreateLogStreamPayload:
    """CreateLogStream request."""

    log_group_name: str
    log_stream_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "logGroupName": self.log_group_name,
            "logStreamName": self.log_stream_name,
        }


@dataclass(frozen=True)
class LogEvent:
    """A single log event.

    Attributes:
        message: Raw event message.
        timestamp: Milliseconds since the Unix epoch (UTC).
    """

    message: str
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "timestamp": self.timestamp}


@dataclass(frozen=True)
class PutLogEventsPayload:
    """PutLogEvents request.

    Attributes:
        log_group_name: Name of the log group.
        log_stream_name: Name of the log stream.
        log_events: Events in chronological order.
        sequence_token: Token from the previous PutLogEvents response.
            Not needed for the first upload to a new stream.
    """

    log_group_name: str
    log_stream_name: str
    log_events: list[LogEvent] = field(default_factory=list)
    sequence_token: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "logEvents": [e.to_dict() for e in self.log_events],
            "logGroupName": self.log_group_name,
            "logStreamName": self.log_stream_name,
        }
        if self.sequence_token is not None:
            d["sequenceToken"] = self.sequence_token
        return d


@dataclass(frozen=True)
class DescribeLogStreamsPayload:
    """DescribeLogStreams request."""

    log_group_name: str
    log_stream_name_prefix: str | None = None
    next_token: str | None = None
    limit: int | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"logGroupName": self.log_group_name}
        if self.log_stream_name_prefix is not None:
            d["logStreamNamePrefix"] = self.log_stream_name_prefix
        if self.next_token is not None:
            d["nextToken"] = self.next_token
        if self.limit is not None:
            d["limit"] = self.limit
        return d
