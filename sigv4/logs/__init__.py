# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""CloudWatch Logs client on top of the SigV4 signing pipeline."""

from sigv4.logs.client import (
    SERVICE,
    X_AMZ_TARGET,
    LogsApiError,
    LogsClient,
    LogsResponse,
    host_for_region,
)
from sigv4.logs.payloads import (
    CreateLogGroupPayload,
    CreateLogStreamPayload,
    DescribeLogStreamsPayload,
    LogEvent,
    PutLogEventsPayload,
)


__all__ = [
    "SERVICE",
    "X_AMZ_TARGET",
    "CreateLogGroupPayload",
    "CreateLogStreamPayload",
    "DescribeLogStreamsPayload",
    "LogEvent",
    "LogsApiError",
    "LogsClient",
    "LogsResponse",
    "PutLogEventsPayload",
    "host_for_region",
]
