# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Minimal CloudWatch Logs client.

Every operation is a signed ``POST /`` with a JSON body and an
``x-amz-target`` header naming the operation.  The headers that are
signed are exactly the headers that are sent (plus ``Authorization``).

No retries: HTTP errors raise ``LogsApiError``, network failures
propagate as ``httpx.TransportError``.
"""

import json
import urllib.parse
from dataclasses import dataclass, field
from typing import Any

import httpx

from sigv4.config import ClientConfig
from sigv4.logging import get_logger
from sigv4.logs.payloads import (
    CreateLogGroupPayload,
    CreateLogStreamPayload,
    DescribeLogStreamsPayload,
    PutLogEventsPayload,
)
from sigv4.signing.canonical import RequestDescriptor
from sigv4.signing.signer import Signer, flatten_headers
from sigv4.signing.timestamps import format_request_datetime


logger = get_logger(__name__)

SERVICE = "logs"

_TARGET_PREFIX = "Logs_20140328"

X_AMZ_TARGET = {
    op: f"{_TARGET_PREFIX}.{op}"
    for op in (
        "CreateLogGroup",
        "CreateLogStream",
        "DescribeLogStreams",
        "PutLogEvents",
    )
}

_CONTENT_TYPE = "application/x-amz-json-1.1; charset=UTF-8"


class LogsApiError(Exception):
    """The Logs service answered with an HTTP error.

    Attributes:
        status: HTTP status code.
        error_type: AWS error type, e.g. ``ResourceAlreadyExistsException``.
        message: Error message from the response body.
    """

    def __init__(self, status: int, error_type: str, message: str) -> None:
        super().__init__(f"{status} {error_type}: {message}")
        self.status = status
        self.error_type = error_type
        self.message = message


@dataclass(frozen=True)
class LogsResponse:
    """A successful Logs API response."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def json(self) -> Any:
        """Decode the body as JSON.  Empty bodies decode to ``{}``."""
        if not self.body:
            return {}
        return json.loads(self.body)


def host_for_region(region: str) -> str:
    """Return the public Logs endpoint host for a region."""
    return f"logs.{region}.amazonaws.com"


def _parse_error(status: int, body: bytes) -> LogsApiError:
    """Build a LogsApiError from an AWS JSON error body."""
    try:
        data = json.loads(body) if body else {}
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}
    error_type = str(data.get("__type", "UnknownError")).rsplit("#", 1)[-1]
    message = data.get("message") or data.get("Message")
    if message is None:
        message = body.decode("utf-8", errors="replace")
    return LogsApiError(status, error_type, str(message))


class LogsClient:
    """Signs and sends CloudWatch Logs API requests."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config
        self._signer = Signer(config.credentials, config.region, SERVICE)
        if config.endpoint:
            parsed = urllib.parse.urlsplit(config.endpoint)
            self._scheme = parsed.scheme
            self._host = parsed.netloc
        else:
            self._scheme = "https"
            self._host = host_for_region(config.region)

    @property
    def host(self) -> str:
        return self._host

    def create_log_group(
        self,
        payload: CreateLogGroupPayload,
        *,
        request_datetime: str | None = None,
    ) -> LogsResponse:
        """Create a log group."""
        return self._call("CreateLogGroup", payload.to_dict(), request_datetime)

    def create_log_stream(
        self,
        payload: CreateLogStreamPayload,
        *,
        request_datetime: str | None = None,
    ) -> LogsResponse:
        """Create a log stream in an existing log group."""
        return self._call(
            "CreateLogStream", payload.to_dict(), request_datetime
        )

    def put_log_events(
        self,
        payload: PutLogEventsPayload,
        *,
        request_datetime: str | None = None,
    ) -> LogsResponse:
        """Upload a batch of log events to a log stream."""
        return self._call("PutLogEvents", payload.to_dict(), request_datetime)

    def describe_log_streams(
        self,
        payload: DescribeLogStreamsPayload,
        *,
        request_datetime: str | None = None,
    ) -> LogsResponse:
        """List the log streams of a log group."""
        return self._call(
            "DescribeLogStreams", payload.to_dict(), request_datetime
        )

    def build_request(
        self,
        operation: str,
        body: dict[str, Any],
        request_datetime: str | None = None,
    ) -> httpx.Request:
        """Build a signed request for an operation without sending it.

        Args:
            operation: Operation name, a key of ``X_AMZ_TARGET``.
            body: JSON-serializable request body.
            request_datetime: ISO 8601 basic timestamp.  Defaults to now.

        Returns:
            Request ready for ``httpx.Client.send``.

        Raises:
            ValueError: If ``operation`` is not a known Logs operation.
        """
        target = X_AMZ_TARGET.get(operation)
        if target is None:
            raise ValueError(f"Unknown Logs operation: {operation!r}")
        if request_datetime is None:
            request_datetime = format_request_datetime()

        payload = json.dumps(body, separators=(",", ":")).encode("utf-8")
        headers = {
            "host": self._host,
            "x-amz-date": request_datetime,
            "x-amz-target": target,
            "accept": "application/json",
            "content-type": _CONTENT_TYPE,
            "content-length": str(len(payload)),
        }
        descriptor = RequestDescriptor.from_raw(
            method="POST",
            uri="/",
            headers=headers,
            payload=payload,
        )
        signed = self._signer.sign(descriptor, request_datetime)

        return httpx.Request(
            "POST",
            f"{self._scheme}://{self._host}/",
            headers=flatten_headers(signed.headers),
            content=payload,
        )

    def _call(
        self,
        operation: str,
        body: dict[str, Any],
        request_datetime: str | None,
    ) -> LogsResponse:
        """Sign, send and decode one operation."""
        request = self.build_request(operation, body, request_datetime)
        logger.debug("Calling %s on %s", operation, self._host)
        with httpx.Client(timeout=self._config.timeout_seconds) as client:
            response = client.send(request)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = _parse_error(response.status_code, response.content)
            logger.warning(
                "%s failed: %d %s: %s",
                operation,
                error.status,
                error.error_type,
                error.message,
            )
            raise error from e

        logger.info("%s succeeded: %d", operation, response.status_code)
        return LogsResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )
