"""Fake HTTP transport for testing."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from gacollect.core.protocols.http import TransportResponse


@dataclass
class RecordedRequest:
    """Single recorded post_form call."""

    url: str
    data: Dict[str, Any]
    headers: Optional[Dict[str, str]]


@dataclass
class _Queued:
    response: Optional[TransportResponse] = None
    error: Optional[BaseException] = None


class FakeHttpTransport:
    """In-memory test double for HttpTransport.

    Records every request and replies with queued responses, falling back
    to ``default_response`` once the queue is empty.

    Usage:
        transport = FakeHttpTransport()
        transport.respond_json({"hitParsingResult": [{"valid": True}]})
        sender = HitSender(config, transport=transport)
        await sender.pageview("example.com", "/", "Home")
        assert transport.last.data["t"] == "pageview"
    """

    def __init__(self, default_response: Optional[TransportResponse] = None) -> None:
        """Initialize with an empty queue; unqueued calls get an empty 200."""
        self.requests: list[RecordedRequest] = []
        self.default_response = default_response or TransportResponse(status_code=200)
        self._queue: list[_Queued] = []
        self.closed = False

    # ------------------------------------------------------------------
    # Scripting
    # ------------------------------------------------------------------

    def respond(self, status_code: int = 200, text: str = "") -> None:
        """Queue a raw response."""
        self._queue.append(_Queued(response=TransportResponse(status_code, text)))

    def respond_json(self, body: Any, status_code: int = 200) -> None:
        """Queue a response whose body is ``body`` serialized as JSON."""
        self.respond(status_code, json.dumps(body))

    def fail(self, error: BaseException) -> None:
        """Queue a transport failure; the next call raises ``error``."""
        self._queue.append(_Queued(error=error))

    # ------------------------------------------------------------------
    # HttpTransport
    # ------------------------------------------------------------------

    async def post_form(
        self,
        url: str,
        data: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> TransportResponse:
        """Record the request and return (or raise) the next queued outcome."""
        self.requests.append(
            RecordedRequest(url=url, data=dict(data), headers=dict(headers) if headers else None)
        )
        if not self._queue:
            return self.default_response
        queued = self._queue.pop(0)
        if queued.error is not None:
            raise queued.error
        return queued.response

    async def close(self) -> None:
        """Mark the transport closed."""
        self.closed = True

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------

    @property
    def last(self) -> RecordedRequest:
        """Return the most recent request, or raise AssertionError."""
        if not self.requests:
            raise AssertionError("No requests were sent")
        return self.requests[-1]

    def clear(self) -> None:
        """Reset recorded requests and queued responses."""
        self.requests.clear()
        self._queue.clear()
