"""HttpTransport protocol for posting form-encoded hits.

The hit sender never talks to an HTTP library directly. It hands a URL,
a flat form payload and optional headers to a transport and gets back
the status code and the raw body text.

Usage:
    response = await transport.post_form(
        "https://www.google-analytics.com/collect",
        {"v": 1, "tid": "UA-1-1", "cid": "...", "t": "pageview"},
        headers={"User-Agent": "my-app/1.0"},
    )
    if response.status_code == 200:
        ...
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Status code and undecoded body of a completed request."""

    status_code: int
    text: str = ""


@runtime_checkable
class HttpTransport(Protocol):
    """Protocol for the network leg of a hit."""

    async def post_form(
        self,
        url: str,
        data: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """POST ``data`` as an application/x-www-form-urlencoded body.

        Implementations must let transport failures (connection, DNS, TLS,
        timeouts) raise; they must not interpret the status code.

        Args:
            url: Fully composed target URL.
            data: Flat field mapping to form-encode.
            headers: Extra request headers.

        Returns:
            The response status code and body text.
        """
        ...

    async def close(self) -> None:
        """Release any held resources (HTTP clients, etc.)."""
        ...
