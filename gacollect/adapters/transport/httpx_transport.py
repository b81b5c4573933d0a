"""httpx-backed transport satisfying the HttpTransport protocol."""

from typing import Any, Mapping, Optional

import httpx

from gacollect.core.protocols.http import HttpTransport, TransportResponse


class HttpxTransport(HttpTransport):
    """Posts form-encoded hits with an ``httpx.AsyncClient``.

    The client is created lazily on first use unless one is injected.
    Only a client created here is closed by ``close()``; an injected client
    stays owned by the caller.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: float = 10.0,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Shared AsyncClient to reuse. Left open by ``close()``.
            timeout: Seconds per request for the client created here.
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def post_form(
        self,
        url: str,
        data: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """POST ``data`` form-encoded and return status and body text.

        Raises:
            httpx.HTTPError: Any transport-level failure, unchanged.
        """
        response = await self._get_client().post(url, data=dict(data), headers=headers)
        return TransportResponse(status_code=response.status_code, text=response.text)

    async def close(self) -> None:
        """Close the AsyncClient if this transport created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
