"""Hit domain exceptions.

A failed hit raises exactly one of four errors so callers can branch on
type instead of inspecting payload shapes:

- ``HitTransportError``: the request never produced a response.
- ``HitDecodeError``: a response body was present but was not JSON.
- ``HitValidationError``: the debug endpoint answered 200 but rejected the hit.
- ``HitStatusError``: the endpoint answered with a status other than 200.

Catch ``HitError`` for all of them.
"""

from typing import Any, Optional

from gacollect.core.exceptions import GACollectException

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class HitError(GACollectException):
    """Base exception for all hit failures."""

    def __init__(
        self,
        message: str = "Hit failed",
        *,
        hit_type: Optional[str] = None,
        client_id: Optional[str] = None,
    ):
        """Initialize with message and the identity of the failed hit."""
        self.message = message
        self.hit_type = hit_type
        self.client_id = client_id
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


class HitTransportError(HitError):
    """Connection, DNS, TLS or timeout failure raised by the transport."""

    def __init__(
        self,
        cause: BaseException,
        *,
        hit_type: Optional[str] = None,
        client_id: Optional[str] = None,
    ):
        """Initialize with the original transport exception."""
        self.cause = cause
        super().__init__(
            f"Hit transport failed: {cause!r}", hit_type=hit_type, client_id=client_id
        )


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class HitDecodeError(HitError):
    """Response body is present but is not valid JSON."""

    def __init__(
        self,
        cause: BaseException,
        body: str,
        *,
        status_code: Optional[int] = None,
        hit_type: Optional[str] = None,
        client_id: Optional[str] = None,
    ):
        """Initialize with the decode exception and the raw body."""
        self.cause = cause
        self.body = body
        self.status_code = status_code
        super().__init__(
            f"Could not decode response body (status {status_code}): {cause}",
            hit_type=hit_type,
            client_id=client_id,
        )


class HitValidationError(HitError):
    """Debug endpoint reported the hit as invalid.

    ``diagnostics`` is the full decoded response body, including every
    ``hitParsingResult`` entry and its ``parserMessage`` list.
    """

    def __init__(
        self,
        diagnostics: dict[str, Any],
        *,
        hit_type: Optional[str] = None,
        client_id: Optional[str] = None,
    ):
        """Initialize with the decoded validation response."""
        self.diagnostics = diagnostics
        super().__init__(
            "Hit rejected by validation endpoint", hit_type=hit_type, client_id=client_id
        )

    @property
    def parser_messages(self) -> list[dict[str, Any]]:
        """Parser messages of all parsing results, flattened."""
        messages: list[dict[str, Any]] = []
        if not isinstance(self.diagnostics, dict):
            return messages
        for result in self.diagnostics.get("hitParsingResult") or []:
            messages.extend(result.get("parserMessage") or [])
        return messages


class HitStatusError(HitError):
    """Endpoint answered with a status code other than 200."""

    def __init__(
        self,
        status_code: int,
        body: Any,
        *,
        hit_type: Optional[str] = None,
        client_id: Optional[str] = None,
    ):
        """Initialize with the status code and the decoded body."""
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Collection endpoint returned status {status_code}",
            hit_type=hit_type,
            client_id=client_id,
        )
