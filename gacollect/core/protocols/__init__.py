"""Core protocols for dependency injection."""

from gacollect.core.protocols.http import HttpTransport, TransportResponse

__all__ = [
    "HttpTransport",
    "TransportResponse",
]
