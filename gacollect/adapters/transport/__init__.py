"""HTTP transport adapters."""

from gacollect.adapters.transport.fake import FakeHttpTransport
from gacollect.adapters.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "FakeHttpTransport"]
