"""Hits domain: measurement-protocol hit construction and dispatch."""

from gacollect.domains.hits.exceptions import (
    HitDecodeError,
    HitError,
    HitStatusError,
    HitTransportError,
    HitValidationError,
)
from gacollect.domains.hits.protocols import HitSenderProtocol
from gacollect.domains.hits.sender import HitSender
from gacollect.domains.hits.types import (
    ClientConfig,
    EventOptions,
    HitResult,
    HitType,
    RefundOptions,
    TransactionOptions,
)

__all__ = [
    "ClientConfig",
    "EventOptions",
    "HitDecodeError",
    "HitError",
    "HitResult",
    "HitSender",
    "HitSenderProtocol",
    "HitStatusError",
    "HitTransportError",
    "HitType",
    "HitValidationError",
    "RefundOptions",
    "TransactionOptions",
]
