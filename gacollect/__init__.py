"""gacollect: async client for the Google Analytics measurement protocol."""

from gacollect.domains.hits import (
    ClientConfig,
    HitDecodeError,
    HitError,
    HitResult,
    HitSender,
    HitStatusError,
    HitTransportError,
    HitType,
    HitValidationError,
)

__all__ = [
    "ClientConfig",
    "HitDecodeError",
    "HitError",
    "HitResult",
    "HitSender",
    "HitStatusError",
    "HitTransportError",
    "HitType",
    "HitValidationError",
]
