"""Fake hit sender for testing code that records analytics."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from gacollect.adapters.transport.fake import FakeHttpTransport
from gacollect.domains.hits.sender import HitSender
from gacollect.domains.hits.types import ClientConfig, HitResult, HitType


@dataclass
class SentHit:
    """Single recorded hit."""

    hit_type: str
    payload: Dict[str, Any]

    @property
    def client_id(self) -> str:
        """The ``cid`` of the hit."""
        return self.payload["cid"]


class FakeHitSender(HitSender):
    """Test implementation of HitSenderProtocol.

    Runs the real builders and payload construction, records every
    payload and accepts it without touching the network.

    Usage:
        sender = FakeHitSender()
        await service_under_test(sender)
        assert sender.get("event").payload["ec"] == "Video"
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        """Initialize with a placeholder tracking id unless a config is given."""
        super().__init__(config or ClientConfig(tracking_id="UA-0000-1"), FakeHttpTransport())
        self.hits: list[SentHit] = []

    async def send(
        self,
        hit_type: Union[HitType, str],
        params: Optional[Dict[str, Any]] = None,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Record the payload and return a successful result."""
        payload = self.build_payload(hit_type, params, client_id)
        self.hits.append(SentHit(hit_type=payload["t"], payload=payload))
        return HitResult(client_id=payload["cid"])

    def has(self, hit_type: str) -> bool:
        """Return True if a hit of the given type was sent."""
        return any(h.hit_type == hit_type for h in self.hits)

    def get(self, hit_type: str) -> SentHit:
        """Return the first hit of the given type, or raise AssertionError."""
        for h in self.hits:
            if h.hit_type == hit_type:
                return h
        raise AssertionError(
            f"No '{hit_type}' hit sent. Sent: {[h.hit_type for h in self.hits]}"
        )

    def clear(self) -> None:
        """Reset recorded hits."""
        self.hits.clear()
