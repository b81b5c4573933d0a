"""Fakes for the hits domain."""

from gacollect.domains.hits.fakes.sender import FakeHitSender, SentHit

__all__ = ["FakeHitSender", "SentHit"]
