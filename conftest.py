"""Root conftest for pytest configuration and shared fixtures.

Loaded before the colocated tests under gacollect/, so its fixtures are
available to every test module.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables, set before any gacollect module import
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("GACOLLECT_TRACKING_ID", "UA-12345-1")
os.environ.setdefault("GACOLLECT_LOG_LEVEL", "DEBUG")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_transport():
    """Fake HttpTransport that records requests and replays queued responses."""
    from gacollect.adapters.transport.fake import FakeHttpTransport

    return FakeHttpTransport()


@pytest.fixture
def client_config():
    """Production-mode config with a fixed tracking id."""
    from gacollect.domains.hits.types import ClientConfig

    return ClientConfig(tracking_id="UA-12345-1")


@pytest.fixture
def sender(client_config, fake_transport):
    """HitSender wired to the fake transport."""
    from gacollect.domains.hits.sender import HitSender

    return HitSender(client_config, transport=fake_transport)


@pytest.fixture
def fake_hit_sender():
    """Fake HitSender that records payloads without a transport."""
    from gacollect.domains.hits.fakes.sender import FakeHitSender

    return FakeHitSender()
