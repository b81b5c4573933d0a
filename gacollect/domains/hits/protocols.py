"""Protocol for hit senders."""

from typing import Any, Dict, Optional, Protocol, Union

from gacollect.domains.hits.types import HitResult, HitType, Number


class HitSenderProtocol(Protocol):
    """What application code depends on to record hits.

    Satisfied by HitSender and by FakeHitSender in tests.
    """

    async def pageview(
        self, hostname: str, url: str, title: str, client_id: Optional[str] = None
    ) -> HitResult:
        """Send a ``pageview`` hit."""
        ...

    async def event(
        self,
        category: str,
        action: str,
        *,
        label: Optional[str] = None,
        value: Optional[Number] = None,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Send an ``event`` hit."""
        ...

    async def screen(
        self,
        app_name: str,
        app_version: str,
        app_id: str,
        app_installer_id: str,
        screen_name: str,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Send a ``screenview`` hit."""
        ...

    async def transaction(
        self,
        transaction_id: str,
        *,
        affiliation: Optional[str] = None,
        revenue: Optional[Number] = None,
        shipping: Optional[Number] = None,
        tax: Optional[Number] = None,
        currency: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Send a ``transaction`` hit."""
        ...

    async def social(
        self, action: str, network: str, target: str, client_id: Optional[str] = None
    ) -> HitResult:
        """Send a ``social`` hit."""
        ...

    async def exception(
        self, description: str, is_fatal: Union[bool, int], client_id: Optional[str] = None
    ) -> HitResult:
        """Send an ``exception`` hit."""
        ...

    async def refund(
        self,
        transaction_id: str,
        category: str = "Ecommerce",
        action: str = "Refund",
        non_interaction: int = 1,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Send a refund as an ``event`` hit."""
        ...

    async def send(
        self,
        hit_type: Union[HitType, str],
        params: Optional[Dict[str, Any]] = None,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Post one hit."""
        ...
