"""HitSender: builds measurement-protocol hits and posts them.

Every public builder maps its arguments to protocol fields and funnels
into ``send``, which adds the identity fields, picks the production or
debug endpoint, performs the POST and interprets the response.

Usage:
    async with HitSender(ClientConfig(tracking_id="UA-12345-1")) as sender:
        result = await sender.pageview("example.com", "/home", "Home")
        print(result.client_id)
"""

import json
import uuid
from typing import Any, Dict, Optional, Union

from gacollect.adapters.transport.httpx_transport import HttpxTransport
from gacollect.core.config import Settings
from gacollect.core.config import settings as default_settings
from gacollect.core.logging import ContextualLogger
from gacollect.core.logging import logger as default_logger
from gacollect.core.protocols.http import HttpTransport, TransportResponse
from gacollect.domains.hits import params as hit_params
from gacollect.domains.hits.exceptions import (
    HitDecodeError,
    HitStatusError,
    HitTransportError,
    HitValidationError,
)
from gacollect.domains.hits.types import (
    ClientConfig,
    EventOptions,
    HitResult,
    HitType,
    Number,
    RefundOptions,
    TransactionOptions,
)


def _config_property(name: str, doc: str) -> property:
    def fget(self: "HitSender") -> Any:
        return getattr(self.config, name)

    def fset(self: "HitSender", value: Any) -> None:
        setattr(self.config, name, value)

    return property(fget, fset, doc=doc)


class HitSender:
    """Measurement-protocol client bound to one tracking id.

    Holds no per-hit state: concurrent calls only read ``config``.
    """

    tracking_id = _config_property("tracking_id", "Property id (tid).")
    user_agent = _config_property("user_agent", "User-Agent header; omitted when empty.")
    debug = _config_property("debug", "Send hits to the validation endpoint.")
    version = _config_property("version", "Protocol version (v).")
    base_url = _config_property("base_url", "Scheme and host of the endpoint.")
    collect_path = _config_property("collect_path", "Path of the collect endpoint.")
    debug_path = _config_property("debug_path", "Path prefix of the validation endpoint.")

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[HttpTransport] = None,
        logger: Optional[ContextualLogger] = None,
    ) -> None:
        """Initialize the sender.

        Args:
            config: Destination and identity settings.
            transport: HTTP transport; an HttpxTransport is created (and
                closed by ``close()``) when omitted.
            logger: Logger to use; defaults to the package logger.
        """
        self.config = config
        self._owns_transport = transport is None
        self._transport: HttpTransport = transport or HttpxTransport()
        self._logger = (logger or default_logger).with_prefix("Hit: ")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "HitSender":
        """Build a sender from environment settings."""
        settings = settings or default_settings
        sender = cls(
            ClientConfig.from_settings(settings),
            transport=HttpxTransport(timeout=settings.REQUEST_TIMEOUT_SECONDS),
        )
        sender._owns_transport = True
        return sender

    async def close(self) -> None:
        """Close the transport if this sender created it."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> "HitSender":
        """Enter the async context."""
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        """Close owned resources."""
        await self.close()

    # ------------------------------------------------------------------
    # Hit builders
    # ------------------------------------------------------------------

    async def pageview(
        self, hostname: str, url: str, title: str, client_id: Optional[str] = None
    ) -> HitResult:
        """Send a ``pageview`` hit."""
        params = hit_params.pageview_params(hostname, url, title)
        return await self.send(HitType.PAGEVIEW, params, client_id)

    async def event(
        self,
        category: str,
        action: str,
        *,
        label: Optional[str] = None,
        value: Optional[Number] = None,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Send an ``event`` hit; ``label`` and ``value`` are sent only when truthy.

        Raises:
            pydantic.ValidationError: If ``label`` or ``value`` has the wrong type.
            HitError: If the hit fails (see ``send``).
        """
        options = EventOptions(label=label, value=value)
        params = hit_params.event_params(category, action, options)
        return await self.send(HitType.EVENT, params, client_id)

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
        params = hit_params.screenview_params(
            app_name, app_version, app_id, app_installer_id, screen_name
        )
        return await self.send(HitType.SCREENVIEW, params, client_id)

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
        """Send a ``transaction`` hit; optional fields are sent only when truthy.

        Raises:
            pydantic.ValidationError: If an optional field has the wrong type.
            HitError: If the hit fails (see ``send``).
        """
        options = TransactionOptions(
            affiliation=affiliation,
            revenue=revenue,
            shipping=shipping,
            tax=tax,
            currency=currency,
        )
        params = hit_params.transaction_params(transaction_id, options)
        return await self.send(HitType.TRANSACTION, params, client_id)

    async def social(
        self, action: str, network: str, target: str, client_id: Optional[str] = None
    ) -> HitResult:
        """Send a ``social`` hit."""
        params = hit_params.social_params(action, network, target)
        return await self.send(HitType.SOCIAL, params, client_id)

    async def exception(
        self, description: str, is_fatal: Union[bool, int], client_id: Optional[str] = None
    ) -> HitResult:
        """Send an ``exception`` hit."""
        params = hit_params.exception_params(description, is_fatal)
        return await self.send(HitType.EXCEPTION, params, client_id)

    async def refund(
        self,
        transaction_id: str,
        category: str = "Ecommerce",
        action: str = "Refund",
        non_interaction: int = 1,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Send a full refund of ``transaction_id`` as an ``event`` hit.

        Raises:
            pydantic.ValidationError: If an override has the wrong type.
            HitError: If the hit fails (see ``send``).
        """
        options = RefundOptions(
            category=category, action=action, non_interaction=non_interaction
        )
        params = hit_params.refund_params(transaction_id, options)
        return await self.send(HitType.EVENT, params, client_id)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def build_payload(
        self,
        hit_type: Union[HitType, str],
        params: Optional[Dict[str, Any]] = None,
        client_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Return the full form payload of a hit.

        A fresh UUIDv4 is used when ``client_id`` is empty.
        """
        payload: Dict[str, Any] = {
            "v": self.config.version,
            "tid": self.config.tracking_id,
            "cid": client_id or str(uuid.uuid4()),
            "t": hit_type.value if isinstance(hit_type, HitType) else hit_type,
        }
        if params:
            payload.update(params)
        return payload

    def _headers(self) -> Optional[Dict[str, str]]:
        if self.config.user_agent:
            return {"User-Agent": self.config.user_agent}
        return None

    async def send(
        self,
        hit_type: Union[HitType, str],
        params: Optional[Dict[str, Any]] = None,
        client_id: Optional[str] = None,
    ) -> HitResult:
        """Post one hit and interpret the response.

        Args:
            hit_type: Value of the ``t`` field.
            params: Hit-specific fields merged over the identity fields.
            client_id: The ``cid`` to send; generated when omitted.

        Returns:
            HitResult carrying the ``cid`` the hit was sent with.

        Raises:
            HitTransportError: The transport raised before a response arrived.
            HitDecodeError: The response body was present but not JSON.
            HitValidationError: Debug mode, status 200, hit reported invalid.
            HitStatusError: Status other than 200.
        """
        payload = self.build_payload(hit_type, params, client_id)
        cid = payload["cid"]
        t = payload["t"]
        url = self.config.collect_url
        log = self._logger.with_context(hit_type=t, client_id=cid)

        log.debug(f"Posting to {url}")
        try:
            response = await self._transport.post_form(url, payload, headers=self._headers())
        except Exception as e:
            log.debug(f"Transport failed: {e!r}")
            raise HitTransportError(e, hit_type=t, client_id=cid) from e

        body = self._decode(response, hit_type=t, client_id=cid)

        if response.status_code != 200:
            log.debug(f"Endpoint returned status {response.status_code}")
            raise HitStatusError(response.status_code, body, hit_type=t, client_id=cid)

        if self.config.debug and not self._is_valid(body):
            log.debug("Hit rejected by validation endpoint")
            raise HitValidationError(body, hit_type=t, client_id=cid)

        log.debug("Hit accepted")
        return HitResult(client_id=cid)

    def _decode(self, response: TransportResponse, *, hit_type: str, client_id: str) -> Any:
        """Decode the body as JSON; an empty body decodes to ``{}``."""
        if not response.text:
            return {}
        try:
            return json.loads(response.text)
        except ValueError as e:
            raise HitDecodeError(
                e,
                response.text,
                status_code=response.status_code,
                hit_type=hit_type,
                client_id=client_id,
            ) from e

    @staticmethod
    def _is_valid(body: Any) -> bool:
        """True when the first hit parsing result reports the hit valid."""
        if not isinstance(body, dict):
            return False
        results = body.get("hitParsingResult")
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            return False
        return bool(results[0].get("valid"))
