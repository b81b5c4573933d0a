"""Types for the hits domain."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gacollect.core.config import Settings
from gacollect.core.exceptions import ConfigurationError

Number = Union[int, float]


class HitType(str, Enum):
    """Value of the ``t`` field."""

    PAGEVIEW = "pageview"
    EVENT = "event"
    SCREENVIEW = "screenview"
    TRANSACTION = "transaction"
    SOCIAL = "social"
    EXCEPTION = "exception"


# ---------------------------------------------------------------------------
# Client configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Destination and identity settings shared by every hit of a sender.

    Mutable for the lifetime of the sender; assignments are validated.
    """

    model_config = ConfigDict(validate_assignment=True)

    tracking_id: str = Field(..., description="Property id (tid).")
    user_agent: str = Field("", description="User-Agent header; omitted when empty.")
    debug: bool = Field(False, description="Use the validation endpoint.")
    version: int = Field(1, description="Protocol version (v).")
    base_url: str = "https://www.google-analytics.com"
    collect_path: str = "/collect"
    debug_path: str = "/debug"

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are appended verbatim, so the base URL must not end in '/'."""
        return v.rstrip("/")

    @property
    def collect_url(self) -> str:
        """Target URL for the current mode."""
        if self.debug:
            return f"{self.base_url}{self.debug_path}{self.collect_path}"
        return f"{self.base_url}{self.collect_path}"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        """Build a config from environment settings.

        Raises:
            ConfigurationError: If no tracking id is configured.
        """
        if not settings.TRACKING_ID:
            raise ConfigurationError("GACOLLECT_TRACKING_ID is not set")
        return cls(
            tracking_id=settings.TRACKING_ID,
            user_agent=settings.USER_AGENT,
            debug=settings.DEBUG,
            version=settings.PROTOCOL_VERSION,
            base_url=settings.BASE_URL,
            collect_path=settings.COLLECT_PATH,
            debug_path=settings.DEBUG_PATH,
        )


# ---------------------------------------------------------------------------
# Per-hit options
#
# Every optional field defaults to None. Only truthy values reach the wire.
# ---------------------------------------------------------------------------


class EventOptions(BaseModel):
    """Optional event fields."""

    label: Optional[str] = Field(None, description="Event label (el).")
    value: Optional[Number] = Field(None, description="Event value (ev).")


class TransactionOptions(BaseModel):
    """Optional transaction fields."""

    affiliation: Optional[str] = Field(None, description="Affiliation (ta).")
    revenue: Optional[Number] = Field(None, description="Revenue (tr).")
    shipping: Optional[Number] = Field(None, description="Shipping cost (ts).")
    tax: Optional[Number] = Field(None, description="Tax (tt).")
    currency: Optional[str] = Field(None, description="ISO 4217 currency code (cu).")


class RefundOptions(BaseModel):
    """Overridable event fields of a refund hit."""

    category: str = "Ecommerce"
    action: str = "Refund"
    non_interaction: int = 1


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class HitResult(BaseModel):
    """Outcome of an accepted hit."""

    client_id: str = Field(..., description="The cid the hit was sent with.")
