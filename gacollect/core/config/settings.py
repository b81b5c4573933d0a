"""Settings for gacollect.

Uses Pydantic Settings for automatic env var loading. Every variable is
prefixed with ``GACOLLECT_``:

    GACOLLECT_TRACKING_ID=UA-12345-1
    GACOLLECT_DEBUG=true
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from the environment or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="GACOLLECT_",
        env_file=".env",
        extra="ignore",
    )

    TRACKING_ID: Optional[str] = Field(
        None, description="Property id hits are recorded against (e.g. UA-12345-1)"
    )
    USER_AGENT: str = Field("", description="User-Agent header; omitted when empty")
    DEBUG: bool = Field(False, description="Send hits to the validation endpoint")
    PROTOCOL_VERSION: int = Field(1, description="Measurement protocol version (v)")

    BASE_URL: str = "https://www.google-analytics.com"
    COLLECT_PATH: str = "/collect"
    DEBUG_PATH: str = "/debug"

    REQUEST_TIMEOUT_SECONDS: float = Field(
        10.0, description="Timeout applied by the HTTP transport to each hit"
    )
    LOG_LEVEL: str = "WARNING"

    @field_validator("BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are appended verbatim, so the base URL must not end in '/'."""
        return v.rstrip("/")
