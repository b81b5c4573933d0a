"""Configuration module for gacollect.

Usage:
    from gacollect.core.config import settings

    if settings.DEBUG:
        ...
"""

from gacollect.core.config.settings import Settings

__all__ = [
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
