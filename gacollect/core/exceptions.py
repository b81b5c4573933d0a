"""Shared exceptions module."""

from typing import Optional


class GACollectException(Exception):
    """Base exception for gacollect."""

    pass


class ConfigurationError(GACollectException):
    """Exception raised when the client is missing required configuration."""

    def __init__(self, message: Optional[str] = "Invalid client configuration"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)
