"""Logging helpers.

Every logger handed out here is a ``ContextualLogger``: a thin
``logging.LoggerAdapter`` that carries a dict of dimensions (hit type,
client id, ...) and an optional message prefix.

Usage:
    from gacollect.core.logging import logger

    hit_logger = logger.with_prefix("Hit: ").with_context(hit_type="event")
    hit_logger.debug("Dispatching hit")
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

from gacollect.core.config import settings

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that appends its dimensions to every record."""

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap ``logger`` with a set of dimensions and a message prefix."""
        super().__init__(logger, dict(dimensions or {}))
        self.dimensions: dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping]:
        """Prefix the message and attach dimensions as ``extra``."""
        extra = dict(self.dimensions)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        if self.dimensions:
            dims = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
            msg = f"{self.prefix}{msg} [{dims}]"
        else:
            msg = f"{self.prefix}{msg}"
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with ``dimensions`` merged into the current ones."""
        return ContextualLogger(
            self.logger,
            dimensions={**self.dimensions, **dimensions},
            prefix=self.prefix,
        )

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger whose messages start with ``prefix``."""
        return ContextualLogger(self.logger, dimensions=self.dimensions, prefix=prefix)


class LoggerConfigurator:
    """Builds ContextualLogger instances for the package.

    Importing the package only attaches a ``NullHandler``. Applications that
    want gacollect output without configuring logging themselves call
    ``enable_console_logging()``.
    """

    _console_handler: Optional[logging.Handler] = None

    @classmethod
    def configure_logger(
        cls,
        name: str,
        dimensions: Optional[dict[str, Any]] = None,
    ) -> ContextualLogger:
        """Return a ContextualLogger for ``name`` carrying ``dimensions``."""
        return ContextualLogger(logging.getLogger(name), dimensions=dimensions)

    @classmethod
    def enable_console_logging(cls, level: Optional[str] = None) -> logging.Handler:
        """Attach a stderr handler to the package logger.

        Args:
            level: Log level name; defaults to ``settings.LOG_LEVEL``.

        Returns:
            The handler, attached once however often this is called.
        """
        package_logger = logging.getLogger("gacollect")
        package_logger.setLevel((level or settings.LOG_LEVEL).upper())
        if cls._console_handler is None:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(_FORMAT))
            package_logger.addHandler(handler)
            cls._console_handler = handler
        return cls._console_handler


logging.getLogger("gacollect").addHandler(logging.NullHandler())

logger = LoggerConfigurator.configure_logger("gacollect")
