"""LoggingPort implementation backed by the standard logging module."""

from __future__ import annotations

import logging


class PythonLoggingAdapter:
    """Implements LoggingPort by forwarding to a stdlib logger.

    Example:
        >>> adapter = PythonLoggingAdapter()
        >>> adapter.warning("statement cache collision")  # logged on "sqltags"
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the adapter.

        Args:
            logger: Logger to forward to. Defaults to the "sqltags" logger.
        """
        self._logger = logger or logging.getLogger("sqltags")

    @property
    def logger(self) -> logging.Logger:
        """Return the wrapped logger."""
        return self._logger

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)
