"""Logging setup for the ``fars`` command-line tool.

The library modules only create loggers; handlers are attached here and
only by the CLI.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

PACKAGE_LOGGER = "fars"

_TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Attributes of a bare LogRecord; anything else on a record came from ``extra=``
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the ``extra=`` fields attached to *record*."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _STANDARD_ATTRS
    }


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    The payload holds ``ts`` (UTC, ISO 8601), ``level``, ``logger`` and
    ``msg``, then any ``extra=`` fields such as ``year``, ``state`` or
    ``reason``.  Values that are not JSON-serializable are written as
    ``str(value)``.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        payload.update(extra_fields(record))
        return json.dumps(payload, default=str)


def configure_logging(
    level: str = "WARNING",
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process do not duplicate output.

    Args:
        level: Logging level name (``'DEBUG'``, ``'INFO'``, ...).
        json_format: Use :class:`JsonFormatter` instead of plain text.
        stream: Destination stream (default: ``sys.stderr``).

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
