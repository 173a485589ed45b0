"""JSON log output for the ``json_messages`` logger."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, TextIO

PACKAGE_LOGGER = "json_messages"

# Every attribute a bare LogRecord carries; anything else came through ``extra``
_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object per line.

    The fixed fields are ``timestamp`` (the record's creation time, UTC),
    ``level``, ``logger`` and ``message``. Values passed through ``extra``,
    such as ``message_id``, are added next to them.
    """

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited docstring
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and key not in payload and not key.startswith("_")
        )

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def configure_logging(level: str | int, *, stream: TextIO | None = None) -> logging.Logger:
    """Send ``json_messages`` records through :class:`JsonFormatter`.

    Calling it again only changes the level; the first handler is kept.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    logger.propagate = False
    logger.debug("Logging configured", extra={"log_level": logging.getLevelName(logger.level)})
    return logger
