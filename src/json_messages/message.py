"""Builder for Google JSON Style Guide shaped response messages."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Callable, Mapping, Sequence

from .config import MessageConfig
from .exceptions import InvalidConfigurationError
from .models import ErrorDetail, ErrorItem, to_plain
from .utils import generate_message_id

LOGGER = logging.getLogger(__name__)

ErrorCode = str | int | float


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


class JsonMessage:
    """One response envelope: ``apiVersion``, ``id``, ``method``, ``data``, ``error``.

    ``params`` takes the keys ``apiVersion`` (required), ``id`` (defaults to a
    random UUID v4) and ``method``. A :class:`MessageConfig` is accepted too.
    ``set_data`` is meant for successful responses and ``set_error`` for
    failures; both return the message so calls can be chained.
    """

    def __init__(
        self,
        params: Mapping[str, Any] | MessageConfig | None = None,
        *,
        id_factory: Callable[[], str] = generate_message_id,
    ) -> None:
        if params is None:
            raise InvalidConfigurationError("No params for JsonMessage instantiation")
        if isinstance(params, MessageConfig):
            params = params.as_params()

        self._api_version: str = params.get("apiVersion")
        self._id: str = params.get("id") or id_factory()
        self._method: str | None = params.get("method") or None
        self._data: Any = None
        self._error: Any = None

        LOGGER.debug(
            "Message created",
            extra={"message_id": self._id, "api_version": self._api_version},
        )

    @classmethod
    def from_config(cls, config: MessageConfig, **overrides: Any) -> "JsonMessage":
        """Build a message from environment defaults, overriding single params."""

        params = config.as_params()
        params.update({key: value for key, value in overrides.items() if value is not None})
        return cls(params)

    @property
    def api_version(self) -> str:
        return self._api_version

    @property
    def id(self) -> str:
        return self._id

    @property
    def method(self) -> str | None:
        return self._method

    @property
    def data(self) -> Any:
        return self._data

    @property
    def error(self) -> Any:
        return self._error

    def set_data(self, data: Any) -> "JsonMessage":
        """Set the success payload, replacing any previous one."""

        self._data = data
        return self

    def set_error(
        self,
        error: ErrorCode | ErrorDetail | Mapping[str, Any] | None,
        message: str | None = None,
        errors: Sequence[ErrorItem | Mapping[str, Any]] | None = None,
    ) -> "JsonMessage":
        """Set the error object.

        Either pass a complete error object (mapping or :class:`ErrorDetail`),
        which is stored as-is, or an error code followed by ``message`` and an
        optional list of sub-errors, which are assembled into
        ``{"code", "message", "errors"}``.
        """

        if isinstance(error, (str, int, float)):
            self._error = {"code": error, "message": message, "errors": errors}
        else:
            self._error = error

        LOGGER.debug("Message error set", extra={"message_id": self._id})
        return self

    def to_object(self) -> dict[str, Any]:
        """Return the message as a plain dict."""

        return {
            "apiVersion": self._api_version,
            "id": self._id,
            "method": self._method,
            "data": self._data,
            "error": to_plain(self._error),
        }

    def to_json(self) -> str:
        """Return the JSON text of :meth:`to_object`.

        NaN and infinite floats are written as ``null`` and non-ASCII text is
        written as is, the way ``JSON.stringify`` does.
        """

        return json.dumps(
            _finite(self.to_object()),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )

    def __repr__(self) -> str:
        return f"JsonMessage(apiVersion={self._api_version!r}, id={self._id!r})"
