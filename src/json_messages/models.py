"""Typed error objects for the ``error`` member of a message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence


@dataclass(slots=True)
class ErrorItem:
    """One entry of ``error.errors``."""

    domain: str
    reason: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"domain": self.domain, "reason": self.reason, "message": self.message}


@dataclass(slots=True)
class ErrorDetail:
    """Structured ``error`` object with an optional list of sub-errors."""

    code: str | int | None
    message: str | None = None
    errors: Sequence[ErrorItem | Mapping[str, Any]] | None = None

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        # Leave ``errors`` out entirely when it was never given
        if self.errors is not None:
            error["errors"] = [to_plain(item) for item in self.errors]
        return error


def to_plain(value: Any) -> Any:
    """Render error dataclasses to plain dicts, recursing into containers."""

    if isinstance(value, (ErrorDetail, ErrorItem)):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value
