"""Environment-driven defaults for building messages."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Final

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError


VALID_LOG_LEVELS: Final[set[str]] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class MessageConfig:
    """Defaults applied to every message built from the environment."""

    api_version: str
    method: str | None
    log_level: str

    def as_params(self) -> dict[str, Any]:
        """Return the constructor params for :class:`JsonMessage`."""

        return {"apiVersion": self.api_version, "method": self.method}


def load_config() -> MessageConfig:
    """Load and validate configuration from environment variables."""

    load_dotenv(find_dotenv(usecwd=True))

    api_version = os.getenv("JSON_MESSAGES_API_VERSION")
    method = os.getenv("JSON_MESSAGES_METHOD") or None
    log_level = (os.getenv("LOG_LEVEL") or "INFO").upper()

    if api_version is None:
        raise ConfigurationError("JSON_MESSAGES_API_VERSION is required")
    if log_level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}"
        )

    return MessageConfig(
        api_version=api_version,
        method=method,
        log_level=log_level,
    )
