"""Exception hierarchy for the JSON message builder."""

from __future__ import annotations


class JsonMessagesError(Exception):
    """Base exception for json_messages."""


class ConfigurationError(JsonMessagesError):
    """Raised when environment configuration is missing or invalid."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when a message is constructed without any params."""
