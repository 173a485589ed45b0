"""Build standardized JSON response messages."""

from .config import MessageConfig, load_config
from .exceptions import ConfigurationError, InvalidConfigurationError, JsonMessagesError
from .message import JsonMessage
from .models import ErrorDetail, ErrorItem

__all__ = [
    "ConfigurationError",
    "ErrorDetail",
    "ErrorItem",
    "InvalidConfigurationError",
    "JsonMessage",
    "JsonMessagesError",
    "MessageConfig",
    "load_config",
]
