import logging

import pytest


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("json_messages")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no message env vars and no .env file in the working directory."""

    for name in ("JSON_MESSAGES_API_VERSION", "JSON_MESSAGES_METHOD", "LOG_LEVEL"):
        # setenv first so values loaded from .env are undone on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
