import logging

import pytest

from todo_client.config import DEFAULT_BASE_URL, Settings
from todo_client.errors import ConfigError
from todo_client.logging import LOG_FORMAT, configure_logging


def test_settings_defaults():
    settings = Settings.from_env({})

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.log_level == "INFO"


def test_settings_from_environ():
    settings = Settings.from_env({
        "TODO_API_BASE_URL": " http://todos.local ",
        "TODO_CLIENT_LOG_LEVEL": "debug",
    })

    assert settings.base_url == "http://todos.local"
    assert settings.log_level == "DEBUG"


def test_settings_empty_base_url():
    with pytest.raises(ConfigError):
        Settings.from_env({"TODO_API_BASE_URL": "  "})


def test_configure_logging():
    logger = configure_logging("debug")
    configure_logging("debug")

    assert logger.name == "todo_client"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_level_from_env(monkeypatch):
    monkeypatch.setenv("TODO_CLIENT_LOG_LEVEL", " debug ")

    logger = configure_logging()

    assert logger.level == logging.DEBUG


def test_configure_logging_default_level(monkeypatch):
    monkeypatch.delenv("TODO_CLIENT_LOG_LEVEL", raising=False)

    assert configure_logging().level == logging.INFO
