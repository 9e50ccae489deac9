"""
pytest fixtures and configuration for tg-bot-models tests.
"""

import logging
from pathlib import Path

import pytest

from tg_bot_models.config import Config, reset_config
from tg_bot_models.logging import reset_logging
from tg_bot_models.models import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:  # type: ignore[misc]
    """
    Point configuration at a temporary file and clear overriding env vars.

    This keeps tests from reading the user's real configuration.
    """
    for env_var in Config.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setattr(Config, "CONFIG_PATH", config_path)
    reset_config()

    yield config_path

    reset_config()


@pytest.fixture(autouse=True)
def reset_logging_state() -> None:  # type: ignore[misc]
    """
    Allow setup_logging() to run again and drop handlers added by a test.
    """
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    reset_logging()

    yield

    for handler in root_logger.handlers:
        if handler not in original_handlers:
            handler.close()
    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)
    reset_logging()


@pytest.fixture
def inline_keyboard() -> InlineKeyboardMarkup:
    """
    Two-row inline keyboard.

    Returns:
        InlineKeyboardMarkup with a callback button and a URL button
    """
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [InlineKeyboardButton(text="Yes", callback_data="answer:yes")],
            [InlineKeyboardButton(text="Docs", url="https://core.telegram.org/bots/api")],
        ]
    )


@pytest.fixture
def reply_keyboard() -> ReplyKeyboardMarkup:
    """
    Reply keyboard built from the string shorthand.

    Returns:
        ReplyKeyboardMarkup with one row of two buttons
    """
    return ReplyKeyboardMarkup(keyboard=[["Left", "Right"]], resize_keyboard=True)


@pytest.fixture
def sample_update() -> dict:
    """
    Sample Telegram update as it arrives from the API.

    Returns:
        Sample update dict, including keys the models do not declare
    """
    return {
        "update_id": 12345,
        "message": {
            "message_id": 1,
            "from": {
                "id": 123456,
                "is_bot": False,
                "first_name": "Test",
                "username": "testuser",
                "is_premium": True,
            },
            "date": 1234567890,
            "chat": {"id": 123456, "type": "private", "first_name": "Test"},
            "text": "/start hello",
            "entities": [{"type": "bot_command", "offset": 0, "length": 6}],
            "link_preview_options": {"is_disabled": True},
        },
    }


@pytest.fixture
def sample_invoice() -> dict:
    """
    Sample invoice wire document.

    Returns:
        Invoice dict with all fields set
    """
    return {
        "title": "Working Time Machine",
        "description": "Want to visit your great-great-great-grandparents?",
        "start_parameter": "time-machine-sku",
        "currency": "USD",
        "total_amount": 145,
    }
