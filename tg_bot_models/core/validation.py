"""
Validation utilities for tg-bot-models.

Every helper raises ValueError with a human-readable message naming the
violated constraint. Models call these from Pydantic validators, and the
base model turns the collected messages into an InvalidPayloadError.
"""

import re
from typing import Any

from tg_bot_models.constants import CALLBACK_DATA_MAX_BYTES, CURRENCY_CODE_LENGTH

# ISO 4217 alphabetic code, e.g. USD, EUR, XTR
CURRENCY_CODE_PATTERN = re.compile(rf"^[A-Z]{{{CURRENCY_CODE_LENGTH}}}$")


def require_text(value: Any, message: str) -> str:
    """
    Ensure a required string field is present and non-empty.

    Args:
        value: Raw field value
        message: Error message used when the value is missing or empty

    Returns:
        The validated string

    Raises:
        ValueError: If value is None, not a string, or empty
    """
    if value is None or value == "":
        raise ValueError(message)

    if not isinstance(value, str):
        raise ValueError(f"{message} as a string, but got: {type(value).__name__}")

    return value


def require_present(value: Any, message: str) -> Any:
    """
    Ensure a required non-string field is present.

    Raises:
        ValueError: If value is None
    """
    if value is None:
        raise ValueError(message)
    return value


def require_non_negative(value: int, label: str) -> int:
    """
    Ensure an integer field is greater than or equal to zero.

    Args:
        value: Integer value (already type-checked)
        label: Human-readable field name, capitalised

    Returns:
        The validated value

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(
            f"{label} should be greater than or equal to zero, but got: {value}"
        )
    return value


def coerce_chat_id(value: Any) -> str:
    """
    Normalise a chat identifier to its wire form.

    Telegram accepts either a numeric chat id or a channel username
    (@channelusername). Integers are converted to their decimal string.

    Args:
        value: Integer id or string id/username

    Returns:
        Chat identifier as a non-empty string

    Raises:
        ValueError: If the identifier is missing or empty
    """
    if isinstance(value, bool):
        raise ValueError("Chat ID should be an integer or a string")

    if isinstance(value, int):
        return str(value)

    return require_text(value, "Chat ID should be provided")


def validate_currency(value: Any) -> str:
    """
    Validate a three-letter ISO 4217 currency code.

    Raises:
        ValueError: If the code is missing or malformed
    """
    currency = require_text(value, "Missing currency.")

    if not CURRENCY_CODE_PATTERN.match(currency):
        raise ValueError(
            f"Currency should be a three-letter ISO 4217 code, but got: {currency}"
        )

    return currency


def validate_callback_data(value: str) -> str:
    """
    Validate inline button callback data (1-64 bytes once UTF-8 encoded).

    Raises:
        ValueError: If data is empty or too long
    """
    size = len(value.encode("utf-8"))
    if size == 0 or size > CALLBACK_DATA_MAX_BYTES:
        raise ValueError(
            f"Callback data should be 1-{CALLBACK_DATA_MAX_BYTES} bytes, but got: {size} bytes"
        )
    return value
