"""
JSON serialization helpers for tg-bot-models.

Reply markup travels inside request payloads as a JSON-encoded string
rather than a nested object. This is the Bot API's documented convention
for keyboards, so projection runs in two stages: the markup is first
projected to its own JSON document, then that document's text is embedded
as a string leaf in the outer payload.
"""

import json
from typing import Any

from tg_bot_models.constants import JSON_SEPARATORS
from tg_bot_models.exceptions import SerializationError
from tg_bot_models.logging import get_logger

logger = get_logger(__name__)


def dumps(data: Any, indent: int | None = None, ensure_ascii: bool = False, sort_keys: bool = False) -> str:
    """
    Encode a projected document as JSON text.

    Compact separators are used unless an indent is requested.

    Args:
        data: JSON-compatible data (dicts, lists, strings, numbers, booleans)
        indent: Optional indentation for pretty-printing
        ensure_ascii: Escape non-ASCII characters
        sort_keys: Sort object keys

    Returns:
        JSON text

    Raises:
        SerializationError: If data contains values JSON cannot represent
    """
    try:
        return json.dumps(
            data,
            indent=indent,
            separators=None if indent is not None else JSON_SEPARATORS,
            ensure_ascii=ensure_ascii,
            sort_keys=sort_keys,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        logger.error("Failed to encode JSON document", error=str(e))
        raise SerializationError(f"Failed to encode JSON document: {e}") from e


def encode_markup(markup: Any) -> str:
    """
    Second projection stage for reply markup.

    Args:
        markup: A reply markup model

    Returns:
        The markup's JSON projection as text

    Raises:
        SerializationError: If the markup cannot be projected
    """
    projection = getattr(markup, "to_dict", None)
    if projection is None:
        raise SerializationError(
            f"Reply markup should be a markup object, but got: {type(markup).__name__}"
        )
    return dumps(projection())


def decode_markup(value: Any) -> Any:
    """
    Undo the string encoding of reply markup on an incoming payload.

    Strings are parsed as JSON; anything else is passed through for the
    model's own validation.

    Raises:
        ValueError: If a string value is not a JSON object
    """
    if not isinstance(value, str | bytes):
        return value

    try:
        decoded = json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError(f"Reply markup should be a JSON-encoded object: {e.msg}") from e

    if not isinstance(decoded, dict):
        raise ValueError(
            f"Reply markup should be a JSON-encoded object, but got: {type(decoded).__name__}"
        )
    return decoded
