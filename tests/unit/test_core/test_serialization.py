"""
Tests for JSON serialization helpers.
"""

import json

import pytest

from tg_bot_models.core.serialization import decode_markup, dumps, encode_markup
from tg_bot_models.exceptions import SerializationError
from tg_bot_models.models import InlineKeyboardMarkup, ReplyKeyboardRemove


class TestDumps:
    """Tests for dumps function."""

    def test_compact_by_default(self):
        """Default output has no whitespace."""
        assert dumps({"a": [1, 2], "b": True}) == '{"a":[1,2],"b":true}'

    def test_indent(self):
        """Indentation switches to pretty-printing."""
        assert dumps({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_sort_keys(self):
        """Keys can be sorted."""
        assert dumps({"b": 1, "a": 2}, sort_keys=True) == '{"a":2,"b":1}'

    def test_ensure_ascii(self):
        """Non-ASCII text can be escaped."""
        assert dumps({"t": "é"}, ensure_ascii=True) == '{"t":"\\u00e9"}'

    def test_unencodable_value_raises_error(self):
        """Values JSON cannot represent should raise SerializationError."""
        with pytest.raises(SerializationError, match="Failed to encode"):
            dumps({"value": object()})

    def test_nan_raises_error(self):
        """NaN is not valid JSON."""
        with pytest.raises(SerializationError):
            dumps({"value": float("nan")})


class TestEncodeMarkup:
    """Tests for encode_markup function."""

    def test_encoded_markup_parses_to_projection(self, inline_keyboard: InlineKeyboardMarkup):
        """The string form should parse back to the markup's projection."""
        encoded = encode_markup(inline_keyboard)

        assert isinstance(encoded, str)
        assert json.loads(encoded) == inline_keyboard.to_dict()

    def test_remove_keyboard(self):
        """Test encoding of the keyboard removal markup."""
        assert encode_markup(ReplyKeyboardRemove()) == '{"remove_keyboard":true}'

    def test_non_markup_raises_error(self):
        """Objects without a projection cannot be encoded."""
        with pytest.raises(SerializationError, match="but got: dict"):
            encode_markup({"remove_keyboard": True})


class TestDecodeMarkup:
    """Tests for decode_markup function."""

    def test_string_is_parsed(self):
        """JSON text should become a dict."""
        assert decode_markup('{"force_reply":true}') == {"force_reply": True}

    def test_non_string_passes_through(self):
        """Dicts and models are left for model validation."""
        markup = ReplyKeyboardRemove()
        assert decode_markup(markup) is markup

    def test_json_array_raises_error(self):
        """Only JSON objects are markup."""
        with pytest.raises(ValueError, match="but got: list"):
            decode_markup("[]")
