"""
Request payload models.

One model per outgoing Bot API call. Two conventions apply to every
payload here:

- reply_markup is sent as a JSON-encoded string, not a nested object.
  This is the API's documented wire format for keyboards.
- Edit requests target a message through exactly one Address variant,
  which is flattened into the outer object on the wire.
"""

from typing import Annotated, Any, ClassVar, Union

from pydantic import (
    Discriminator,
    Field,
    Tag,
    field_serializer,
    field_validator,
    model_serializer,
    model_validator,
)

from tg_bot_models.constants import CALLBACK_ANSWER_MAX_LENGTH
from tg_bot_models.core.serialization import decode_markup, encode_markup
from tg_bot_models.core.validation import (
    coerce_chat_id,
    require_non_negative,
    require_present,
    require_text,
    validate_currency,
)
from tg_bot_models.exceptions import SerializationError
from tg_bot_models.models.base import TelegramObject
from tg_bot_models.models.enums import ParseMode
from tg_bot_models.models.markups import ReplyMarkup
from tg_bot_models.models.payment import LabeledPrice

CHAT_ADDRESS_KEYS = ("chat_id", "message_id")
INLINE_ADDRESS_KEY = "inline_message_id"


class ChatAddress(TelegramObject):
    """A message sent by the bot, located by chat and message id."""

    address_tag: ClassVar[str] = "chat"

    chat_id: str = Field(default=None, validate_default=True)
    message_id: int = Field(default=None, validate_default=True, strict=True)

    @field_validator("chat_id", mode="before")
    @classmethod
    def _check_chat_id(cls, value: Any) -> str:
        return coerce_chat_id(value)

    @field_validator("message_id", mode="before")
    @classmethod
    def _check_message_id(cls, value: Any) -> Any:
        return require_present(value, "Message ID should be provided")


class InlineAddress(TelegramObject):
    """A message sent via the bot in inline mode."""

    address_tag: ClassVar[str] = "inline"

    inline_message_id: str = Field(default=None, validate_default=True)

    @field_validator("inline_message_id", mode="before")
    @classmethod
    def _check_inline_message_id(cls, value: Any) -> str:
        return require_text(value, "Inline message ID should be provided")


def _address_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        if INLINE_ADDRESS_KEY in value:
            return "inline"
        if any(key in value for key in CHAT_ADDRESS_KEYS):
            return "chat"
        return None
    return getattr(value, "address_tag", None)


Address = Annotated[
    Union[
        Annotated[ChatAddress, Tag("chat")],
        Annotated[InlineAddress, Tag("inline")],
    ],
    Discriminator(
        _address_tag,
        custom_error_type="invalid_address",
        custom_error_message="Address should be a chat address or an inline message address",
    ),
]


def address_fields(address: Any) -> dict[str, Any]:
    """
    Flatten an address into its wire keys.

    Raises:
        SerializationError: If the value is not a known address variant
    """
    if isinstance(address, ChatAddress):
        return {"chat_id": address.chat_id, "message_id": address.message_id}
    if isinstance(address, InlineAddress):
        return {"inline_message_id": address.inline_message_id}
    raise SerializationError(f"Unknown message address: {type(address).__name__}")


class _MarkupPayload(TelegramObject):
    """Payload carrying an optional, string-encoded reply markup."""

    reply_markup: ReplyMarkup | None = None

    @field_validator("reply_markup", mode="before")
    @classmethod
    def _decode_reply_markup(cls, value: Any) -> Any:
        return decode_markup(value)

    @field_serializer("reply_markup")
    def _encode_reply_markup(self, value: Any) -> str | None:
        if value is None:
            return None
        return encode_markup(value)


class _AddressedPayload(_MarkupPayload):
    """
    Payload editing an existing message.

    Accepts either an explicit address= value or the flat wire keys
    (chat_id + message_id, or inline_message_id), never both modes.
    """

    address: Address = Field(exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _collect_address(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        chat_fields = {
            key: data.pop(key) for key in CHAT_ADDRESS_KEYS if data.get(key) is not None
        }
        inline_message_id = data.pop(INLINE_ADDRESS_KEY, None)
        for key in CHAT_ADDRESS_KEYS:
            data.pop(key, None)

        if "address" in data:
            if chat_fields or inline_message_id is not None:
                raise ValueError("Address should be given either explicitly or by wire keys, not both")
            address = data["address"]
            if (
                isinstance(address, dict)
                and INLINE_ADDRESS_KEY in address
                and any(key in address for key in CHAT_ADDRESS_KEYS)
            ):
                raise ValueError(
                    "Either chat_id/message_id or inline_message_id should be provided, not both"
                )
            return data

        if chat_fields and inline_message_id is not None:
            raise ValueError(
                "Either chat_id/message_id or inline_message_id should be provided, not both"
            )
        if inline_message_id is not None:
            data["address"] = {INLINE_ADDRESS_KEY: inline_message_id}
        elif chat_fields:
            data["address"] = chat_fields
        else:
            raise ValueError("Chat ID and message ID, or inline message ID, should be provided")
        return data

    @model_serializer(mode="wrap")
    def _flatten_address(self, handler: Any) -> dict[str, Any]:
        return {**address_fields(self.address), **handler(self)}


class EditMessageTextPayload(_AddressedPayload):
    """Edit the text of a message sent by the bot or via the bot (inline mode)."""

    text: str = Field(default=None, validate_default=True, description="New text of the message")
    parse_mode: ParseMode | None = None
    disable_preview: bool | None = Field(None, alias="disable_web_page_preview")

    @field_validator("text", mode="before")
    @classmethod
    def _check_text(cls, value: Any) -> str:
        return require_text(value, "New text should be provided")

    @classmethod
    def for_chat_message(
        cls,
        chat_id: int | str,
        message_id: int,
        text: str,
        parse_mode: ParseMode | None = None,
        disable_preview: bool | None = None,
        reply_markup: Any = None,
    ) -> "EditMessageTextPayload":
        """
        Edit a message the bot sent to a chat.

        Args:
            chat_id: Unique identifier for the target chat or username of the
                target channel (in the format @channelusername)
            message_id: Identifier of the sent message
            text: New text of the message
            parse_mode: Optional. Markdown or HTML formatting of the text
            disable_preview: Optional. Disables link previews for links in this message
            reply_markup: Optional. Inline keyboard to attach
        """
        return cls(
            address={"chat_id": chat_id, "message_id": message_id},
            text=text,
            parse_mode=parse_mode,
            disable_preview=disable_preview,
            reply_markup=reply_markup,
        )

    @classmethod
    def for_inline_message(
        cls,
        inline_message_id: str,
        text: str,
        parse_mode: ParseMode | None = None,
        disable_preview: bool | None = None,
        reply_markup: Any = None,
    ) -> "EditMessageTextPayload":
        """
        Edit a message sent via the bot in inline mode.

        Args:
            inline_message_id: Identifier of the inline message
            text: New text of the message
            parse_mode: Optional. Markdown or HTML formatting of the text
            disable_preview: Optional. Disables link previews for links in this message
            reply_markup: Optional. Inline keyboard to attach
        """
        return cls(
            address={INLINE_ADDRESS_KEY: inline_message_id},
            text=text,
            parse_mode=parse_mode,
            disable_preview=disable_preview,
            reply_markup=reply_markup,
        )


class EditMessageReplyMarkupPayload(_AddressedPayload):
    """Replace (or remove, when unset) the reply markup of a message."""


class SendMessagePayload(_MarkupPayload):
    """Send a text message."""

    chat_id: str = Field(default=None, validate_default=True)
    text: str = Field(default=None, validate_default=True)
    parse_mode: ParseMode | None = None
    disable_preview: bool | None = Field(None, alias="disable_web_page_preview")
    disable_notification: bool | None = None
    reply_to_message_id: int | None = None

    @field_validator("chat_id", mode="before")
    @classmethod
    def _check_chat_id(cls, value: Any) -> str:
        return coerce_chat_id(value)

    @field_validator("text", mode="before")
    @classmethod
    def _check_text(cls, value: Any) -> str:
        return require_text(value, "Text should be provided")


class AnswerCallbackQueryPayload(TelegramObject):
    """Answer a callback query sent from an inline keyboard."""

    callback_query_id: str = Field(default=None, validate_default=True)
    text: str | None = Field(None, max_length=CALLBACK_ANSWER_MAX_LENGTH)
    show_alert: bool | None = None
    url: str | None = None
    cache_time: int | None = None

    @field_validator("callback_query_id", mode="before")
    @classmethod
    def _check_callback_query_id(cls, value: Any) -> str:
        return require_text(value, "Callback query ID should be provided")

    @field_validator("cache_time")
    @classmethod
    def _check_cache_time(cls, value: int | None) -> int | None:
        if value is None:
            return value
        return require_non_negative(value, "Cache time")


class SendInvoicePayload(_MarkupPayload):
    """Send an invoice for a payment."""

    chat_id: str = Field(default=None, validate_default=True)
    title: str = Field(default=None, validate_default=True)
    description: str = Field(default=None, validate_default=True)
    payload: str = Field(default=None, validate_default=True)
    provider_token: str = Field(default=None, validate_default=True)
    currency: str = Field(default=None, validate_default=True)
    prices: tuple[LabeledPrice, ...] = Field(default=None, validate_default=True)
    start_parameter: str | None = None
    photo_url: str | None = None
    need_shipping_address: bool | None = None
    is_flexible: bool | None = None
    disable_notification: bool | None = None
    reply_to_message_id: int | None = None

    @field_validator("chat_id", mode="before")
    @classmethod
    def _check_chat_id(cls, value: Any) -> str:
        return coerce_chat_id(value)

    @field_validator("title", mode="before")
    @classmethod
    def _check_title(cls, value: Any) -> str:
        return require_text(value, "Missing product name.")

    @field_validator("description", mode="before")
    @classmethod
    def _check_description(cls, value: Any) -> str:
        return require_text(value, "Missing product description.")

    @field_validator("payload", mode="before")
    @classmethod
    def _check_payload(cls, value: Any) -> str:
        return require_text(value, "Missing invoice payload.")

    @field_validator("provider_token", mode="before")
    @classmethod
    def _check_provider_token(cls, value: Any) -> str:
        return require_text(value, "Missing payment provider token.")

    @field_validator("currency", mode="before")
    @classmethod
    def _check_currency(cls, value: Any) -> str:
        return validate_currency(value)

    @field_validator("prices", mode="before")
    @classmethod
    def _check_prices(cls, value: Any) -> Any:
        if not value:
            raise ValueError("At least one price should be provided")
        return value
