"""
Reply markup models.

Custom keyboards and reply options attached to outgoing messages. Keyboard
rows are tuples so a markup value is immutable all the way down.
"""

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Discriminator, Field, Tag, field_validator, model_validator

from tg_bot_models.core.validation import require_present, require_text, validate_callback_data
from tg_bot_models.models.base import TelegramObject

INLINE_BUTTON_ACTIONS = (
    "url",
    "callback_data",
    "switch_inline_query",
    "switch_inline_query_current_chat",
    "pay",
)


def _action_is_set(name: str, value: Any) -> bool:
    # pay only counts when true; the other actions count even when empty
    if name == "pay":
        return value is True
    return value is not None


class InlineKeyboardButton(TelegramObject):
    """
    One button of an inline keyboard.

    Exactly one of the optional action fields must be used.
    """

    text: str = Field(default=None, validate_default=True)
    url: str | None = None
    callback_data: str | None = None
    switch_inline_query: str | None = None
    switch_inline_query_current_chat: str | None = None
    pay: bool | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _check_text(cls, value: Any) -> str:
        return require_text(value, "Button text should be provided")

    @field_validator("callback_data")
    @classmethod
    def _check_callback_data(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return validate_callback_data(value)

    @model_validator(mode="after")
    def _check_single_action(self) -> "InlineKeyboardButton":
        used = [name for name in INLINE_BUTTON_ACTIONS if _action_is_set(name, getattr(self, name))]
        if len(used) != 1:
            raise ValueError(
                f"Exactly one of {', '.join(INLINE_BUTTON_ACTIONS)} should be set "
                f"on button '{self.text}', but got: {len(used)}"
            )
        return self


class InlineKeyboardMarkup(TelegramObject):
    """Inline keyboard that appears right next to the message it belongs to."""

    markup_tag: ClassVar[str] = "inline_keyboard"

    inline_keyboard: tuple[tuple[InlineKeyboardButton, ...], ...] = Field(
        default=None, validate_default=True
    )

    @field_validator("inline_keyboard", mode="before")
    @classmethod
    def _check_rows(cls, value: Any) -> Any:
        return require_present(value, "Inline keyboard rows should be provided")


class KeyboardButton(TelegramObject):
    """One button of a custom reply keyboard."""

    text: str = Field(default=None, validate_default=True)
    request_contact: bool | None = None
    request_location: bool | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _check_text(cls, value: Any) -> str:
        return require_text(value, "Button text should be provided")


class ReplyKeyboardMarkup(TelegramObject):
    """Custom keyboard with reply options."""

    markup_tag: ClassVar[str] = "keyboard"

    keyboard: tuple[tuple[KeyboardButton, ...], ...] = Field(default=None, validate_default=True)
    resize_keyboard: bool | None = None
    one_time_keyboard: bool | None = None
    selective: bool | None = None

    @field_validator("keyboard", mode="before")
    @classmethod
    def _check_rows(cls, value: Any) -> Any:
        require_present(value, "Keyboard rows should be provided")
        if not isinstance(value, list | tuple):
            return value
        # Bare strings are shorthand for a button with only text
        return [
            [{"text": button} if isinstance(button, str) else button for button in row]
            if isinstance(row, list | tuple)
            else row
            for row in value
        ]


class ReplyKeyboardRemove(TelegramObject):
    """Asks clients to remove the current custom keyboard."""

    markup_tag: ClassVar[str] = "remove_keyboard"

    remove_keyboard: Literal[True] = True
    selective: bool | None = None


class ForceReply(TelegramObject):
    """Asks clients to display a reply interface to the user."""

    markup_tag: ClassVar[str] = "force_reply"

    force_reply: Literal[True] = True
    input_field_placeholder: str | None = None
    selective: bool | None = None


MARKUP_TAGS = ("inline_keyboard", "keyboard", "remove_keyboard", "force_reply")


def _markup_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        return next((tag for tag in MARKUP_TAGS if tag in value), None)
    return getattr(value, "markup_tag", None)


ReplyMarkup = Annotated[
    Union[
        Annotated[InlineKeyboardMarkup, Tag("inline_keyboard")],
        Annotated[ReplyKeyboardMarkup, Tag("keyboard")],
        Annotated[ReplyKeyboardRemove, Tag("remove_keyboard")],
        Annotated[ForceReply, Tag("force_reply")],
    ],
    Discriminator(
        _markup_tag,
        custom_error_type="invalid_reply_markup",
        custom_error_message=(
            "Reply markup should be one of inline_keyboard, keyboard, "
            "remove_keyboard or force_reply"
        ),
    ),
]
