"""
Telegram API response models.

Objects Telegram sends to the bot: updates, messages, callbacks and the
users and chats they refer to. Unknown keys are ignored so new API fields
never break decoding.
"""

from pydantic import Field

from tg_bot_models.models.base import TelegramObject
from tg_bot_models.models.enums import ChatType
from tg_bot_models.models.markups import InlineKeyboardMarkup
from tg_bot_models.models.payment import Invoice, SuccessfulPayment


class User(TelegramObject):
    """Telegram user model."""

    id: int
    is_bot: bool = False
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None


class Chat(TelegramObject):
    """Telegram chat model."""

    id: int
    type: ChatType = Field(..., description="Chat type: private, group, supergroup, channel")
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    title: str | None = None


class MessageEntity(TelegramObject):
    """Special entity in a text message: hashtag, username, URL, etc."""

    type: str
    offset: int
    length: int
    url: str | None = None
    user: User | None = None
    language: str | None = None


class Message(TelegramObject):
    """Telegram message model."""

    message_id: int
    from_: User | None = Field(None, alias="from")
    date: int
    chat: Chat
    edit_date: int | None = None
    text: str | None = None
    entities: tuple[MessageEntity, ...] | None = None
    invoice: Invoice | None = None
    successful_payment: SuccessfulPayment | None = None
    # Markup on incoming messages is a plain nested object, not a string
    reply_markup: InlineKeyboardMarkup | None = None


class CallbackQuery(TelegramObject):
    """Telegram callback query model."""

    id: str
    from_: User = Field(..., alias="from")
    message: Message | None = None
    inline_message_id: str | None = None
    chat_instance: str | None = None
    data: str | None = None


class Update(TelegramObject):
    """Telegram update model."""

    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    callback_query: CallbackQuery | None = None
