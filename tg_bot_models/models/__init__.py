"""
Telegram Bot API wire models.

WIRE_MODELS maps each public model name to its class so tools can decode
a document by name.
"""

from tg_bot_models.models.base import TelegramObject
from tg_bot_models.models.enums import ChatType, ParseMode
from tg_bot_models.models.markups import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
)
from tg_bot_models.models.payloads import (
    AnswerCallbackQueryPayload,
    ChatAddress,
    EditMessageReplyMarkupPayload,
    EditMessageTextPayload,
    InlineAddress,
    SendInvoicePayload,
    SendMessagePayload,
)
from tg_bot_models.models.payment import (
    Invoice,
    LabeledPrice,
    OrderInfo,
    ShippingAddress,
    SuccessfulPayment,
)
from tg_bot_models.models.telegram import (
    CallbackQuery,
    Chat,
    Message,
    MessageEntity,
    Update,
    User,
)

WIRE_MODELS: dict[str, type[TelegramObject]] = {
    model.__name__: model
    for model in (
        # Request payloads
        AnswerCallbackQueryPayload,
        EditMessageReplyMarkupPayload,
        EditMessageTextPayload,
        SendInvoicePayload,
        SendMessagePayload,
        # Reply markup
        ForceReply,
        InlineKeyboardButton,
        InlineKeyboardMarkup,
        KeyboardButton,
        ReplyKeyboardMarkup,
        ReplyKeyboardRemove,
        # Payments
        Invoice,
        LabeledPrice,
        OrderInfo,
        ShippingAddress,
        SuccessfulPayment,
        # Responses
        CallbackQuery,
        Chat,
        Message,
        MessageEntity,
        Update,
        User,
    )
}

__all__ = [
    "WIRE_MODELS",
    "AnswerCallbackQueryPayload",
    "CallbackQuery",
    "Chat",
    "ChatAddress",
    "ChatType",
    "EditMessageReplyMarkupPayload",
    "EditMessageTextPayload",
    "ForceReply",
    "InlineAddress",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "Invoice",
    "KeyboardButton",
    "LabeledPrice",
    "Message",
    "MessageEntity",
    "OrderInfo",
    "ParseMode",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ReplyMarkup",
    "SendInvoicePayload",
    "SendMessagePayload",
    "ShippingAddress",
    "SuccessfulPayment",
    "TelegramObject",
    "Update",
    "User",
]
