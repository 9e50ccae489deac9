"""
Payment models.

Invoices, prices and the objects Telegram sends back once a user pays.
Amounts are integers in the smallest units of the currency: for a price of
US$ 1.45 the amount is 145.
"""

from typing import Any

from pydantic import Field, field_validator

from tg_bot_models.core.validation import (
    require_non_negative,
    require_present,
    require_text,
    validate_currency,
)
from tg_bot_models.models.base import TelegramObject


class Invoice(TelegramObject):
    """Basic information about an invoice."""

    title: str = Field(default=None, validate_default=True, description="Product name")
    description: str | None = Field(None, description="Product description")
    start_parameter: str | None = Field(
        None, description="Deep-linking parameter that can be used to generate this invoice"
    )
    currency: str = Field(default=None, validate_default=True, description="ISO 4217 currency code")
    total_amount: int = Field(
        default=None,
        validate_default=True,
        strict=True,
        description="Total price in the smallest currency units",
    )

    @field_validator("title", mode="before")
    @classmethod
    def _check_title(cls, value: Any) -> str:
        return require_text(value, "Missing product name.")

    @field_validator("currency", mode="before")
    @classmethod
    def _check_currency(cls, value: Any) -> str:
        return validate_currency(value)

    @field_validator("total_amount", mode="before")
    @classmethod
    def _check_total_amount_present(cls, value: Any) -> Any:
        return require_present(value, "Missing total amount.")

    @field_validator("total_amount")
    @classmethod
    def _check_total_amount(cls, value: int) -> int:
        return require_non_negative(value, "Total amount")


class LabeledPrice(TelegramObject):
    """A portion of the price for goods or services."""

    label: str = Field(default=None, validate_default=True)
    amount: int = Field(default=None, validate_default=True, strict=True)

    @field_validator("label", mode="before")
    @classmethod
    def _check_label(cls, value: Any) -> str:
        return require_text(value, "Missing price label.")

    @field_validator("amount", mode="before")
    @classmethod
    def _check_amount(cls, value: Any) -> Any:
        return require_present(value, "Missing price amount.")


class ShippingAddress(TelegramObject):
    """A shipping address."""

    country_code: str
    state: str = ""
    city: str
    street_line1: str
    street_line2: str = ""
    post_code: str


class OrderInfo(TelegramObject):
    """Information about an order."""

    name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    shipping_address: ShippingAddress | None = None


class SuccessfulPayment(TelegramObject):
    """Basic information about a successful payment."""

    currency: str
    total_amount: int = Field(strict=True)
    invoice_payload: str
    shipping_option_id: str | None = None
    order_info: OrderInfo | None = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str

    @field_validator("currency", mode="before")
    @classmethod
    def _check_currency(cls, value: Any) -> str:
        return validate_currency(value)

    @field_validator("total_amount")
    @classmethod
    def _check_total_amount(cls, value: int) -> int:
        return require_non_negative(value, "Total amount")
