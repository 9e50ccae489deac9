"""
Tests for payment models.
"""

import pytest

from tg_bot_models.exceptions import InvalidPayloadError, PayloadDecodeError
from tg_bot_models.models import (
    Invoice,
    LabeledPrice,
    OrderInfo,
    ShippingAddress,
    SuccessfulPayment,
)


class TestInvoiceValidation:
    """Tests for Invoice construction."""

    def test_create_invoice_with_required_fields(self):
        """Test creating invoice with required fields."""
        invoice = Invoice(title="Book", currency="USD", total_amount=145)
        assert invoice.title == "Book"
        assert invoice.currency == "USD"
        assert invoice.total_amount == 145
        assert invoice.description is None
        assert invoice.start_parameter is None

    def test_zero_total_amount_is_valid(self):
        """A free invoice is allowed."""
        invoice = Invoice(title="Sample", currency="EUR", total_amount=0)
        assert invoice.total_amount == 0

    @pytest.mark.parametrize("amount", [-1, -5, -100000])
    def test_negative_total_amount_raises_error(self, amount):
        """Negative amounts should be rejected with the offending value."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            Invoice(title="Book", currency="USD", total_amount=amount)

        assert str(exc_info.value) == (
            f"Total amount should be greater than or equal to zero, but got: {amount}"
        )

    @pytest.mark.parametrize("title", ["", None])
    def test_missing_title_raises_error(self, title):
        """Title is required and non-empty."""
        with pytest.raises(InvalidPayloadError, match="Missing product name."):
            Invoice(title=title, currency="USD", total_amount=1)

    @pytest.mark.parametrize("currency", ["", None])
    def test_missing_currency_raises_error(self, currency):
        """Currency is required and non-empty."""
        with pytest.raises(InvalidPayloadError, match="Missing currency."):
            Invoice(title="Book", currency=currency, total_amount=1)

    @pytest.mark.parametrize("currency", ["usd", "US", "DOLLAR", "U$D"])
    def test_malformed_currency_raises_error(self, currency):
        """Currency must be a three-letter upper-case code."""
        with pytest.raises(InvalidPayloadError, match="ISO 4217"):
            Invoice(title="Book", currency=currency, total_amount=1)

    def test_missing_total_amount_raises_error(self):
        """Total amount is required."""
        with pytest.raises(InvalidPayloadError, match="Missing total amount."):
            Invoice(title="Book", currency="USD")

    def test_non_integer_total_amount_raises_error(self):
        """Fractional amounts are not allowed."""
        with pytest.raises(InvalidPayloadError, match="total_amount"):
            Invoice(title="Book", currency="USD", total_amount=1.45)

    @pytest.mark.parametrize("amount", [True, "5"])
    def test_bool_or_string_total_amount_raises_error(self, amount):
        """Only real integers are amounts; no coercion from bool or str."""
        with pytest.raises(InvalidPayloadError, match="total_amount"):
            Invoice(title="Book", currency="USD", total_amount=amount)


class TestInvoiceProjection:
    """Tests for Invoice JSON projection."""

    def test_absent_optionals_are_omitted(self):
        """description and start_parameter should not appear when unset."""
        data = Invoice(title="Book", currency="USD", total_amount=145).to_dict()

        assert data == {"title": "Book", "currency": "USD", "total_amount": 145}
        assert "description" not in data
        assert "start_parameter" not in data

    def test_all_fields_projected(self, sample_invoice: dict):
        """Every set field should use its wire name."""
        assert Invoice(**sample_invoice).to_dict() == sample_invoice

    def test_str_is_json(self):
        """str() should return the compact JSON projection."""
        invoice = Invoice(title="Book", currency="USD", total_amount=145)
        assert str(invoice) == '{"title":"Book","currency":"USD","total_amount":145}'


class TestInvoiceDecoding:
    """Tests for decoding invoices from the wire."""

    def test_round_trip(self, sample_invoice: dict):
        """Decoding the projection should give field-for-field equal values."""
        invoice = Invoice(**sample_invoice)
        decoded = Invoice.from_json(invoice.to_json())

        assert decoded == invoice
        assert decoded.title == invoice.title
        assert decoded.description == invoice.description
        assert decoded.start_parameter == invoice.start_parameter
        assert decoded.currency == invoice.currency
        assert decoded.total_amount == invoice.total_amount

    def test_round_trip_without_optionals(self):
        """Absent optionals should stay absent."""
        invoice = Invoice(title="Book", currency="USD", total_amount=0)
        decoded = Invoice.from_dict(invoice.to_dict())

        assert decoded == invoice
        assert decoded.description is None

    def test_unknown_fields_ignored(self, sample_invoice: dict):
        """Fields added by newer API versions should be ignored."""
        invoice = Invoice.from_dict({**sample_invoice, "subscription_period": 2592000})
        assert "subscription_period" not in invoice.to_dict()

    def test_negative_amount_raises_decode_error(self, sample_invoice: dict):
        """Range checks apply when decoding too."""
        with pytest.raises(PayloadDecodeError, match="but got: -5"):
            Invoice.from_dict({**sample_invoice, "total_amount": -5})

    def test_decode_error_is_invalid_payload(self):
        """Decode errors belong to the invalid payload category."""
        with pytest.raises(InvalidPayloadError):
            Invoice.from_json('{"title": "Book"}')

    def test_malformed_json_raises_decode_error(self):
        """Malformed JSON text should fail decoding."""
        with pytest.raises(PayloadDecodeError, match="Invalid JSON"):
            Invoice.from_json("{not json")


class TestLabeledPrice:
    """Tests for LabeledPrice model."""

    def test_projection(self):
        """Label and amount should be projected."""
        assert LabeledPrice(label="Tax", amount=15).to_dict() == {"label": "Tax", "amount": 15}

    def test_missing_label_raises_error(self):
        """Label is required."""
        with pytest.raises(InvalidPayloadError, match="Missing price label."):
            LabeledPrice(amount=15)

    def test_bool_amount_raises_error(self):
        """A boolean is not a price amount."""
        with pytest.raises(InvalidPayloadError, match="amount"):
            LabeledPrice(label="Tax", amount=False)


class TestSuccessfulPayment:
    """Tests for SuccessfulPayment model."""

    def test_decode_with_order_info(self):
        """Nested order info and shipping address should be decoded."""
        payment = SuccessfulPayment.from_dict(
            {
                "currency": "USD",
                "total_amount": 145,
                "invoice_payload": "order-1",
                "telegram_payment_charge_id": "tg-1",
                "provider_payment_charge_id": "pp-1",
                "order_info": {
                    "name": "Marty",
                    "shipping_address": {
                        "country_code": "US",
                        "state": "CA",
                        "city": "Hill Valley",
                        "street_line1": "9303 Lyon Drive",
                        "street_line2": "",
                        "post_code": "95420",
                    },
                },
            }
        )

        assert payment.order_info == OrderInfo(
            name="Marty",
            shipping_address=ShippingAddress(
                country_code="US",
                state="CA",
                city="Hill Valley",
                street_line1="9303 Lyon Drive",
                post_code="95420",
            ),
        )
        assert payment.shipping_option_id is None

    def test_negative_amount_raises_decode_error(self):
        """Payment amounts cannot be negative."""
        with pytest.raises(PayloadDecodeError, match="greater than or equal to zero"):
            SuccessfulPayment.from_dict(
                {
                    "currency": "USD",
                    "total_amount": -1,
                    "invoice_payload": "order-1",
                    "telegram_payment_charge_id": "tg-1",
                    "provider_payment_charge_id": "pp-1",
                }
            )
