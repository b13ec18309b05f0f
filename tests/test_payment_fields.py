"""
Tests for payment field formatting and validation.
"""

import random
import re

import pytest
from beautyai_booking.core.models import PaymentFields
from beautyai_booking.utils.payment_fields import PaymentFieldUtils

CARD_SHAPE = re.compile(r"^(\d{1,4}( \d{1,4})*)?$")
EXPIRY_SHAPE = re.compile(r"^\d{0,2}(/\d{0,2})?$")


def _random_inputs(count=300, seed=7):
    rng = random.Random(seed)
    alphabet = "0123456789 -/abcXYZ.\t"
    for _ in range(count):
        yield "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 30)))


class TestFormatCardNumber:
    """Test card number formatting."""

    def test_groups_digits_by_four(self):
        assert PaymentFieldUtils.format_card_number("4242424242424242") == "4242 4242 4242 4242"

    def test_strips_separators(self):
        assert PaymentFieldUtils.format_card_number("4242-4242 4242x4242") == "4242 4242 4242 4242"

    def test_partial_input(self):
        assert PaymentFieldUtils.format_card_number("424242") == "4242 42"
        assert PaymentFieldUtils.format_card_number("424") == "424"
        assert PaymentFieldUtils.format_card_number("") == ""

    def test_keeps_only_first_sixteen_digits(self):
        assert PaymentFieldUtils.format_card_number("1" * 20) == "1111 1111 1111 1111"

    def test_none_is_empty(self):
        assert PaymentFieldUtils.format_card_number(None) == ""

    def test_output_shape_for_arbitrary_input(self):
        for raw in _random_inputs():
            formatted = PaymentFieldUtils.format_card_number(raw)
            assert CARD_SHAPE.match(formatted), (raw, formatted)
            assert len(formatted) <= 19


class TestFormatExpiry:
    """Test expiry formatting."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("", ""),
            ("1", "1"),
            ("12", "12/"),
            ("123", "12/3"),
            ("1225", "12/25"),
            ("12/25", "12/25"),
            ("122599", "12/25"),
        ],
    )
    def test_inserts_slash_after_month(self, raw, expected):
        assert PaymentFieldUtils.format_expiry(raw) == expected

    def test_output_shape_for_arbitrary_input(self):
        for raw in _random_inputs(seed=11):
            formatted = PaymentFieldUtils.format_expiry(raw)
            assert EXPIRY_SHAPE.match(formatted), (raw, formatted)
            assert len(formatted) <= 5


class TestSanitizeDigits:
    def test_strips_and_truncates(self):
        assert PaymentFieldUtils.sanitize_digits("12a34b5", 4) == "1234"
        assert PaymentFieldUtils.sanitize_digits("9 0 2 1 0 7", 5) == "90210"

    def test_zero_length(self):
        assert PaymentFieldUtils.sanitize_digits("123", 0) == ""


class TestValidate:
    """Test card field validation."""

    def test_valid_fields_have_no_errors(self):
        fields = PaymentFields(
            card_number="4242 4242 4242 4242",
            expiry="12/30",
            cvv="123",
            cardholder_name="Jane Doe",
            postal_code="10001",
        )
        assert PaymentFieldUtils.validate(fields) == {}

    def test_reports_every_failing_field(self):
        errors = PaymentFieldUtils.validate(PaymentFields())
        assert set(errors) == {"card_number", "expiry", "cvv", "cardholder_name", "postal_code"}

    def test_fifteen_digit_card_fails(self):
        fields = PaymentFields(card_number="4242 4242 4242 424")
        assert "card_number" in PaymentFieldUtils.validate(fields)

    def test_blank_name_fails(self):
        fields = PaymentFields(cardholder_name="   ")
        assert "cardholder_name" in PaymentFieldUtils.validate(fields)

    def test_expiry_pattern(self):
        assert "expiry" in PaymentFieldUtils.validate(PaymentFields(expiry="12/"))
        assert "expiry" not in PaymentFieldUtils.validate(PaymentFields(expiry="99/99"))

    def test_none_values_do_not_raise(self):
        class Loose:
            card_number = None
            expiry = None
            cvv = None
            cardholder_name = None
            postal_code = None

        assert len(PaymentFieldUtils.validate(Loose())) == 5

    def test_validate_is_idempotent(self):
        fields = PaymentFields(card_number="4242", cvv="12", cardholder_name="Jane")
        assert PaymentFieldUtils.validate(fields) == PaymentFieldUtils.validate(fields)


class TestPaymentFields:
    """Test keystroke handling on PaymentFields."""

    def test_card_number_is_formatted(self):
        fields = PaymentFields().with_card_number("4242424242424242")
        assert fields.card_number == "4242 4242 4242 4242"

    def test_cvv_and_postal_code_are_capped(self):
        fields = PaymentFields().with_cvv("12345").with_postal_code("1234567")
        assert fields.cvv == "1234"
        assert fields.postal_code == "12345"

    def test_validated_replaces_previous_errors(self):
        fields = PaymentFields().validated()
        assert "card_number" in fields.field_errors

        fixed = (
            fields.with_card_number("4242424242424242")
            .with_expiry("1230")
            .with_cvv("123")
            .with_cardholder_name("Jane Doe")
            .with_postal_code("10001")
            .validated()
        )
        assert fixed.field_errors == {}
        assert fixed.is_valid

    def test_masked_card_number(self):
        fields = PaymentFields().with_card_number("4242424242421234")
        assert fields.masked_card_number() == "**** 1234"
