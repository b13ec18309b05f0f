"""
Tests for core models and enums.
"""

from dataclasses import FrozenInstanceError, replace
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError
from beautyai_booking.core.enums import BookingStatus, BookingStep, PaymentMethod, PaymentStatus
from beautyai_booking.core.models import BookingRecord, PriceBreakdown, Service


class TestBookingStep:
    """Test BookingStep ordering."""

    def test_ordered_steps(self):
        assert BookingStep.ordered() == [
            BookingStep.SERVICE,
            BookingStep.DATETIME,
            BookingStep.DETAILS,
            BookingStep.PAYMENT,
            BookingStep.CONFIRMATION,
        ]

    def test_next_and_previous(self):
        assert BookingStep.SERVICE.next() is BookingStep.DATETIME
        assert BookingStep.PAYMENT.next() is BookingStep.CONFIRMATION
        assert BookingStep.CONFIRMATION.next() is None
        assert BookingStep.DATETIME.previous() is BookingStep.SERVICE
        assert BookingStep.SERVICE.previous() is None

    def test_step_text(self):
        assert BookingStep.DATETIME.title == "Date & Time"
        assert BookingStep.PAYMENT.description == "Complete your booking"
        assert BookingStep.CONFIRMATION.is_terminal
        assert not BookingStep.PAYMENT.is_terminal


class TestPaymentMethod:
    def test_only_card_requires_fields(self):
        assert PaymentMethod.CARD.requires_card_fields
        assert not PaymentMethod.PAYPAL.requires_card_fields
        assert not PaymentMethod.APPLE_PAY.requires_card_fields
        assert not PaymentMethod.GOOGLE_PAY.requires_card_fields

    def test_display_names(self):
        assert PaymentMethod.CARD.display_name == "Credit/Debit Card"
        assert PaymentMethod.GOOGLE_PAY.display_name == "Google Pay"


class TestPriceBreakdown:
    """Test tax and total computation."""

    @pytest.mark.parametrize(
        "price, tax, total",
        [
            (150.0, "12.00", "162.00"),
            (80.0, "6.40", "86.40"),
            (0, "0.00", "0.00"),
            (19.99, "1.60", "21.59"),
            (0.06, "0.00", "0.06"),
        ],
    )
    def test_from_price(self, price, tax, total):
        breakdown = PriceBreakdown.from_price(price)
        assert breakdown.tax == Decimal(tax)
        assert breakdown.total == Decimal(total)
        assert breakdown.subtotal + breakdown.tax == breakdown.total


class TestService:
    @pytest.mark.parametrize("price", [0, -10.0])
    def test_rejects_non_positive_price(self, price):
        with pytest.raises(ValidationError):
            Service(
                id="s",
                professional_id="p",
                name="Consultation",
                duration=30,
                price=price,
                category="Hair",
                created_at="2024-01-15",
            )

    def test_rejects_non_positive_duration(self):
        with pytest.raises(ValidationError):
            Service(
                id="s",
                professional_id="p",
                name="Trim",
                description="",
                duration=0,
                price=10.0,
                category="Hair",
                created_at="2024-01-15",
            )


class TestBookingSession:
    """Test BookingSession."""

    def test_is_immutable(self, sample_session):
        with pytest.raises(FrozenInstanceError):
            sample_session.notes = "changed"

    def test_defaults(self, sample_session):
        assert sample_session.current_step is BookingStep.SERVICE
        assert sample_session.payment_method is PaymentMethod.CARD
        assert not sample_session.processing
        assert not sample_session.has_datetime()

    def test_totals(self, sample_session):
        assert sample_session.subtotal == Decimal("150.00")
        assert sample_session.tax == Decimal("12.00")
        assert sample_session.total == Decimal("162.00")


class TestBookingRecord:
    def test_from_confirmed_session(self, sample_session):
        session = replace(
            sample_session,
            current_step=BookingStep.CONFIRMATION,
            selected_date=date(2030, 1, 15),
            selected_time="10:00 AM",
            booking_id="booking_abc",
            payment_id="pay_abc",
        )

        record = BookingRecord.from_session(session, customer_id="customer_1")

        assert record.id == "booking_abc"
        assert record.professional_id == "prof_1"
        assert record.service_id == "service_1"
        assert record.status is BookingStatus.CONFIRMED
        assert record.payment_status is PaymentStatus.PAID
        assert record.payment_intent_id == "pay_abc"
        assert record.total_amount == Decimal("162.00")
        assert record.notes is None
