"""
Pytest configuration and fixtures.
"""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import Mock, AsyncMock

from beautyai_booking.core.models import BookingSession, Professional, ReviewRecord, Service
from beautyai_booking.services.booking import BookingService, BookingWizard, CatalogDataProvider
from beautyai_booking.services.payment import PaymentGateway, PaymentProcessor

TODAY = date(2026, 1, 1)
OPEN_DAY = date(2030, 1, 15)  # a Tuesday
SUNDAY = date(2030, 1, 13)


@pytest.fixture
def sample_service():
    """A $150 service matching the catalog's bridal package."""
    return Service(
        id="service_1",
        professional_id="prof_1",
        name="Bridal Makeup Package",
        description="Complete bridal makeup",
        duration=180,
        price=150.0,
        category="Makeup",
        created_at="2024-01-15",
    )


@pytest.fixture
def sample_professional():
    return Professional(
        id="prof_1",
        user_id="user1",
        business_name="Glamour Studio by Sarah",
        description="Bridal makeup and special occasion styling",
        location="Downtown, NYC",
        rating=4.9,
        review_count=127,
        verified=True,
        created_at="2024-01-15",
    )


@pytest.fixture
def sample_session(sample_service, sample_professional):
    return BookingSession(service=sample_service, professional=sample_professional)


@pytest.fixture
def catalog():
    return CatalogDataProvider()


@pytest.fixture
def booking_service(catalog):
    return BookingService(catalog)


@pytest.fixture
def mock_gateway():
    """Gateway double that approves every charge."""
    gateway = Mock(spec=PaymentGateway)
    gateway.charge = AsyncMock(return_value="pay_test123")
    return gateway


@pytest.fixture
def processor(mock_gateway):
    return PaymentProcessor(mock_gateway, timeout_seconds=1.0)


@pytest.fixture
def completed_ids():
    """Booking ids passed to the completion callback."""
    return []


@pytest.fixture
def make_wizard(booking_service, processor, completed_ids):
    """Factory for wizards wired to the mock gateway and a fixed 'today'."""

    def _make(**kwargs):
        kwargs.setdefault("on_booking_complete", completed_ids.append)
        kwargs.setdefault("today", lambda: TODAY)
        return BookingWizard(booking_service, processor, **kwargs)

    return _make


@pytest.fixture
def fill_valid_card():
    """Type a complete, valid set of card details into a wizard."""

    def _fill(wizard):
        wizard.update_card_number("4242424242424242")
        wizard.update_expiry("1230")
        wizard.update_cvv("123")
        wizard.update_cardholder_name("Jane Doe")
        wizard.update_postal_code("10001")

    return _fill


@pytest.fixture
def go_to_payment():
    """Walk a started wizard from the service step to the payment step."""

    def _go(wizard):
        wizard.advance()
        wizard.select_date(OPEN_DAY)
        wizard.select_time("10:00 AM")
        wizard.advance()
        wizard.advance()

    return _go


def make_review(review_id, rating, created_at, professional_id="prof_1"):
    return ReviewRecord(
        id=review_id,
        booking_id=f"booking_{review_id}",
        customer_id=f"customer_{review_id}",
        professional_id=professional_id,
        rating=rating,
        comment="",
        created_at=created_at,
    )


@pytest.fixture
def review_factory():
    return make_review


@pytest.fixture
def jan():
    """Build a UTC datetime on a January 2024 day."""

    def _jan(day, hour=0):
        return datetime(2024, 1, day, hour, tzinfo=timezone.utc)

    return _jan
