"""
Booking-related data models.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ..enums import BookingStep, BookingStatus, PaymentMethod, PaymentStatus
from .catalog import Professional, Service
from .payment import PaymentFields

TAX_RATE = Decimal("0.08")
_CENTS = Decimal("0.01")


def _to_money(value: float | Decimal) -> Decimal:
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class PriceBreakdown(BaseModel):
    """Subtotal, tax and total for a booking."""

    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    tax: Decimal
    total: Decimal

    @classmethod
    def from_price(cls, price: float | Decimal) -> "PriceBreakdown":
        subtotal = _to_money(price)
        tax = (subtotal * TAX_RATE).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return cls(subtotal=subtotal, tax=tax, total=subtotal + tax)


class StepInfo(BaseModel):
    """Display data for one step of the progress indicator."""

    step: BookingStep
    position: int
    title: str
    description: str
    completed: bool = False
    current: bool = False


@dataclass(frozen=True)
class BookingSession:
    """Working state of one booking attempt."""

    service: Service
    professional: Professional
    current_step: BookingStep = BookingStep.SERVICE

    # Selections carried across steps
    selected_date: Optional[date] = None
    selected_time: Optional[str] = None
    notes: str = ""

    # Payment
    payment_method: PaymentMethod = PaymentMethod.CARD
    payment_fields: PaymentFields = field(default_factory=PaymentFields)
    processing: bool = False
    payment_error: Optional[str] = None

    # Outcome
    booking_id: Optional[str] = None
    payment_id: Optional[str] = None

    version: int = 0

    @property
    def price(self) -> PriceBreakdown:
        return PriceBreakdown.from_price(self.service.price)

    @property
    def subtotal(self) -> Decimal:
        return self.price.subtotal

    @property
    def tax(self) -> Decimal:
        return self.price.tax

    @property
    def total(self) -> Decimal:
        return self.price.total

    @property
    def is_confirmed(self) -> bool:
        return self.current_step is BookingStep.CONFIRMATION

    def has_datetime(self) -> bool:
        return self.selected_date is not None and bool(self.selected_time)


class BookingRecord(BaseModel):
    """A confirmed booking handed over to the host after payment."""

    model_config = ConfigDict(extra="forbid")

    id: str
    customer_id: Optional[str] = None
    professional_id: str
    service_id: str
    date: date
    time: str
    status: BookingStatus = BookingStatus.PENDING
    notes: Optional[str] = None
    total_amount: Decimal
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_intent_id: Optional[str] = None
    created_at: str = Field(default_factory=_now_iso)

    @classmethod
    def from_session(
        cls, session: BookingSession, customer_id: Optional[str] = None
    ) -> "BookingRecord":
        """Build the record for a session that has reached confirmation."""
        return cls(
            id=session.booking_id,
            customer_id=customer_id,
            professional_id=session.professional.id,
            service_id=session.service.id,
            date=session.selected_date,
            time=session.selected_time,
            status=BookingStatus.CONFIRMED,
            notes=session.notes or None,
            total_amount=session.total,
            payment_status=PaymentStatus.PAID,
            payment_intent_id=session.payment_id,
        )
