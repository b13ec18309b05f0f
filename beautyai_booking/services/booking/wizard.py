"""
Booking wizard orchestrating the step flow, payment and completion callbacks.
"""

import asyncio
import inspect
import logging
import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Sequence

from ...core.enums import BookingStep, PaymentMethod, SubmitStatus, WizardStatus
from ...core.exceptions import DataNotFoundError, PaymentError, StepTransitionError
from ...core.models import BookingRecord, BookingSession, StepInfo
from ..payment import PaymentProcessor
from .service import BookingService
from .step_controller import (
    Advance,
    BookingEvent,
    PaymentFailed,
    PaymentStarted,
    PaymentSucceeded,
    Retreat,
    SelectDate,
    SelectPaymentMethod,
    SelectTime,
    SetNotes,
    StepController,
    UpdatePaymentField,
    ValidatePayment,
)

logger = logging.getLogger(__name__)

PAYMENT_INTERRUPTED_MESSAGE = "Payment was interrupted. Please try again."


@dataclass(frozen=True)
class SubmitOutcome:
    """What happened when the user pressed "Complete Payment"."""

    status: SubmitStatus
    field_errors: Dict[str, str] = field(default_factory=dict)
    error: Optional[PaymentError] = None
    booking_id: Optional[str] = None


def new_booking_id() -> str:
    return f"booking_{uuid.uuid4().hex[:12]}"


async def _invoke(callback: Optional[Callable[..., Any]], *args: Any) -> None:
    if callback is None:
        return
    result = callback(*args)
    if inspect.isawaitable(result):
        await result


class BookingWizard:
    """
    Drive one booking session from service review to confirmation.

    The wizard owns the session exclusively. State changes go through the
    StepController; the only suspension points are catalog loading in
    ``start`` and the charge in ``submit_payment``.
    """

    def __init__(
        self,
        booking_service: BookingService,
        processor: PaymentProcessor,
        *,
        on_back: Optional[Callable[[], Any]] = None,
        on_booking_complete: Optional[Callable[[str], Any]] = None,
        time_slots: Optional[Sequence[str]] = None,
        today: Callable[[], date] = date.today,
        customer_id: Optional[str] = None,
    ):
        self.booking_service = booking_service
        self.processor = processor
        self.on_back = on_back
        self.on_booking_complete = on_booking_complete
        self.customer_id = customer_id
        self._today = today
        self._time_slots = list(time_slots) if time_slots is not None else None
        self.controller = StepController(self._time_slots)

        self.status = WizardStatus.LOADING
        self.session: Optional[BookingSession] = None
        self.booking: Optional[BookingRecord] = None
        self._completion_notified = False

    async def start(self, service_id: str) -> Optional[BookingSession]:
        """Load the service and professional; a missing record yields the not-found status."""
        self.status = WizardStatus.LOADING
        try:
            session = await self.booking_service.start_booking(service_id)
        except DataNotFoundError as e:
            logger.info(f"wizard: {e}")
            self.status = WizardStatus.NOT_FOUND
            self.session = None
            return None

        if self._time_slots is None:
            self._time_slots = self.booking_service.catalog.get_time_slots(service_id)
            self.controller = StepController(self._time_slots)

        self.session = session
        self.status = WizardStatus.ACTIVE
        return session

    @property
    def time_slots(self) -> List[str]:
        return list(self._time_slots or [])

    @property
    def current_step(self) -> Optional[BookingStep]:
        return self.session.current_step if self.session else None

    @property
    def subtotal(self) -> Decimal:
        return self._require_session().subtotal

    @property
    def tax(self) -> Decimal:
        return self._require_session().tax

    @property
    def total(self) -> Decimal:
        return self._require_session().total

    def steps(self) -> List[StepInfo]:
        """Ordered step list with progress flags for display."""
        current = self._require_session().current_step
        return [
            StepInfo(
                step=step,
                position=step.position,
                title=step.title,
                description=step.description,
                completed=step.position < current.position,
                current=step is current,
            )
            for step in BookingStep.ordered()
        ]

    def can_proceed(self, step: Optional[BookingStep] = None) -> bool:
        return self.controller.can_proceed(self._require_session(), step)

    def advance(self) -> BookingSession:
        return self._apply(Advance())

    def retreat(self) -> BookingSession:
        return self._apply(Retreat())

    def select_date(self, value: date) -> BookingSession:
        return self._apply(SelectDate(value=value, today=self._today()))

    def select_time(self, value: str) -> BookingSession:
        return self._apply(SelectTime(value=value))

    def select_datetime(
        self, value: Optional[date] = None, time: Optional[str] = None
    ) -> BookingSession:
        """Apply a date and/or time together; nothing is kept if either is rejected."""
        session = self._require_session()
        if value is not None:
            session = self.controller.apply(session, SelectDate(value=value, today=self._today()))
        if time is not None:
            session = self.controller.apply(session, SelectTime(value=time))
        self.session = session
        return session

    def set_notes(self, text: str) -> BookingSession:
        return self._apply(SetNotes(text=text))

    def select_payment_method(self, method: PaymentMethod) -> BookingSession:
        return self._apply(SelectPaymentMethod(method=method))

    def update_payment_field(self, name: str, raw: str) -> BookingSession:
        return self._apply(UpdatePaymentField(field=name, raw=raw))

    def update_card_number(self, raw: str) -> BookingSession:
        return self.update_payment_field("card_number", raw)

    def update_expiry(self, raw: str) -> BookingSession:
        return self.update_payment_field("expiry", raw)

    def update_cvv(self, raw: str) -> BookingSession:
        return self.update_payment_field("cvv", raw)

    def update_cardholder_name(self, raw: str) -> BookingSession:
        return self.update_payment_field("cardholder_name", raw)

    def update_postal_code(self, raw: str) -> BookingSession:
        return self.update_payment_field("postal_code", raw)

    async def submit_payment(self) -> SubmitOutcome:
        """
        Validate card input, charge the total and complete the booking.

        A call made while a charge is in flight is ignored. Field errors and
        payment failures leave the wizard at the payment step.
        """
        session = self._require_session()
        if session.processing:
            logger.info("wizard: payment already in progress; ignoring submit")
            return SubmitOutcome(status=SubmitStatus.IGNORED)

        if session.payment_method.requires_card_fields:
            session = self._apply(ValidatePayment())
            errors = session.payment_fields.field_errors
            if errors:
                logger.info(f"wizard: card details invalid: {sorted(errors)}")
                return SubmitOutcome(status=SubmitStatus.INVALID_FIELDS, field_errors=dict(errors))

        session = self._apply(PaymentStarted())
        try:
            result = await self.processor.process_payment(session.total, session.payment_method)
        except asyncio.CancelledError:
            logger.info("wizard: payment cancelled before completion")
            self._apply(PaymentFailed(message=PAYMENT_INTERRUPTED_MESSAGE))
            raise
        except Exception:
            logger.exception("wizard: payment processor raised unexpectedly")
            self._apply(PaymentFailed(message=PAYMENT_INTERRUPTED_MESSAGE))
            raise

        if not result.succeeded:
            self._apply(PaymentFailed(message=result.error.message))
            return SubmitOutcome(status=SubmitStatus.FAILED, error=result.error)

        booking_id = new_booking_id()
        session = self._apply(PaymentSucceeded(payment_id=result.payment_id, booking_id=booking_id))
        self.booking = BookingRecord.from_session(session, customer_id=self.customer_id)
        self.status = WizardStatus.COMPLETED
        logger.info(f"wizard: booking {booking_id} confirmed (payment {result.payment_id})")

        await self._notify_booking_complete(booking_id)
        return SubmitOutcome(status=SubmitStatus.CONFIRMED, booking_id=booking_id)

    async def abandon(self) -> None:
        """Leave the flow; the host discards the session."""
        if self.session is not None and self.session.processing:
            logger.warning("wizard: abandoned while a payment is in flight")
        await _invoke(self.on_back)

    async def _notify_booking_complete(self, booking_id: str) -> None:
        if self._completion_notified:
            return
        self._completion_notified = True
        await _invoke(self.on_booking_complete, booking_id)

    def _apply(self, event: BookingEvent) -> BookingSession:
        self.session = self.controller.apply(self._require_session(), event)
        return self.session

    def _require_session(self) -> BookingSession:
        if self.session is None:
            raise StepTransitionError("No active booking session")
        return self.session
