"""
Step controller for managing booking wizard state.

Transitions are pure: ``apply(session, event)`` returns a new session and
never mutates its input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Dict, Optional, Sequence, Union

from ...core.enums import BookingStep, PaymentMethod
from ...core.exceptions import BookingValidationError, StepTransitionError
from ...core.models import BookingSession, PaymentFields
from ...utils.payment_fields import PaymentFieldUtils

logger = logging.getLogger(__name__)

SUNDAY = 6


@dataclass(frozen=True)
class Advance:
    pass


@dataclass(frozen=True)
class Retreat:
    pass


@dataclass(frozen=True)
class SelectDate:
    value: date
    today: date


@dataclass(frozen=True)
class SelectTime:
    value: str


@dataclass(frozen=True)
class SetNotes:
    text: str


@dataclass(frozen=True)
class SelectPaymentMethod:
    method: PaymentMethod


@dataclass(frozen=True)
class UpdatePaymentField:
    field: str
    raw: str


@dataclass(frozen=True)
class ValidatePayment:
    pass


@dataclass(frozen=True)
class PaymentStarted:
    pass


@dataclass(frozen=True)
class PaymentSucceeded:
    payment_id: str
    booking_id: str


@dataclass(frozen=True)
class PaymentFailed:
    message: str


BookingEvent = Union[
    Advance,
    Retreat,
    SelectDate,
    SelectTime,
    SetNotes,
    SelectPaymentMethod,
    UpdatePaymentField,
    ValidatePayment,
    PaymentStarted,
    PaymentSucceeded,
    PaymentFailed,
]

_FIELD_UPDATERS: Dict[str, Callable[[PaymentFields, str], PaymentFields]] = {
    "card_number": PaymentFields.with_card_number,
    "expiry": PaymentFields.with_expiry,
    "cvv": PaymentFields.with_cvv,
    "cardholder_name": PaymentFields.with_cardholder_name,
    "postal_code": PaymentFields.with_postal_code,
}

PAYMENT_FIELD_NAMES = tuple(_FIELD_UPDATERS)


class StepController:
    """Gate and apply transitions on a BookingSession."""

    def __init__(self, time_slots: Optional[Sequence[str]] = None) -> None:
        self.time_slots = tuple(time_slots or ())

    @staticmethod
    def can_proceed(session: BookingSession, step: Optional[BookingStep] = None) -> bool:
        """Return True if the wizard may move forward from ``step`` (default: current)."""
        step = step or session.current_step
        if step is BookingStep.DATETIME:
            return session.has_datetime()
        return not step.is_terminal

    def apply(self, session: BookingSession, event: BookingEvent) -> BookingSession:
        """Apply ``event`` and return the resulting session."""
        if session.current_step.is_terminal:
            raise StepTransitionError("Booking is already confirmed")

        if session.processing and not isinstance(event, (PaymentSucceeded, PaymentFailed)):
            raise StepTransitionError("Payment is being processed")

        handler = getattr(self, f"_on_{type(event).__name__}", None)
        if handler is None:
            raise TypeError(f"Unsupported booking event: {event!r}")

        updated = handler(session, event)
        updated = replace(updated, version=session.version + 1)

        if updated.current_step is not session.current_step:
            self._log_step_transition(session.current_step, updated.current_step)
        return updated

    def _on_Advance(self, session: BookingSession, event: Advance) -> BookingSession:
        if session.current_step is BookingStep.PAYMENT:
            raise StepTransitionError("Submit the payment to complete the booking")
        if not self.can_proceed(session):
            raise StepTransitionError(
                f"Cannot continue from '{session.current_step.value}' yet"
            )
        return replace(session, current_step=session.current_step.next())

    def _on_Retreat(self, session: BookingSession, event: Retreat) -> BookingSession:
        previous = session.current_step.previous()
        if previous is None:
            raise StepTransitionError("Already at the first step")
        return replace(session, current_step=previous)

    def _on_SelectDate(self, session: BookingSession, event: SelectDate) -> BookingSession:
        if event.value < event.today:
            raise BookingValidationError("Cannot book a date in the past")
        if event.value.weekday() == SUNDAY:
            raise BookingValidationError("Bookings are not available on Sundays")
        return replace(session, selected_date=event.value)

    def _on_SelectTime(self, session: BookingSession, event: SelectTime) -> BookingSession:
        value = (event.value or "").strip()
        if not value:
            raise BookingValidationError("Please choose a time slot")
        if self.time_slots and value not in self.time_slots:
            raise BookingValidationError(f"Time slot '{value}' is not available")
        return replace(session, selected_time=value)

    def _on_SetNotes(self, session: BookingSession, event: SetNotes) -> BookingSession:
        return replace(session, notes=event.text or "")

    def _on_SelectPaymentMethod(
        self, session: BookingSession, event: SelectPaymentMethod
    ) -> BookingSession:
        return replace(
            session,
            payment_method=PaymentMethod(event.method),
            payment_fields=replace(session.payment_fields, field_errors={}),
            payment_error=None,
        )

    def _on_UpdatePaymentField(
        self, session: BookingSession, event: UpdatePaymentField
    ) -> BookingSession:
        updater = _FIELD_UPDATERS.get(event.field)
        if updater is None:
            raise BookingValidationError(f"Unknown payment field '{event.field}'")
        return replace(session, payment_fields=updater(session.payment_fields, event.raw))

    def _on_ValidatePayment(self, session: BookingSession, event: ValidatePayment) -> BookingSession:
        self._require_payment_step(session)
        return replace(session, payment_fields=session.payment_fields.validated())

    def _on_PaymentStarted(self, session: BookingSession, event: PaymentStarted) -> BookingSession:
        self._require_payment_step(session)
        if session.payment_method.requires_card_fields and PaymentFieldUtils.validate(
            session.payment_fields
        ):
            raise BookingValidationError("Card details must be valid before payment")
        return replace(session, processing=True, payment_error=None)

    def _on_PaymentSucceeded(
        self, session: BookingSession, event: PaymentSucceeded
    ) -> BookingSession:
        self._require_processing(session)
        return replace(
            session,
            processing=False,
            current_step=BookingStep.CONFIRMATION,
            payment_id=event.payment_id,
            booking_id=event.booking_id,
        )

    def _on_PaymentFailed(self, session: BookingSession, event: PaymentFailed) -> BookingSession:
        self._require_processing(session)
        return replace(session, processing=False, payment_error=event.message)

    @staticmethod
    def _require_payment_step(session: BookingSession) -> None:
        if session.current_step is not BookingStep.PAYMENT:
            raise StepTransitionError("Payment is only available at the payment step")

    @staticmethod
    def _require_processing(session: BookingSession) -> None:
        if not session.processing:
            raise StepTransitionError("No payment is in progress")

    def _log_step_transition(self, from_step: BookingStep, to_step: BookingStep) -> None:
        logger.debug(f"booking: step {from_step.value} -> {to_step.value}")
