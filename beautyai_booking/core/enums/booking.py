"""
Booking-related enums.
"""

from enum import Enum
from typing import Optional


class BookingStep(str, Enum):
    """Enumeration of the booking wizard steps."""

    SERVICE = "service"
    DATETIME = "datetime"
    DETAILS = "details"
    PAYMENT = "payment"
    CONFIRMATION = "confirmation"

    @property
    def title(self) -> str:
        return _STEP_TEXT[self][0]

    @property
    def description(self) -> str:
        return _STEP_TEXT[self][1]

    @property
    def position(self) -> int:
        """1-based position of the step in the wizard."""
        return _STEP_POSITION[self]

    @property
    def is_terminal(self) -> bool:
        return self is BookingStep.CONFIRMATION

    def next(self) -> Optional["BookingStep"]:
        """Return the step that follows this one, or None at the end."""
        return _NEXT_STEP.get(self)

    def previous(self) -> Optional["BookingStep"]:
        """Return the step that precedes this one, or None at the start."""
        return _PREVIOUS_STEP.get(self)

    @classmethod
    def first(cls) -> "BookingStep":
        return cls.SERVICE

    @classmethod
    def ordered(cls) -> list["BookingStep"]:
        """Walk the successor chain from the first step."""
        steps = []
        step: Optional[BookingStep] = cls.first()
        while step is not None:
            steps.append(step)
            step = step.next()
        return steps


_STEP_TEXT = {
    BookingStep.SERVICE: ("Service", "Review service details"),
    BookingStep.DATETIME: ("Date & Time", "Choose your appointment"),
    BookingStep.DETAILS: ("Details", "Add special requests"),
    BookingStep.PAYMENT: ("Payment", "Complete your booking"),
    BookingStep.CONFIRMATION: ("Confirmation", "Booking confirmed"),
}

_NEXT_STEP = {
    BookingStep.SERVICE: BookingStep.DATETIME,
    BookingStep.DATETIME: BookingStep.DETAILS,
    BookingStep.DETAILS: BookingStep.PAYMENT,
    BookingStep.PAYMENT: BookingStep.CONFIRMATION,
}

_PREVIOUS_STEP = {after: before for before, after in _NEXT_STEP.items()}

_STEP_POSITION = {
    BookingStep.SERVICE: 1,
    BookingStep.DATETIME: 2,
    BookingStep.DETAILS: 3,
    BookingStep.PAYMENT: 4,
    BookingStep.CONFIRMATION: 5,
}


class BookingStatus(str, Enum):
    """Booking status enumeration."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class WizardStatus(str, Enum):
    """Lifecycle of a booking wizard as seen by the host."""

    LOADING = "loading"
    ACTIVE = "active"
    NOT_FOUND = "not_found"
    COMPLETED = "completed"


class SubmitStatus(str, Enum):
    """Outcome of a payment submission from the wizard."""

    CONFIRMED = "confirmed"
    INVALID_FIELDS = "invalid_fields"
    FAILED = "failed"
    IGNORED = "ignored"
