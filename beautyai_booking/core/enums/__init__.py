"""
Enums for the BeautyAI booking system.
"""

from .booking import BookingStep, BookingStatus, WizardStatus, SubmitStatus
from .payment import PaymentMethod, PaymentStatus, PaymentErrorKind
from .review import ReviewSortPolicy

__all__ = [
    "BookingStep",
    "BookingStatus",
    "WizardStatus",
    "SubmitStatus",
    "PaymentMethod",
    "PaymentStatus",
    "PaymentErrorKind",
    "ReviewSortPolicy",
]
