"""
Custom exceptions for the BeautyAI booking system.
"""

from .booking import (
    BookingFlowError,
    BookingValidationError,
    StepTransitionError,
    DataNotFoundError,
    SessionNotFoundError,
)
from .payment import PaymentError
from .review import ReviewError, ReviewValidationError
from .notification import ShareUnavailableError

__all__ = [
    "BookingFlowError",
    "BookingValidationError",
    "StepTransitionError",
    "DataNotFoundError",
    "SessionNotFoundError",
    "PaymentError",
    "ReviewError",
    "ReviewValidationError",
    "ShareUnavailableError",
]
