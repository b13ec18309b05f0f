"""
Booking-related exceptions.
"""


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class BookingValidationError(BookingFlowError):
    """Exception raised when booking input fails validation."""
    pass


class StepTransitionError(BookingFlowError):
    """Exception raised when a wizard transition is not allowed from the current step."""
    pass


class DataNotFoundError(BookingFlowError):
    """Exception raised when the service or professional for a booking is missing."""
    pass


class SessionNotFoundError(BookingFlowError):
    """Exception raised when no active booking session exists for an identifier."""
    pass
