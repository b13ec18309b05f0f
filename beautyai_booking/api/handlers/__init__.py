"""
API request handlers.
"""

from .health import HealthHandler
from .bookings import BookingHandler
from .reviews import ReviewHandler

__all__ = [
    "HealthHandler",
    "BookingHandler",
    "ReviewHandler",
]
