"""
Service layer for the BeautyAI booking system.
"""

from .booking import BookingService, BookingWizard, CatalogDataProvider
from .payment import PaymentProcessor, PaymentGateway
from .reviews import ReviewAggregator, ReviewService
from .dashboard import DashboardService
from .session import SessionStore

__all__ = [
    "BookingService",
    "BookingWizard",
    "CatalogDataProvider",
    "PaymentProcessor",
    "PaymentGateway",
    "ReviewAggregator",
    "ReviewService",
    "DashboardService",
    "SessionStore",
]
