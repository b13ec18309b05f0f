"""
Core data models for the BeautyAI booking system.
"""

from .catalog import Service, Professional
from .payment import PaymentFields, PaymentResult
from .booking import BookingSession, BookingRecord, PriceBreakdown, StepInfo, TAX_RATE
from .review import ReviewRecord, RatingBucket, RatingSummary
from .analytics import DailyAnalytics, DashboardSummary

__all__ = [
    "Service",
    "Professional",
    "PaymentFields",
    "PaymentResult",
    "BookingSession",
    "BookingRecord",
    "PriceBreakdown",
    "StepInfo",
    "TAX_RATE",
    "ReviewRecord",
    "RatingBucket",
    "RatingSummary",
    "DailyAnalytics",
    "DashboardSummary",
]
