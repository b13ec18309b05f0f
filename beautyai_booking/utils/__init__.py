"""
Utility modules for the BeautyAI booking system.
"""

from .payment_fields import PaymentFieldUtils
from .logging import configure_logging

__all__ = [
    "PaymentFieldUtils",
    "configure_logging",
]
