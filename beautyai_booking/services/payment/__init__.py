"""
Payment service module.
"""

from .gateway import (
    PaymentGateway,
    SimulatedPaymentGateway,
    HttpPaymentGateway,
    create_payment_gateway,
)
from .processor import PaymentProcessor

__all__ = [
    "PaymentGateway",
    "SimulatedPaymentGateway",
    "HttpPaymentGateway",
    "create_payment_gateway",
    "PaymentProcessor",
]
