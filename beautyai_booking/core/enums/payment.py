"""
Payment-related enums.
"""

from enum import Enum


class PaymentMethod(str, Enum):
    """Supported charge channels."""

    CARD = "card"
    PAYPAL = "paypal"
    APPLE_PAY = "apple_pay"
    GOOGLE_PAY = "google_pay"

    @property
    def display_name(self) -> str:
        return {
            PaymentMethod.CARD: "Credit/Debit Card",
            PaymentMethod.PAYPAL: "PayPal",
            PaymentMethod.APPLE_PAY: "Apple Pay",
            PaymentMethod.GOOGLE_PAY: "Google Pay",
        }[self]

    @property
    def requires_card_fields(self) -> bool:
        """Only direct card payments collect card details locally."""
        return self is PaymentMethod.CARD


class PaymentStatus(str, Enum):
    """Payment status of a booking."""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentErrorKind(str, Enum):
    """Classification of a failed charge attempt."""

    DECLINED = "declined"
    NETWORK = "network"
    TIMEOUT = "timeout"
    GATEWAY = "gateway"
    INVALID_AMOUNT = "invalid_amount"
