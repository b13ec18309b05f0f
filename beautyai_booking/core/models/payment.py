"""
Payment data models.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from ...utils.payment_fields import PaymentFieldUtils
from ..exceptions import PaymentError

MAX_CARD_NUMBER_LENGTH = 19
MAX_EXPIRY_LENGTH = 5
MAX_CVV_LENGTH = 4
MAX_POSTAL_CODE_LENGTH = 5


@dataclass(frozen=True)
class PaymentFields:
    """Raw and normalized card input for one payment attempt."""

    card_number: str = ""
    expiry: str = ""
    cvv: str = ""
    cardholder_name: str = ""
    postal_code: str = ""
    field_errors: Dict[str, str] = field(default_factory=dict)

    def with_card_number(self, raw: str) -> "PaymentFields":
        """Apply a card-number keystroke; over-long input is not accepted."""
        formatted = PaymentFieldUtils.format_card_number(raw)
        if len(formatted) > MAX_CARD_NUMBER_LENGTH:
            return self
        return replace(self, card_number=formatted)

    def with_expiry(self, raw: str) -> "PaymentFields":
        formatted = PaymentFieldUtils.format_expiry(raw)
        if len(formatted) > MAX_EXPIRY_LENGTH:
            return self
        return replace(self, expiry=formatted)

    def with_cvv(self, raw: str) -> "PaymentFields":
        return replace(self, cvv=PaymentFieldUtils.sanitize_digits(raw, MAX_CVV_LENGTH))

    def with_cardholder_name(self, raw: str) -> "PaymentFields":
        return replace(self, cardholder_name=raw or "")

    def with_postal_code(self, raw: str) -> "PaymentFields":
        return replace(
            self, postal_code=PaymentFieldUtils.sanitize_digits(raw, MAX_POSTAL_CODE_LENGTH)
        )

    def validated(self) -> "PaymentFields":
        """Return a copy whose ``field_errors`` reflect a fresh validation pass."""
        return replace(self, field_errors=PaymentFieldUtils.validate(self))

    @property
    def is_valid(self) -> bool:
        return not PaymentFieldUtils.validate(self)

    def masked_card_number(self) -> str:
        """Card number with all but the last four digits hidden, for logs."""
        digits = PaymentFieldUtils.sanitize_digits(self.card_number, 16)
        if len(digits) < 4:
            return "****"
        return f"**** {digits[-4:]}"


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of one charge attempt: a payment id or a typed error."""

    payment_id: Optional[str] = None
    error: Optional[PaymentError] = None

    @classmethod
    def success(cls, payment_id: str) -> "PaymentResult":
        return cls(payment_id=payment_id)

    @classmethod
    def failure(cls, error: PaymentError) -> "PaymentResult":
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None and bool(self.payment_id)
