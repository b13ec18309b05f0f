"""
Formatting and validation utilities for payment input fields.
"""

import re
from typing import Any, Dict, Optional

_NON_DIGITS = re.compile(r"\D")
_CARD_DIGIT_RUN = re.compile(r"\d{4,16}")
_EXPIRY_PATTERN = re.compile(r"\d{2}/\d{2}")

CARD_NUMBER_ERROR = "Please enter a valid card number"
EXPIRY_ERROR = "Please enter a valid expiry date (MM/YY)"
CVV_ERROR = "Please enter a valid CVV"
CARDHOLDER_NAME_ERROR = "Please enter the cardholder name"
POSTAL_CODE_ERROR = "Please enter a valid ZIP code"


def _text(value: Optional[str]) -> str:
    return value if isinstance(value, str) else ""


class PaymentFieldUtils:
    """Pure helpers that normalize keystrokes and validate card details."""

    @staticmethod
    def format_card_number(raw: Optional[str]) -> str:
        """
        Format a card number into space-separated groups of four digits.

        Args:
            raw: Raw user input, possibly containing separators

        Returns:
            Digits of the first 4-16 digit run grouped by four, or the bare
            digits when fewer than four are present
        """
        digits = _NON_DIGITS.sub("", _text(raw))
        match = _CARD_DIGIT_RUN.search(digits)
        if not match:
            return digits
        run = match.group(0)
        return " ".join(run[i:i + 4] for i in range(0, len(run), 4))

    @staticmethod
    def format_expiry(raw: Optional[str]) -> str:
        """
        Format an expiry date as MM/YY.

        Args:
            raw: Raw user input

        Returns:
            Digits with a slash after the month once two digits are present
        """
        digits = _NON_DIGITS.sub("", _text(raw))
        if len(digits) >= 2:
            return f"{digits[:2]}/{digits[2:4]}"
        return digits

    @staticmethod
    def sanitize_digits(raw: Optional[str], max_len: int) -> str:
        """Strip non-digits and truncate to ``max_len``."""
        return _NON_DIGITS.sub("", _text(raw))[:max(max_len, 0)]

    @staticmethod
    def validate(fields: Any) -> Dict[str, str]:
        """
        Validate card payment fields.

        Every rule runs independently, so all failing fields are reported.

        Args:
            fields: Object exposing card_number, expiry, cvv,
                cardholder_name and postal_code attributes

        Returns:
            Mapping of failing field name to message; empty when valid
        """
        card_number = _text(getattr(fields, "card_number", None))
        expiry = _text(getattr(fields, "expiry", None))
        cvv = _text(getattr(fields, "cvv", None))
        cardholder_name = _text(getattr(fields, "cardholder_name", None))
        postal_code = _text(getattr(fields, "postal_code", None))

        errors: Dict[str, str] = {}

        if len(re.sub(r"\s", "", card_number)) < 16:
            errors["card_number"] = CARD_NUMBER_ERROR

        if not _EXPIRY_PATTERN.fullmatch(expiry):
            errors["expiry"] = EXPIRY_ERROR

        if len(cvv) < 3:
            errors["cvv"] = CVV_ERROR

        if not cardholder_name.strip():
            errors["cardholder_name"] = CARDHOLDER_NAME_ERROR

        if len(postal_code) < 5:
            errors["postal_code"] = POSTAL_CODE_ERROR

        return errors
