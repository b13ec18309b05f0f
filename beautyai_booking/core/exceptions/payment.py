"""
Payment-related exceptions.
"""

from ..enums import PaymentErrorKind


class PaymentError(Exception):
    """Exception raised when a charge attempt fails."""

    def __init__(self, kind: PaymentErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"PaymentError(kind={self.kind.value!r}, message={self.message!r})"
