"""
Payment processor for executing a single charge attempt.
"""

import asyncio
import logging
from decimal import Decimal

from ...core.enums import PaymentErrorKind, PaymentMethod
from ...core.exceptions import PaymentError
from ...core.models import PaymentResult
from .gateway import PaymentGateway

logger = logging.getLogger(__name__)


class PaymentProcessor:
    """
    Runs one charge through a gateway and reports the outcome.

    Field content is never re-validated here; callers validate card input
    before submitting. Overlapping calls for one session are prevented by
    the caller.
    """

    def __init__(self, gateway: PaymentGateway, timeout_seconds: float = 30.0):
        self.gateway = gateway
        self.timeout_seconds = timeout_seconds

    async def process_payment(self, amount: Decimal, method: PaymentMethod) -> PaymentResult:
        """Charge ``amount`` with ``method``; failures come back as a result, not an exception."""
        if amount <= 0:
            return PaymentResult.failure(
                PaymentError(PaymentErrorKind.INVALID_AMOUNT, "Payment amount must be positive")
            )

        logger.info(f"payment: charging {amount} via {method.value}")
        try:
            payment_id = await asyncio.wait_for(
                self.gateway.charge(amount, method), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(f"payment: timed out after {self.timeout_seconds}s via {method.value}")
            return PaymentResult.failure(
                PaymentError(PaymentErrorKind.TIMEOUT, "Payment timed out. Please try again.")
            )
        except PaymentError as e:
            logger.warning(f"payment: failed ({e.kind.value}): {e.message}")
            return PaymentResult.failure(e)

        logger.info(f"payment: succeeded {payment_id}")
        return PaymentResult.success(payment_id)
