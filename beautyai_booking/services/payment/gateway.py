"""
Payment gateway strategies.

A gateway performs the actual charge. It returns an opaque payment id on
success and raises ``PaymentError`` on any failure.
"""

import asyncio
import logging
import random
import uuid
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

import httpx

from ...config import PaymentConfig
from ...core.enums import PaymentErrorKind, PaymentMethod
from ...core.exceptions import PaymentError

logger = logging.getLogger(__name__)

PAYMENT_FAILED_MESSAGE = "Payment failed. Please try again."


def new_payment_id() -> str:
    return f"pay_{uuid.uuid4().hex}"


class PaymentGateway(ABC):
    @abstractmethod
    async def charge(self, amount: Decimal, method: PaymentMethod) -> str:
        """Charge ``amount`` using ``method``. Returns the payment id."""
        raise NotImplementedError


class SimulatedPaymentGateway(PaymentGateway):
    """Stand-in gateway: fixed delay, then succeeds with a set probability."""

    def __init__(
        self,
        success_rate: float = 0.9,
        delay_seconds: float = 2.0,
        rng: Optional[random.Random] = None,
    ):
        self.success_rate = success_rate
        self.delay_seconds = delay_seconds
        self._rng = rng or random.Random()

    async def charge(self, amount: Decimal, method: PaymentMethod) -> str:
        await asyncio.sleep(self.delay_seconds)
        if self._rng.random() < self.success_rate:
            return new_payment_id()
        raise PaymentError(PaymentErrorKind.DECLINED, PAYMENT_FAILED_MESSAGE)


class HttpPaymentGateway(PaymentGateway):
    """Gateway that posts charges to a remote payment API."""

    def __init__(self, config: PaymentConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        if not config.is_http_configured():
            raise ValueError("HTTP payment gateway requires gateway_url")
        self.config = config
        self._transport = transport

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    async def charge(self, amount: Decimal, method: PaymentMethod) -> str:
        payload = {
            "amount": str(amount),
            "currency": self.config.currency,
            "method": method.value,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.post(
                    self.config.get_charge_url(), json=payload, headers=self._headers()
                )
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException:
            raise PaymentError(PaymentErrorKind.TIMEOUT, "Payment request timed out")
        except httpx.HTTPStatusError as e:
            code = e.response.status_code
            if 400 <= code < 500:
                raise PaymentError(PaymentErrorKind.DECLINED, PAYMENT_FAILED_MESSAGE)
            raise PaymentError(PaymentErrorKind.GATEWAY, f"Payment gateway error {code}")
        except httpx.HTTPError as e:
            raise PaymentError(PaymentErrorKind.NETWORK, f"Payment request failed: {e}")
        except ValueError:
            raise PaymentError(PaymentErrorKind.GATEWAY, "Payment gateway returned invalid JSON")

        payment_id = data.get("payment_id") if isinstance(data, dict) else None
        if not isinstance(payment_id, str) or not payment_id:
            raise PaymentError(PaymentErrorKind.GATEWAY, "Payment gateway response missing payment_id")
        return payment_id


def create_payment_gateway(config: PaymentConfig) -> PaymentGateway:
    """Build the gateway selected by configuration."""
    if config.gateway == "http":
        logger.info(f"payments: using HTTP gateway at {config.gateway_url}")
        return HttpPaymentGateway(config)
    logger.info(
        f"payments: using simulated gateway (success_rate={config.simulated_success_rate})"
    )
    return SimulatedPaymentGateway(
        success_rate=config.simulated_success_rate,
        delay_seconds=config.simulated_delay_seconds,
    )
