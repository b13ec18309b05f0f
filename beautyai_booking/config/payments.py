"""
Payment gateway configuration.
"""

from typing import Literal, Optional
from pydantic import BaseModel


class PaymentConfig(BaseModel):
    """Payment gateway configuration settings."""

    gateway: Literal["simulated", "http"] = "simulated"
    timeout_seconds: float = 30.0
    currency: str = "USD"

    # HTTP gateway
    gateway_url: Optional[str] = None
    api_key: Optional[str] = None

    # Simulated gateway
    simulated_success_rate: float = 0.9
    simulated_delay_seconds: float = 2.0

    def get_charge_url(self) -> Optional[str]:
        """Get the charge endpoint URL if configured."""
        if self.gateway_url:
            return f"{self.gateway_url.rstrip('/')}/charges"
        return None

    def is_http_configured(self) -> bool:
        """Check if the HTTP gateway is properly configured."""
        return bool(self.gateway_url)
