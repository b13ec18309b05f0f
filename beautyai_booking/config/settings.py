"""
Application settings and configuration.
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .payments import PaymentConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

    # Application
    app_name: str = "BeautyAI Booking"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8001

    # Logging
    log_level: str = "INFO"

    # Payments
    payment_gateway: Literal["simulated", "http"] = "simulated"
    payment_timeout_seconds: float = Field(default=30.0, gt=0)
    payment_currency: str = "USD"
    payment_gateway_url: Optional[str] = None
    payment_gateway_api_key: Optional[str] = None
    simulated_payment_success_rate: float = Field(default=0.9, ge=0, le=1)
    simulated_payment_delay_seconds: float = Field(default=2.0, ge=0)

    # Catalog
    catalog_load_delay_seconds: float = Field(default=0.0, ge=0)

    # Sharing
    profile_base_url: str = "http://localhost:8001"

    def payment_config(self) -> PaymentConfig:
        """Get the payment sub-configuration."""
        return PaymentConfig(
            gateway=self.payment_gateway,
            timeout_seconds=self.payment_timeout_seconds,
            currency=self.payment_currency,
            gateway_url=self.payment_gateway_url,
            api_key=self.payment_gateway_api_key,
            simulated_success_rate=self.simulated_payment_success_rate,
            simulated_delay_seconds=self.simulated_payment_delay_seconds,
        )


@lru_cache
def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
