"""
Configuration management for the BeautyAI booking system.
"""

from .settings import Settings, get_settings
from .payments import PaymentConfig

__all__ = [
    "Settings",
    "get_settings",
    "PaymentConfig",
]
