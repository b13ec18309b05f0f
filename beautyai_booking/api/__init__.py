"""
API layer for the BeautyAI booking system.
"""

from .app import create_app
from .dependencies import AppServices

__all__ = [
    "create_app",
    "AppServices",
]
