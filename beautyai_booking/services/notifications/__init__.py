"""
Notification and sharing module.
"""

from .ports import (
    NotificationPort,
    SharePort,
    ClipboardPort,
    LoggingNotifier,
    InMemoryClipboard,
)
from .share import ProfileShareService, ShareOutcome

__all__ = [
    "NotificationPort",
    "SharePort",
    "ClipboardPort",
    "LoggingNotifier",
    "InMemoryClipboard",
    "ProfileShareService",
    "ShareOutcome",
]
