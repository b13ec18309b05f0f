"""
Ports the core calls through to reach the host platform.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


class NotificationPort(ABC):
    @abstractmethod
    async def notify(self, title: str, description: str) -> None:
        """Show a short notification to the user."""
        raise NotImplementedError


class SharePort(ABC):
    @abstractmethod
    async def share(self, title: str, text: str, url: str) -> None:
        """Share via the platform. Raises ShareUnavailableError when unsupported."""
        raise NotImplementedError


class ClipboardPort(ABC):
    @abstractmethod
    async def copy(self, text: str) -> None:
        """Copy text to the user's clipboard."""
        raise NotImplementedError


class LoggingNotifier(NotificationPort):
    """Notifier that records notifications in the application log."""

    async def notify(self, title: str, description: str) -> None:
        logger.info(f"notify: {title} - {description}")


class InMemoryClipboard(ClipboardPort):
    def __init__(self) -> None:
        self.content: Optional[str] = None

    async def copy(self, text: str) -> None:
        self.content = text
