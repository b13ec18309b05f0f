"""
Profile sharing with a native-share then clipboard fallback.
"""

import logging
from enum import Enum
from typing import Optional

from ...core.exceptions import ShareUnavailableError
from ...core.models import Professional
from .ports import ClipboardPort, NotificationPort, SharePort

logger = logging.getLogger(__name__)

APP_NAME = "BeautyAI"


class ShareOutcome(str, Enum):
    SHARED = "shared"
    COPIED = "copied"


class ProfileShareService:
    """Share a professional's profile link through the host's ports."""

    def __init__(
        self,
        notifier: NotificationPort,
        clipboard: ClipboardPort,
        share: Optional[SharePort] = None,
        base_url: str = "",
    ):
        self.notifier = notifier
        self.clipboard = clipboard
        self.share_port = share
        self.base_url = base_url.rstrip("/")

    def profile_url(self, professional_id: str) -> str:
        return f"{self.base_url}/professional/{professional_id}"

    async def share_profile(self, professional: Professional) -> ShareOutcome:
        """
        Share a profile natively when possible, otherwise copy its link.

        A native share needs no confirmation; a copied link is followed by a
        notification.
        """
        url = self.profile_url(professional.id)

        if self.share_port is not None:
            try:
                await self.share_port.share(
                    title=f"{professional.business_name} - {APP_NAME}",
                    text=f"Check out {professional.business_name} on {APP_NAME} - {professional.description}",
                    url=url,
                )
                return ShareOutcome.SHARED
            except ShareUnavailableError:
                logger.info("share: native share unavailable; copying link")
            except Exception as e:
                logger.warning(f"share: native share failed ({e}); copying link")

        await self.clipboard.copy(url)
        await self.notifier.notify(
            "Link copied!", "Profile link has been copied to your clipboard."
        )
        return ShareOutcome.COPIED
