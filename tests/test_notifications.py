"""
Tests for profile sharing.
"""

import logging
from unittest.mock import AsyncMock, Mock

import pytest
from beautyai_booking.core.exceptions import ShareUnavailableError
from beautyai_booking.services.notifications import (
    InMemoryClipboard,
    LoggingNotifier,
    NotificationPort,
    ProfileShareService,
    SharePort,
    ShareOutcome,
)


@pytest.fixture
def notifier():
    notifier = Mock(spec=NotificationPort)
    notifier.notify = AsyncMock()
    return notifier


@pytest.fixture
def clipboard():
    return InMemoryClipboard()


class TestProfileShareService:
    """Test native share with clipboard fallback."""

    def test_profile_url(self, notifier, clipboard):
        service = ProfileShareService(notifier, clipboard, base_url="https://beauty.test/")
        assert service.profile_url("prof_1") == "https://beauty.test/professional/prof_1"

    @pytest.mark.asyncio
    async def test_native_share(self, notifier, clipboard, sample_professional):
        share = Mock(spec=SharePort)
        share.share = AsyncMock()
        service = ProfileShareService(notifier, clipboard, share=share, base_url="https://beauty.test")

        outcome = await service.share_profile(sample_professional)

        assert outcome is ShareOutcome.SHARED
        share.share.assert_awaited_once()
        kwargs = share.share.await_args.kwargs
        assert kwargs["url"] == "https://beauty.test/professional/prof_1"
        assert kwargs["title"] == "Glamour Studio by Sarah - BeautyAI"
        assert clipboard.content is None
        notifier.notify.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_share_port_copies_link(self, notifier, clipboard, sample_professional):
        service = ProfileShareService(notifier, clipboard, base_url="https://beauty.test")

        outcome = await service.share_profile(sample_professional)

        assert outcome is ShareOutcome.COPIED
        assert clipboard.content == "https://beauty.test/professional/prof_1"
        notifier.notify.assert_awaited_once_with(
            "Link copied!", "Profile link has been copied to your clipboard."
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [ShareUnavailableError("unsupported"), RuntimeError("boom")])
    async def test_failed_share_falls_back(self, notifier, clipboard, sample_professional, error):
        share = Mock(spec=SharePort)
        share.share = AsyncMock(side_effect=error)
        service = ProfileShareService(notifier, clipboard, share=share)

        outcome = await service.share_profile(sample_professional)

        assert outcome is ShareOutcome.COPIED
        assert clipboard.content == "/professional/prof_1"
        notifier.notify.assert_awaited_once()


class TestLoggingNotifier:
    @pytest.mark.asyncio
    async def test_writes_to_log(self, caplog):
        with caplog.at_level(logging.INFO, logger="beautyai_booking.services.notifications.ports"):
            await LoggingNotifier().notify("Link copied!", "Copied.")

        assert "notify: Link copied! - Copied." in caplog.text
