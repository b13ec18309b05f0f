"""
Service wiring for the HTTP application.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import Settings, get_settings
from ..services.booking import BookingService, BookingWizard, CatalogDataProvider
from ..services.notifications import InMemoryClipboard, LoggingNotifier, ProfileShareService
from ..services.payment import PaymentGateway, PaymentProcessor, create_payment_gateway
from ..services.reviews import ReviewService
from ..services.session import SessionStore


@dataclass
class AppServices:
    """Long-lived collaborators shared by all request handlers."""

    settings: Settings
    catalog: CatalogDataProvider
    booking_service: BookingService
    processor: PaymentProcessor
    sessions: SessionStore
    reviews: ReviewService
    sharing: ProfileShareService

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        gateway: Optional[PaymentGateway] = None,
    ) -> "AppServices":
        settings = settings or get_settings()
        payment_config = settings.payment_config()
        catalog = CatalogDataProvider(load_delay_seconds=settings.catalog_load_delay_seconds)
        processor = PaymentProcessor(
            gateway or create_payment_gateway(payment_config),
            timeout_seconds=payment_config.timeout_seconds,
        )
        return cls(
            settings=settings,
            catalog=catalog,
            booking_service=BookingService(catalog),
            processor=processor,
            sessions=SessionStore(),
            reviews=ReviewService(catalog.get_reviews()),
            sharing=ProfileShareService(
                notifier=LoggingNotifier(),
                clipboard=InMemoryClipboard(),
                base_url=settings.profile_base_url,
            ),
        )

    def new_wizard(self, session_id: str) -> BookingWizard:
        """Create a wizard whose completion is recorded against its session id."""

        async def on_booking_complete(booking_id: str) -> None:
            await self.sessions.record_completion(session_id, booking_id)

        async def on_back() -> None:
            await self.sessions.discard(session_id)

        return BookingWizard(
            self.booking_service,
            self.processor,
            on_back=on_back,
            on_booking_complete=on_booking_complete,
        )
