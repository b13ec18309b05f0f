"""
Booking service for starting booking sessions.
"""

import logging

from ...core.exceptions import DataNotFoundError
from ...core.models import BookingSession
from .data import CatalogDataProvider

logger = logging.getLogger(__name__)


class BookingService:
    """Loads catalog records and opens booking sessions."""

    def __init__(self, catalog: CatalogDataProvider):
        self.catalog = catalog

    async def start_booking(self, service_id: str) -> BookingSession:
        """
        Create a booking session for a service.

        Args:
            service_id: Identifier of the service to book

        Returns:
            A new BookingSession at the first step

        Raises:
            DataNotFoundError: If the service is unknown or inactive, or its
                professional cannot be found
        """
        service = await self.catalog.get_service(service_id)
        if service is None or not service.active:
            logger.info(f"booking: service not found: {service_id}")
            raise DataNotFoundError(f"Service '{service_id}' not found")

        professional = await self.catalog.get_professional(service.professional_id)
        if professional is None:
            logger.info(f"booking: professional not found for service {service_id}")
            raise DataNotFoundError(
                f"Professional '{service.professional_id}' not found"
            )

        logger.info(f"booking: session started for {service_id} with {professional.id}")
        return BookingSession(service=service, professional=professional)
