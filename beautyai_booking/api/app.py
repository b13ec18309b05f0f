"""
FastAPI application factory and configuration.
"""

from typing import Optional

from fastapi import FastAPI

from .dependencies import AppServices
from .errors import register_exception_handlers
from .handlers import BookingHandler, HealthHandler, ReviewHandler
from .middleware import LoggingMiddleware


def create_app(services: Optional[AppServices] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    services = services or AppServices.from_settings()
    settings = services.settings

    app = FastAPI(
        title=settings.app_name,
        description="Booking wizard, payments and reviews for the BeautyAI marketplace",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.services = services

    app.add_middleware(LoggingMiddleware)
    register_exception_handlers(app)

    health_handler = HealthHandler(services)
    booking_handler = BookingHandler(services)
    review_handler = ReviewHandler(services)

    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(booking_handler.router, prefix="/bookings", tags=["bookings"])
    app.include_router(review_handler.router, tags=["reviews"])

    return app
