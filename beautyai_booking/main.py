"""
Main application entry point for the BeautyAI booking service.
"""

import uvicorn

from .api.app import create_app
from .config import get_settings
from .utils.logging import configure_logging

configure_logging()

app = create_app()


def run() -> None:
    """Serve the booking API with the configured bind address."""
    settings = get_settings()
    uvicorn.run(
        "beautyai_booking.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
