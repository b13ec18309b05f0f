"""
Health check handler.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..dependencies import AppServices


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float
    payment_gateway: str


class HealthHandler:
    """Liveness and readiness checks for the booking service."""

    def __init__(self, services: AppServices):
        self.services = services
        self.started_at = datetime.now(timezone.utc)
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup health check routes."""

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            now = datetime.now(timezone.utc)
            return HealthResponse(
                status="healthy",
                timestamp=now.isoformat(),
                version=self.services.settings.app_version,
                uptime=(now - self.started_at).total_seconds(),
                payment_gateway=self.services.settings.payment_gateway,
            )

        @self.router.get("/ready")
        async def readiness_check():
            """Ready once the catalog can serve the booking flow."""
            slots = self.services.catalog.get_time_slots("")
            if not slots:
                return JSONResponse(status_code=503, content={"status": "not_ready"})
            return {"status": "ready"}

        @self.router.get("/live")
        async def liveness_check():
            return {"status": "alive"}
