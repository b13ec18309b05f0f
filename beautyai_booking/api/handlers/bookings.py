"""
Booking wizard handler.
"""

import logging

from fastapi import APIRouter, HTTPException, Response, status

from ...core.enums import WizardStatus
from ..dependencies import AppServices
from ..schemas import (
    DateTimeRequest,
    NotesRequest,
    PaymentFieldsRequest,
    PaymentMethodRequest,
    SessionResponse,
    StartBookingRequest,
    SubmitPaymentResponse,
)

logger = logging.getLogger(__name__)


class BookingHandler:
    """Handler exposing the booking wizard over HTTP."""

    def __init__(self, services: AppServices):
        self.services = services
        self.router = APIRouter()
        self._setup_routes()

    async def _view(self, session_id: str) -> SessionResponse:
        wizard = await self.services.sessions.get(session_id)
        return SessionResponse.from_wizard(session_id, wizard)

    def _setup_routes(self):
        """Setup booking routes."""

        @self.router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
        async def start_booking(body: StartBookingRequest):
            """Open a booking session for a service."""
            session_id = self.services.sessions.new_session_id()
            wizard = self.services.new_wizard(session_id)
            await wizard.start(body.service_id)
            if wizard.status is WizardStatus.NOT_FOUND:
                raise HTTPException(status_code=404, detail="Service not found")
            await self.services.sessions.add(session_id, wizard)
            return SessionResponse.from_wizard(session_id, wizard)

        @self.router.get("/{session_id}", response_model=SessionResponse)
        async def get_booking(session_id: str):
            return await self._view(session_id)

        @self.router.post("/{session_id}/datetime", response_model=SessionResponse)
        async def select_datetime(session_id: str, body: DateTimeRequest):
            wizard = await self.services.sessions.get(session_id)
            wizard.select_datetime(body.selected_date, body.selected_time)
            return SessionResponse.from_wizard(session_id, wizard)

        @self.router.post("/{session_id}/notes", response_model=SessionResponse)
        async def set_notes(session_id: str, body: NotesRequest):
            wizard = await self.services.sessions.get(session_id)
            wizard.set_notes(body.notes)
            return SessionResponse.from_wizard(session_id, wizard)

        @self.router.post("/{session_id}/advance", response_model=SessionResponse)
        async def advance(session_id: str):
            wizard = await self.services.sessions.get(session_id)
            wizard.advance()
            return SessionResponse.from_wizard(session_id, wizard)

        @self.router.post("/{session_id}/retreat", response_model=SessionResponse)
        async def retreat(session_id: str):
            wizard = await self.services.sessions.get(session_id)
            wizard.retreat()
            return SessionResponse.from_wizard(session_id, wizard)

        @self.router.post("/{session_id}/payment/method", response_model=SessionResponse)
        async def select_payment_method(session_id: str, body: PaymentMethodRequest):
            wizard = await self.services.sessions.get(session_id)
            wizard.select_payment_method(body.method)
            return SessionResponse.from_wizard(session_id, wizard)

        @self.router.post("/{session_id}/payment/fields", response_model=SessionResponse)
        async def update_payment_fields(session_id: str, body: PaymentFieldsRequest):
            wizard = await self.services.sessions.get(session_id)
            for name, raw in body.model_dump(exclude_none=True).items():
                wizard.update_payment_field(name, raw)
            return SessionResponse.from_wizard(session_id, wizard)

        @self.router.post("/{session_id}/payment/submit", response_model=SubmitPaymentResponse)
        async def submit_payment(session_id: str):
            wizard = await self.services.sessions.get(session_id)
            outcome = await wizard.submit_payment()
            return SubmitPaymentResponse.from_outcome(
                outcome, SessionResponse.from_wizard(session_id, wizard)
            )

        @self.router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
        async def abandon_booking(session_id: str):
            """Leave the booking flow and discard the session."""
            wizard = await self.services.sessions.get(session_id)
            await wizard.abandon()
            return Response(status_code=status.HTTP_204_NO_CONTENT)
