"""
In-memory registry of active booking wizards.
"""

import asyncio
import logging
import uuid
from collections import deque
from typing import Deque, Dict, List, Tuple

from ...core.exceptions import SessionNotFoundError
from ..booking import BookingWizard

logger = logging.getLogger(__name__)

DEFAULT_COMPLETED_HISTORY = 1000


class SessionStore:
    """
    Keeps one wizard per open booking session for the HTTP host.

    Completed sessions are removed from the registry; only a bounded
    history of (session id, booking id) pairs is retained.
    """

    def __init__(self, completed_history: int = DEFAULT_COMPLETED_HISTORY):
        self._wizards: Dict[str, BookingWizard] = {}
        self._completed: Deque[Tuple[str, str]] = deque(maxlen=completed_history)
        self._lock = asyncio.Lock()

    @staticmethod
    def new_session_id() -> str:
        return uuid.uuid4().hex

    async def add(self, session_id: str, wizard: BookingWizard) -> None:
        async with self._lock:
            self._wizards[session_id] = wizard
        logger.info(f"sessions: opened {session_id}")

    async def get(self, session_id: str) -> BookingWizard:
        async with self._lock:
            wizard = self._wizards.get(session_id)
        if wizard is None:
            raise SessionNotFoundError(f"Booking session '{session_id}' not found")
        return wizard

    async def discard(self, session_id: str) -> None:
        async with self._lock:
            removed = self._wizards.pop(session_id, None)
        if removed is not None:
            logger.info(f"sessions: discarded {session_id}")

    async def record_completion(self, session_id: str, booking_id: str) -> None:
        """Remember the booking and drop the finished wizard."""
        async with self._lock:
            self._completed.append((session_id, booking_id))
            self._wizards.pop(session_id, None)
        logger.info(f"sessions: {session_id} completed booking {booking_id}")

    async def completed_booking_ids(self) -> List[str]:
        async with self._lock:
            return [booking_id for _, booking_id in self._completed]
