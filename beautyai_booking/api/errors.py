"""
Exception handlers mapping domain errors to HTTP responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    BookingValidationError,
    ReviewValidationError,
    SessionNotFoundError,
    StepTransitionError,
)

logger = logging.getLogger(__name__)


async def session_not_found_handler(_request: Request, exc: SessionNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def step_transition_handler(_request: Request, exc: StepTransitionError) -> JSONResponse:
    logger.info("Rejected transition: %s", exc)
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def validation_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SessionNotFoundError, session_not_found_handler)
    app.add_exception_handler(StepTransitionError, step_transition_handler)
    app.add_exception_handler(BookingValidationError, validation_error_handler)
    app.add_exception_handler(ReviewValidationError, validation_error_handler)
