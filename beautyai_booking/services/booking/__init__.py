"""
Booking service module.
"""

from .data import CatalogDataProvider
from .service import BookingService
from .step_controller import StepController
from .wizard import BookingWizard, SubmitOutcome

__all__ = [
    "CatalogDataProvider",
    "BookingService",
    "StepController",
    "BookingWizard",
    "SubmitOutcome",
]
