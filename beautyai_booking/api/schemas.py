"""
Request and response models for the HTTP API.
"""

from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import BookingStep, PaymentErrorKind, PaymentMethod, SubmitStatus, WizardStatus
from ..core.models import PriceBreakdown, Professional, ReviewRecord, Service, StepInfo
from ..services.booking import BookingWizard, SubmitOutcome


class StartBookingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    service_id: str = Field(min_length=1)


class DateTimeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    selected_date: Optional[date] = None
    selected_time: Optional[str] = None


class NotesRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    notes: str = ""


class PaymentMethodRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    method: PaymentMethod


class PaymentFieldsRequest(BaseModel):
    """Raw keystroke values; only the fields present are applied."""

    model_config = ConfigDict(extra="forbid")

    card_number: Optional[str] = None
    expiry: Optional[str] = None
    cvv: Optional[str] = None
    cardholder_name: Optional[str] = None
    postal_code: Optional[str] = None


class PaymentFieldsView(BaseModel):
    card_number: str
    expiry: str
    cvv_entered: bool
    cardholder_name: str
    postal_code: str
    field_errors: Dict[str, str]


class SessionResponse(BaseModel):
    session_id: str
    status: WizardStatus
    current_step: BookingStep
    steps: List[StepInfo]
    can_proceed: bool
    service: Service
    professional: Professional
    time_slots: List[str]
    selected_date: Optional[date] = None
    selected_time: Optional[str] = None
    notes: str = ""
    payment_method: PaymentMethod
    payment_fields: PaymentFieldsView
    processing: bool
    payment_error: Optional[str] = None
    price: PriceBreakdown
    booking_id: Optional[str] = None
    version: int

    @classmethod
    def from_wizard(cls, session_id: str, wizard: BookingWizard) -> "SessionResponse":
        session = wizard.session
        fields = session.payment_fields
        return cls(
            session_id=session_id,
            status=wizard.status,
            current_step=session.current_step,
            steps=wizard.steps(),
            can_proceed=wizard.can_proceed(),
            service=session.service,
            professional=session.professional,
            time_slots=wizard.time_slots,
            selected_date=session.selected_date,
            selected_time=session.selected_time,
            notes=session.notes,
            payment_method=session.payment_method,
            payment_fields=PaymentFieldsView(
                card_number=fields.card_number,
                expiry=fields.expiry,
                cvv_entered=bool(fields.cvv),
                cardholder_name=fields.cardholder_name,
                postal_code=fields.postal_code,
                field_errors=dict(fields.field_errors),
            ),
            processing=session.processing,
            payment_error=session.payment_error,
            price=session.price,
            booking_id=session.booking_id,
            version=session.version,
        )


class SubmitPaymentResponse(BaseModel):
    status: SubmitStatus
    field_errors: Dict[str, str] = Field(default_factory=dict)
    error_kind: Optional[PaymentErrorKind] = None
    error_message: Optional[str] = None
    booking_id: Optional[str] = None
    session: SessionResponse

    @classmethod
    def from_outcome(
        cls, outcome: SubmitOutcome, session: SessionResponse
    ) -> "SubmitPaymentResponse":
        return cls(
            status=outcome.status,
            field_errors=outcome.field_errors,
            error_kind=outcome.error.kind if outcome.error else None,
            error_message=outcome.error.message if outcome.error else None,
            booking_id=outcome.booking_id,
            session=session,
        )


class ReviewCollectionRequest(BaseModel):
    reviews: List[ReviewRecord] = Field(default_factory=list)


class ReviewSubmitRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    booking_id: str
    customer_id: str
    professional_id: str
    rating: int
    comment: str = ""
