"""
Analytics data models for the professional dashboard.
"""

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field

from .review import RatingSummary


class DailyAnalytics(BaseModel):
    """One day of business figures for a professional."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    professional_id: str
    date: str
    revenue: Decimal = Field(ge=0)
    bookings: int = Field(ge=0)
    new_customers: int = Field(ge=0)
    avg_rating: float = Field(ge=0, le=5)


class DashboardSummary(BaseModel):
    """Totals shown on the professional dashboard."""

    professional_id: str
    total_revenue: Decimal
    total_bookings: int
    total_customers: int
    avg_rating: float
    reviews: RatingSummary
