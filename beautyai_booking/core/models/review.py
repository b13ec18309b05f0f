"""
Review data models.
"""

from datetime import datetime, timezone
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewRecord(BaseModel):
    """A customer review, as supplied by the review store."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    booking_id: str
    customer_id: str
    professional_id: str
    rating: int = Field(ge=1, le=5)
    comment: str = ""
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """Naive timestamps are taken as UTC so collections stay comparable."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class RatingBucket(BaseModel):
    """Count and share of reviews carrying one star value."""

    model_config = ConfigDict(frozen=True)

    count: int = 0
    percentage: float = 0.0


class RatingSummary(BaseModel):
    """Aggregate rating statistics, recomputed on demand."""

    model_config = ConfigDict(frozen=True)

    average: float = 0.0
    total: int = 0
    distribution: Dict[int, RatingBucket]

    def bucket(self, star: int) -> RatingBucket:
        return self.distribution[star]
