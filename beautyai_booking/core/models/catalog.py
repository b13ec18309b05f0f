"""
Catalog data models for services and professionals.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Service(BaseModel):
    """A bookable service offered by a professional."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    professional_id: str
    name: str
    description: str = ""
    duration: int = Field(description="Duration in minutes", gt=0)
    price: float = Field(gt=0)
    category: str
    images: List[str] = Field(default_factory=list)
    active: bool = True
    created_at: str


class Professional(BaseModel):
    """A professional listed on the marketplace."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    user_id: str
    business_name: str
    description: str = ""
    location: str
    avatar: Optional[str] = None
    rating: float = Field(default=0.0, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    verified: bool = False
    specialties: List[str] = Field(default_factory=list)
    price_range: str = ""
    availability: bool = True
    created_at: str
